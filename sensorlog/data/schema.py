"""
Internal data schema for sensor log analysis.

Every parsed log line is converted to a LogLine before accumulation, and the
results of a run are carried as immutable ExtremeRecord / SensorStat /
AnalysisReport objects so the report formatter cannot alter them.

Design rationale:
- Timestamps are kept as the raw label from the log (no date parsing; the
  tool never interprets them, it only reports them)
- Readings are plain floats, one per sensor column, in column order
- Result models are frozen after creation
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LogLine(BaseModel):
    """
    A single parsed sensor log line.

    Attributes:
        timestamp: Label of the line (first token, not interpreted)
        readings: Numeric readings in column order
        line_number: 1-based line number in the source (optional)

    Notes:
        - A line with no readings is valid on its own; the column count
          check happens during accumulation
    """

    timestamp: str = Field(
        ...,
        min_length=1,
        description="Timestamp label of the line"
    )

    readings: List[float] = Field(
        default_factory=list,
        description="Sensor readings in column order"
    )

    line_number: Optional[int] = Field(
        default=None,
        ge=1,
        description="1-based source line number"
    )

    @property
    def column_count(self) -> int:
        """Number of readings on this line."""
        return len(self.readings)


class ExtremeRecord(BaseModel):
    """
    Global maximum and minimum reading of a run.

    Each value is paired with the timestamp of the line on which it was first
    observed. Ties keep the first occurrence.
    """

    model_config = ConfigDict(frozen=True)

    max_value: float = Field(..., description="Largest reading across all sensors")
    max_timestamp: str = Field(..., description="Timestamp where the maximum was first seen")
    min_value: float = Field(..., description="Smallest reading across all sensors")
    min_timestamp: str = Field(..., description="Timestamp where the minimum was first seen")


class SensorStat(BaseModel):
    """
    Mean and sample standard deviation of one sensor column.

    Attributes:
        sensor: 1-based sensor (column) index
        count: Number of readings in the column
        mean: Arithmetic mean
        std_dev: Sample standard deviation (divisor n-1, zero for n <= 1)
    """

    model_config = ConfigDict(frozen=True)

    sensor: int = Field(..., ge=1)
    count: int = Field(..., ge=0)
    mean: float
    std_dev: float = Field(..., ge=0.0)


class AnalysisReport(BaseModel):
    """
    Complete result of one analysis run, ready for formatting.
    """

    model_config = ConfigDict(frozen=True)

    extremes: ExtremeRecord
    sensors: List[SensorStat] = Field(default_factory=list)
    line_count: int = Field(..., ge=1)
    column_count: int = Field(..., ge=0)
