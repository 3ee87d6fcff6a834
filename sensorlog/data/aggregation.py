"""
Run-scoped accumulation of sensor readings.

Collects parsed LogLine objects into per-column series and tracks the global
extremes as values arrive. One SensorAccumulator belongs to one run; nothing
is kept at module level, so runs can be repeated or nested freely.

Design:
- Series are growable lists indexed by column (no fixed sensor limit)
- The first line fixes the expected column count
- Extremes use strict comparisons, so the first occurrence wins ties
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from sensorlog.core.exceptions import InconsistentColumnCountError, NoDataError
from sensorlog.data.schema import ExtremeRecord, LogLine

logger = logging.getLogger(__name__)


@dataclass
class SensorAccumulator:
    """
    Accumulates readings for a single analysis run.

    Attributes:
        series: One list of readings per sensor column, in column order
        line_count: Number of lines accumulated
        expected_columns: Reading count fixed by the first line (None before it)
    """

    series: List[List[float]] = field(default_factory=list)
    line_count: int = 0
    expected_columns: Optional[int] = None
    _max_value: Optional[float] = field(default=None, init=False, repr=False)
    _max_timestamp: Optional[str] = field(default=None, init=False, repr=False)
    _min_value: Optional[float] = field(default=None, init=False, repr=False)
    _min_timestamp: Optional[str] = field(default=None, init=False, repr=False)

    def add(self, line: LogLine) -> None:
        """
        Add one parsed line.

        Raises:
            InconsistentColumnCountError: If the line's reading count differs
                from the first line's
        """
        found = line.column_count
        if self.expected_columns is None:
            self.expected_columns = found
            self.series = [[] for _ in range(found)]
        elif found != self.expected_columns:
            raise InconsistentColumnCountError(
                expected=self.expected_columns,
                found=found,
                line_number=line.line_number,
            )

        for column, value in enumerate(line.readings):
            self.series[column].append(value)
            self._observe(value, line.timestamp)

        self.line_count += 1

    def _observe(self, value: float, timestamp: str) -> None:
        if self._max_value is None or value > self._max_value:
            self._max_value = value
            self._max_timestamp = timestamp
        if self._min_value is None or value < self._min_value:
            self._min_value = value
            self._min_timestamp = timestamp

    @property
    def reading_count(self) -> int:
        """Total number of readings across all columns."""
        return sum(len(values) for values in self.series)

    def extremes(self) -> ExtremeRecord:
        """
        Global maximum and minimum with their timestamps.

        Raises:
            NoDataError: If no line or no reading has been accumulated
        """
        if self.line_count == 0:
            raise NoDataError("No sensor data to process")
        if self._max_value is None or self._min_value is None:
            raise NoDataError(
                f"No sensor readings to process ({self.line_count} lines without readings)"
            )

        return ExtremeRecord(
            max_value=self._max_value,
            max_timestamp=self._max_timestamp,
            min_value=self._min_value,
            min_timestamp=self._min_timestamp,
        )


def accumulate(lines: Iterable[LogLine]) -> SensorAccumulator:
    """
    Feed an iterable of parsed lines into a fresh accumulator.

    Args:
        lines: Parsed LogLine objects in source order

    Returns:
        The populated SensorAccumulator
    """
    accumulator = SensorAccumulator()
    for line in lines:
        accumulator.add(line)

    logger.debug(
        f"Accumulated {accumulator.line_count} lines, "
        f"{accumulator.expected_columns or 0} columns"
    )
    return accumulator
