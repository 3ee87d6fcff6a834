"""
Sensor log analyzer.

Ties the pipeline together: ingest lines, parse and validate them, accumulate
per-column series, compute statistics, then format the report. The whole
input is validated before any output is produced, so a failed run writes
nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

from sensorlog.core.config import STD_METHODS, config
from sensorlog.core.exceptions import ConfigurationError
from sensorlog.data.aggregation import SensorAccumulator
from sensorlog.data.ingestion import ingest_lines
from sensorlog.data.parsers import SensorLineParser
from sensorlog.data.schema import AnalysisReport

from .report import format_report, write_report
from .statistics import compute_sensor_stats

logger = logging.getLogger(__name__)

Source = Union[str, Path, Iterable[str]]


@dataclass
class SensorLogAnalyzer:
    """
    Batch analyzer for whitespace-delimited sensor logs.

    Notes:
    - Fail fast: the first invalid line aborts the run.
    - Each call to analyze() uses a fresh accumulator, so one analyzer can
      process any number of logs.
    - Settings left as None fall back to config.analysis.
    """

    std_method: Optional[str] = None
    decimal_places: Optional[int] = None
    encoding: Optional[str] = None

    def __post_init__(self) -> None:
        if self.std_method is None:
            self.std_method = config.analysis.std_method
        if self.decimal_places is None:
            self.decimal_places = config.analysis.decimal_places
        if self.encoding is None:
            self.encoding = config.analysis.encoding

        if self.std_method not in STD_METHODS:
            raise ConfigurationError(f"Unknown standard deviation method: {self.std_method}")
        if self.decimal_places < 0:
            raise ConfigurationError("decimal_places must be non-negative")

        self._parser = SensorLineParser()

    def analyze(self, source: Source) -> AnalysisReport:
        """
        Validate the whole log and compute its statistics.

        Args:
            source: Path to a log file, an open text stream, or an iterable
                of raw lines

        Returns:
            AnalysisReport with extremes and per-sensor statistics

        Raises:
            NoDataError, MalformedLineError, InvalidReadingError,
            InconsistentColumnCountError, LogIngestionError
        """
        accumulator = SensorAccumulator()

        for raw_line in ingest_lines(source, encoding=self.encoding):
            line = self._parser.parse(raw_line)
            accumulator.add(line)

        extremes = accumulator.extremes()
        sensors = compute_sensor_stats(accumulator.series, self.std_method)

        logger.info(
            f"Analyzed {accumulator.line_count} lines with "
            f"{accumulator.expected_columns} sensors"
        )
        logger.debug(
            f"Maximum {extremes.max_value} at {extremes.max_timestamp}, "
            f"minimum {extremes.min_value} at {extremes.min_timestamp}"
        )

        return AnalysisReport(
            extremes=extremes,
            sensors=sensors,
            line_count=accumulator.line_count,
            column_count=accumulator.expected_columns,
        )

    def render(self, report: AnalysisReport) -> str:
        """Format a report with this analyzer's decimal places."""
        return format_report(report, self.decimal_places)

    def run(self, source: Source, sink: TextIO) -> AnalysisReport:
        """
        Analyze a log and write exactly one report to sink.

        Nothing is written if analysis fails.
        """
        report = self.analyze(source)
        write_report(report, sink, self.decimal_places)
        return report
