"""
Data module: Sensor log ingestion, parsing, and accumulation.

Pipeline:

    Raw sensor log (file or stream)
        ↓
    Ingestion (sensorlog/data/ingestion.py) → raw line dicts, blanks skipped
        ↓
    Parsing (sensorlog/data/parsers.py) → LogLine
        ↓
    Accumulation (sensorlog/data/aggregation.py) → per-column series + extremes
        ↓
    Statistics and report (sensorlog/analysis)
"""

from sensorlog.data.aggregation import SensorAccumulator, accumulate
from sensorlog.data.ingestion import (
    FileLineSource,
    StreamLineSource,
    ingest_lines,
    is_blank,
)
from sensorlog.data.parsers import (
    SensorLineParser,
    is_valid_reading,
    parse_line,
    parse_log_line,
    parse_reading,
    split_fields,
)
from sensorlog.data.schema import (
    AnalysisReport,
    ExtremeRecord,
    LogLine,
    SensorStat,
)

__all__ = [
    # Schema
    "LogLine",
    "ExtremeRecord",
    "SensorStat",
    "AnalysisReport",

    # Ingestion
    "ingest_lines",
    "is_blank",
    "FileLineSource",
    "StreamLineSource",

    # Parsing
    "is_valid_reading",
    "parse_reading",
    "parse_line",
    "parse_log_line",
    "split_fields",
    "SensorLineParser",

    # Accumulation
    "accumulate",
    "SensorAccumulator",
]
