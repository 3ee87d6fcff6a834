"""
SensorLog: batch statistics for whitespace-delimited sensor logs.
"""

from sensorlog.analysis import SensorLogAnalyzer
from sensorlog.data.schema import AnalysisReport, ExtremeRecord, LogLine, SensorStat

__version__ = "0.1.0"

__all__ = [
    "SensorLogAnalyzer",
    "AnalysisReport",
    "ExtremeRecord",
    "LogLine",
    "SensorStat",
]
