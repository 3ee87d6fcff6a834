"""
Analysis module: per-sensor statistics, report formatting, and the analyzer
that runs the full pipeline.
"""

from .engine import SensorLogAnalyzer
from .report import format_fixed, format_report, format_value, write_report
from .statistics import compute_mean, compute_sensor_stats, compute_std_dev

__all__ = [
    "SensorLogAnalyzer",
    "compute_mean",
    "compute_std_dev",
    "compute_sensor_stats",
    "format_report",
    "format_value",
    "format_fixed",
    "write_report",
]
