"""
Core module: Configuration, logging, and exception handling.
"""

from .config import AnalysisConfig, Config, config
from .exceptions import (
    ConfigurationError,
    DataValidationError,
    InconsistentColumnCountError,
    InvalidReadingError,
    LogIngestionError,
    MalformedLineError,
    NoDataError,
    SensorLogError,
)

__all__ = [
    "Config",
    "AnalysisConfig",
    "config",
    "SensorLogError",
    "DataValidationError",
    "NoDataError",
    "MalformedLineError",
    "InvalidReadingError",
    "InconsistentColumnCountError",
    "LogIngestionError",
    "ConfigurationError",
]
