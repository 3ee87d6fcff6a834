"""
Custom exceptions for the sensor log analyzer.

Every failure during a run is fatal: the first error aborts the analysis and
no report is produced. Use these to distinguish bad data from unreadable
input and invalid configuration.
"""

from typing import Optional


class SensorLogError(Exception):
    """Base exception for sensor log analysis failures."""
    pass


class DataValidationError(SensorLogError):
    """Raised when input data fails validation."""
    pass


class NoDataError(DataValidationError):
    """Raised when the input contained no usable lines or readings."""
    pass


class MalformedLineError(DataValidationError):
    """Raised when a non-blank line yields no timestamp token."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number


class InvalidReadingError(DataValidationError):
    """Raised when a reading token does not match the numeric grammar."""

    def __init__(self, token: str, line_number: Optional[int] = None):
        location = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Invalid sensor reading '{token}'{location}")
        self.token = token
        self.line_number = line_number


class InconsistentColumnCountError(DataValidationError):
    """Raised when a line's reading count differs from the first line's."""

    def __init__(self, expected: int, found: int, line_number: Optional[int] = None):
        location = f"line {line_number}" if line_number is not None else "line"
        super().__init__(
            f"Inconsistent sensor readings: {location} has {found} readings, expected {expected}"
        )
        self.expected = expected
        self.found = found
        self.line_number = line_number


class LogIngestionError(SensorLogError):
    """Raised when the input log cannot be opened or read."""
    pass


class ConfigurationError(SensorLogError):
    """Raised when configuration is invalid or missing."""
    pass
