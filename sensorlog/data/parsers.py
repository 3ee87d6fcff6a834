"""
Sensor log line parsing and reading validation.

Converts raw log lines into LogLine objects. Unlike a best-effort log parser,
every failure here is fatal: one bad token invalidates the whole dataset, so
errors are raised to the caller instead of being skipped.

Line format:

    TIMESTAMP READING [READING ...]

Fields are separated by runs of spaces or tabs.
"""

import re
from abc import ABC, abstractmethod
from math import isfinite
from typing import Any, Dict, List, Optional

from sensorlog.core.exceptions import InvalidReadingError, MalformedLineError
from sensorlog.data.schema import LogLine


# Sign, mantissa with at least one digit and at most one '.', then an
# optional exponent that needs at least one digit.
READING_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

FIELD_SEPARATOR = re.compile(r"[ \t]+")


def is_valid_reading(token: str) -> bool:
    """
    Check a token against the numeric reading grammar.

    Accepts forms such as "100", "-3.14", "5.", ".5" and "2.5e-10".
    Rejects "1.2.3", "abc", "1e", ".", "" and anything containing
    characters other than digits, one '.', one exponent marker and signs.
    """
    return READING_PATTERN.fullmatch(token) is not None


def parse_reading(token: str, line_number: Optional[int] = None) -> float:
    """
    Validate and convert a single reading token.

    Raises:
        InvalidReadingError: If the token does not match the grammar or
            its value overflows a float (e.g. "1e999")
    """
    if not is_valid_reading(token):
        raise InvalidReadingError(token, line_number=line_number)
    value = float(token)
    if not isfinite(value):
        raise InvalidReadingError(token, line_number=line_number)
    return value


def split_fields(line: str) -> List[str]:
    """Split a line on runs of horizontal whitespace."""
    stripped = line.rstrip("\r\n").strip(" \t")
    if not stripped:
        return []
    return FIELD_SEPARATOR.split(stripped)


class BaseLineParser(ABC):
    """
    Abstract base for sensor log line parsers.
    """

    @abstractmethod
    def parse(self, raw_log: Dict[str, Any]) -> LogLine:
        """
        Parse a raw line record from ingestion.

        Args:
            raw_log: Dict with "raw_line" and optional "_metadata"

        Returns:
            Parsed LogLine

        Raises:
            MalformedLineError: If the line has no timestamp token
            InvalidReadingError: If a reading fails validation
        """
        pass


class SensorLineParser(BaseLineParser):
    """
    Parses whitespace-delimited sensor lines.

    Examples:
        08:00:00 21.5 40.2 1013.2
        2024-11-23T08:00:05 -3.14 2.5e-10 100

    The first token is the timestamp label; every following token must be a
    valid reading and is converted left to right.
    """

    def parse(self, raw_log: Dict[str, Any]) -> LogLine:
        if "raw_line" not in raw_log:
            raise MalformedLineError("raw_line not found in log dict")

        line_number = raw_log.get("_metadata", {}).get("line_number")
        tokens = split_fields(raw_log["raw_line"])
        if not tokens:
            raise MalformedLineError(
                "Improperly formatted data: no timestamp found",
                line_number=line_number,
            )

        timestamp, reading_tokens = tokens[0], tokens[1:]
        readings = [parse_reading(token, line_number) for token in reading_tokens]

        return LogLine(timestamp=timestamp, readings=readings, line_number=line_number)


def parse_log_line(
    raw_log: Dict[str, Any],
    parser: Optional[BaseLineParser] = None
) -> LogLine:
    """
    Parse a raw line record with the given parser (SensorLineParser by
    default). Errors propagate to the caller.
    """
    if parser is None:
        parser = SensorLineParser()
    return parser.parse(raw_log)


def parse_line(text: str, line_number: Optional[int] = None) -> LogLine:
    """
    Parse a single line of text.

    Example:
        >>> parse_line("t0 1.5 -2").readings
        [1.5, -2.0]
    """
    raw_log: Dict[str, Any] = {"raw_line": text}
    if line_number is not None:
        raw_log["_metadata"] = {"line_number": line_number}
    return SensorLineParser().parse(raw_log)
