"""
Sensor log ingestion from files and open text streams.

All ingested lines are returned as raw dictionaries for subsequent parsing.
Blank lines are dropped here so later stages never see them.

Design:
- Iterator-based, one line at a time, so large logs are never loaded whole
- Files opened by a source are closed on every exit path
- Streams handed in by the caller are never closed
- Read failures are fatal and surface as LogIngestionError
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Union

from sensorlog.core.exceptions import LogIngestionError

logger = logging.getLogger(__name__)

# Horizontal whitespace plus line terminators
BLANK_CHARS = " \t\r\n"


def is_blank(line: str) -> bool:
    """True for empty or whitespace-only lines (space, tab, CR, LF)."""
    return not line.strip(BLANK_CHARS)


def _raw_record(line: str, source: str, line_number: int, fmt: str) -> Dict[str, Any]:
    return {
        "raw_line": line.rstrip("\r\n"),
        "_metadata": {
            "source": source,
            "line_number": line_number,
            "format": fmt,
        },
    }


class BaseLineSource(ABC):
    """
    Abstract base class for sensor log sources.

    Subclasses decide where lines come from; all of them skip blank lines and
    number the remaining ones by their position in the source.
    """

    @abstractmethod
    def ingest(self) -> Iterator[Dict[str, Any]]:
        """
        Ingest lines from the source.

        Yields:
            Dict with "raw_line" and "_metadata" (source, line_number, format)
        """
        pass


class FileLineSource(BaseLineSource):
    """
    Reads a sensor log file from disk.

    Example input:
        08:00:00 21.5 40.2 1013.2
        08:00:05 21.7 40.0 1013.1
    """

    def __init__(self, filepath: Union[str, Path], encoding: str = "utf-8"):
        """
        Initialize file source.

        Args:
            filepath: Path to the sensor log
            encoding: File encoding (default utf-8)

        Raises:
            LogIngestionError: If the file doesn't exist
        """
        self.filepath = Path(filepath)
        self.encoding = encoding

        if not self.filepath.is_file():
            raise LogIngestionError(f"Could not open file '{self.filepath}'. Please check file path.")

    def ingest(self) -> Iterator[Dict[str, Any]]:
        try:
            with open(self.filepath, "r", encoding=self.encoding) as f:
                for line_num, line in enumerate(f, start=1):
                    if is_blank(line):
                        continue
                    yield _raw_record(line, str(self.filepath), line_num, "file")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading sensor log {self.filepath}: {e}")
            raise LogIngestionError(f"Failed to read sensor log: {e}") from e


class StreamLineSource(BaseLineSource):
    """
    Reads lines from an already-open text stream (stdin, an open file, or
    any iterable of strings).

    The stream is left open; its owner is responsible for closing it.
    """

    def __init__(self, stream: Iterable[str], name: str = "<stream>"):
        self.stream = stream
        self.name = name

    def ingest(self) -> Iterator[Dict[str, Any]]:
        try:
            for line_num, line in enumerate(self.stream, start=1):
                if is_blank(line):
                    continue
                yield _raw_record(line, self.name, line_num, "stream")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading sensor log from {self.name}: {e}")
            raise LogIngestionError(f"Failed to read sensor log: {e}") from e


def ingest_lines(
    source: Union[str, Path, Iterable[str]],
    encoding: str = "utf-8",
) -> Iterator[Dict[str, Any]]:
    """
    Convenience function to ingest a sensor log.

    Args:
        source: Path to a log file, or an open text stream / iterable of lines
        encoding: Encoding used when source is a path

    Yields:
        Raw line dicts for the parser

    Example:
        for raw in ingest_lines("readings.txt"):
            line = parse_log_line(raw)
            ...
    """
    if isinstance(source, (str, Path)):
        line_source: BaseLineSource = FileLineSource(source, encoding=encoding)
    else:
        name = getattr(source, "name", "<stream>")
        line_source = StreamLineSource(source, name=str(name))

    yield from line_source.ingest()
