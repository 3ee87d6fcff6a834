"""
Pytest configuration and shared fixtures.

Provides sample sensor logs (as text and as files) for unit and integration
tests.
"""

from pathlib import Path
from typing import List

import pytest


@pytest.fixture
def sample_log_lines() -> List[str]:
    """
    Fixture providing a small, well-formed three-sensor log.

    Column 1 peaks at 08:00:10, column 3 holds the global minimum at 08:00:05.
    A blank line is included to check that it is skipped.

    Returns:
        List[str]: Raw log lines with newline terminators
    """
    return [
        "08:00:00 21.5 40.2 3.0\n",
        "08:00:05 21.7 40.0 -1.5\n",
        "\n",
        "08:00:10 45.0 39.8 2.5\n",
        "08:00:15 21.6\t40.4   2.0\n",
    ]


@pytest.fixture
def sample_log_text(sample_log_lines) -> str:
    return "".join(sample_log_lines)


@pytest.fixture
def sample_log_file(tmp_path: Path, sample_log_text: str) -> Path:
    """
    Fixture writing the sample log to a temporary file.

    Returns:
        Path: Location of the log file
    """
    path = tmp_path / "readings.txt"
    path.write_text(sample_log_text, encoding="utf-8")
    return path


@pytest.fixture
def expected_sample_report() -> str:
    """Report text produced for the sample log with default settings."""
    return (
        "Maximum recorded at 08:00:10 (45)\n"
        "Minimum recorded at 08:00:05 (-1.5)\n"
        "\n"
        "Sensor 1:\n"
        "  - mean: 27.45\n"
        "  - deviation: 11.70\n"
        "Sensor 2:\n"
        "  - mean: 40.10\n"
        "  - deviation: 0.26\n"
        "Sensor 3:\n"
        "  - mean: 1.50\n"
        "  - deviation: 2.04\n"
    )


@pytest.fixture
def write_log(tmp_path: Path):
    """
    Factory fixture: write arbitrary log text to a temp file and return its path.
    """
    def _write(text: str, name: str = "log.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def pytest_configure(config):
    """
    Pytest hook for custom configuration.

    Registers custom markers used throughout tests.
    """
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running (deferred CI)"
    )
