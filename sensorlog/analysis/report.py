"""
Text report formatting.

Layout:

    Maximum recorded at <timestamp> (<value>)
    Minimum recorded at <timestamp> (<value>)

    Sensor 1:
      - mean: <mean>
      - deviation: <std dev>
    ...

Extremes use general format (6 significant digits); means and deviations use
a fixed number of decimal places (2 by default).
"""

from typing import List, TextIO

from sensorlog.data.schema import AnalysisReport


def format_value(value: float) -> str:
    """General format for an extreme reading, e.g. 21.5, 1e+10, -0.0025."""
    return f"{value:g}"


def format_fixed(value: float, decimal_places: int = 2) -> str:
    """Fixed-point format for mean and deviation lines, e.g. 2.14."""
    return f"{value:.{decimal_places}f}"


def format_report(report: AnalysisReport, decimal_places: int = 2) -> str:
    """
    Render an analysis report as text.

    Args:
        report: Result of an analysis run
        decimal_places: Precision of mean and deviation lines

    Returns:
        Report text, newline terminated
    """
    extremes = report.extremes
    lines: List[str] = [
        f"Maximum recorded at {extremes.max_timestamp} ({format_value(extremes.max_value)})",
        f"Minimum recorded at {extremes.min_timestamp} ({format_value(extremes.min_value)})",
        "",
    ]

    for stat in report.sensors:
        lines.append(f"Sensor {stat.sensor}:")
        lines.append(f"  - mean: {format_fixed(stat.mean, decimal_places)}")
        lines.append(f"  - deviation: {format_fixed(stat.std_dev, decimal_places)}")

    return "\n".join(lines) + "\n"


def write_report(report: AnalysisReport, sink: TextIO, decimal_places: int = 2) -> None:
    """Write the formatted report to an open text sink in a single write."""
    sink.write(format_report(report, decimal_places))
    sink.flush()
