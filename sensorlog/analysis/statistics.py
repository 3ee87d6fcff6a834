"""
Per-sensor statistics.

Mean and sample standard deviation (divisor n-1) for each column series.
Two deviation methods are available; both give the same result for
well-scaled data. Series whose sums or squares overflow a float are
rescaled by their largest magnitude, so any finite reading is accepted.
"""

from __future__ import annotations

from math import isfinite, sqrt
from typing import Callable, List, Sequence, Tuple

from sensorlog.core.exceptions import ConfigurationError
from sensorlog.data.schema import SensorStat


def _scaled_down(values: Sequence[float]) -> Tuple[List[float], float]:
    # Every scaled value lies in [-1, 1]
    scale = max(abs(v) for v in values)
    return [v / scale for v in values], scale


def compute_mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    mean = sum(values) / len(values)
    if not isfinite(mean):
        scaled, scale = _scaled_down(values)
        mean = sum(scaled) / len(scaled) * scale
    return mean


def _sum_of_squares_variance(values: Sequence[float]) -> float:
    n = len(values)
    sum_x = 0.0
    sum_x2 = 0.0
    for value in values:
        sum_x += value
        sum_x2 += value * value
    return (n * sum_x2 - sum_x * sum_x) / (n * (n - 1))


def _two_pass_variance(values: Sequence[float]) -> float:
    n = len(values)
    mean = sum(values) / n
    return sum((v - mean) * (v - mean) for v in values) / (n - 1)


def _std_from_variance(
    values: Sequence[float],
    variance_of: Callable[[Sequence[float]], float],
) -> float:
    variance = variance_of(values)
    scale = 1.0
    if not isfinite(variance):
        scaled, scale = _scaled_down(values)
        variance = variance_of(scaled)
    # Rounding can push a zero variance slightly negative
    return sqrt(max(variance, 0.0)) * scale


def compute_std_dev(values: Sequence[float], method: str = "sum_of_squares") -> float:
    """
    Sample standard deviation of a series.

    Args:
        values: Readings of one sensor
        method: "sum_of_squares" (single pass over sum and sum of squares)
            or "two_pass" (mean-centred, more stable for large magnitudes)

    Returns:
        Standard deviation, 0.0 for fewer than two readings

    Raises:
        ConfigurationError: If method is unknown
    """
    if method == "sum_of_squares":
        variance_of = _sum_of_squares_variance
    elif method == "two_pass":
        variance_of = _two_pass_variance
    else:
        raise ConfigurationError(f"Unknown standard deviation method: {method}")

    if len(values) < 2:
        return 0.0
    return _std_from_variance(values, variance_of)


def compute_sensor_stats(
    series: Sequence[Sequence[float]],
    method: str = "sum_of_squares",
) -> List[SensorStat]:
    """
    Build one SensorStat per column, in column order (sensors numbered from 1).
    """
    return [
        SensorStat(
            sensor=index,
            count=len(values),
            mean=compute_mean(values),
            std_dev=compute_std_dev(values, method),
        )
        for index, values in enumerate(series, start=1)
    ]
