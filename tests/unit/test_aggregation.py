"""
Unit tests for run-scoped accumulation.
"""

import pytest

from sensorlog.core.exceptions import InconsistentColumnCountError, NoDataError
from sensorlog.data.aggregation import SensorAccumulator, accumulate
from sensorlog.data.schema import LogLine


def _line(timestamp, *readings, line_number=None):
    return LogLine(timestamp=timestamp, readings=list(readings), line_number=line_number)


class TestSensorAccumulator:
    def test_series_by_column(self):
        acc = accumulate([
            _line("t0", 1.0, 10.0),
            _line("t1", 2.0, 20.0),
            _line("t2", 3.0, 30.0),
        ])

        assert acc.series == [[1.0, 2.0, 3.0], [10.0, 20.0, 30.0]]
        assert acc.line_count == 3
        assert acc.expected_columns == 2
        assert acc.reading_count == 6

    def test_extremes_with_timestamps(self):
        acc = accumulate([
            _line("t0", 5.0, -1.0),
            _line("t1", 9.0, 0.0),
            _line("t2", 2.0, -7.5),
        ])

        extremes = acc.extremes()

        assert extremes.max_value == 9.0
        assert extremes.max_timestamp == "t1"
        assert extremes.min_value == -7.5
        assert extremes.min_timestamp == "t2"

    def test_ties_keep_first_occurrence(self):
        acc = accumulate([
            _line("first", 4.0, 1.0),
            _line("second", 4.0, 1.0),
            _line("third", 4.0, 1.0),
        ])

        extremes = acc.extremes()

        assert extremes.max_timestamp == "first"
        assert extremes.min_timestamp == "first"

    def test_tie_within_line_keeps_earliest_line(self):
        acc = accumulate([
            _line("a", 1.0, 3.0),
            _line("b", 3.0, 0.5),
        ])

        assert acc.extremes().max_timestamp == "a"
        assert acc.extremes().min_timestamp == "b"

    def test_extremes_bound_every_value(self):
        lines = [
            _line(f"t{i}", float((i * 37) % 11) - 5.0, float((i * 13) % 7) * 1.5)
            for i in range(25)
        ]
        acc = accumulate(lines)
        extremes = acc.extremes()
        values = [v for line in lines for v in line.readings]

        assert extremes.max_value == max(values)
        assert extremes.min_value == min(values)
        assert all(extremes.min_value <= v <= extremes.max_value for v in values)

    def test_single_value_is_both_extremes(self):
        acc = accumulate([_line("only", 42.0)])

        extremes = acc.extremes()

        assert extremes.max_value == extremes.min_value == 42.0
        assert extremes.max_timestamp == extremes.min_timestamp == "only"

    def test_column_count_mismatch(self):
        acc = SensorAccumulator()
        acc.add(_line("t0", 1.0, 2.0))

        with pytest.raises(InconsistentColumnCountError) as exc_info:
            acc.add(_line("t1", 1.0, 2.0, 3.0, line_number=2))

        assert exc_info.value.expected == 2
        assert exc_info.value.found == 3
        assert exc_info.value.line_number == 2

    def test_fewer_columns_than_first_line(self):
        acc = SensorAccumulator()
        acc.add(_line("t0", 1.0, 2.0))

        with pytest.raises(InconsistentColumnCountError):
            acc.add(_line("t1", 1.0))

    def test_no_lines_is_no_data(self):
        with pytest.raises(NoDataError):
            SensorAccumulator().extremes()

    def test_lines_without_readings_is_no_data(self):
        acc = accumulate([_line("t0"), _line("t1")])

        assert acc.line_count == 2
        assert acc.expected_columns == 0
        with pytest.raises(NoDataError):
            acc.extremes()

    def test_accumulators_are_independent(self):
        first = accumulate([_line("t0", 100.0)])
        second = accumulate([_line("t0", 1.0, 2.0)])

        assert first.series == [[100.0]]
        assert second.series == [[1.0], [2.0]]
        assert first.extremes().max_value == 100.0


def test_extremes_cannot_be_seeded():
    with pytest.raises(TypeError):
        SensorAccumulator(_max_value=100.0)

    assert "_max_value" not in repr(SensorAccumulator())
