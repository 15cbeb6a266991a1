import logging

import pytest

from intervalgebra import Interval, flatten, gaps, intersection, union


class TestFlatten:
    def test_empty(self):
        assert flatten([]) == []

    def test_merges_overlapping_and_adjacent(self):
        result = flatten(
            [
                Interval.closed(20, 25),
                Interval.closed(5, 8),
                Interval.closed_open(0, 5),
                Interval.open_closed(25, 30),
            ]
        )

        assert result == [Interval.closed(0, 8), Interval.closed(20, 30)]

    def test_keeps_one_point_gap(self):
        """[0, 5) and (5, 10] leave the point 5 uncovered."""
        result = flatten([Interval.open_closed(5, 10), Interval.closed_open(0, 5)])

        assert result == [Interval.closed_open(0, 5), Interval.open_closed(5, 10)]

    def test_absorbs_contained(self):
        result = flatten(
            [Interval.closed(2, 3), Interval.unbounded(), Interval.closed(7, 9)]
        )

        assert result == [Interval.unbounded()]

    def test_accepts_generators(self):
        result = flatten(Interval.closed_open(i, i + 2) for i in range(0, 10, 2))

        assert result == [Interval.closed_open(0, 10)]

    def test_logs_at_debug(self, caplog: pytest.LogCaptureFixture):
        with caplog.at_level(logging.DEBUG, logger="intervalgebra.ops"):
            flatten([Interval.closed(0, 1), Interval.closed(1, 2)])

        assert "Flattened 2 intervals into 1" in caplog.text


class TestUnion:
    def test_requires_arguments(self):
        with pytest.raises(ValueError, match="at least one interval"):
            union()

    def test_single(self):
        assert union(Interval.point(1)) == [Interval.point(1)]

    def test_many(self):
        assert union(
            Interval.closed(0, 5), Interval.closed(3, 9), Interval.at_least(20)
        ) == [Interval.closed(0, 9), Interval.at_least(20)]


class TestIntersection:
    def test_requires_arguments(self):
        with pytest.raises(ValueError, match="at least one interval"):
            intersection()

    def test_single(self):
        assert intersection(Interval.open(0, 1)) == Interval.open(0, 1)

    def test_many(self):
        assert intersection(
            Interval.at_least(0), Interval.closed_open(-5, 10), Interval.open(2, 20)
        ) == Interval.open(2, 10)

    def test_empty_short_circuits(self):
        assert (
            intersection(
                Interval.closed(0, 1), Interval.closed(5, 6), Interval.unbounded()
            )
            is None
        )


class TestGaps:
    def test_no_intervals_is_one_gap(self):
        assert gaps([]) == [Interval.unbounded()]

    def test_bounded(self):
        assert gaps([Interval.closed(10, 15), Interval.closed_open(0, 5)]) == [
            Interval.less_than(0),
            Interval.closed_open(5, 10),
            Interval.greater_than(15),
        ]

    def test_unbounded_edges(self):
        assert gaps([Interval.at_most(0), Interval.greater_than(10)]) == [
            Interval.open_closed(0, 10)
        ]

    def test_single_point_gap(self):
        assert gaps([Interval.closed_open(0, 5), Interval.open_closed(5, 10)]) == [
            Interval.less_than(0),
            Interval.point(5),
            Interval.greater_than(10),
        ]

    def test_everything_has_no_gaps(self):
        assert gaps([Interval.less_than(0), Interval.at_least(0)]) == []
