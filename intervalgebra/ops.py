"""Operations over any number of intervals.

The pairwise algebra lives on the interval types themselves. These helpers
fold it over collections, e.g. to consolidate the validity ranges of a
record's versions into a minimal set of spans.
"""

import logging
from collections.abc import Iterable
from functools import cmp_to_key, reduce
from typing import Any, TypeVar

from intervalgebra.bounds import Bound, compare_as_lower
from intervalgebra.interval import BaseInterval, Interval

logger = logging.getLogger(__name__)

Ivl = TypeVar("Ivl", bound=BaseInterval[Any])


def _by_lower_bound(left: BaseInterval[Any], right: BaseInterval[Any]) -> int:
    return compare_as_lower(left.lower_bound(), right.lower_bound())


def flatten(intervals: Iterable[Ivl]) -> list[Ivl]:
    """Coalesce intervals into sorted, disjoint, non-touching spans.

    Overlapping and adjacent intervals are merged; the result covers exactly
    the points covered by the input.

    Example:
        >>> flatten([Interval.closed(5, 8), Interval.closed_open(0, 5)])
        [Interval([0, 8])]
    """
    ordered = sorted(intervals, key=cmp_to_key(_by_lower_bound))
    if not ordered:
        return []

    flattened: list[Ivl] = []
    current = ordered[0]
    for interval in ordered[1:]:
        if current.overlaps(interval) or current.is_adjacent_to(interval):
            current = current.merge(interval)
        else:
            flattened.append(current)
            current = interval
    flattened.append(current)

    logger.debug("Flattened %d intervals into %d", len(ordered), len(flattened))
    return flattened


def union(*intervals: Ivl) -> list[Ivl]:
    """Return the points in any of the intervals (same as `flatten`)."""

    if not intervals:
        raise ValueError(
            f"union() requires at least one interval argument.\n"
            f"Example: union(Interval.closed(0, 5), Interval.closed(3, 9))"
        )
    return flatten(intervals)


def intersection(*intervals: Ivl) -> Ivl | None:
    """Return the points common to all intervals, or None if there are none."""

    if not intervals:
        raise ValueError(
            f"intersection() requires at least one interval argument.\n"
            f"Example: intersection(Interval.closed(0, 5), Interval.closed(3, 9))"
        )

    def reducer(acc: Ivl | None, nxt: Ivl) -> Ivl | None:
        return None if acc is None else acc.intersect(nxt)

    return reduce(reducer, intervals[1:], intervals[0])


def gaps(intervals: Iterable[Ivl]) -> list[Ivl]:
    """Return the points covered by none of the intervals, in order.

    With no input the whole domain is one gap, returned as `Interval`.
    """
    flattened = flatten(intervals)
    if not flattened:
        return [Interval.unbounded()]  # pyright: ignore[reportReturnType]

    cls = type(flattened[0])
    result: list[Ivl] = []
    cursor: Bound[Any] | None = Bound.unbounded()
    for interval in flattened:
        lower, upper = interval.into_bounds()
        if not lower.is_unbounded:
            result.append(cls.from_bounds(cursor, lower.invert()))
        cursor = None if upper.is_unbounded else upper.invert()
    if cursor is not None:
        result.append(cls.from_bounds(cursor, Bound.unbounded()))

    logger.debug("Found %d gaps between %d intervals", len(result), len(flattened))
    return result
