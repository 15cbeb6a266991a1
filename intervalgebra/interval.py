from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, Self, TypeVar

from typing_extensions import override

from intervalgebra.bounds import (
    Bound,
    Ordering,
    compare_as_lower,
    compare_as_upper,
    compare_lower_to_upper,
    compare_upper_to_lower,
    is_adjacent,
)
from intervalgebra.notation import format_bounds, parse_bounds
from intervalgebra.pieces import Pieces

T = TypeVar("T")

_LESS_OR_EQUAL = (Ordering.LESS, Ordering.EQUAL)
_GREATER_OR_EQUAL = (Ordering.GREATER, Ordering.EQUAL)


def check_bounds(lower: Bound[Any], upper: Bound[Any]) -> None:
    """Raise if `lower` and `upper` do not enclose at least one point.

    Every interval representation calls this when it is built, so the
    algorithms below never see an empty or inverted interval.
    """
    if compare_lower_to_upper(lower, upper) is Ordering.GREATER:
        raise ValueError(
            f"Interval lower bound ({lower!r}) must be less than or equal to "
            f"its upper bound ({upper!r})"
        )


class BaseInterval(ABC, Generic[T]):
    """Set algebra shared by every interval representation.

    Subclasses provide construction from a pair of bounds and access to
    those bounds; everything else is derived from the bound comparisons.
    Operations never mutate an interval, they build new ones through
    `from_bounds`.
    """

    @classmethod
    @abstractmethod
    def from_bounds(cls, lower: Bound[T], upper: Bound[T]) -> Self:
        """Build an interval, raising ValueError if lower is after upper."""
        pass

    @abstractmethod
    def lower_bound(self) -> Bound[T]:
        pass

    @abstractmethod
    def upper_bound(self) -> Bound[T]:
        pass

    def into_bounds(self) -> tuple[Bound[T], Bound[T]]:
        return self.lower_bound(), self.upper_bound()

    @classmethod
    def parse(cls, text: str, convert: Callable[[str], T] = int) -> Self:
        """Build an interval from bracket notation such as `[0, 5)`.

        `convert` turns each finite endpoint's text into a value.
        """
        return cls.from_bounds(*parse_bounds(text, convert))

    @override
    def __str__(self) -> str:
        return format_bounds(self.lower_bound(), self.upper_bound())

    def overlaps(self, other: "BaseInterval[T]") -> bool:
        """Return True if both intervals have any point in common."""
        lhs_lower, lhs_upper = self.into_bounds()
        rhs_lower, rhs_upper = other.into_bounds()

        # Examples |      1     |     2
        # =========|============|============
        # Range A  |    [-----] | [-----]
        # Range B  | [-----]    |    [-----]
        return (
            compare_as_lower(lhs_lower, rhs_lower) in _GREATER_OR_EQUAL
            and compare_lower_to_upper(lhs_lower, rhs_upper) in _LESS_OR_EQUAL
        ) or (
            compare_as_lower(rhs_lower, lhs_lower) in _GREATER_OR_EQUAL
            and compare_lower_to_upper(rhs_lower, lhs_upper) in _LESS_OR_EQUAL
        )

    def is_adjacent_to(self, other: "BaseInterval[T]") -> bool:
        """Return True if the intervals touch without sharing a point."""
        return is_adjacent(self.upper_bound(), other.lower_bound()) or is_adjacent(
            other.upper_bound(), self.lower_bound()
        )

    def contains_point(self, point: T) -> bool:
        probe = Bound.closed(point)
        return (
            compare_as_lower(self.lower_bound(), probe) in _LESS_OR_EQUAL
            and compare_as_upper(self.upper_bound(), probe) in _GREATER_OR_EQUAL
        )

    def contains_interval(self, other: "BaseInterval[T]") -> bool:
        """Return True if every point of `other` lies in this interval."""
        return (
            compare_as_lower(self.lower_bound(), other.lower_bound()) in _LESS_OR_EQUAL
            and compare_as_upper(self.upper_bound(), other.upper_bound())
            in _GREATER_OR_EQUAL
        )

    def complement(self) -> Pieces[Self]:
        """Return every point outside this interval.

        Examples   |      1      |    2    |    3    |    4    |    5
        ===========|=============|=========|=========|=========|=========
        Range      |   [-----]   | ---)    | ---]    |    (--- |    [---
        -----------|-------------|---------|---------|---------|---------
        Complement | --)     (-- |    [--- |    (--- | ---]    | ---)
        """
        everything = type(self).from_bounds(Bound.unbounded(), Bound.unbounded())
        return everything.difference(self)

    def merge(self, other: Self) -> Self:
        """Return the smallest interval covering both, bridging any gap.

        Unlike `union`, disjoint intervals still produce a single interval
        that includes the points between them.
        """
        lhs_lower, lhs_upper = self.into_bounds()
        rhs_lower, rhs_upper = other.into_bounds()

        return type(self).from_bounds(
            lhs_lower
            if compare_as_lower(lhs_lower, rhs_lower) in _LESS_OR_EQUAL
            else rhs_lower,
            lhs_upper
            if compare_as_upper(lhs_upper, rhs_upper) in _GREATER_OR_EQUAL
            else rhs_upper,
        )

    def union(self, other: Self) -> Pieces[Self]:
        """Return the points in either interval as one or two intervals.

        Two intervals come back only when the operands neither overlap nor
        touch, ordered by their lower bounds.
        """
        if self.overlaps(other) or self.is_adjacent_to(other):
            return Pieces.one(self.merge(other))
        if compare_as_lower(self.lower_bound(), other.lower_bound()) is Ordering.LESS:
            return Pieces.two(self, other)
        return Pieces.two(other, self)

    def intersect(self, other: Self) -> Self | None:
        """Return the points the intervals share, or None if there are none."""
        if not self.overlaps(other):
            return None

        lhs_lower, lhs_upper = self.into_bounds()
        rhs_lower, rhs_upper = other.into_bounds()

        # Examples     |     1     |     2
        # =============|===========|===========
        # Range A      |   [-----] | [-----]
        # Range B      | [-----]   |   [-----]
        # -------------|-----------|-----------
        # Intersection |   [---]   |   [---]
        return type(self).from_bounds(
            rhs_lower
            if compare_as_lower(lhs_lower, rhs_lower) in _LESS_OR_EQUAL
            else lhs_lower,
            lhs_upper
            if compare_as_upper(lhs_upper, rhs_upper) in _LESS_OR_EQUAL
            else rhs_upper,
        )

    def difference(self, other: Self) -> Pieces[Self]:
        """Return the points of this interval that are not in `other`.

        Non-overlapping operands give this interval back unchanged. Cutting
        `other` out of the middle gives two pieces.
        """
        cls = type(self)
        lhs_lower, lhs_upper = self.into_bounds()
        rhs_lower, rhs_upper = other.into_bounds()

        lower_vs_lower = compare_as_lower(lhs_lower, rhs_lower)
        lower_vs_upper = compare_lower_to_upper(lhs_lower, rhs_upper)
        upper_vs_lower = compare_upper_to_lower(lhs_upper, rhs_lower)
        upper_vs_upper = compare_as_upper(lhs_upper, rhs_upper)

        # Range A    | [---------------]
        # Range B    |     [-------]
        # Difference | [---]       [---]
        if lower_vs_lower is Ordering.LESS and upper_vs_upper is Ordering.GREATER:
            return Pieces.two(
                cls.from_bounds(lhs_lower, rhs_lower.invert()),
                cls.from_bounds(rhs_upper.invert(), lhs_upper),
            )

        # Range A    |        [---]
        # Range B    | [---]
        # Difference |        [---]
        if lower_vs_upper is Ordering.GREATER or upper_vs_lower is Ordering.LESS:
            return Pieces.one(cls.from_bounds(lhs_lower, lhs_upper))

        # Range A    |   [---]   | [---]
        # Range B    | [-------] | [---]
        # Difference |   empty   | empty
        if lower_vs_lower in _GREATER_OR_EQUAL and upper_vs_upper in _LESS_OR_EQUAL:
            return Pieces.none()

        # Range A    | [-----]
        # Range B    |     [---]
        # Difference | [---]
        if lower_vs_lower is Ordering.LESS:
            return Pieces.one(cls.from_bounds(lhs_lower, rhs_lower.invert()))

        # Range A    |   [-----]
        # Range B    | [---]
        # Difference |     [---]
        return Pieces.one(cls.from_bounds(rhs_upper.invert(), lhs_upper))

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, BaseInterval):
            return self.contains_interval(item)
        if item is None:
            return False
        return self.contains_point(item)

    def __and__(self, other: Self) -> Self | None:
        return self.intersect(other)

    def __or__(self, other: Self) -> Pieces[Self]:
        return self.union(other)

    def __sub__(self, other: Self) -> Pieces[Self]:
        return self.difference(other)

    def __invert__(self) -> Pieces[Self]:
        return self.complement()


@dataclass(frozen=True)
class Interval(BaseInterval[T]):
    """Interval stored as a plain pair of bounds.

    >>> Interval.closed(0, 10) & Interval.closed(5, 15)
    Interval([5, 10])
    >>> list(Interval.closed(0, 15) - Interval.closed(5, 10))
    [Interval([0, 5)), Interval((10, 15])]
    """

    lower: Bound[T]
    upper: Bound[T]

    def __post_init__(self) -> None:
        check_bounds(self.lower, self.upper)

    @classmethod
    @override
    def from_bounds(cls, lower: Bound[T], upper: Bound[T]) -> Self:
        return cls(lower, upper)

    @override
    def lower_bound(self) -> Bound[T]:
        return self.lower

    @override
    def upper_bound(self) -> Bound[T]:
        return self.upper

    @classmethod
    def closed(cls, lower: T, upper: T) -> Self:
        return cls(Bound.closed(lower), Bound.closed(upper))

    @classmethod
    def open(cls, lower: T, upper: T) -> Self:
        return cls(Bound.open(lower), Bound.open(upper))

    @classmethod
    def closed_open(cls, lower: T, upper: T) -> Self:
        return cls(Bound.closed(lower), Bound.open(upper))

    @classmethod
    def open_closed(cls, lower: T, upper: T) -> Self:
        return cls(Bound.open(lower), Bound.closed(upper))

    @classmethod
    def at_least(cls, lower: T) -> Self:
        return cls(Bound.closed(lower), Bound.unbounded())

    @classmethod
    def greater_than(cls, lower: T) -> Self:
        return cls(Bound.open(lower), Bound.unbounded())

    @classmethod
    def at_most(cls, upper: T) -> Self:
        return cls(Bound.unbounded(), Bound.closed(upper))

    @classmethod
    def less_than(cls, upper: T) -> Self:
        return cls(Bound.unbounded(), Bound.open(upper))

    @classmethod
    def unbounded(cls) -> Self:
        return cls(Bound.unbounded(), Bound.unbounded())

    @classmethod
    def point(cls, value: T) -> Self:
        return cls.closed(value, value)

    @override
    def __repr__(self) -> str:
        return f"Interval({self})"
