"""Interval endpoints and the side-aware rules for ordering them.

A bound on its own does not know which side of an interval it sits on. The
side is chosen by the comparison applied to it: the same `Bound.open(5)`
orders after `Bound.closed(5)` when both are lower bounds and before it
when both are upper bounds.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class BoundKind(Enum):
    CLOSED = "closed"
    OPEN = "open"
    UNBOUNDED = "unbounded"


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)


@dataclass(frozen=True)
class Bound(Generic[T]):
    kind: BoundKind
    value: T | None = None

    def __post_init__(self) -> None:
        try:
            kind = BoundKind(self.kind)
        except ValueError:
            valid = ", ".join(repr(member.value) for member in BoundKind)
            raise ValueError(
                f"Unknown bound kind {self.kind!r}. Valid kinds: {valid}"
            ) from None
        object.__setattr__(self, "kind", kind)

        if self.kind is BoundKind.UNBOUNDED:
            if self.value is not None:
                raise ValueError(
                    f"Unbounded bound must not carry a value, got {self.value!r}"
                )
        elif self.value is None:
            raise ValueError(f"{self.kind.value.capitalize()} bound requires a value")

    @classmethod
    def closed(cls, value: T) -> "Bound[T]":
        return cls(BoundKind.CLOSED, value)

    @classmethod
    def open(cls, value: T) -> "Bound[T]":
        return cls(BoundKind.OPEN, value)

    @classmethod
    def unbounded(cls) -> "Bound[T]":
        return cls(BoundKind.UNBOUNDED)

    @classmethod
    def from_pair(cls, pair: tuple[BoundKind, T | None]) -> "Bound[T]":
        kind, value = pair
        return cls(kind, value)

    @property
    def is_closed(self) -> bool:
        return self.kind is BoundKind.CLOSED

    @property
    def is_open(self) -> bool:
        return self.kind is BoundKind.OPEN

    @property
    def is_unbounded(self) -> bool:
        return self.kind is BoundKind.UNBOUNDED

    def as_pair(self) -> tuple[BoundKind, T | None]:
        return self.kind, self.value

    def invert(self) -> "Bound[T]":
        """Return the bound that closes the other side at the same value.

        Used to turn one interval's lower bound into the upper bound of the
        piece left before it (and the reverse). A closed edge becomes open
        and an open edge becomes closed, so the two never share a point and
        never leave a gap. Unbounded stays unbounded.
        """
        if self.kind is BoundKind.CLOSED:
            return Bound(BoundKind.OPEN, self.value)
        if self.kind is BoundKind.OPEN:
            return Bound(BoundKind.CLOSED, self.value)
        return self

    def __repr__(self) -> str:
        if self.kind is BoundKind.UNBOUNDED:
            return "Unbounded"
        return f"{self.kind.value.capitalize()}({self.value!r})"


def _compare_values(left: Any, right: Any) -> Ordering:
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare_as_lower(left: Bound[T], right: Bound[T]) -> Ordering:
    """Order two lower bounds. The one admitting more points is smaller."""
    if left.is_unbounded:
        return Ordering.EQUAL if right.is_unbounded else Ordering.LESS
    if right.is_unbounded:
        return Ordering.GREATER

    order = _compare_values(left.value, right.value)
    if order is not Ordering.EQUAL or left.kind is right.kind:
        return order
    # Same value, different kinds: [v starts before (v
    return Ordering.LESS if left.is_closed else Ordering.GREATER


def compare_as_upper(left: Bound[T], right: Bound[T]) -> Ordering:
    """Order two upper bounds. The one admitting more points is larger."""
    if left.is_unbounded:
        return Ordering.EQUAL if right.is_unbounded else Ordering.GREATER
    if right.is_unbounded:
        return Ordering.LESS

    order = _compare_values(left.value, right.value)
    if order is not Ordering.EQUAL or left.kind is right.kind:
        return order
    # Same value, different kinds: v] ends after v)
    return Ordering.GREATER if left.is_closed else Ordering.LESS


def compare_lower_to_upper(lower: Bound[T], upper: Bound[T]) -> Ordering:
    """Place a lower bound relative to an upper bound.

    `LESS` or `EQUAL` means an interval running from `lower` to `upper`
    holds at least one point; `EQUAL` is the single shared point of two
    closed bounds at the same value.
    """
    if lower.is_unbounded or upper.is_unbounded:
        return Ordering.LESS

    order = _compare_values(lower.value, upper.value)
    if order is not Ordering.EQUAL:
        return order
    if lower.is_closed and upper.is_closed:
        return Ordering.EQUAL
    return Ordering.GREATER


def compare_upper_to_lower(upper: Bound[T], lower: Bound[T]) -> Ordering:
    return compare_lower_to_upper(lower, upper).reverse()


def is_adjacent(upper: Bound[T], lower: Bound[T]) -> bool:
    """True if `upper` and `lower` meet at one value without overlap or gap.

    Exactly one of the two must include the value: `5]` meets `(5` and
    `5)` meets `[5`, whereas `5]` and `[5` overlap and `5)` and `(5` leave
    the value itself uncovered.
    """
    if upper.is_unbounded or lower.is_unbounded:
        return False
    if _compare_values(upper.value, lower.value) is not Ordering.EQUAL:
        return False
    return upper.kind is not lower.kind
