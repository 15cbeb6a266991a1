from .bounds import (
    Bound,
    BoundKind,
    Ordering,
    compare_as_lower,
    compare_as_upper,
    compare_lower_to_upper,
    compare_upper_to_lower,
    is_adjacent,
)
from .interval import BaseInterval, Interval, check_bounds
from .notation import format_bounds, parse_bounds
from .ops import flatten, gaps, intersection, union
from .pieces import Pieces

__all__ = [
    "Bound",
    "BoundKind",
    "Ordering",
    "compare_as_lower",
    "compare_as_upper",
    "compare_lower_to_upper",
    "compare_upper_to_lower",
    "is_adjacent",
    "BaseInterval",
    "Interval",
    "check_bounds",
    "Pieces",
    "format_bounds",
    "parse_bounds",
    "flatten",
    "gaps",
    "union",
    "intersection",
]
