"""Bracket notation for intervals.

`[` and `]` mark a closed side, `(` and `)` an open one, and `-` stands in
for the value of an unbounded side, which is always drawn open:

    [0, 5)     closed at 0, open at 5
    (-, 5]     everything up to and including 5
    (-, -)     everything

Endpoint text is written with `str()` and is not escaped, so values whose
text contains `,` or is exactly `-` render fine but cannot be parsed back.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from intervalgebra.bounds import Bound, BoundKind

T = TypeVar("T")

UNBOUNDED_SYMBOL = "-"
SEPARATOR = ","

_LOWER_BRACKETS = {BoundKind.CLOSED: "[", BoundKind.OPEN: "(", BoundKind.UNBOUNDED: "("}
_UPPER_BRACKETS = {BoundKind.CLOSED: "]", BoundKind.OPEN: ")", BoundKind.UNBOUNDED: ")"}
_LOWER_KINDS = {"[": BoundKind.CLOSED, "(": BoundKind.OPEN}
_UPPER_KINDS = {"]": BoundKind.CLOSED, ")": BoundKind.OPEN}


def _format_value(bound: Bound[Any]) -> str:
    return UNBOUNDED_SYMBOL if bound.is_unbounded else str(bound.value)


def format_bounds(lower: Bound[Any], upper: Bound[Any]) -> str:
    return (
        f"{_LOWER_BRACKETS[lower.kind]}{_format_value(lower)}{SEPARATOR} "
        f"{_format_value(upper)}{_UPPER_BRACKETS[upper.kind]}"
    )


def _parse_bound(token: str, kind: BoundKind, convert: Callable[[str], T]) -> Bound[T]:
    if token == UNBOUNDED_SYMBOL:
        if kind is BoundKind.CLOSED:
            raise ValueError(
                f"An unbounded side cannot be closed.\n"
                f"Hint: write '(-' or '-)' instead of '[-' or '-]'"
            )
        return Bound.unbounded()
    if not token:
        raise ValueError(
            f"Missing endpoint value; use '{UNBOUNDED_SYMBOL}' for an unbounded side"
        )
    return Bound(kind, convert(token))


def parse_bounds(
    text: str, convert: Callable[[str], T] = int
) -> tuple[Bound[T], Bound[T]]:
    """Split bracket notation into a lower and an upper bound.

    Raises:
        ValueError: If the text is not of the form `<bracket>a, b<bracket>`,
            or if `convert` rejects an endpoint.
    """
    stripped = text.strip()
    if (
        len(stripped) < 2
        or stripped[0] not in _LOWER_KINDS
        or stripped[-1] not in _UPPER_KINDS
    ):
        raise ValueError(
            f"Interval notation must start with '[' or '(' and end with ']' or ')'.\n"
            f"Got: {text!r}\n"
            f"Examples: '[0, 5)', '(-, 10]', '(-, -)'"
        )

    parts = stripped[1:-1].split(SEPARATOR)
    if len(parts) != 2:
        raise ValueError(
            f"Interval notation must hold exactly two endpoints separated by "
            f"'{SEPARATOR}'; endpoint values cannot contain '{SEPARATOR}'.\n"
            f"Got: {text!r}"
        )

    lower_token, upper_token = (part.strip() for part in parts)
    return (
        _parse_bound(lower_token, _LOWER_KINDS[stripped[0]], convert),
        _parse_bound(upper_token, _UPPER_KINDS[stripped[-1]], convert),
    )
