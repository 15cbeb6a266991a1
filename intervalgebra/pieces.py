from collections.abc import Iterator
from typing import Generic, TypeVar

from typing_extensions import override

T = TypeVar("T")


class Pieces(Iterator[T], Generic[T]):
    """Single-pass iterator over zero, one or two precomputed values.

    Set operations on a pair of intervals never produce more than two
    intervals, so their results are held in two fixed slots instead of a
    list. `len()` reports how many values are still to come.
    """

    __slots__ = ("_first", "_second", "_count", "_index")

    def __init__(self, *values: T):
        if len(values) > 2:
            raise ValueError(f"Pieces holds at most two values, got {len(values)}")
        self._first: T | None = values[0] if len(values) > 0 else None
        self._second: T | None = values[1] if len(values) > 1 else None
        self._count: int = len(values)
        self._index: int = 0

    @classmethod
    def none(cls) -> "Pieces[T]":
        return cls()

    @classmethod
    def one(cls, value: T) -> "Pieces[T]":
        return cls(value)

    @classmethod
    def two(cls, first: T, second: T) -> "Pieces[T]":
        return cls(first, second)

    @override
    def __iter__(self) -> "Pieces[T]":
        return self

    @override
    def __next__(self) -> T:
        if self._index >= self._count:
            raise StopIteration
        self._index += 1
        if self._index == 1:
            value, self._first = self._first, None
        else:
            value, self._second = self._second, None
        return value  # pyright: ignore[reportReturnType]

    def __len__(self) -> int:
        return self._count - self._index

    def __length_hint__(self) -> int:
        return len(self)

    @override
    def __repr__(self) -> str:
        pending = [self._first, self._second][self._index : self._count]
        return f"Pieces({', '.join(str(value) for value in pending)})"
