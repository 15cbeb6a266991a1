import pytest

from intervalgebra.pieces import Pieces


def test_none_is_empty():
    pieces: Pieces[int] = Pieces.none()

    assert len(pieces) == 0
    assert list(pieces) == []


def test_one_yields_single_value():
    pieces = Pieces.one("a")

    assert len(pieces) == 1
    assert next(pieces) == "a"
    assert len(pieces) == 0
    with pytest.raises(StopIteration):
        next(pieces)


def test_two_yields_in_order_and_counts_down():
    pieces = Pieces.two(1, 2)

    assert len(pieces) == 2
    assert next(pieces) == 1
    assert len(pieces) == 1
    assert next(pieces) == 2
    assert len(pieces) == 0


def test_single_pass():
    """A consumed sequence stays consumed."""
    pieces = Pieces.two(1, 2)

    assert list(pieces) == [1, 2]
    assert list(pieces) == []
    assert len(pieces) == 0


def test_is_its_own_iterator():
    pieces = Pieces.one(1)

    assert iter(pieces) is pieces


def test_falsy_values_are_yielded():
    assert list(Pieces.two(0, None)) == [0, None]


def test_rejects_more_than_two():
    with pytest.raises(ValueError, match="at most two"):
        Pieces(1, 2, 3)


def test_length_always_matches_values():
    """The count comes from the values given, never set separately."""
    assert len(Pieces()) == 0
    assert list(Pieces("a")) == ["a"]
    with pytest.raises(TypeError):
        Pieces(count=1)  # pyright: ignore[reportCallIssue]


def test_repr_shows_pending_values():
    pieces = Pieces.two(1, 2)
    assert repr(pieces) == "Pieces(1, 2)"

    next(pieces)
    assert repr(pieces) == "Pieces(2)"

    next(pieces)
    assert repr(pieces) == "Pieces()"
