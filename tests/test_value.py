import pytest

from game_2048 import EMPTY, MAX_TILE_VALUE, BoardFormatError, Direction, Value


@pytest.mark.parametrize("char,number", [
    ("0", 0), ("1", 2), ("2", 4), ("3", 8), ("9", 512), ("A", 1024), ("B", 2048),
])
def test_char_encoding(char, number):
    value = Value.from_char(char)

    assert value.number == number
    assert value.to_char() == char


def test_exponent():
    assert EMPTY.to_exponent() == 0
    assert Value(2).to_exponent() == 1
    assert Value(MAX_TILE_VALUE).to_exponent() == 11


@pytest.mark.parametrize("char", ["C", "a", "", "10", " "])
def test_invalid_char(char):
    with pytest.raises(BoardFormatError):
        Value.from_char(char)


def test_merge():
    assert Value(4).merge(Value(4)) == Value(8)
    assert EMPTY.merge(Value(2)) == Value(2)
    assert EMPTY.merge(EMPTY) == EMPTY


def test_merge_does_not_check_equality():
    # only the board planner decides which values may merge
    assert Value(2).merge(Value(4)) == Value(6)


def test_empty():
    assert EMPTY.is_empty
    assert Value() == EMPTY
    assert not Value(2).is_empty
    assert Value.from_number(0) is EMPTY
    assert repr(EMPTY) == "Empty"
    assert repr(Value(16)) == "Number(16)"


def test_color():
    assert EMPTY.color() == (0.6, 0.6, 0.6)
    assert Value(2).color() == pytest.approx((0.8, 0.8, 0.8))
    assert Value(2048).color() == pytest.approx((1.0, 0.8, 0.8))
    assert Value(64).color()[0] > Value(8).color()[0]


@pytest.mark.parametrize("text,direction", [
    ("L", Direction.LEFT), ("r", Direction.RIGHT), ("up", Direction.UP), ("DOWN", Direction.DOWN),
])
def test_direction_parse(text, direction):
    assert Direction.parse(text) is direction


def test_direction_letters():
    assert [str(direction) for direction in Direction] == ["L", "R", "U", "D"]
    assert Direction.LEFT.is_horizontal
    assert not Direction.DOWN.is_horizontal

    with pytest.raises(ValueError):
        Direction.parse("X")
