"""
Cell values for the 2048 board.

A value is either empty or a power of two between 2 and MAX_TILE_VALUE.
Each value has a single character text encoding indexed by its exponent:
empty -> '0', 2 -> '1', 4 -> '2', ..., 2048 -> 'B'.
"""

from dataclasses import dataclass
from typing import Tuple

from .errors import BoardFormatError

MAX_TILE_VALUE = 2048
ALPHABET = "0123456789AB"
MAX_EXPONENT = len(ALPHABET) - 1

EMPTY_COLOR: Tuple[float, float, float] = (0.6, 0.6, 0.6)
TILE_GRAY = 0.8


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


@dataclass(frozen=True)
class Value:
    """Content of a single cell. ``number == 0`` means empty."""
    number: int = 0

    @classmethod
    def from_number(cls, number: int) -> "Value":
        """Build a value from a plain tile number (0 for empty)."""
        if number == 0:
            return EMPTY
        if number < 2 or number > MAX_TILE_VALUE or number & (number - 1):
            raise BoardFormatError(f"Invalid tile value: {number}")
        return cls(number)

    @classmethod
    def from_exponent(cls, exponent: int) -> "Value":
        return EMPTY if exponent == 0 else cls(1 << exponent)

    @classmethod
    def from_char(cls, char: str) -> "Value":
        """Decode a single character of the board text encoding."""
        exponent = ALPHABET.find(char) if len(char) == 1 else -1
        if exponent < 0:
            raise BoardFormatError(f"Invalid tile character: {char!r}")
        return cls.from_exponent(exponent)

    @property
    def is_empty(self) -> bool:
        return self.number == 0

    def to_exponent(self) -> int:
        """Empty -> 0, Number(n) -> log2(n)."""
        return self.number.bit_length() - 1 if self.number else 0

    def to_char(self) -> str:
        return ALPHABET[self.to_exponent()]

    def merge(self, other: "Value") -> "Value":
        """
        Combine two values into one.

        Merging into an empty value yields ``other``. Two numbers are added
        without checking that they are equal; callers only merge equal
        values.
        """
        if self.is_empty:
            return other
        return Value(self.number + other.number)

    def color(self) -> Tuple[float, float, float]:
        """Background colour as an RGB triple in [0, 1] for renderers."""
        if self.is_empty:
            return EMPTY_COLOR
        t = (self.to_exponent() - 1) / (MAX_EXPONENT - 1)
        return (_lerp(TILE_GRAY, 1.0, t), TILE_GRAY, TILE_GRAY)

    def __str__(self) -> str:
        return self.to_char()

    def __repr__(self) -> str:
        return "Empty" if self.is_empty else f"Number({self.number})"


EMPTY = Value()
