"""Move directions and their single-letter rendering."""

from enum import Enum


class Direction(Enum):
    """Direction of travel for a move. Values are the log letters."""
    LEFT = "L"
    RIGHT = "R"
    UP = "U"
    DOWN = "D"

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Parse a letter (``"L"``) or a name (``"left"``), case-insensitive."""
        key = text.strip().upper()
        for direction in cls:
            if key in (direction.value, direction.name):
                return direction
        raise ValueError(f"Unknown direction: {text}")

    @property
    def is_horizontal(self) -> bool:
        return self in (Direction.LEFT, Direction.RIGHT)

    def __str__(self) -> str:
        return self.value
