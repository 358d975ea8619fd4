"""
Grid positions, tiles and the per-direction traversal map.

The traversal map orders the cells of a board into lines for every
direction. Within a line, index 0 is the edge the tiles compact toward.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .direction import Direction
from .value import Value


@dataclass(frozen=True, order=True)
class Position:
    """A cell coordinate on the board."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True)
class Tile:
    """A value observed at a position. Never stored by the board."""
    value: Value
    position: Position

    def __str__(self) -> str:
        return f"{self.value!r}@{self.position}"


Line = Tuple[Position, ...]
LineTraversals = Tuple[Line, ...]


def generate_traversal_map(size: int) -> Dict[Direction, LineTraversals]:
    """
    Build the line ordering for every direction on a ``size`` x ``size`` grid.

    Left walks rows with columns in natural order, Right mirrors the columns.
    Up walks columns top to bottom, Down mirrors the rows. For every
    direction the lines partition all ``size ** 2`` positions.

    Args:
        size: Edge length of the grid

    Returns:
        Mapping from direction to ``size`` lines of ``size`` positions each
    """
    forward = range(size)
    backward = range(size - 1, -1, -1)

    return {
        Direction.LEFT: tuple(
            tuple(Position(row, col) for col in forward) for row in forward
        ),
        Direction.RIGHT: tuple(
            tuple(Position(row, col) for col in backward) for row in forward
        ),
        Direction.UP: tuple(
            tuple(Position(row, col) for row in forward) for col in forward
        ),
        Direction.DOWN: tuple(
            tuple(Position(row, col) for row in backward) for col in forward
        ),
    }
