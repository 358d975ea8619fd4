"""
Board engine for 2048.

The board owns the canonical grid and the traversal map. Planning is pure:
``plan`` and ``plan_spawn`` return actions without touching the board, and
``apply`` is the only way the grid changes.
"""

import random
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .action import Action, MergeTiles, SlideTile, SpawnRandomTile
from .direction import Direction
from .errors import BoardFormatError
from .position import Line, LineTraversals, Position, Tile, generate_traversal_map
from .value import EMPTY, MAX_EXPONENT, MAX_TILE_VALUE, Value

DEFAULT_SIZE = 4
SPAWN_TWO_PROBABILITY = 0.9


class Board:
    """
    A ``size`` x ``size`` grid of values.

    Every position always holds a value (possibly empty). The traversal map
    is computed once here and never changes.

    Example:
        >>> board = Board.from_text("0122000000000000")
        >>> board.move_and_apply(Direction.LEFT)
        True
        >>> str(board)
        '1300000000000000'
    """

    def __init__(self, size: int = DEFAULT_SIZE):
        self.size = size
        self._traversal_map = MappingProxyType(generate_traversal_map(size))
        self._values: Dict[Position, Value] = {
            position: EMPTY for position in self.positions()
        }

    # Construction

    @classmethod
    def from_text(cls, text: str, size: int = DEFAULT_SIZE) -> "Board":
        """
        Decode the row-major text encoding.

        Raises:
            BoardFormatError: If the length is not ``size ** 2`` or a
                character is outside ``0123456789AB``
        """
        if len(text) != size * size:
            raise BoardFormatError(
                f"Expected {size * size} characters for a {size}x{size} board, "
                f"got {len(text)}"
            )
        values = [Value.from_char(char) for char in text]

        board = cls(size)
        for position, value in zip(board.positions(), values):
            board._values[position] = value
        return board

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> "Board":
        """Build a board from nested rows of tile numbers (0 = empty)."""
        size = len(grid)
        if size == 0 or any(len(row) != size for row in grid):
            raise BoardFormatError("Grid must be a non-empty square")
        values = [Value.from_number(int(number)) for row in grid for number in row]

        board = cls(size)
        for position, value in zip(board.positions(), values):
            board._values[position] = value
        return board

    def copy(self) -> "Board":
        board = object.__new__(Board)
        board.size = self.size
        board._traversal_map = self._traversal_map
        board._values = dict(self._values)
        return board

    # Queries

    @property
    def traversal_map(self) -> Mapping[Direction, LineTraversals]:
        return self._traversal_map

    def positions(self) -> List[Position]:
        """All positions in Left traversal (row-major) order."""
        return [position for line in self._traversal_map[Direction.LEFT] for position in line]

    def get(self, position: Position) -> Value:
        return self._values[position]

    def get_tile(self, position: Position) -> Tile:
        return Tile(self._values[position], position)

    def empty_positions(self) -> List[Position]:
        return [position for position in self.positions() if self._values[position].is_empty]

    def empty_count(self) -> int:
        return sum(1 for value in self._values.values() if value.is_empty)

    def max_value(self) -> Value:
        return max(self._values.values(), key=lambda value: value.number)

    def to_text(self) -> str:
        return "".join(self._values[position].to_char() for position in self.positions())

    def to_array(self) -> np.ndarray:
        """Tile numbers as a ``size`` x ``size`` integer array."""
        numbers = [self._values[position].number for position in self.positions()]
        return np.array(numbers, dtype=np.int64).reshape(self.size, self.size)

    def normalized(self) -> np.ndarray:
        """Exponents scaled to [0, 1] for neural network input."""
        exponents = [self._values[position].to_exponent() for position in self.positions()]
        return np.array(exponents, dtype=np.float32).reshape(self.size, self.size) / MAX_EXPONENT

    # Planning

    def plan(self, direction: Direction) -> List[Action]:
        """
        Compute the actions that move every tile toward ``direction``.

        The board is not modified. Applying the returned actions in order
        produces the post-move board; an empty list means nothing moves.
        """
        working = self.copy()
        actions: List[Action] = []
        for line in self._traversal_map[direction]:
            actions.extend(self._plan_line(line, working))
        return actions

    @staticmethod
    def _plan_line(line: Line, working: "Board") -> List[Action]:
        """
        Compact and merge one line, applying each emitted action to ``working``.

        A slide is held back as ``pending`` until the next tile is known: if
        that tile merges with the sliding one, the slide is dropped and the
        merge is recorded from the sliding tile's original position.
        """
        actions: List[Action] = []
        focus = 0
        prev: Optional[Tuple[int, Value]] = None
        pending: Optional[SlideTile] = None

        for position in line:
            value = working.get(position)
            if value.is_empty:
                continue
            tile = Tile(value, position)
            slot = line[focus]
            can_slide = position != slot

            if prev is not None:
                prev_idx, prev_value = prev
                if prev_value == value and prev_value.number < MAX_TILE_VALUE:
                    if pending is not None:
                        source, target = pending.tile, pending.destination
                        pending = None
                    else:
                        target = line[prev_idx]
                        source = working.get_tile(target)
                    merge = MergeTiles(source, tile, target, source.value.merge(value))
                    working.apply(merge)
                    actions.append(merge)
                    # merged tiles cannot merge again this move
                    prev = None
                    continue

                if can_slide and pending is not None:
                    working.apply(pending)
                    actions.append(pending)
                    pending = None

            if can_slide:
                pending = SlideTile(tile, slot)
            prev = (focus, value)
            focus += 1

        if pending is not None:
            working.apply(pending)
            actions.append(pending)
        return actions

    def plan_spawn(self, rng: random.Random) -> Optional[SpawnRandomTile]:
        """
        Pick an empty cell and a new value (90% 2, 10% 4).

        Args:
            rng: Generator owned by the caller, so the same seed and history
                give the same spawn

        Returns:
            The spawn action, or None when the board is full
        """
        empty_positions = self.empty_positions()
        if not empty_positions:
            return None

        position = empty_positions[rng.randrange(len(empty_positions))]
        number = 2 if rng.random() < SPAWN_TWO_PROBABILITY else 4
        return SpawnRandomTile(Tile(Value(number), position))

    # Mutation

    def apply(self, action: Action) -> None:
        """Apply one action. Actions must come from this board's own planning."""
        if isinstance(action, SpawnRandomTile):
            self._values[action.tile.position] = action.tile.value
        elif isinstance(action, SlideTile):
            self._values[action.tile.position] = EMPTY
            self._values[action.destination] = action.tile.value
        elif isinstance(action, MergeTiles):
            self._values[action.tile1.position] = EMPTY
            self._values[action.tile2.position] = EMPTY
            self._values[action.destination] = action.value

    def move_and_apply(self, direction: Direction) -> bool:
        """Plan and apply a move. Returns True if the board changed."""
        actions = self.plan(direction)
        for action in actions:
            self.apply(action)
        return bool(actions)

    # Rendering

    def render(self) -> str:
        """Boxed grid of tile numbers for terminals."""
        border = "+" + "+".join(["------"] * self.size) + "+"
        lines = [border]
        for line in self._traversal_map[Direction.LEFT]:
            cells = []
            for position in line:
                value = self._values[position]
                cells.append("      " if value.is_empty else f"{value.number:^6}")
            lines.append("|" + "|".join(cells) + "|")
            lines.append(border)
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.size == other.size and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Board(size={self.size}, text={self.to_text()!r})"
