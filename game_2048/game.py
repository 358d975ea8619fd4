"""
2048 game session with deterministic, seedable RNG.

A ``Game`` runs the turn protocol on top of a ``Board``: plan a move, apply
every action, and if anything moved, spawn a tile. The actions of each turn
are published to subscribers, which is how a presentation layer follows the
game without touching board internals.
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from .action import Action, SpawnRandomTile
from .board import DEFAULT_SIZE, Board
from .direction import Direction

logger = logging.getLogger(__name__)

DEFAULT_SEED = 42
START_TILES = 2

Subscriber = Callable[[Optional[Direction], Sequence[Action]], None]


@dataclass
class StepResult:
    """Result of a game step."""
    direction: Direction
    actions: List[Action]
    spawn: Optional[SpawnRandomTile]
    moved: bool
    board: str


class Game:
    """
    A single 2048 session.

    Example:
        >>> game = Game(seed=42)
        >>> result = game.step(Direction.LEFT)
        >>> result.moved, len(game.history)
    """

    def __init__(self, seed: int = DEFAULT_SEED, size: int = DEFAULT_SIZE,
                 start_tiles: int = START_TILES):
        """Create a new game with the given seed."""
        self._seed = seed
        self.size = size
        self.start_tiles = start_tiles
        self._subscribers: List[Subscriber] = []
        self._start()

    def _start(self) -> None:
        self._rng = random.Random(self._seed)
        self.board = Board(self.size)
        self.history: List[Direction] = []

        spawns: List[Action] = []
        for _ in range(self.start_tiles):
            spawn = self.board.plan_spawn(self._rng)
            if spawn is None:
                break
            self.board.apply(spawn)
            spawns.append(spawn)
        self._publish(None, spawns)

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self, seed: Optional[int] = None) -> str:
        """Reset the game to its initial state. Returns the board text."""
        if seed is not None:
            self._seed = seed
        self._start()
        return self.board.to_text()

    def subscribe(self, callback: Subscriber) -> None:
        """
        Register a listener for the action stream.

        The callback receives the move direction (None for the opening
        spawns) and the actions in application order.
        """
        self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        self._subscribers.remove(callback)

    def _publish(self, direction: Optional[Direction], actions: Sequence[Action]) -> None:
        for callback in list(self._subscribers):
            callback(direction, actions)

    def step(self, direction: Direction) -> StepResult:
        """
        Play one turn in the given direction.

        Returns:
            StepResult with the move actions, the spawn (if any), whether
            the board moved and the resulting board text
        """
        before = self.board.to_text()
        actions = self.board.plan(direction)
        for action in actions:
            self.board.apply(action)

        moved = bool(actions)
        spawn = None
        if moved:
            spawn = self.board.plan_spawn(self._rng)
            if spawn is not None:
                self.board.apply(spawn)
            self.history.append(direction)

        after = self.board.to_text()
        logger.debug("%s --%s--> %s", before, direction, after)

        published: List[Action] = list(actions)
        if spawn is not None:
            published.append(spawn)
        if published:
            self._publish(direction, published)

        return StepResult(
            direction=direction,
            actions=actions,
            spawn=spawn,
            moved=moved,
            board=after,
        )

    @classmethod
    def replay(cls, moves: str, seed: int = DEFAULT_SEED,
               size: int = DEFAULT_SIZE) -> "Game":
        """
        Rebuild a session from its seed and a move string such as ``"LURD"``.

        Raises:
            ValueError: If ``moves`` contains an unknown direction letter
        """
        directions = [Direction.parse(letter) for letter in moves if not letter.isspace()]
        game = cls(seed=seed, size=size)
        for direction in directions:
            game.step(direction)
        return game

    def moves(self) -> str:
        """Moves that changed the board, as direction letters."""
        return "".join(str(direction) for direction in self.history)

    def is_full(self) -> bool:
        return self.board.empty_count() == 0

    def max_tile(self) -> int:
        """Get the maximum tile value."""
        return self.board.max_value().number

    def empty_count(self) -> int:
        return self.board.empty_count()

    def normalized_board(self) -> np.ndarray:
        """Board as log2-normalized floats for neural network input."""
        return self.board.normalized().flatten()

    def __repr__(self) -> str:
        return f"Game(seed={self._seed}, max_tile={self.max_tile()}, moves={len(self.history)})"

    def __str__(self) -> str:
        return f"Moves: {len(self.history)}\n{self.board.render()}"
