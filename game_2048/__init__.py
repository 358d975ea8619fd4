"""
Deterministic 2048 simulation core.

The board plans moves as ordered lists of spawn / slide / merge actions and
replays them to change state. Rendering and input live outside this package
and follow the game through its action stream.
"""

from .action import Action, MergeTiles, SlideTile, SpawnRandomTile, describe_action
from .board import DEFAULT_SIZE, SPAWN_TWO_PROBABILITY, Board
from .direction import Direction
from .errors import BoardFormatError
from .game import Game, StepResult
from .position import Position, Tile, generate_traversal_map
from .value import EMPTY, MAX_TILE_VALUE, Value

__all__ = [
    'Action', 'MergeTiles', 'SlideTile', 'SpawnRandomTile', 'describe_action',
    'DEFAULT_SIZE', 'SPAWN_TWO_PROBABILITY', 'Board',
    'Direction',
    'BoardFormatError',
    'Game', 'StepResult',
    'Position', 'Tile', 'generate_traversal_map',
    'EMPTY', 'MAX_TILE_VALUE', 'Value',
]
