"""
Atomic board actions.

Planning produces these, ``Board.apply`` consumes them, and a presentation
layer can animate from them: every action names its source tile(s) by value
and position, its destination, and for merges the resulting value.
"""

from dataclasses import dataclass
from typing import Union

from .position import Position, Tile
from .value import Value


@dataclass(frozen=True)
class SpawnRandomTile:
    """A new tile appears on an empty cell."""
    tile: Tile


@dataclass(frozen=True)
class SlideTile:
    """A tile moves to ``destination`` without merging."""
    tile: Tile
    destination: Position


@dataclass(frozen=True)
class MergeTiles:
    """Two equal tiles combine into ``value`` at ``destination``."""
    tile1: Tile
    tile2: Tile
    destination: Position
    value: Value


Action = Union[SpawnRandomTile, SlideTile, MergeTiles]


def describe_action(action: Action) -> str:
    """One-line human readable form used by the CLI and debug logs."""
    if isinstance(action, SpawnRandomTile):
        return f"spawn {action.tile}"
    if isinstance(action, SlideTile):
        return f"slide {action.tile} -> {action.destination}"
    return (
        f"merge {action.tile1} + {action.tile2} -> "
        f"{action.value!r}@{action.destination}"
    )
