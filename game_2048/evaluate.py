"""
Random-policy simulation for the 2048 engine.

Plays many seeded games with uniformly random moves and summarises how far
they get. Useful as a baseline and as a smoke test of the engine at scale.
"""

import logging
import random
from typing import Dict, List

import numpy as np
from tqdm import tqdm

from .board import DEFAULT_SIZE
from .direction import Direction
from .game import Game

logger = logging.getLogger(__name__)

DIRECTIONS: List[Direction] = list(Direction)


def simulate_random_game(seed: int = 0, size: int = DEFAULT_SIZE,
                         max_steps: int = 10000) -> Dict:
    """
    Play one game with random moves.

    The game ends once the board is full and a move in each direction has
    failed in a row, or after ``max_steps`` attempted moves.

    Returns:
        Dict with keys: seed, max_tile, steps, moves, board
    """
    game = Game(seed=seed, size=size)
    policy = random.Random(seed)
    steps = 0
    failed = set()

    while steps < max_steps and len(failed) < len(DIRECTIONS):
        direction = policy.choice(DIRECTIONS)
        result = game.step(direction)
        steps += 1
        if result.moved:
            failed.clear()
        elif game.is_full():
            failed.add(direction)

    return {
        'seed': seed,
        'max_tile': game.max_tile(),
        'steps': steps,
        'moves': len(game.history),
        'board': game.board.to_text(),
    }


def evaluate_random(num_episodes: int = 100, seed: int = 0, size: int = DEFAULT_SIZE,
                    max_steps: int = 10000, progress: bool = True) -> Dict:
    """Evaluate the random policy over ``num_episodes`` seeded games."""
    max_tiles = []
    moves_list = []

    episodes = range(num_episodes)
    if progress:
        episodes = tqdm(episodes, desc="Simulating")

    for i in episodes:
        stats = simulate_random_game(seed=seed + i, size=size, max_steps=max_steps)
        max_tiles.append(stats['max_tile'])
        moves_list.append(stats['moves'])

    tile_counts: Dict[int, int] = {}
    for tile in max_tiles:
        tile_counts[tile] = tile_counts.get(tile, 0) + 1

    logger.info("Simulated %d games from seed %d", num_episodes, seed)

    return {
        'num_episodes': num_episodes,
        'avg_max_tile': float(np.mean(max_tiles)),
        'std_max_tile': float(np.std(max_tiles)),
        'max_tile': int(np.max(max_tiles)),
        'avg_moves': float(np.mean(moves_list)),
        'median_moves': float(np.median(moves_list)),
        'tile_distribution': tile_counts,
        'max_tiles': max_tiles,
    }
