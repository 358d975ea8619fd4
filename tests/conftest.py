import random

import pytest

from game_2048 import Board, Direction, Game


@pytest.fixture
def board_from_text():
    def _make(text, size=4):
        return Board.from_text(text, size=size)
    return _make


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def reachable_boards():
    """Boards collected from a few short seeded games."""
    boards = []
    for seed in range(5):
        game = Game(seed=seed)
        policy = random.Random(seed)
        for _ in range(40):
            game.step(policy.choice(list(Direction)))
            boards.append(game.board.copy())
    return boards
