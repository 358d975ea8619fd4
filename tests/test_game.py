"""Tests for the game session and its action stream."""

import logging

import pytest

from game_2048 import Board, Direction, Game, SpawnRandomTile


def test_start_spawns_two_tiles():
    game = Game(seed=42)

    assert game.empty_count() == 14
    assert game.max_tile() in (2, 4)
    assert game.history == []


def test_same_seed_same_game():
    moves = [Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN] * 5
    game_a = Game(seed=3)
    game_b = Game(seed=3)

    for direction in moves:
        assert game_a.step(direction) == game_b.step(direction)
    assert game_a.board == game_b.board


def test_different_seeds_differ():
    boards = {Game(seed=seed).board.to_text() for seed in range(10)}
    assert len(boards) > 1


def test_step_spawns_only_when_moved(board_from_text):
    game = Game(seed=1)
    game.board = board_from_text("1000000000000000")

    result = game.step(Direction.LEFT)
    assert result.moved is False
    assert result.actions == []
    assert result.spawn is None
    assert game.history == []

    result = game.step(Direction.RIGHT)
    assert result.moved is True
    assert isinstance(result.spawn, SpawnRandomTile)
    assert game.empty_count() == 14
    assert game.moves() == "R"
    assert result.board == game.board.to_text()


def test_full_board_move_frees_cells(board_from_text):
    game = Game(seed=1)
    game.board = board_from_text("1111234134124123")

    result = game.step(Direction.LEFT)

    assert result.moved is True
    assert result.spawn is not None
    assert game.board.to_text().startswith("22")


def test_subscribers_can_mirror_the_board():
    received = []
    game = Game(seed=11)
    mirror = Board.from_text(game.board.to_text())

    def on_actions(direction, actions):
        received.append(direction)
        for action in actions:
            mirror.apply(action)

    game.subscribe(on_actions)

    for direction in [Direction.LEFT, Direction.DOWN, Direction.RIGHT, Direction.UP] * 10:
        game.step(direction)
        assert mirror == game.board

    assert received
    assert all(direction is not None for direction in received)


def test_reset_publishes_opening_spawns():
    calls = []
    game = Game(seed=5)
    first = game.board.to_text()
    game.subscribe(lambda direction, actions: calls.append((direction, list(actions))))

    assert game.reset() == first
    assert calls[0][0] is None
    assert len(calls[0][1]) == 2

    game.reset(seed=6)
    assert game.seed == 6


def test_unsubscribe():
    calls = []

    def callback(direction, actions):
        calls.append(direction)

    game = Game(seed=2)
    game.subscribe(callback)
    game.unsubscribe(callback)
    game.reset()

    assert calls == []


def test_replay_reproduces_session():
    game = Game(seed=9)
    for direction in [Direction.LEFT, Direction.UP, Direction.UP, Direction.RIGHT, Direction.DOWN] * 6:
        game.step(direction)

    replayed = Game.replay(game.moves(), seed=9)

    assert replayed.board == game.board
    assert replayed.moves() == game.moves()


def test_replay_rejects_unknown_letters():
    with pytest.raises(ValueError):
        Game.replay("LRX")


def test_turn_is_logged(caplog):
    game = Game(seed=4)
    before = game.board.to_text()

    with caplog.at_level(logging.DEBUG, logger="game_2048.game"):
        result = game.step(Direction.UP)

    assert f"{before} --U--> {result.board}" in caplog.text


def test_small_board_session():
    game = Game(seed=0, size=2, start_tiles=4)
    assert game.is_full()

    game = Game(seed=0, size=2, start_tiles=5)
    assert game.empty_count() == 0


def test_normalized_board_and_str():
    game = Game(seed=42)

    assert game.normalized_board().shape == (16,)
    assert "Moves: 0" in str(game)
    assert repr(game).startswith("Game(seed=42")
