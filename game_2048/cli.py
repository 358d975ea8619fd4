"""
Command line interface for the 2048 engine.

Usage:
    python -m game_2048 plan 0122000000000000 L
    python -m game_2048 replay LURDLL --seed 7
    python -m game_2048 play --seed 42
    python -m game_2048 evaluate --episodes 100 --seed 12345
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .action import describe_action
from .board import DEFAULT_SIZE, Board
from .direction import Direction
from .evaluate import evaluate_random
from .game import DEFAULT_SEED, Game


def cmd_plan(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        board = Board.from_text(args.board, size=args.size)
        direction = Direction.parse(args.direction)
    except ValueError as exc:
        parser.error(str(exc))

    actions = board.plan(direction)
    for action in actions:
        print(describe_action(action))
        board.apply(action)
    print(f"{args.board} --{direction}--> {board}")
    print(f"Moved: {bool(actions)}")
    return 0


def cmd_replay(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        game = Game.replay(args.moves, seed=args.seed, size=args.size)
    except ValueError as exc:
        parser.error(str(exc))

    print(game)
    print(f"Board: {game.board}")
    return 0


def cmd_play(args: argparse.Namespace, parser: argparse.ArgumentParser,
             stdin: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    game = Game(seed=args.seed, size=args.size)
    print(game)
    print("Enter L, R, U or D (q to quit)")

    for line in stdin:
        text = line.strip()
        if not text:
            continue
        if text.lower() in ("q", "quit", "exit"):
            break
        try:
            direction = Direction.parse(text)
        except ValueError as exc:
            print(exc)
            continue

        before = game.board.to_text()
        result = game.step(direction)
        print(f"{before} --{direction}--> {result.board}")
        print(game)

    print(f"Moves: {game.moves()}")
    return 0


def cmd_evaluate(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if args.episodes < 1:
        parser.error("--episodes must be at least 1")

    print(f"Simulating {args.episodes} random games...")
    stats = evaluate_random(
        num_episodes=args.episodes,
        seed=args.seed,
        size=args.size,
        max_steps=args.max_steps,
        progress=not args.no_progress,
    )

    print("\n" + "=" * 50)
    print("RANDOM POLICY RESULTS")
    print("=" * 50)
    print(f"Episodes:      {stats['num_episodes']}")
    print(f"Avg Max Tile:  {stats['avg_max_tile']:.1f} ± {stats['std_max_tile']:.1f}")
    print(f"Best Tile:     {stats['max_tile']}")
    print(f"Avg Moves:     {stats['avg_moves']:.1f}")
    print(f"Median Moves:  {stats['median_moves']:.1f}")
    print("\nTile Distribution:")
    for tile in sorted(stats['tile_distribution'].keys()):
        count = stats['tile_distribution'][tile]
        pct = count / stats['num_episodes'] * 100
        print(f"  {tile:5d}: {count:4d} ({pct:5.1f}%)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="game-2048", description='Deterministic 2048 engine')
    parser.add_argument('--verbose', action='store_true', help='Log every turn')
    subparsers = parser.add_subparsers(dest='command', required=True)

    plan = subparsers.add_parser('plan', help='Print the actions of one move')
    plan.add_argument('board', type=str, help='Board text, e.g. 0122000000000000')
    plan.add_argument('direction', type=str, help='L, R, U or D')
    plan.add_argument('--size', type=int, default=DEFAULT_SIZE, help='Board size')
    plan.set_defaults(func=cmd_plan)

    replay = subparsers.add_parser('replay', help='Replay a move string from a seed')
    replay.add_argument('moves', type=str, help='Move letters, e.g. LURD')
    replay.add_argument('--seed', type=int, default=DEFAULT_SEED, help='Random seed')
    replay.add_argument('--size', type=int, default=DEFAULT_SIZE, help='Board size')
    replay.set_defaults(func=cmd_replay)

    play = subparsers.add_parser('play', help='Play interactively from stdin')
    play.add_argument('--seed', type=int, default=DEFAULT_SEED, help='Random seed')
    play.add_argument('--size', type=int, default=DEFAULT_SIZE, help='Board size')
    play.set_defaults(func=cmd_play)

    evaluate = subparsers.add_parser('evaluate', help='Simulate random-policy games')
    evaluate.add_argument('--episodes', type=int, default=100, help='Number of games')
    evaluate.add_argument('--seed', type=int, default=12345, help='Random seed')
    evaluate.add_argument('--size', type=int, default=DEFAULT_SIZE, help='Board size')
    evaluate.add_argument('--max-steps', type=int, default=10000, help='Max moves per game')
    evaluate.add_argument('--no-progress', action='store_true', help='Hide the progress bar')
    evaluate.set_defaults(func=cmd_evaluate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args, parser)


if __name__ == "__main__":
    sys.exit(main())
