#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--preset {beginner,intermediate,expert}]
    python main.py autoplay [--games N] [--seed S]
"""
import argparse
import logging

import numpy as np

from src.minesweeper.board import BoardConfig, PRESETS
from src.minesweeper.controls import Action, apply_action
from src.minesweeper.engine import Game
from src.minesweeper.environment import MinesweeperEnv


COMMANDS = {
    "r": Action.REVEAL,
    "f": Action.FLAG,
    "c": Action.CHORD,
}

HELP = "Commands: r X Y (reveal), f X Y (flag), c X Y (chord), n (new), q (quit)"


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Build a board configuration from a preset and any overrides."""
    preset = PRESETS[args.preset]
    return BoardConfig(
        rows=args.rows if args.rows is not None else preset.rows,
        columns=(
            args.columns if args.columns is not None else preset.columns
        ),
        mine_count=args.mines if args.mines is not None else preset.mine_count,
    )


def print_game(game: Game) -> None:
    """Print the board with a status line."""
    snapshot = game.snapshot()
    print(snapshot.render_text())
    print(
        f"Status: {snapshot.status.name} | "
        f"Mines left: {snapshot.mines_remaining} | "
        f"Progress: {snapshot.progress:.0%}"
    )


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    game = Game(build_config(args))
    print(HELP)
    print_game(game)

    while True:
        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        parts = line.split()
        if not parts:
            continue
        if parts[0] == "q":
            break
        if parts[0] == "n":
            apply_action(game, Action.NEW_GAME)
            print_game(game)
            continue

        action = COMMANDS.get(parts[0])
        if action is None or len(parts) != 3:
            print(HELP)
            continue
        try:
            x, y = int(parts[1]), int(parts[2])
            changed = apply_action(game, action, x, y)
        except ValueError:
            print(HELP)
            continue
        except IndexError as exc:
            print(exc)
            continue

        if not changed:
            print("Nothing to do there.")
        print_game(game)
        if game.is_won:
            print("*** You won! (n for a new game) ***")
        elif game.is_lost:
            print("*** You lost. (n for a new game) ***")


def autoplay(args: argparse.Namespace) -> None:
    """Play random legal actions and report the outcome."""
    env = MinesweeperEnv(config=build_config(args))
    env.action_space.seed(args.seed)
    wins = 0
    total_revealed = 0

    for episode in range(args.games):
        seed = None if args.seed is None else args.seed + episode
        _, info = env.reset(seed=seed)
        done = False

        while not done:
            mask = env.get_action_mask().astype(np.int8)
            action = env.action_space.sample(mask=mask)
            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        if info["game_state"] == "WON":
            wins += 1
        total_revealed += info["revealed"]

    print(f"Games: {args.games}")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} cells")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="expert",
        help="Board preset",
    )
    parser.add_argument("--rows", type=int, help="Override row count")
    parser.add_argument("--columns", type=int, help="Override column count")
    parser.add_argument("--mines", type=int, help="Override mine count")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("play", help="Play in the terminal")

    autoplay_parser = subparsers.add_parser(
        "autoplay", help="Play random legal moves"
    )
    autoplay_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    autoplay_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for boards and moves"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "autoplay":
            autoplay(args)
        else:
            parser.print_help()
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
