"""
Minesweeper - terminal front-end.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed N] [--color]
    python main.py play --rows R --cols C --mines K
    python main.py demo [--games N] [--delay S] [--seed N]
"""
import argparse
import logging
import os
import time
from typing import List, Optional

import numpy as np

from .board import BoardConfig
from .commands import parse_command
from .difficulty import difficulty_names, get_difficulty
from .display import render_text
from .environment import MinesweeperEnv
from .errors import MinesweeperError
from .events import GameLost, GameWon
from .session import GameSession


HELP_TEXT = """Commands:
  r ROW COL        reveal a cell
  f ROW COL        flag / unflag a cell
  n                new game
  d NAME           change difficulty ({names})
  q                quit"""


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def positive_int(value: str) -> int:
    """argparse type accepting integers greater than zero."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_config(args: argparse.Namespace) -> BoardConfig:
    """
    Board configuration from --rows/--cols/--mines or --difficulty.

    Custom values override the preset one by one and are validated as
    given, so an explicit zero is rejected rather than ignored.

    Raises:
        InvalidConfiguration: If the resulting board is not playable.
    """
    preset = get_difficulty(args.difficulty).config
    if args.rows is None and args.cols is None and args.mines is None:
        return preset
    return BoardConfig(
        rows=preset.rows if args.rows is None else args.rows,
        cols=preset.cols if args.cols is None else args.cols,
        num_mines=preset.num_mines if args.mines is None else args.mines,
    )


def print_status(session: GameSession, color: bool) -> None:
    rows, cols = session.dimensions
    print(render_text(session.snapshot(), color=color, headers=True))
    print(
        f"\n{rows}x{cols} | Mines left: {session.flag_budget} | "
        f"State: {session.status.name}"
    )


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    session = GameSession(build_config(args), rng=args.seed)

    def on_event(event) -> None:
        if isinstance(event, GameWon):
            print("\n*** Bravo! Minefield cleared! ***")
        elif isinstance(event, GameLost):
            print(f"\n*** GAME OVER: mine at ({event.row}, {event.col}) ***")

    session.subscribe(on_event)
    print(HELP_TEXT.format(names=", ".join(difficulty_names())))

    while True:
        print()
        print_status(session, args.color)
        try:
            line = input("> ")
        except EOFError:
            break
        if line.strip().lower() in ("q", "quit", "exit"):
            break

        try:
            command = parse_command(line)
            if command is None:
                continue
            if not session.execute(command):
                print("Nothing happened.")
        except (ValueError, MinesweeperError) as error:
            print(f"Error: {error}")


def demo(args: argparse.Namespace) -> int:
    """
    Watch random reveals play out.

    Returns:
        Number of games won.
    """
    config = build_config(args)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(args.seed)

    print(
        f"Board: {config.rows}x{config.cols} with {config.num_mines} mines "
        f"({100 * config.num_mines / config.total_cells:.1f}% density)"
    )

    wins = 0
    for game in range(args.games):
        seed: Optional[int] = None if args.seed is None else args.seed + game
        obs, info = env.reset(seed=seed)
        done = False
        step = 0

        while not done:
            valid = np.flatnonzero(env.get_action_mask())
            action = int(rng.choice(valid))
            row, col = divmod(action, config.cols)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            if args.delay > 0:
                clear_screen()
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())

            if done:
                if info["game_state"] == "WON":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            if args.delay > 0:
                time.sleep(args.delay)

    if args.games:
        rate = 100 * wins / args.games
        print(f"\n=== Final: {wins}/{args.games} wins ({rate:.0f}%) ===")
    return wins


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--difficulty",
        choices=[name.lower() for name in difficulty_names()],
        default="easy",
        help="Board preset",
    )
    parser.add_argument("--rows", type=int, default=None, help="Custom row count")
    parser.add_argument("--cols", type=int, default=None, help="Custom column count")
    parser.add_argument("--mines", type=int, default=None, help="Custom mine count")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with the play and demo subcommands."""
    parser = argparse.ArgumentParser(description="Minesweeper - terminal front-end")
    parser.add_argument(
        "--verbose", action="store_true", help="Log game lifecycle events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_arguments(play_parser)
    play_parser.add_argument(
        "--color", action="store_true", help="Colour the mine counts"
    )

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Watch random reveals")
    add_board_arguments(demo_parser)
    demo_parser.add_argument(
        "--games", type=positive_int, default=5, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "demo":
            demo(args)
        else:
            parser.print_help()
    except MinesweeperError as error:
        parser.error(str(error))
