#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard,custom}] [--resume]
    python main.py stats
"""
import argparse
import logging
import random

from sweeper import Outcome, SweeperError, clamped_config, render_board
from play import GameSession, GameStorage, SessionConfig

COMMAND_HELP = (
    "Commands: r ROW COL (reveal), f ROW COL (mark), c ROW COL (chord), "
    "n (new game), q (quit)"
)


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    config = SessionConfig(
        difficulty=args.difficulty,
        storage_dir=None if args.no_save else args.storage_dir,
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    session = GameSession(config, rng=rng)

    if args.resume and session.resume():
        print(f"Resumed saved {session.difficulty} game.")
    elif args.difficulty == "custom":
        custom = clamped_config(args.width, args.height, args.mines)
        session.new_game(custom=custom)

    game = session.game
    print(
        f"Board: {game.width}x{game.height} with {game.mine_count} mines"
    )
    print(COMMAND_HELP)

    while True:
        game = session.game
        print()
        print(render_board(game, reveal_mines=game.is_over, coordinates=True))
        print(
            f"Mines left: {game.mines_remaining} | "
            f"Time: {session.timer.elapsed:03d}s | "
            f"Phase: {game.phase.name}"
        )

        try:
            line = input("> ").split()
        except EOFError:
            break
        if not line:
            continue

        command = line[0].lower()
        if command == "q":
            break
        if command == "n":
            session.new_game()
            continue
        if command not in ("r", "f", "c") or len(line) != 3:
            print(COMMAND_HELP)
            continue

        try:
            row, col = int(line[1]), int(line[2])
            if command == "f":
                mark = session.toggle_mark(row, col)
                if not mark.accepted:
                    print("Cannot mark that cell.")
                continue
            if command == "r":
                result = session.reveal(row, col)
            else:
                result = session.chord_reveal(row, col)
        except (ValueError, SweeperError) as exc:
            print(f"Invalid move: {exc}")
            continue

        if result.outcome is Outcome.WON:
            print(f"\n*** WIN in {session.timer.elapsed}s! ***")
        elif result.outcome is Outcome.LOST:
            print("\n*** LOST (hit mine) ***")
        elif result.highlight:
            cells = ", ".join(f"({r}, {c})" for r, c in result.highlight)
            print(f"Flag count does not match. Unrevealed: {cells}")

    session.save()


def stats(args: argparse.Namespace) -> None:
    """Print saved statistics."""
    storage = GameStorage(args.storage_dir)
    book = storage.load_stats()
    if book is None:
        print("No statistics saved yet.")
        return

    print(f"{'Difficulty':<12} {'Played':>8} {'Wins':>6} {'Win Rate':>10} {'Best':>6}")
    print("-" * 46)
    for name, entry in book.entries.items():
        best = "-" if entry.best_time is None else f"{entry.best_time}s"
        print(
            f"{name:<12} {entry.games_played:>8} {entry.wins:>6} "
            f"{entry.win_rate:>10.0%} {best:>6}"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--log-level", default="WARNING", help="Logging level (e.g. INFO, DEBUG)"
    )
    parser.add_argument(
        "--storage-dir",
        default=SessionConfig.storage_dir,
        help="Directory for statistics and saved games",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--difficulty",
        choices=["easy", "medium", "hard", "custom"],
        default="easy",
        help="Board preset",
    )
    play_parser.add_argument("--width", type=int, default=9, help="Custom width")
    play_parser.add_argument("--height", type=int, default=9, help="Custom height")
    play_parser.add_argument("--mines", type=int, default=10, help="Custom mines")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    play_parser.add_argument(
        "--resume", action="store_true", help="Resume the saved game"
    )
    play_parser.add_argument(
        "--no-save", action="store_true", help="Do not read or write files"
    )

    # Stats command
    subparsers.add_parser("stats", help="Show statistics")

    args = parser.parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "stats":
        stats(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
