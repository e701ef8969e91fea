#!/usr/bin/env python3
"""
Minefield - terminal entry point.

Usage:
    python main.py [--rows N] [--cols N] [--mines N] [--seed S] [--verbose]

Commands at the prompt:
    r ROW COL   reveal a cell
    f ROW COL   toggle a flag
    q           quit
"""
import argparse
import logging

from src.minefield.field import MineField
from src.minefield.shell import FieldShell


COMMANDS = ("r", "f")


def play(shell: FieldShell) -> None:
    """Read commands until the game ends or the player quits."""
    minefield = shell.minefield
    print(shell.render())

    while not minefield.is_game_over:
        try:
            line = input("> ").strip()
        except EOFError:
            break
        if line in ("q", "quit"):
            break

        parts = line.split()
        if len(parts) != 3 or parts[0] not in COMMANDS:
            print("Commands: r ROW COL | f ROW COL | q")
            continue
        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            print(f"Not a position: {parts[1]} {parts[2]}")
            continue

        # The shell works in pixels; aim at the top-left corner of the cell.
        x, y = col * shell.cell_size, row * shell.cell_size
        if shell.pixel_to_cell(x, y) is None:
            rows, cols = minefield.get_field_size()
            print(f"Position out of range (field is {rows}x{cols})")
            continue

        if parts[0] == "r":
            shell.handle_left_click(x, y)
        else:
            shell.handle_right_click(x, y)
        print(shell.render())

    if minefield.is_game_over:
        print("\n*** BOOM (hit mine) ***")


def main() -> None:
    """Parse arguments and start a game."""
    parser = argparse.ArgumentParser(
        description="Minefield - play Minesweeper in the terminal"
    )
    parser.add_argument("--rows", type=int, default=9, help="Number of rows")
    parser.add_argument("--cols", type=int, default=9, help="Number of columns")
    parser.add_argument(
        "--mines", type=int, default=None, help="Number of mines (default: 3 per row)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    mines = args.mines if args.mines is not None else 3 * args.rows
    try:
        minefield = MineField.create(args.rows, args.cols, mines, seed=args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    print(f"Field: {args.rows}x{args.cols} with {mines} mines")
    play(FieldShell(minefield))


if __name__ == "__main__":
    main()
