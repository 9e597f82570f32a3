"""Play 2048 on the terminal with the w, a, s and d keys."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, TextIO

from .game2048 import GameHandler
from .game2048_enums import Action

_KEYS = {"w": Action.UP, "s": Action.DOWN, "a": Action.LEFT, "d": Action.RIGHT}


def _ask_board_size(inp: TextIO, out: TextIO) -> Optional[int]:
    while True:
        print("board size: ", file=out)
        line = inp.readline()
        if not line:
            return None
        try:
            size = int(line.strip())
        except ValueError:
            print("Set fail, please retry", file=out)
            continue
        if size <= 1:
            print("Set fail, please greater than 1", file=out)
            continue
        return size


def main(argv: Optional[list[str]] = None) -> int:
    """Run the game reading from standard input until it ends or input runs out."""
    parser = argparse.ArgumentParser(prog="game2048", description="Play 2048.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    inp, out = sys.stdin, sys.stdout

    size = _ask_board_size(inp, out)
    if size is None:
        return 0
    game = GameHandler(random.Random(args.seed))
    game.new_game(size)
    print(game.format_board(), file=out)

    while True:
        line = inp.readline()
        if not line:
            return 0
        action = _KEYS.get(line.strip().lower())
        if action is None:
            continue
        print(f"{action.name}!", file=out)
        print("-------", file=out)
        game.process(action)
        print(game.format_board(), file=out)
        if game.check_win():
            print("You Win!", file=out)
            return 0
        if not game.check_available():
            print("You lose!", file=out)
            return 0


if __name__ == "__main__":
    sys.exit(main())