"""State and rules of the 2048 game."""

from __future__ import annotations

import random
from collections import deque
from typing import Optional

from .game2048_enums import Action
from .game2048_iterator import travel
from .game2048_util import NBSP, fill_num

WIN_NUM = 2048


class GameHandler:
    """A square 2048 board with its score."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.data: list[list[int]] = []
        self.score = 0
        self._rng = rng if rng is not None else random.Random()

    def new_game(self, size: int) -> None:
        """Start a fresh ``size`` x ``size`` game with a few random tiles."""
        if size <= 1:
            raise ValueError("board size must be greater than 1")
        self.data = [[0] * size for _ in range(size)]
        self.score = 0
        self._rand_input()

    def new_default_game(self) -> None:
        """Load a fixed 4x4 board."""
        self.data = [
            [2, 4, 1024, 2],
            [4, 12, 8, 16],
            [8, 24, 32, 12],
            [12, 24, 2, 12],
        ]

    def process(self, action: Action) -> None:
        """Play one move: slide the tiles, then drop in a random tile."""
        self.slide(action)
        self.add_rand_cell()

    def slide(self, action: Action) -> None:
        """Move, merge and move again, without adding a tile."""
        self.move(action)
        self.merge(action)
        self.move(action)

    def _walk(self, action: Action):
        return travel(len(self.data), len(self.data[0]), action)

    def move(self, action: Action) -> None:
        """Push every tile as far as it goes towards the ``action`` edge."""
        empties: deque[tuple[int, int]] = deque()
        for (row, col), is_begin in self._walk(action):
            if is_begin:
                empties.clear()
            if self.data[row][col] == 0:
                empties.append((row, col))
            elif empties:
                to_row, to_col = empties.popleft()
                empties.append((row, col))
                self.data[to_row][to_col], self.data[row][col] = (
                    self.data[row][col],
                    self.data[to_row][to_col],
                )

    def merge(self, action: Action) -> int:
        """Join equal neighbours along ``action``; return the new score."""
        previous = -1
        previous_pos: Optional[tuple[int, int]] = None
        for (row, col), is_begin in self._walk(action):
            if is_begin:
                previous = -1
                previous_pos = None
            value = self.data[row][col]
            if previous == value and previous_pos is not None:
                prev_row, prev_col = previous_pos
                self.data[prev_row][prev_col] = value + previous
                self.score += self.data[prev_row][prev_col]
                self.data[row][col] = 0
            previous = self.data[row][col]
            previous_pos = (row, col)
        return self.score

    def add_rand_cell(self) -> None:
        """Put a 2 or a 4 into a random empty cell, if there is one."""
        empty = [
            (row, col)
            for col in range(len(self.data[0]))
            for row in range(len(self.data))
            if self.data[row][col] == 0
        ]
        if empty:
            row, col = self._rng.choice(empty)
            self.data[row][col] = self._random_num()

    def format_board(self) -> str:
        """Plain text board, one bracketed row per line."""
        return "\n".join("[" + " ".join(map(str, line)) + "]" for line in self.data)

    def score_text(self) -> str:
        """The score line for display."""
        return NBSP * 5 + "SCORE: " + str(self.score)

    def board_text(self) -> str:
        """The board with each cell right-aligned to four characters."""
        return "\n".join(
            " ".join(fill_num(str(value), 4) for value in line) for line in self.data
        )

    def check_available(self) -> bool:
        """True while a move can still change the board."""
        if any(0 in line for line in self.data):
            return True
        return any(
            self._neighbour_is_same(row, col)
            for row, line in enumerate(self.data)
            for col in range(len(line))
        )

    def check_win(self) -> bool:
        """True once some tile reaches 2048."""
        return any(WIN_NUM in line for line in self.data)

    def _neighbour_is_same(self, row: int, col: int) -> bool:
        target = self.data[row][col]
        for d_row, d_col in ((0, -1), (-1, 0), (0, 1), (1, 0)):
            n_row, n_col = row + d_row, col + d_col
            if (
                0 <= n_row < len(self.data)
                and 0 <= n_col < len(self.data[n_row])
                and self.data[n_row][n_col] == target
            ):
                return True
        return False

    def _random_num(self) -> int:
        return 2 if self._rng.random() < 0.75 else 4

    def _rand_input(self) -> None:
        size = len(self.data)
        rows = self._rng.sample(range(size), size)
        cols = self._rng.sample(range(len(self.data[0])), len(self.data[0]))
        for row, col in list(zip(rows, cols))[: size // 2]:
            self.data[row][col] = self._random_num()