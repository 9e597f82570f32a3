"""Walk order over the 2048 board for each slide direction."""

from typing import Iterator

from .game2048_enums import Action

Position = tuple[int, int]


def travel(row_max: int, col_max: int, action: Action) -> Iterator[tuple[Position, bool]]:
    """Yield every board position as ``((row, col), is_begin)``.

    Positions come line by line, each line starting at the edge the tiles slide
    towards; ``is_begin`` is true for the first position of each line.
    """
    if action in (Action.LEFT, Action.RIGHT):
        cols = range(col_max) if action is Action.LEFT else range(col_max - 1, -1, -1)
        for row in range(row_max):
            for index, col in enumerate(cols):
                yield (row, col), index == 0
    elif action in (Action.UP, Action.DOWN):
        rows = range(row_max) if action is Action.UP else range(row_max - 1, -1, -1)
        for col in range(col_max):
            for index, row in enumerate(rows):
                yield (row, col), index == 0
    else:
        raise ValueError(f"unknown action: {action!r}")