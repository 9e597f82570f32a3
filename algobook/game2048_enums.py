"""Moves and number keys of the 2048 game."""

from enum import IntEnum


class Action(IntEnum):
    """A direction in which the tiles slide."""

    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


class Number(IntEnum):
    """A digit key that starts a new game of that board size."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9