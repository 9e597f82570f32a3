"""Stack exercises."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator, Sequence


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under a histogram."""
    stack: list[tuple[int, int]] = []  # (start index, height)
    best = 0
    for idx, height in enumerate(heights):
        start = idx
        while stack and stack[-1][1] > height:
            start, top_height = stack.pop()
            best = max(best, (idx - start) * top_height)
        stack.append((start, height))
    for start, height in stack:
        best = max(best, (len(heights) - start) * height)
    return best


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Sequence[str]) -> int:
    """Evaluate integer arithmetic in reverse Polish notation.

    Division truncates towards zero.
    """
    stack: list[int] = []
    for token in tokens:
        apply = _OPERATORS.get(token)
        if apply is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"not enough operands for {token!r}")
        right = stack.pop()
        left = stack.pop()
        stack.append(apply(left, right))
    if not stack:
        raise ValueError("no expression to evaluate")
    return stack[0]


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, how many days until a warmer one; 0 if none comes."""
    waits = [0] * len(temperatures)
    pending: list[tuple[int, int]] = []  # (temperature, day), decreasing
    for day, temperature in enumerate(temperatures):
        while pending and temperature > pending[-1][0]:
            _, earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append((temperature, day))
    return waits


def car_fleet(target: int, position: Sequence[int], speed: Sequence[int]) -> int:
    """How many fleets of cars reach ``target``."""
    if len(position) != len(speed):
        raise ValueError("position and speed must have the same length")
    cars = sorted(zip(position, speed), key=lambda car: car[0], reverse=True)
    fleet_times: list[float] = []
    for pos, spd in cars:
        arrival = (target - pos) / spd
        if not fleet_times or arrival > fleet_times[-1]:
            fleet_times.append(arrival)
    return len(fleet_times)


def _parentheses(opened: int, closed: int, n: int, prefix: str) -> Iterator[str]:
    if opened == n and closed == n:
        yield prefix
        return
    if opened < n:
        yield from _parentheses(opened + 1, closed, n, prefix + "(")
    if opened > closed:
        yield from _parentheses(opened, closed + 1, n, prefix + ")")


def generate_parenthesis(n: int) -> list[str]:
    """Every well-formed string of ``n`` pairs of parentheses, in sorted order."""
    return list(_parentheses(0, 0, n, ""))


class MinStack:
    """A stack that also reports its smallest value in constant time."""

    def __init__(self) -> None:
        self._stack: list[int] = []
        self._mins: list[int] = []

    def push(self, val: int) -> None:
        """Put ``val`` on top."""
        if not self._mins or val <= self._mins[-1]:
            self._mins.append(val)
        self._stack.append(val)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._stack:
            raise IndexError("pop from empty stack")
        value = self._stack.pop()
        if self._mins[-1] == value:
            self._mins.pop()
        return value

    def top(self) -> int:
        """The top value."""
        if not self._stack:
            raise IndexError("top of empty stack")
        return self._stack[-1]

    def get_min(self) -> int:
        """The smallest value on the stack."""
        if not self._mins:
            raise IndexError("minimum of empty stack")
        return self._mins[-1]

    def __len__(self) -> int:
        return len(self._stack)