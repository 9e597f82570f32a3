"""Two small warm-up exercises."""

from __future__ import annotations

import math


def first_factorial(num: int) -> int:
    """The product 1 * 2 * ... * num; 1 for num below 1."""
    return math.prod(range(1, num + 1))


def longest_word(sen: str) -> str:
    """The first space-separated word with the most letters and digits.

    Punctuation does not count towards the length but stays in the word.
    """
    best, best_count = "", 0
    for word in sen.split(" "):
        count = sum(1 for ch in word if ch.isalpha() or ch.isnumeric())
        if count > best_count:
            best, best_count = word, count
    return best