"""Bit manipulation exercises."""

from __future__ import annotations

from functools import reduce
from operator import xor

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
_UINT32_LIMIT = 2**32
_MASK64 = (1 << 64) - 1


def _check_uint32(num: int) -> None:
    if not 0 <= num < _UINT32_LIMIT:
        raise ValueError(f"{num} is not an unsigned 32-bit integer")


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves the 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if INT32_MIN <= result <= INT32_MAX else 0


def single_number(nums: list[int]) -> int:
    """The one value that appears once when every other appears twice."""
    return reduce(xor, nums)


def reverse_bits(num: int) -> int:
    """Reverse the 32 bits of an unsigned 32-bit integer."""
    _check_uint32(num)
    return int(f"{num:032b}"[::-1], 2)


def hamming_weight(num: int) -> int:
    """The number of set bits in an unsigned 32-bit integer."""
    _check_uint32(num)
    return bin(num).count("1")


def missing_number(nums: list[int]) -> int:
    """The value of ``0..len(nums)`` that is absent from ``nums``."""
    return reduce(xor, (i ^ num for i, num in enumerate(nums)), len(nums))


def count_bits(n: int) -> list[int]:
    """The number of set bits of each integer from 0 to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    dp = [0] * (n + 1)
    power = 1
    for i in range(1, n + 1):
        dp[i] = 1 + dp[i - power]
        if i + 1 == power * 2:
            power *= 2
    return dp


def get_sum(a: int, b: int) -> int:
    """Add two signed 64-bit integers with xor and carry only."""
    a &= _MASK64
    b &= _MASK64
    while b:
        a, b = a ^ b, ((a & b) << 1) & _MASK64
    return a - (1 << 64) if a >> 63 else a