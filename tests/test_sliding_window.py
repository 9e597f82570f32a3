import pytest

from algobook.sliding_window import (
    character_replacement,
    check_inclusion,
    length_of_longest_substring,
    max_sliding_window,
    min_window,
)


def test_longest_substring_example():
    assert length_of_longest_substring("abcabcbb") == 3


def test_longest_substring_distinct_and_empty():
    assert length_of_longest_substring("abcdef") == len("abcdef")
    assert length_of_longest_substring("") == 0
    assert length_of_longest_substring("zzzz") == 1


def test_min_window_example():
    assert min_window("ADOBECODEBANC", "ABC") == "BANC"


def test_min_window_impossible():
    assert min_window("a", "aa") == ""
    assert min_window("abc", "") == ""


def test_min_window_covers_target():
    s, t = "xxaybzcxxa", "abc"
    window = min_window(s, t)
    assert window in s
    assert all(window.count(ch) >= t.count(ch) for ch in t)


def test_max_sliding_window_k_one_is_identity():
    nums = [4, -2, 7, 7, 0]
    assert max_sliding_window(nums, 1) == nums


def test_max_sliding_window_full_width():
    nums = [1, 3, -1, -3, 5, 3, 6, 7]
    assert max_sliding_window(nums, len(nums)) == [max(nums)]


def test_max_sliding_window_shape():
    nums, k = [1, 3, -1, -3, 5, 3, 6, 7], 3
    result = max_sliding_window(nums, k)
    assert len(result) == len(nums) - k + 1
    for i, value in enumerate(result):
        window = nums[i:i + k]
        assert value in window
        assert all(value >= other for other in window)


def test_max_sliding_window_bad_k():
    with pytest.raises(ValueError):
        max_sliding_window([1, 2], 0)


def test_character_replacement_enough_changes():
    assert character_replacement("ABAB", 2) == len("ABAB")
    assert character_replacement("AAAA", 0) == len("AAAA")


def test_character_replacement_empty():
    assert character_replacement("", 3) == 0


def test_check_inclusion():
    assert check_inclusion("ab", "eidbaooo") is True
    assert check_inclusion("ab", "eidboaoo") is False


def test_check_inclusion_longer_pattern():
    assert check_inclusion("abc", "ab") is False


def test_check_inclusion_empty_pattern():
    assert check_inclusion("", "x") is True