import pytest

from algobook.coderbyte import first_factorial, longest_word


def test_factorial_examples():
    assert first_factorial(4) == 24
    assert first_factorial(8) == 40320


@pytest.mark.parametrize("n", range(2, 19))
def test_factorial_recurrence(n):
    assert first_factorial(n) == n * first_factorial(n - 1)


def test_factorial_of_one():
    assert first_factorial(1) == 1


def test_longest_word_examples():
    assert longest_word("fun&!! time") == "time"
    assert longest_word("I love dogs") == "love"


def test_longest_word_first_wins_ties():
    assert longest_word("abc def ghi") == "abc"


def test_punctuation_not_counted_but_kept():
    assert longest_word("ab!!!! abc") == "abc"
    assert longest_word("hello!! hi") == "hello!!"


def test_digits_count():
    assert longest_word("Hello world123 567") == "world123"