import itertools

import pytest

from algobook.stack import (
    MinStack,
    car_fleet,
    daily_temperatures,
    eval_rpn,
    generate_parenthesis,
    largest_rectangle_area,
)


def _balanced(text):
    depth = 0
    for ch in text:
        depth += 1 if ch == "(" else -1
        if depth < 0:
            return False
    return depth == 0


def test_largest_rectangle_worked_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


@pytest.mark.parametrize(
    "heights",
    [[5], [3, 3, 3, 3], [1, 2, 3, 4, 5], [5, 4, 3, 2, 1], [0, 0], [2, 0, 2], [6, 2, 5, 4, 5, 1, 6]],
)
def test_largest_rectangle_bounds(heights):
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)


def test_largest_rectangle_uniform_heights():
    heights = [3, 3, 3, 3]
    assert largest_rectangle_area(heights) == heights[0] * len(heights)


def test_largest_rectangle_empty_is_like_flat_ground():
    assert largest_rectangle_area([]) == largest_rectangle_area([0])


def test_eval_rpn_worked_example():
    assert eval_rpn(["2", "1", "+", "3", "*"]) == 9


def test_eval_rpn_single_number():
    assert eval_rpn(["42"]) == 42


def test_eval_rpn_operand_order():
    assert eval_rpn(["10", "4", "-"]) == 10 - 4


@pytest.mark.parametrize("a,b", [(7, 2), (-7, 2), (7, -2), (-7, -2), (6, 3), (0, 5)])
def test_eval_rpn_division_truncates_towards_zero(a, b):
    quotient = eval_rpn([str(a), str(b), "/"])
    remainder = a - quotient * b
    assert abs(remainder) < abs(b)
    assert remainder == 0 or (remainder > 0) == (a > 0)


def test_eval_rpn_missing_operand():
    with pytest.raises(ValueError):
        eval_rpn(["1", "+"])


def test_eval_rpn_empty():
    with pytest.raises(ValueError):
        eval_rpn([])


def test_eval_rpn_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        eval_rpn(["1", "0", "/"])


@pytest.mark.parametrize(
    "temps",
    [[73, 74, 75, 71, 69, 72, 76, 73], [30, 40, 50, 60], [60, 50, 40], [30, 30, 31], []],
)
def test_daily_temperatures_waits(temps):
    waits = daily_temperatures(temps)
    assert len(waits) == len(temps)
    for i, (temp, wait) in enumerate(zip(temps, waits)):
        if wait:
            assert temps[i + wait] > temp
            assert all(x <= temp for x in temps[i + 1 : i + wait])
        else:
            assert all(x <= temp for x in temps[i + 1 :])


def test_car_fleet_same_speed_never_merges():
    position = [0, 3, 5, 8]
    assert car_fleet(12, position, [1, 1, 1, 1]) == len(position)


def test_car_fleet_catching_up_forms_one_fleet():
    assert car_fleet(10, [0, 5], [10, 1]) == car_fleet(10, [5], [1])
    assert car_fleet(10, [5], [1]) == len([5])


def test_car_fleet_same_arrival_merges():
    assert car_fleet(10, [0, 5], [2, 1]) == car_fleet(10, [5], [1])


def test_car_fleet_length_mismatch():
    with pytest.raises(ValueError):
        car_fleet(10, [1, 2], [1])


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_generate_parenthesis_matches_all_balanced(n):
    result = generate_parenthesis(n)
    expected = {"".join(p) for p in itertools.product("()", repeat=2 * n) if _balanced(p)}
    assert set(result) == expected
    assert len(result) == len(set(result))
    assert result == sorted(result)


def test_generate_parenthesis_zero():
    assert generate_parenthesis(0) == [""]


def test_min_stack_tracks_minimum():
    stack = MinStack()
    pushed = []
    for value in [5, 3, 7, 3, 1, 8]:
        stack.push(value)
        pushed.append(value)
        assert stack.get_min() == min(pushed)
        assert stack.top() == value
    while len(pushed) > 1:
        assert stack.pop() == pushed.pop()
        assert stack.get_min() == min(pushed)
        assert stack.top() == pushed[-1]


def test_min_stack_empty_errors():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.get_min()
    with pytest.raises(IndexError):
        stack.pop()