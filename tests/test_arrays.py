import pytest

from leetsolve.arrays import (
    climb_stairs,
    majority_element,
    max_profit,
    max_profit_simple,
    my_sqrt,
    single_number,
    sort_colors,
    trap,
    trap_o1_memory,
    trap_on_memory,
    two_sum2,
)

TRAP_CASES = [
    ([], 0),
    ([1], 0),
    ([1, 2], 0),
    ([1, 2, 3], 0),
    ([4, 2, 3], 1),
    ([2, 1, 2], 1),
    ([0, 2, 1, 0, 1, 3], 4),
    ([2, 1, 2, 2, 1, 2], 2),
    ([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1], 6),
]


@pytest.mark.parametrize("height, expected", TRAP_CASES)
@pytest.mark.parametrize("func", [trap, trap_on_memory, trap_o1_memory])
def test_trap(func, height, expected):
    assert func(height) == expected


@pytest.mark.parametrize("x, expected", [(4, 2), (6, 2), (8, 2), (1, 1), (9, 3)])
def test_my_sqrt(x, expected):
    assert my_sqrt(x) == expected


@pytest.mark.parametrize("n, expected", [(1, 1), (2, 2), (3, 3), (4, 5), (5, 8)])
def test_climb_stairs(n, expected):
    assert climb_stairs(n) == expected


@pytest.mark.parametrize(
    "nums, expected",
    [([], []), ([2, 1, 0], [0, 1, 2]), ([2, 0, 2, 1, 1, 0], [0, 0, 1, 1, 2, 2])],
)
def test_sort_colors(nums, expected):
    sort_colors(nums)
    assert nums == expected


def test_sort_colors_rejects_other_values():
    with pytest.raises(ValueError):
        sort_colors([0, 3, 1])


@pytest.mark.parametrize(
    "prices, expected",
    [([], 0), ([5], 0), ([7, 1, 5, 3, 6, 4], 5), ([7, 6, 4, 3, 1], 0)],
)
@pytest.mark.parametrize("func", [max_profit, max_profit_simple])
def test_max_profit(func, prices, expected):
    assert func(prices) == expected


@pytest.mark.parametrize(
    "nums, expected", [([1], 1), ([2, 2, 1], 1), ([4, 1, 2, 1, 2], 4)]
)
def test_single_number(nums, expected):
    assert single_number(nums) == expected


def test_single_number_without_single_raises():
    with pytest.raises(ValueError):
        single_number([1, 1])


def test_two_sum2():
    assert two_sum2([2, 7, 11, 15], 9) == [1, 2]


def test_two_sum2_without_solution_raises():
    with pytest.raises(ValueError):
        two_sum2([1, 2, 3], 100)


@pytest.mark.parametrize("nums, expected", [([3], 3), ([3, 1, 3], 3)])
def test_majority_element(nums, expected):
    assert majority_element(nums) == expected