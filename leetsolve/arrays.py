"""Algorithms over sequences of integers."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate, combinations


def trap(height: list[int]) -> int:
    """Return the water trapped between bars, scanning left to right."""
    total = 0
    wall = 0
    filling = False
    for pos in range(1, len(height)):
        level = height[pos]
        if not filling:
            if height[wall] <= level:
                wall = pos
            else:
                filling = True
        if filling:
            top = height[wall]
            if top > level:
                if all(later <= level for later in height[pos + 1 :]):
                    total += sum(level - h for h in height[wall + 1 : pos])
                    filling = False
                    wall = pos
            else:
                total += sum(top - h for h in height[wall + 1 : pos])
                filling = False
                wall = pos
    return total


def trap_on_memory(height: list[int]) -> int:
    """Return the water trapped between bars using prefix maxima."""
    if len(height) <= 2:
        return 0
    max_left = list(accumulate(height[:-1], max, initial=0))
    max_right = list(accumulate(reversed(height[1:]), max, initial=0))[::-1]
    return sum(
        max(min(left, right) - h, 0)
        for left, right, h in zip(max_left, max_right, height)
    )


def trap_o1_memory(heights: list[int]) -> int:
    """Return the water trapped between bars using two pointers."""
    if len(heights) <= 2:
        return 0
    total = 0
    left, right = 0, len(heights) - 1
    max_left, max_right = heights[left], heights[right]
    while left < right - 1:
        if max_left < max_right:
            left += 1
            h = heights[left]
            if max_left > h:
                total += max_left - h
            else:
                max_left = h
        else:
            right -= 1
            h = heights[right]
            if max_right > h:
                total += max_right - h
            else:
                max_right = h
    return total


def my_sqrt(x: int) -> int:
    """Return the integer square root of ``x``; values below 2 give 1."""
    if x < 2:
        return 1
    low, high = 1, x // 2
    while low <= high:
        middle = (low + high) // 2
        square = middle * middle
        if square == x:
            return middle
        if square > x:
            high = middle - 1
        else:
            low = middle + 1
    return high


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking 1 or 2 at a time."""
    one, two = 1, 1
    for _ in range(n - 1):
        one, two = one + two, one
    return one


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place; other values raise ValueError."""
    counts = Counter(nums)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"bad number: {min(unexpected)}")
    nums[:] = [0] * counts[0] + [1] * counts[1] + [2] * counts[2]


def max_profit(prices: list[int]) -> int:
    """Return the best profit from one buy followed by one sell."""
    profit = 0
    lowest = prices[0] if prices else 0
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            profit = max(profit, price - lowest)
    return profit


def max_profit_simple(prices: list[int]) -> int:
    """Same as max_profit, by trying every buy and sell pair."""
    return max((sell - buy for buy, sell in combinations(prices, 2)), default=0) if len(
        prices
    ) > 1 and max(sell - buy for buy, sell in combinations(prices, 2)) > 0 else 0


def single_number(nums: list[int]) -> int:
    """Return the value that appears exactly once; raise ValueError if none."""
    for value, count in Counter(nums).items():
        if count == 1:
            return value
    raise ValueError("no value appears exactly once")


def two_sum2(numbers: list[int], target: int) -> list[int]:
    """Return 1-based positions of two entries of a sorted list summing to target."""
    i, j = 0, len(numbers) - 1
    while i < j:
        total = numbers[i] + numbers[j]
        if total == target:
            return [i + 1, j + 1]
        if total < target:
            i += 1
        else:
            j -= 1
    raise ValueError(f"no two entries sum to {target}")


def majority_element(nums: list[int]) -> int:
    """Return the majority value by the Boyer-Moore vote."""
    candidate = 0
    count = 0
    for num in nums:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    return candidate