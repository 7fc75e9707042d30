"""Algorithms over strings."""

from __future__ import annotations

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_PAIRS.values())


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest run of characters with no repeats."""
    last_seen: dict[str, int] = {}
    left = 0
    longest = 0
    for right, character in enumerate(s):
        previous = last_seen.get(character)
        if previous is not None and previous >= left:
            left = previous + 1
        last_seen[character] = right
        longest = max(longest, right - left + 1)
    return longest


def length_of_longest_substring_slow(s: str) -> int:
    """Same as length_of_longest_substring, by checking every start position."""
    longest = 0
    for start in range(len(s)):
        seen: set[str] = set()
        for character in s[start:]:
            if character in seen:
                break
            seen.add(character)
        longest = max(longest, len(seen))
    return longest


def is_valid(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Any character other than ``()[]{}`` makes the string invalid.
    """
    stack: list[str] = []
    for character in s:
        if character in _OPENERS:
            stack.append(character)
        elif not stack or _PAIRS.get(character) != stack.pop():
            return False
    return not stack