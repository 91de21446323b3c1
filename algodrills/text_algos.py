"""String algorithms: longest palindromic substring and longest run of unique characters."""

from __future__ import annotations


def _expand_around_center(s: str, left: int, right: int) -> str:
    """Grow a palindrome outward from the given center and return it."""
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return s[left + 1 : right]


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring of ``s``.

    When several have the same maximal length, the one found first
    (scanning centers from left to right) is returned.
    """
    if len(s) <= 1:
        return s

    best = s[0]
    for center in range(len(s)):
        odd = _expand_around_center(s, center, center)
        even = _expand_around_center(s, center, center + 1)
        if len(odd) > len(best):
            best = odd
        if len(even) > len(best):
            best = even
    return best


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring with no repeated characters."""
    window: set[str] = set()
    best = 0
    left = 0
    for right, char in enumerate(s):
        while char in window:
            window.discard(s[left])
            left += 1
        window.add(char)
        best = max(best, right - left + 1)
    return best