"""Lookup problems: repeated elements, two sum, anagrams, symmetry, palindromes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def two_repeated(values: Sequence[int]) -> tuple[int, int]:
    """Return the two repeated values, ordered by when their second copy appears.

    Raises ValueError when fewer than two values repeat.
    """
    counts = Counter(values)
    repeated = sorted(value for value, count in counts.items() if count > 1)
    if len(repeated) < 2:
        raise ValueError("fewer than two values are repeated")
    candidates = set(repeated[:2])
    seen: set[int] = set()
    for value in values:
        if value in candidates:
            if value in seen:
                other = (candidates - {value}).pop()
                return value, other
            seen.add(value)
    raise ValueError("fewer than two values are repeated")


def two_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(later, earlier)`` of two values adding up to ``target``.

    Returns None when no such pair exists.
    """
    positions: dict[int, int] = {}
    for index, value in enumerate(values):
        partner = positions.get(target - value)
        if partner is not None:
            return index, partner
        positions[value] = index
    return None


def is_anagram(first: str, second: str) -> bool:
    """Tell whether the two strings use exactly the same characters."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def is_symmetric(matrix: Sequence[Sequence[int]]) -> bool:
    """Tell whether a matrix equals its transpose; non-square matrices are not."""
    rows = len(matrix)
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("matrix rows have different lengths")
    if widths and widths.pop() != rows:
        return False
    return all(
        matrix[i][j] == matrix[j][i] for i in range(rows) for j in range(i + 1, rows)
    )


def can_make_palindrome(words: Sequence[str]) -> bool:
    """Tell whether the equal-length words can be joined into a palindrome."""
    return sorted(words) == sorted(word[::-1] for word in words)