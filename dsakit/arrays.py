"""Array algorithms: extremes, rotations, subarray sums, water trapping and more."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, pairwise


def _require_values(values: Sequence[int], what: str = "values") -> None:
    if not values:
        raise ValueError(f"{what} must not be empty")


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and largest element, found by sorting."""
    _require_values(values)
    ordered = sorted(values)
    return ordered[0], ordered[-1]


def largest(values: Sequence[int]) -> int:
    """Return the largest element."""
    _require_values(values)
    return max(values)


def second_largest(values: Sequence[int]) -> int:
    """Return the largest element strictly smaller than the maximum."""
    _require_values(values)
    top = max(values)
    smaller = [value for value in values if value != top]
    if not smaller:
        raise ValueError("no element differs from the largest one")
    return max(smaller)


def rotate_left_by_one(values: Sequence[int]) -> list[int]:
    """Return a copy with every element moved one place to the left."""
    items = list(values)
    return items[1:] + items[:1]


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Return a copy rotated ``k`` places to the right."""
    items = list(values)
    if not items:
        return items
    k %= len(items)
    return items[len(items) - k:] + items[: len(items) - k]


def max_subarray_sum(values: Sequence[int], clamp_to_zero: bool = False) -> int:
    """Return the largest sum of a non-empty contiguous run (Kadane).

    With ``clamp_to_zero`` a negative best sum is reported as 0, and an
    empty sequence gives 0 instead of an error.
    """
    if not values:
        if clamp_to_zero:
            return 0
        raise ValueError("values must not be empty")
    current = best = values[0]
    for value in values[1:]:
        current = max(value, current + value)
        best = max(best, current)
    return max(best, 0) if clamp_to_zero else best


def longest_subarray_with_sum(values: Sequence[int], k: int) -> int:
    """Return the length of the longest run summing to ``k``.

    Uses a sliding window, which is correct for non-negative values.
    """
    best = 0
    left = 0
    total = 0
    for right, value in enumerate(values):
        total += value
        while left <= right and total > k:
            total -= values[left]
            left += 1
        if total == k:
            best = max(best, right - left + 1)
    return best


def trapped_water(heights: Sequence[int]) -> int:
    """Return the water trapped by an elevation map, using running maxima."""
    if not heights:
        return 0
    left_max = list(accumulate(heights, max))
    right_max = list(accumulate(reversed(heights), max))[::-1]
    return sum(
        min(lm, rm) - h for lm, rm, h in zip(left_max, right_max, heights)
    )


def trapped_water_two_pointer(heights: Sequence[int]) -> int:
    """Return the water trapped by an elevation map in constant space."""
    if not heights:
        return 0
    left, right = 0, len(heights) - 1
    left_max, right_max = heights[0], 0
    water = 0
    while left < right:
        if heights[left] < heights[right]:
            if heights[left] > left_max:
                left_max = heights[left]
            else:
                water += left_max - heights[left]
            left += 1
        else:
            if heights[right] > right_max:
                right_max = heights[right]
            else:
                water += right_max - heights[right]
            right -= 1
    return water


def candy(ratings: Sequence[int]) -> int:
    """Return the fewest candies so higher-rated neighbours get more."""
    n = len(ratings)
    left = [1] * n
    right = [1] * n
    for i in range(1, n):
        if ratings[i] > ratings[i - 1]:
            left[i] = left[i - 1] + 1
    for i in range(n - 2, -1, -1):
        if ratings[i] > ratings[i + 1]:
            right[i] = right[i + 1] + 1
    return sum(max(a, b) for a, b in zip(left, right))


def _triangle(n: int) -> int:
    return n * (n + 1) // 2


def candy_constant_space(ratings: Sequence[int]) -> int:
    """Return the same answer as :func:`candy` by counting slopes."""
    if len(ratings) <= 1:
        return len(ratings)
    up = down = candies = previous = 0
    for before, after in pairwise(ratings):
        slope = 1 if after > before else -1 if after < before else 0
        if (previous < 0 and slope >= 0) or (previous > 0 and slope == 0):
            candies += _triangle(up) + _triangle(down) + max(up, down)
            up = down = 0
        if slope > 0:
            up += 1
        elif slope < 0:
            down += 1
        else:
            candies += 1
        previous = slope
    return candies + _triangle(up) + _triangle(down) + max(up, down) + 1


def median_of_sorted(first: Sequence[int], second: Sequence[int]) -> float:
    """Return the median of the two sequences taken together."""
    merged = sorted([*first, *second])
    _require_values(merged, "the combined sequences")
    middle = len(merged) // 2
    if len(merged) % 2:
        return float(merged[middle])
    return (merged[middle] + merged[middle - 1]) / 2


def count_good_pairs(values: Sequence[int]) -> int:
    """Return the number of index pairs i < j with equal values."""
    return sum(count * (count - 1) // 2 for count in Counter(values).values())


def three_sum(values: Sequence[int]) -> list[list[int]]:
    """Return every distinct triplet summing to zero, in sorted order."""
    items = sorted(values)
    n = len(items)
    found: list[list[int]] = []
    for i, first in enumerate(items):
        if i and first == items[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + items[j] + items[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                found.append([first, items[j], items[k]])
                j += 1
                k -= 1
                while j < k and items[j] == items[j - 1]:
                    j += 1
                while j < k and items[k] == items[k + 1]:
                    k -= 1
    return found


def n_choose_r(n: int, r: int) -> int:
    """Return the binomial coefficient C(n, r)."""
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


def pascal_element(row: int, col: int) -> int:
    """Return the element at 1-based ``row`` and ``col`` of Pascal's triangle."""
    if row < 1 or col < 1:
        raise ValueError("row and col are 1-based")
    return n_choose_r(row - 1, col - 1)


def is_feasible(pages: Sequence[int], students: int, limit: int) -> bool:
    """Tell whether the books fit among ``students`` with at most ``limit`` each."""
    needed = 1
    current = 0
    for book in pages:
        if current + book <= limit:
            current += book
        else:
            needed += 1
            current = book
    return needed <= students


def _check_allocation(pages: Sequence[int], students: int) -> None:
    _require_values(pages, "pages")
    if students < 1:
        raise ValueError("there must be at least one student")


def allocate_pages(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages any student reads.

    Books are given out in order, each student taking a contiguous run.
    """
    _check_allocation(pages, students)
    if students > len(pages):
        raise ValueError("more students than books")
    low, high = max(pages), sum(pages)
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if is_feasible(pages, students, mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def allocate_pages_brute_force(pages: Sequence[int], students: int) -> int:
    """Return the same answer as :func:`allocate_pages` by trying every split."""
    _check_allocation(pages, students)

    def solve(count: int, k: int) -> int:
        if k == 1:
            return sum(pages[:count])
        if count == 1:
            return pages[0]
        return min(
            max(sum(pages[split:count]), solve(split, k - 1))
            for split in range(1, count)
        )

    return solve(len(pages), students)