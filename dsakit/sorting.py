"""Sorting and merging: bubble sort, quick sort and two ways to merge sorted lists."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def bubble_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``values`` using bubble sort."""
    items = list(values)
    for done in range(len(items) - 1):
        for j in range(len(items) - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def partition(values: MutableSequence[int], start: int, end: int) -> int:
    """Partition ``values[start:end + 1]`` in place around its last element.

    Elements smaller than the pivot end up before it, the rest after it.
    Returns the final index of the pivot.
    """
    if not 0 <= start <= end < len(values):
        raise IndexError("partition bounds out of range")
    pivot = values[end]
    boundary = start
    for i in range(start, end):
        if values[i] < pivot:
            values[boundary], values[i] = values[i], values[boundary]
            boundary += 1
    values[boundary], values[end] = values[end], values[boundary]
    return boundary


def quick_sort(values: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``values`` using quick sort with a last-element pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            split = partition(items, start, end)
            pending.append((start, split - 1))
            pending.append((split + 1, end))
    return items


def next_gap(gap: int) -> int:
    """Return the next gap of the shell-style merge: half rounded up, or 0."""
    if gap <= 1:
        return 0
    return gap // 2 + gap % 2


def merge_in_place(first: MutableSequence[int], second: MutableSequence[int]) -> None:
    """Merge two sorted lists in place using the gap method.

    Afterwards ``first`` holds the smallest elements and ``second`` the rest,
    both sorted, with their lengths unchanged.
    """
    n, m = len(first), len(second)
    gap = next_gap(n + m)
    while gap > 0:
        i = 0
        while i + gap < n:
            if first[i] > first[i + gap]:
                first[i], first[i + gap] = first[i + gap], first[i]
            i += 1
        j = gap - n if gap > n else 0
        while i < n and j < m:
            if first[i] > second[j]:
                first[i], second[j] = second[j], first[i]
            i += 1
            j += 1
        if j < m:
            for j in range(m - gap):
                if second[j] > second[j + gap]:
                    second[j], second[j + gap] = second[j + gap], second[j]
        gap = next_gap(gap)


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the merge of two sorted sequences, keeping ties from ``first`` first."""
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] <= second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged