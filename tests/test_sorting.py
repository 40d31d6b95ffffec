import random

import pytest

from dsakit.sorting import (
    bubble_sort,
    merge_in_place,
    merge_sorted,
    next_gap,
    partition,
    quick_sort,
)

SAMPLE = [24, 9, 29, 14, 19, 27]


def _random_lists(count=20):
    rng = random.Random(7)
    return [
        [rng.randint(-50, 50) for _ in range(rng.randint(0, 30))]
        for _ in range(count)
    ]


@pytest.mark.parametrize("values", _random_lists())
def test_bubble_sort_matches_sorted(values):
    assert bubble_sort(values) == sorted(values)


def test_bubble_sort_leaves_input_alone():
    values = [3, 1, 2]
    bubble_sort(values)
    assert values == [3, 1, 2]


@pytest.mark.parametrize("values", _random_lists())
def test_quick_sort_matches_sorted(values):
    assert quick_sort(values) == sorted(values)


def test_quick_sort_source_sample():
    assert quick_sort(SAMPLE) == sorted(SAMPLE)


def test_partition_places_pivot():
    items = list(SAMPLE)
    index = partition(items, 0, len(items) - 1)
    pivot = SAMPLE[-1]
    assert items[index] == pivot
    assert all(v < pivot for v in items[:index])
    assert all(v >= pivot for v in items[index + 1:])
    assert sorted(items) == sorted(SAMPLE)


def test_partition_rejects_bad_bounds():
    with pytest.raises(IndexError):
        partition([1, 2], 0, 5)


def test_next_gap_values():
    assert next_gap(1) == 0
    assert next_gap(0) == 0
    assert next_gap(5) == 3
    assert next_gap(4) == 2


@pytest.mark.parametrize("seed", range(10))
def test_merge_in_place_invariants(seed):
    rng = random.Random(seed)
    first = sorted(rng.randint(0, 40) for _ in range(rng.randint(0, 12)))
    second = sorted(rng.randint(0, 40) for _ in range(rng.randint(0, 12)))
    expected = sorted(first + second)
    a, b = list(first), list(second)
    merge_in_place(a, b)
    assert len(a) == len(first)
    assert len(b) == len(second)
    assert a + b == expected


def test_merge_sorted_worked_example():
    assert merge_sorted([1, 3, 5, 7], [0, 2, 6, 8, 9]) == [0, 1, 2, 3, 5, 6, 7, 8, 9]


@pytest.mark.parametrize("seed", range(10))
def test_merge_sorted_matches_sorted(seed):
    rng = random.Random(seed)
    first = sorted(rng.randint(-9, 9) for _ in range(rng.randint(0, 10)))
    second = sorted(rng.randint(-9, 9) for _ in range(rng.randint(0, 10)))
    assert merge_sorted(first, second) == sorted(first + second)