import pytest

from dsakit import arrays


def test_min_max_of_source_array():
    values = [1, 423, 6, 46, 34, 23, 13, 53, 4]
    assert arrays.min_max(values) == (1, 423)


def test_min_max_empty_raises():
    with pytest.raises(ValueError):
        arrays.min_max([])


@pytest.mark.parametrize("values", [[3, 9, 2], [-5, -1, -7], [4]])
def test_largest_is_member_and_upper_bound(values):
    result = arrays.largest(values)
    assert result in values
    assert all(v <= result for v in values)


def test_largest_empty_raises():
    with pytest.raises(ValueError):
        arrays.largest([])


def test_second_largest_skips_duplicates_of_max():
    assert arrays.second_largest([10, 5, 10, 8]) == 8


def test_second_largest_all_equal_raises():
    with pytest.raises(ValueError):
        arrays.second_largest([7, 7, 7])


def test_rotate_left_by_one():
    assert arrays.rotate_left_by_one([1, 2, 3, 4, 5]) == [2, 3, 4, 5, 1]
    assert arrays.rotate_left_by_one([]) == []


def test_rotate_right_moves_tail_to_front():
    assert arrays.rotate_right([1, 2, 3, 4, 5, 6, 7], 3) == [5, 6, 7, 1, 2, 3, 4]


@pytest.mark.parametrize("k", [0, 7, 14])
def test_rotate_right_by_multiple_of_length_is_identity(k):
    values = [1, 2, 3, 4, 5, 6, 7]
    assert arrays.rotate_right(values, k) == values


def test_rotate_right_undoes_left_rotation():
    values = [4, 8, 15, 16, 23, 42]
    assert arrays.rotate_right(arrays.rotate_left_by_one(values), 1) == values


def test_rotate_right_empty():
    assert arrays.rotate_right([], 3) == []


@pytest.mark.parametrize(
    "values, expected",
    [
        ([-2, 1, -3, 4, -1, 2, 1, -5, 4], 6),
        ([-1, 1], 1),
        ([-1, 1, 2, -1, 2], 4),
    ],
)
def test_max_subarray_sum_documented_examples(values, expected):
    assert arrays.max_subarray_sum(values) == expected
    assert arrays.max_subarray_sum(values, clamp_to_zero=True) == expected


def test_max_subarray_sum_all_negative():
    values = [-8, -3, -6]
    assert arrays.max_subarray_sum(values) == max(values)
    assert arrays.max_subarray_sum(values, clamp_to_zero=True) == 0


def test_max_subarray_sum_empty():
    assert arrays.max_subarray_sum([], clamp_to_zero=True) == 0
    with pytest.raises(ValueError):
        arrays.max_subarray_sum([])


def test_max_subarray_sum_all_positive_is_total():
    values = [3, 1, 4, 1, 5]
    assert arrays.max_subarray_sum(values) == sum(values)


def test_longest_subarray_with_sum_source_example():
    assert arrays.longest_subarray_with_sum([2, 3, 5, 1, 9], 10) == 3


def test_longest_subarray_with_sum_whole_array():
    values = [1, 1, 1, 1]
    assert arrays.longest_subarray_with_sum(values, sum(values)) == len(values)


def test_longest_subarray_with_sum_none_found():
    assert arrays.longest_subarray_with_sum([5, 5], 3) == 0
    assert arrays.longest_subarray_with_sum([], 3) == 0


def test_trapped_water_documented_example():
    heights = [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]
    assert arrays.trapped_water(heights) == 6
    assert arrays.trapped_water_two_pointer(heights) == 6


@pytest.mark.parametrize(
    "heights",
    [[4, 2, 0, 3, 2, 5], [3, 0, 3], [1, 2, 3], [5, 1, 1, 5, 2, 6], [2], []],
)
def test_trapped_water_variants_agree(heights):
    assert arrays.trapped_water(heights) == arrays.trapped_water_two_pointer(heights)


def test_trapped_water_monotone_holds_nothing():
    assert arrays.trapped_water([1, 2, 3, 4]) == 0
    assert arrays.trapped_water_two_pointer([4, 3, 2, 1]) == 0


@pytest.mark.parametrize(
    "ratings",
    [[1, 0, 2], [1, 2, 2], [1, 3, 4, 5, 2], [5, 4, 3, 2, 1], [1, 2, 87, 87, 87, 2, 1], [3, 3, 3]],
)
def test_candy_variants_agree(ratings):
    assert arrays.candy(ratings) == arrays.candy_constant_space(ratings)


def test_candy_equal_ratings_get_one_each():
    assert arrays.candy([3, 3, 3]) == 3


def test_candy_small_inputs():
    assert arrays.candy([]) == 0
    assert arrays.candy_constant_space([]) == 0
    assert arrays.candy_constant_space([9]) == 1


def test_candy_at_least_one_per_child():
    ratings = [2, 7, 1, 8, 2, 8]
    assert arrays.candy(ratings) >= len(ratings)


def test_median_odd_total():
    assert arrays.median_of_sorted([1, 3], [2]) == 2.0


def test_median_even_total_of_equal_values():
    assert arrays.median_of_sorted([2], [2]) == 2.0


def test_median_is_symmetric_in_arguments():
    first, second = [1, 2, 9], [3, 4]
    assert arrays.median_of_sorted(first, second) == arrays.median_of_sorted(second, first)


def test_median_empty_raises():
    with pytest.raises(ValueError):
        arrays.median_of_sorted([], [])


def test_count_good_pairs():
    assert arrays.count_good_pairs([1, 2, 3, 1, 1, 3]) == 4
    assert arrays.count_good_pairs([1, 2, 3]) == 0


def test_three_sum_source_example():
    assert arrays.three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_triplets_are_distinct_and_zero():
    result = arrays.three_sum([0, 0, 0, 0, -2, 1, 1, 2, -1, -1])
    assert all(sum(t) == 0 for t in result)
    assert len({tuple(t) for t in result}) == len(result)
    assert [0, 0, 0] in result


def test_three_sum_none():
    assert arrays.three_sum([1, 2, 3]) == []


@pytest.mark.parametrize("n", [5, 8, 12])
def test_n_choose_r_edges_and_symmetry(n):
    assert arrays.n_choose_r(n, 0) == 1
    assert arrays.n_choose_r(n, 1) == n
    for r in range(n + 1):
        assert arrays.n_choose_r(n, r) == arrays.n_choose_r(n, n - r)


def test_n_choose_r_pascal_rule():
    for n in range(1, 10):
        for r in range(1, n):
            assert arrays.n_choose_r(n, r) == (
                arrays.n_choose_r(n - 1, r - 1) + arrays.n_choose_r(n - 1, r)
            )


def test_pascal_element_matches_binomial():
    assert arrays.pascal_element(5, 3) == arrays.n_choose_r(4, 2)
    assert arrays.pascal_element(1, 1) == 1


def test_pascal_element_rejects_zero_index():
    with pytest.raises(ValueError):
        arrays.pascal_element(0, 1)


def test_is_feasible():
    pages = [10, 20, 30, 40]
    assert arrays.is_feasible(pages, 2, sum(pages))
    assert not arrays.is_feasible(pages, 1, sum(pages) - 1)


def test_allocate_pages_source_example():
    assert arrays.allocate_pages([10, 20, 30, 40], 2) == 60


@pytest.mark.parametrize(
    "pages, students",
    [([10, 20, 30, 40], 2), ([12, 34, 67, 90], 2), ([5, 17, 100, 11], 3), ([7, 2, 5, 10, 8], 1)],
)
def test_allocate_pages_variants_agree(pages, students):
    assert arrays.allocate_pages(pages, students) == arrays.allocate_pages_brute_force(
        pages, students
    )


def test_allocate_pages_one_student_per_book_is_max():
    pages = [3, 9, 4]
    assert arrays.allocate_pages(pages, len(pages)) == max(pages)


def test_allocate_pages_errors():
    with pytest.raises(ValueError):
        arrays.allocate_pages([10, 20], 3)
    with pytest.raises(ValueError):
        arrays.allocate_pages([], 1)
    with pytest.raises(ValueError):
        arrays.allocate_pages_brute_force([10], 0)