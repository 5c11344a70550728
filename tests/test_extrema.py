from collections import Counter

import pytest

from dailyarrays.extrema import majority_elements, min_height_difference, second_largest


def test_second_largest_example():
    assert second_largest([12, 35, 1, 10, 34, 1]) == 34


def test_second_largest_all_equal_reports_none():
    assert second_largest([10, 10, 10]) == -1


def test_second_largest_empty_raises():
    with pytest.raises(ValueError):
        second_largest([])


@pytest.mark.parametrize(
    "values",
    [[3, 9, 5], [1, 2], [7, 7, 3, 7], [5, 4, 3, 2, 1], [0, 100, 50, 99]],
)
def test_second_largest_is_below_maximum_and_present(values):
    result = second_largest(values)
    assert result in values
    assert result < max(values)
    assert all(v <= result or v == max(values) for v in values)


def test_second_largest_accepts_iterators():
    assert second_largest(iter([4, 8, 6])) == 6


def test_majority_two_candidates():
    assert majority_elements([2, 2, 3, 1, 3, 2, 1, 1]) == [1, 2]


def test_majority_empty_sequence():
    assert majority_elements([]) == []


def test_majority_single_dominant():
    assert majority_elements([5, 5, 5, 4]) == [5]


@pytest.mark.parametrize(
    "values",
    [
        [1, 2, 3, 4, 5, 6],
        [3, 3, 3, 1, 2],
        [1, 1, 2, 2, 3, 3, 1, 2],
        [9],
        [4, 4, 7, 7, 7, 4, 1],
    ],
)
def test_majority_invariant(values):
    result = majority_elements(values)
    counts = Counter(values)
    limit = len(values) // 3
    assert result == sorted(result)
    assert all(counts[value] > limit for value in result)
    assert all(value in result for value, n in counts.items() if n > limit)


def test_min_height_example():
    assert min_height_difference([1, 5, 8, 10], 2) == 5


def test_min_height_does_not_mutate_input():
    heights = [10, 1, 8, 5]
    min_height_difference(heights, 2)
    assert heights == [10, 1, 8, 5]


@pytest.mark.parametrize(
    "heights, k",
    [([3, 9, 12, 16, 20], 3), ([1, 10, 14, 14, 14, 15], 6), ([7], 4), ([2, 2, 2], 1)],
)
def test_min_height_bounded_by_original_spread(heights, k):
    result = min_height_difference(heights, k)
    assert 0 <= result <= max(heights) - min(heights)


def test_min_height_empty_raises():
    with pytest.raises(ValueError):
        min_height_difference([], 3)