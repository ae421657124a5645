import pytest

from codedrills.arrays import (
    find_duplicates,
    find_missing_number,
    intersection,
    merge_intervals,
)


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([3, 7, 1, 2, 8, 4, 5], 6),
        ([1, 2, 4, 5], 3),
        ([2, 3, 4, 5, 6, 7, 8, 9], 1),
        ([1, 2, 3, 5, 6], 4),
    ],
)
def test_find_missing_number(nums, expected):
    assert find_missing_number(nums) == expected


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([1, 2, 3, 4, 5, 6, 2, 3], [2, 3]),
        ([4, 5, 6, 7, 5, 4], [5, 4]),
        ([1, 2, 3, 4, 5], []),
        ([1, 1, 1, 1, 1], [1]),
        ([10, 9, 8, 7, 6, 7, 8], [7, 8]),
    ],
)
def test_find_duplicates(nums, expected):
    assert find_duplicates(nums) == expected


@pytest.mark.parametrize(
    "nums1, nums2, expected",
    [
        ([1, 2, 2, 1], [2, 2], [2]),
        ([4, 9, 5], [9, 4, 9, 8, 4], [4, 9]),
        ([1, 2, 3], [4, 5, 6], []),
        ([1, 1, 1], [1, 1, 1], [1]),
        ([10, 20, 30], [30, 40, 50], [30]),
    ],
)
def test_intersection(nums1, nums2, expected):
    assert intersection(nums1, nums2) == expected


@pytest.mark.parametrize(
    "intervals, expected",
    [
        ([[1, 3], [2, 6], [8, 10], [15, 18]], [[1, 6], [8, 10], [15, 18]]),
        ([[1, 4], [4, 5]], [[1, 5]]),
        ([[1, 4], [0, 4]], [[0, 4]]),
        ([[1, 10], [2, 6], [8, 10]], [[1, 10]]),
        ([[1, 2], [3, 5], [4, 7], [8, 10]], [[1, 2], [3, 7], [8, 10]]),
    ],
)
def test_merge_intervals(intervals, expected):
    assert merge_intervals(intervals) == expected


def test_merge_intervals_empty():
    assert merge_intervals([]) == []


def test_merge_intervals_leaves_input_untouched():
    intervals = [[5, 8], [1, 6]]
    assert merge_intervals(intervals) == [[1, 8]]
    assert intervals == [[5, 8], [1, 6]]


def test_find_missing_number_empty_input():
    assert find_missing_number([]) == 1