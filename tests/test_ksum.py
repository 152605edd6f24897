from itertools import combinations

import pytest

from algodrills.ksum import four_sum, three_sum, two_sum


def _all_combos(nums, size, target):
    return {c for c in combinations(sorted(nums), size) if sum(c) == target}


@pytest.mark.parametrize(
    ("nums", "target"),
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([-3, 4, 3, 90], 0), ([1, 5, 9, 14], 23)],
)
def test_two_sum_returns_matching_indices(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_duplicate_values():
    assert two_sum([3, 3], 6) == (0, 1)


def test_two_sum_missing_is_none():
    assert two_sum([1, 2, 4], 100) is None


def test_two_sum_cannot_reuse_element():
    assert two_sum([5], 10) is None


def test_three_sum_worked_example():
    assert three_sum([-1, 0, 1, 2, -1, -4]) == [[-1, -1, 2], [-1, 0, 1]]


def test_three_sum_empty():
    assert three_sum([]) == []


def test_three_sum_all_zeros_once():
    assert three_sum([0, 0, 0, 0, 0]) == [[0, 0, 0]]


@pytest.mark.parametrize(
    "nums",
    [[-4, -2, -2, 0, 1, 2, 2, 3, 4, 6], [3, -2, 1, 0, -1, -1, 2], [1, 2, 3]],
)
def test_three_sum_matches_all_combinations(nums):
    result = three_sum(nums)
    assert {tuple(t) for t in result} == _all_combos(nums, 3, 0)
    assert result == sorted(result)
    assert all(t == sorted(t) for t in result)
    assert len({tuple(t) for t in result}) == len(result)


def test_three_sum_leaves_input_alone():
    nums = [2, -1, -1]
    three_sum(nums)
    assert nums == [2, -1, -1]


@pytest.mark.parametrize(
    ("nums", "target"),
    [
        ([1, 0, -1, 0, -2, 2], 0),
        ([2, 2, 2, 2, 2], 8),
        ([-3, -1, 0, 2, 4, 5], 2),
        ([1000000000, 1000000000, 1000000000, 1000000000], -294967296),
    ],
)
def test_four_sum_matches_all_combinations(nums, target):
    result = four_sum(nums, target)
    assert {tuple(q) for q in result} == _all_combos(nums, 4, target)
    assert result == sorted(result)
    assert len({tuple(q) for q in result}) == len(result)


def test_four_sum_too_short():
    assert four_sum([1, 2, 3], 6) == []