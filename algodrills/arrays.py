"""Assorted array routines."""

import heapq
import operator
from functools import reduce
from itertools import accumulate, count


def merge_sorted(nums1, m, nums2, n):
    """Merge the first ``n`` items of sorted ``nums2`` into the first ``m``
    items of sorted ``nums1``, in place; ``nums1`` ends with ``m + n`` items."""
    nums1[:] = heapq.merge(nums1[:m], nums2[:n])


def move_zeroes(nums):
    """Move every zero to the end in place, keeping other items in order."""
    non_zero = [value for value in nums if value]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def next_permutation(nums):
    """Rearrange ``nums`` in place into the next lexicographic permutation,
    wrapping round to ascending order after the last one."""
    pivot = len(nums) - 2
    while pivot >= 0 and nums[pivot] >= nums[pivot + 1]:
        pivot -= 1
    if pivot >= 0:
        swap = len(nums) - 1
        while nums[swap] <= nums[pivot]:
            swap -= 1
        nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1:] = nums[pivot + 1:][::-1]


def product_except_self(nums):
    """Return, for each position, the product of every other item."""
    if not nums:
        return []
    prefix = accumulate(nums[:-1], operator.mul, initial=1)
    suffix = list(accumulate(reversed(nums[1:]), operator.mul, initial=1))
    return [left * right for left, right in zip(prefix, reversed(suffix))]


def first_missing_positive(nums):
    """Return the smallest positive integer not present in ``nums``."""
    present = set(nums)
    return next(candidate for candidate in count(1) if candidate not in present)


def kth_largest(nums, k):
    """Return the ``k``-th largest item, counting from 1."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    return heapq.nlargest(k, nums)[-1]


def longest_consecutive(nums):
    """Return the length of the longest run of consecutive integers."""
    bucket = set(nums)
    longest = 0
    for start in bucket:
        if start - 1 in bucket:
            continue
        end = start
        while end in bucket:
            end += 1
        longest = max(longest, end - start)
    return longest


def majority_element(nums):
    """Return the element found more than half the time (Boyer-Moore vote).

    For input with no majority the result is merely the last vote leader.
    """
    if not nums:
        raise ValueError("majority_element() of an empty sequence")
    elected = None
    votes = 0
    for value in nums:
        if votes == 0:
            elected = value
        votes += 1 if value == elected else -1
    return elected


def _majorities(nums, low, high):
    """Return the majority candidates of ``nums[low:high]``."""
    if high - low == 1:
        return [nums[low]]
    middle = (low + high + 1) // 2
    from_left = _majorities(nums, low, middle)
    from_right = _majorities(nums, middle, high)
    right_set = set(from_right)
    pool = [value for value in from_left if value not in right_set] + from_right
    window = nums[low:high]
    return [value for value in pool if window.count(value) > len(window) // 2]


def majority_element_split(nums):
    """Return the majority element found by divide and conquer.

    Raises ``ValueError`` when there is no element occurring more than half
    the time.
    """
    if not nums:
        raise ValueError("majority_element_split() of an empty sequence")
    found = _majorities(list(nums), 0, len(nums))
    if not found:
        raise ValueError("no majority element")
    return found[0]


def single_number(nums):
    """Return the one item that appears an odd number of times when all
    others appear in pairs."""
    return reduce(operator.xor, nums, 0)


def trap_rain_water(heights):
    """Return how much rain water the elevation map ``heights`` holds."""
    left, right = 0, len(heights) - 1
    left_max = right_max = 0
    total = 0
    while left < right:
        left_max = max(left_max, heights[left])
        right_max = max(right_max, heights[right])
        if heights[left] < heights[right]:
            total += left_max - heights[left]
            left += 1
        else:
            total += right_max - heights[right]
            right -= 1
    return total