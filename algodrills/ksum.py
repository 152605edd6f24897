"""Finding numbers that add up to a target."""


def two_sum(nums, target):
    """Return the indices ``(i, j)`` with ``i < j`` of two numbers summing to
    ``target``, or ``None`` when there are none."""
    seen = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return seen[complement], index
        seen[value] = index
    return None


def _k_sum(nums, k, target, start):
    """Yield unique ascending k-tuples from sorted ``nums[start:]``."""
    if k == 2:
        low, high = start, len(nums) - 1
        while low < high:
            total = nums[low] + nums[high]
            if total < target:
                low += 1
            elif total > target:
                high -= 1
            else:
                yield nums[low], nums[high]
                low += 1
                high -= 1
                while low < high and nums[low] == nums[low - 1]:
                    low += 1
        return
    for first in range(start, len(nums) - k + 1):
        if first > start and nums[first] == nums[first - 1]:
            continue
        for rest in _k_sum(nums, k - 1, target - nums[first], first + 1):
            yield (nums[first], *rest)


def three_sum(nums):
    """Return every distinct triplet summing to zero, each sorted, in
    lexicographic order."""
    return [list(triple) for triple in _k_sum(sorted(nums), 3, 0, 0)]


def four_sum(nums, target):
    """Return every distinct quadruplet summing to ``target``, each sorted,
    in lexicographic order."""
    return [list(quad) for quad in _k_sum(sorted(nums), 4, target, 0)]