"""Searching, matching and replacing inside strings."""

from bisect import bisect_left
from collections import Counter, defaultdict


def find_replace_string(s, indices, sources, targets):
    """Apply every replacement whose source occurs at its index in ``s``.

    All matches are judged against the original string and applied
    together, so one replacement never affects another.
    """
    matches = {
        index: (source, target)
        for index, source, target in zip(indices, sources, targets)
        if s.startswith(source, index)
    }
    pieces = []
    position = 0
    while position < len(s):
        if position in matches:
            source, target = matches[position]
            pieces.append(target)
            position += len(source)
        else:
            pieces.append(s[position])
            position += 1
    return "".join(pieces)


def str_str(haystack, needle):
    """Return the index of the first occurrence of ``needle``, or -1.

    An empty needle is found at index 0.
    """
    return haystack.find(needle)


def min_window(s, t):
    """Return the shortest substring of ``s`` holding every character of
    ``t`` with multiplicity; the earliest wins ties, "" when there is none."""
    if not t:
        return ""
    need = Counter(t)
    missing = len(t)
    best = None
    left = 0
    for right, char in enumerate(s):
        if need[char] > 0:
            missing -= 1
        need[char] -= 1
        while missing == 0:
            if best is None or right + 1 - left < best[1] - best[0]:
                best = (left, right + 1)
            dropped = s[left]
            need[dropped] += 1
            if need[dropped] > 0:
                missing += 1
            left += 1
    return "" if best is None else s[best[0]:best[1]]


def num_matching_subseq(s, words):
    """Return how many of ``words`` are subsequences of ``s``.

    Repeated words are counted each time they appear.
    """
    positions = defaultdict(list)
    for index, char in enumerate(s):
        positions[char].append(index)

    def is_subsequence(word):
        next_free = 0
        for char in word:
            spots = positions.get(char)
            if not spots:
                return False
            found = bisect_left(spots, next_free)
            if found == len(spots):
                return False
            next_free = spots[found] + 1
        return True

    return sum(
        times for word, times in Counter(words).items() if is_subsequence(word)
    )


def length_of_longest_substring(s):
    """Return the length of the longest substring without repeated characters."""
    last_seen = {}
    start = 0
    longest = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        longest = max(longest, index + 1 - start)
    return longest


def _longest_with_distinct(s, k, limit):
    """Longest window with at most ``limit`` distinct characters, each
    occurring at least ``k`` times."""
    freq = Counter()
    left = 0
    distinct = 0
    at_least_k = 0
    longest = 0
    for right, char in enumerate(s):
        freq[char] += 1
        if freq[char] == 1:
            distinct += 1
        if freq[char] == k:
            at_least_k += 1
        while distinct > limit:
            dropped = s[left]
            freq[dropped] -= 1
            if freq[dropped] == 0:
                distinct -= 1
            if freq[dropped] == k - 1:
                at_least_k -= 1
            left += 1
        if distinct == at_least_k:
            longest = max(longest, right + 1 - left)
    return longest


def longest_substring_k_repeating(s, k):
    """Return the length of the longest substring in which every character
    occurs at least ``k`` times."""
    return max(
        (_longest_with_distinct(s, k, limit) for limit in range(1, len(set(s)) + 1)),
        default=0,
    )