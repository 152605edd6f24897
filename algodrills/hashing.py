"""Problems solved by counting or keying values in dictionaries."""

from collections import Counter, defaultdict
from itertools import product

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def four_sum_count(a, b, c, d):
    """Return how many index tuples pick one item from each list summing to 0."""
    pair_sums = Counter(x + y for x, y in product(a, b))
    return sum(pair_sums[-(x + y)] for x, y in product(c, d))


def is_isomorphic(s, t):
    """Return True if the characters of ``s`` map one-to-one onto ``t``."""
    if len(s) != len(t):
        return False
    forward = {}
    backward = {}
    for left, right in zip(s, t):
        if forward.setdefault(left, right) != right:
            return False
        if backward.setdefault(right, left) != left:
            return False
    return True


def roman_to_int(s):
    """Return the value of the Roman numeral ``s``; "" gives 0.

    Raises ``ValueError`` for a character that is not a Roman digit.
    """
    try:
        values = [_ROMAN_VALUES[char] for char in s]
    except KeyError as error:
        raise ValueError(f"not a Roman digit: {error.args[0]!r}") from None
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += -value if value < following else value
    return total


def _shift_key(word):
    if not word:
        return ()
    base = ord(word[0])
    return tuple((ord(char) - base) % 26 for char in word)


def group_strings(strings):
    """Group strings that are alphabet shifts of each other.

    Groups come in order of first appearance, strings keep input order.
    """
    groups = {}
    for word in strings:
        groups.setdefault(_shift_key(word), []).append(word)
    return list(groups.values())


def differ_by_one(words):
    """Return True if two of ``words`` differ in exactly one position."""
    seen = defaultdict(set)
    for word in words:
        for position, char in enumerate(word):
            pattern = (word[:position], word[position + 1:])
            others = seen[pattern]
            if others - {char}:
                return True
            others.add(char)
    return False