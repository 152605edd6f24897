"""Grouping, parsing and comparing strings."""

from collections import Counter
from functools import cmp_to_key
from itertools import takewhile
from os.path import commonprefix

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_DIGITS = "0123456789"
_BRACKETS = {")": "(", "]": "[", "}": "{"}


def group_anagrams(strs):
    """Group words that are anagrams of each other.

    Groups come in order of first appearance, words keep their input order.
    """
    groups = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def _concat_order(left, right):
    joined, swapped = left + right, right + left
    if joined > swapped:
        return -1
    if joined < swapped:
        return 1
    return 0


def largest_number(nums):
    """Return the largest number, as a string, made by concatenating ``nums``."""
    if not nums:
        return ""
    ordered = sorted(map(str, nums), key=cmp_to_key(_concat_order))
    return "".join(ordered).lstrip("0") or "0"


def longest_common_prefix(strs):
    """Return the longest prefix shared by every string, "" for none."""
    return commonprefix(list(strs))


def longest_str_chain(words):
    """Return the length of the longest chain in which each word is the
    previous one with a single letter added."""
    chain = {}
    longest = 0
    for word in sorted(words, key=len):
        best = max(
            chain.get(word[:i] + word[i + 1:], 0) + 1 for i in range(len(word))
        ) if word else 1
        chain[word] = max(chain.get(word, 0), best)
        longest = max(longest, best)
    return longest


def is_anagram(s, t):
    """Return True if ``t`` uses exactly the characters of ``s``."""
    return Counter(s) == Counter(t)


def my_atoi(s):
    """Parse a leading signed integer the way C ``atoi`` does, clamped to
    the 32-bit signed range; 0 when there is none."""
    text = s.lstrip(" ")
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = "".join(takewhile(lambda char: char in _DIGITS, text))
    value = sign * int(digits or "0")
    return max(_INT_MIN, min(_INT_MAX, value))


def decode_string(s):
    """Expand ``k[text]`` repetitions, nested to any depth."""
    stack = [["", 1]]
    times = 0
    for char in s:
        if char in _DIGITS:
            times = times * 10 + int(char)
        elif char == "[":
            stack.append(["", times])
            times = 0
        elif char == "]":
            if len(stack) == 1:
                raise ValueError("unmatched ']' in encoded string")
            text, repeat = stack.pop()
            stack[-1][0] += text * repeat
        else:
            stack[-1][0] += char
    if len(stack) > 1:
        raise ValueError("unclosed '[' in encoded string")
    return stack[0][0]


def is_valid_parentheses(s):
    """Return True if every bracket in ``s`` is closed in the right order.

    Any character that is not a bracket makes the string invalid.
    """
    opened = []
    for char in s:
        if char in "([{":
            opened.append(char)
        elif opened and _BRACKETS.get(char) == opened[-1]:
            opened.pop()
        else:
            return False
    return not opened