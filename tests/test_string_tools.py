from itertools import permutations

import pytest

from algodrills.string_tools import (
    decode_string,
    group_anagrams,
    is_anagram,
    is_valid_parentheses,
    largest_number,
    longest_common_prefix,
    longest_str_chain,
    my_atoi,
)


def test_group_anagrams_partitions_input():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    groups = group_anagrams(words)
    assert sorted(w for group in groups for w in group) == sorted(words)
    keys = [{"".join(sorted(w)) for w in group} for group in groups]
    assert all(len(key) == 1 for key in keys)
    assert len({next(iter(key)) for key in keys}) == len(groups)


def test_group_anagrams_order_of_first_appearance():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    groups = group_anagrams(words)
    assert [group[0] for group in groups] == ["eat", "tan", "bat"]
    assert groups[0] == ["eat", "tea", "ate"]


def test_group_anagrams_empty():
    assert group_anagrams([]) == []


def test_largest_number_pinned():
    assert largest_number([3, 30, 34, 5, 9]) == "9534330"


@pytest.mark.parametrize("nums", [[10, 2], [3, 30, 34, 5, 9], [121, 12], [8, 89, 898]])
def test_largest_number_beats_every_order(nums):
    result = largest_number(nums)
    candidates = {"".join(map(str, order)) for order in permutations(nums)}
    assert result in candidates
    assert int(result) == max(int(c) for c in candidates)


def test_largest_number_all_zeros():
    assert largest_number([0, 0, 0]) == "0"


def test_largest_number_empty():
    assert largest_number([]) == ""


@pytest.mark.parametrize(
    "strs", [["flower", "flow", "flight"], ["dog", "racecar", "car"], ["same", "same"], ["a"]]
)
def test_longest_common_prefix_is_maximal(strs):
    prefix = longest_common_prefix(strs)
    assert all(s.startswith(prefix) for s in strs)
    n = len(prefix)
    assert any(len(s) == n for s in strs) or len({s[n] for s in strs}) > 1


def test_longest_common_prefix_empty_list():
    assert longest_common_prefix([]) == ""


def test_longest_str_chain_pinned():
    assert longest_str_chain(["a", "b", "ba", "bca", "bda", "bdca"]) == 4


def test_longest_str_chain_full_ladder():
    words = ["abcde", "a", "abcd", "ab", "abc"]
    assert longest_str_chain(words) == len(words)


def test_longest_str_chain_unrelated_words():
    assert longest_str_chain(["abcd", "dbqca"]) == 1


def test_longest_str_chain_empty():
    assert longest_str_chain([]) == 0


@pytest.mark.parametrize("s", ["anagram", "listen", ""])
def test_is_anagram_of_reversal(s):
    assert is_anagram(s, s[::-1]) is True


@pytest.mark.parametrize("s, t", [("rat", "car"), ("aab", "abb"), ("a", "aa")])
def test_is_anagram_rejects(s, t):
    assert is_anagram(s, t) is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("+17", 17),
        ("4193 with words", 4193),
        ("words and 987", 0),
        ("", 0),
        ("   ", 0),
        ("+-12", 0),
        ("-0012a42", -12),
    ],
)
def test_my_atoi(text, expected):
    assert my_atoi(text) == expected


def test_my_atoi_clamps():
    assert my_atoi("91283472332") == 2**31 - 1
    assert my_atoi("-91283472332") == -(2**31)
    assert my_atoi("2147483647") == 2**31 - 1
    assert my_atoi("-2147483648") == -(2**31)


def test_decode_string_pinned():
    assert decode_string("3[a]2[bc]") == "aaabcbc"


def test_decode_string_plain_text_unchanged():
    assert decode_string("abcdef") == "abcdef"


@pytest.mark.parametrize("times, text", [(1, "x"), (4, "ab"), (12, "q")])
def test_decode_string_single_repeat(times, text):
    assert decode_string(f"{times}[{text}]") == text * times


def test_decode_string_nested():
    assert decode_string("2[a3[b]]") == ("a" + "b" * 3) * 2


@pytest.mark.parametrize("encoded", ["2[a", "a]", "3[b]]"])
def test_decode_string_malformed(encoded):
    with pytest.raises(ValueError):
        decode_string(encoded)


@pytest.mark.parametrize(
    "s, expected",
    [
        ("()", True),
        ("()[]{}", True),
        ("{[()]}", True),
        ("", True),
        ("(]", False),
        ("([)]", False),
        ("(", False),
        (")", False),
        ("(a)", False),
    ],
)
def test_is_valid_parentheses(s, expected):
    assert is_valid_parentheses(s) is expected