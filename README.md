# algodrills

Classic algorithm and data-structure routines written in plain Python, with
no runtime dependencies. It is a library only: there is no command-line tool.

## Installation

```
pip install algodrills
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "algodrills[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algodrills.stocks` | `max_profit`, `max_profit_unlimited` |
| `algodrills.ksum` | `two_sum`, `three_sum`, `four_sum` |
| `algodrills.intervals` | `merge_intervals`, `min_meeting_rooms` |
| `algodrills.arrays` | `merge_sorted`, `move_zeroes`, `next_permutation`, `product_except_self`, `first_missing_positive`, `kth_largest`, `longest_consecutive`, `majority_element`, `majority_element_split`, `single_number`, `trap_rain_water` |
| `algodrills.randomized_set` | `RandomizedSet` with `insert`, `remove` and `get_random` in O(1) |
| `algodrills.text_search` | `find_replace_string`, `str_str`, `min_window`, `num_matching_subseq`, `length_of_longest_substring`, `longest_substring_k_repeating` |
| `algodrills.string_tools` | `group_anagrams`, `largest_number`, `longest_common_prefix`, `longest_str_chain`, `is_anagram`, `my_atoi`, `decode_string`, `is_valid_parentheses` |
| `algodrills.justify` | `full_justify` |
| `algodrills.structures` | `HashMap`, `LRUCache`, `Logger`, `DetectSquares` |
| `algodrills.geometry` | `max_points`, `min_area_rect` |
| `algodrills.hashing` | `four_sum_count`, `is_isomorphic`, `roman_to_int`, `group_strings`, `differ_by_one` |
| `algodrills.linked` | `ListNode`, `RandomNode`, `build_list`, `list_values`, `copy_random_list`, `pair_sum`, `merge_k_lists` |
| `algodrills.trees` | `TreeNode`, `connect`, `max_path_sum`, `build_tree`, `kth_smallest`, `get_directions`, `serialize`, `deserialize`, `find_duplicate_subtrees` |
| `algodrills.trie` | `Trie`, `word_break`, `find_words` |
| `algodrills.graphs` | `Employee`, `can_finish`, `get_importance`, `num_islands` |
| `algodrills.backtracking` | `subsets`, `solve_sudoku`, `exist` |
| `algodrills.greedy` | `candy`, `max_nice_divisors` |

## Examples

```python
from algodrills.ksum import two_sum, three_sum
from algodrills.string_tools import decode_string, my_atoi
from algodrills.structures import LRUCache
from algodrills.trees import build_tree, serialize

two_sum([2, 7, 11, 15], 9)        # (0, 1)
two_sum([1, 2], 10)               # None
three_sum([-1, 0, 1, 2, -1, -4])  # [[-1, -1, 2], [-1, 0, 1]]

decode_string("3[a]2[bc]")        # "aaabcbc"
my_atoi("   -42")                 # -42

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                      # 1
cache.put(3, 3)                   # evicts key 2
cache.get(2)                      # -1

root = build_tree([3, 9, 20, 15, 7], [9, 3, 15, 20, 7])
serialize(root)                   # "3,9,20,null,null,15,7,null,null,null,null"
```

## Notes on behaviour

- `merge_sorted`, `move_zeroes`, `next_permutation` and `solve_sudoku` change
  the list they are given; `merge_k_lists` relinks the nodes of its input
  lists.
- `HashMap.get` and `LRUCache.get` return `-1` for a missing key.
- Invalid input raises `ValueError` where there is no sensible answer: for
  example `kth_largest` with `k` out of range, `majority_element_split` with no
  majority, `roman_to_int` with a non-Roman character, `full_justify` with a
  word wider than the line, `decode_string` with unbalanced brackets, and
  `solve_sudoku` for a malformed, conflicting or unsolvable board.
  `get_importance` raises `KeyError` for an unknown id, and
  `RandomizedSet.get_random` raises `IndexError` on an empty set.