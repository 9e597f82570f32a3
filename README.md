# algobook

Solutions to well-known algorithm problems, grouped by topic, together with a
2048 game played in the terminal and a command that regenerates a problem
table inside a README file. Pure Python, no dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The problems

Each topic is a module of plain functions over Python lists, strings and
small node classes:

| Module | Contents |
| --- | --- |
| `algobook.arrays_hashing` | `two_sum`, `is_valid_sudoku`, `group_anagrams`, `longest_consecutive`, `contains_duplicate`, `product_except_self`, `is_anagram`, `top_k_frequent` |
| `algobook.two_pointers` | `max_area`, `three_sum`, `trap`, `two_sum_sorted`, `move_zeroes`, `str_str` |
| `algobook.sliding_window` | `length_of_longest_substring`, `min_window`, `max_sliding_window`, `character_replacement`, `check_inclusion` |
| `algobook.stack` | `largest_rectangle_area`, `eval_rpn`, `daily_temperatures`, `car_fleet`, `generate_parenthesis`, `MinStack` |
| `algobook.binary_search` | `find_median_sorted_arrays`, `search_rotated`, `search_matrix`, `find_min`, `binary_search`, `min_eating_speed`, `TimeMap` |
| `algobook.intervals` | `Interval`, `merge_intervals`, `insert_interval`, `erase_overlap_intervals`, `min_meeting_rooms`, `can_attend_meetings` |
| `algobook.linked_list` | `reverse_list`, `reverse_between`, `reverse_k_group`, `merge_two_lists`, `merge_k_lists`, `reorder_list`, `rotate_right`, `remove_nth_from_end`, `delete_duplicates`, `add_two_numbers`, `has_cycle`, `find_duplicate`, `copy_random_list` with `RandomNode` |
| `algobook.lru_cache` | `LRUCache` |
| `algobook.tries` | `Trie`, `WordDictionary` (with `.` as a wildcard), `find_words` on a letter board |
| `algobook.trees` | traversals, depth, balance, path sums, BST checks, subtree tests, rebuilding from preorder and inorder |
| `algobook.tree_codec` | `serialize` / `deserialize` for binary trees |
| `algobook.bits` | `reverse_integer`, `single_number`, `reverse_bits`, `hamming_weight`, `missing_number`, `count_bits`, `get_sum` |
| `algobook.codec` | `encode` / `decode`: length-prefixed packing of a list of strings |
| `algobook.coderbyte` | `first_factorial`, `longest_word` |

Invalid input raises `ValueError` (or `IndexError` for reading an empty
`MinStack`) rather than returning a sentinel, except where a sentinel is part
of the problem, such as `-1` from `binary_search` or `LRUCache.get`.

Linked lists and trees are built and read with the helpers in
`algobook.structures` (`ListNode`, `TreeNode`, `list_from_values`,
`values_of_list`, `tree_from_level_order`, `tree_to_level_order`):

```python
from algobook.structures import list_from_values, values_of_list, tree_from_level_order
from algobook.linked_list import reverse_list
from algobook.trees import level_order
from algobook.two_pointers import trap
from algobook.codec import encode, decode
from algobook.lru_cache import LRUCache

values_of_list(reverse_list(list_from_values([1, 2, 3])))  # [3, 2, 1]
level_order(tree_from_level_order([3, 9, 20, None, None, 15, 7]))  # [[3], [9, 20], [15, 7]]
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])                 # 6
decode(encode(["say", ":", "yes"]))                        # ['say', ':', 'yes']

cache = LRUCache(2)
cache.put(1, 1)
cache.get(1)   # 1
cache.get(7)   # -1
```

## 2048

```
algobook-2048 [--seed N]
```

The game first asks for the board size, which must be an integer greater
than 1, and asks again until it gets one. It then reads one key per line:
`w` (up), `s` (down), `a` (left), `d` (right); other lines are ignored. After
each move the board is printed. The game stops with "You Win!" once a tile
reaches 2048, with "You lose!" when no move can change the board, or when
input runs out. `--seed` makes the random tiles repeatable.

A new game places `size // 2` random tiles; after every move one more tile,
a 2 (three times in four) or a 4, lands in a random empty cell.

The game can also be driven from code with `algobook.game2048.GameHandler`:

```python
import random
from algobook.game2048 import GameHandler
from algobook.game2048_enums import Action

game = GameHandler(random.Random(7))
game.new_game(4)
game.process(Action.LEFT)   # slide, merge, slide, then add a random tile
print(game.score_text())
print(game.board_text())
game.check_win(), game.check_available()
```

`slide(action)` performs a move without adding a tile, and
`new_default_game()` loads a fixed 4x4 board, which is handy for testing.

## README problem-list generator

```
algobook-readme update-readme [--neetcode-dir DIR] [--readme FILE]
```

The action may also be given in the `ACTION` environment variable
(`ACTION=update-readme algobook-readme`). `DIR` defaults to `../neetcode` and
`FILE` to `../README.md`.

Every `.go` file in `DIR` (test files ending in `_test.go` excepted) is named
like `0001-two-sum.go` and may start with a tag line such as

```
// tags: arrays&hashing, star3, easy, practice-count:2
```

The first tag is the topic and must be one of the known topics (arrays&hashing,
two-pointers, sliding-window, stack, binary-search, linked-list, trees, tries,
heap(priority-queue), backtracking, graphs, advanced-graphs, 1d-dp, 2d-dp,
greedy, intervals, math&geometry, bit-manipulation, todo); otherwise
`algobook.readme_files.TagFormatError` is raised. `starN`, `easy`/`medium`/`hard`
and `practice-count:N` set the star rating, difficulty and practice count;
any other tags are listed as they are. Files without a tag line go under
`todo`.

The rendered Markdown, one table per topic in the order above, replaces
whatever lies between the `<!-- leetcode list start -->` and
`<!-- leetcode list end -->` markers in `FILE`; if the markers are missing,
`ValueError` is raised. The pieces are usable on their own:
`readme_files.FileRepo`, `readme_usecase.render_leetcode_list`,
`readme_writer.ReadMeWriter` and `readme_usecase.AlgoUseCase`.

## What is not included

- There are no modules for backtracking, graph, heap or dynamic-programming
  problems, even though the README generator knows those topics.
- The 2048 game has only the line-based terminal interface described above;
  there is no graphical or browser front end.