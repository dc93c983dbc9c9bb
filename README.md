# algodrills

Small, tested solutions to classic programming exercises: array and number
puzzles, binary searches, a large set of singly linked-list manipulations,
and a few small data structures. Pure Python, no dependencies, Python 3.10+.

## Installation

From a checkout of the project:

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algodrills.nodes` | `ListNode`, `build_list`, `list_values` |
| `algodrills.arrays` | `return_to_boundary_count`, `average_value`, `get_concatenation`, `count_hill_valley`, `find_disappeared_numbers`, `find_gcd`, `find_lucky`, `find_missing_and_repeated_values`, `fizz_buzz`, `furthest_distance_from_origin`, `judge_circle` |
| `algodrills.basics` | `add`, `convert_temperature`, `max_depth`, `common_factors`, `is_palindrome_number`, `smallest_even_multiple`, `subtract_product_and_sum`, `is_three` |
| `algodrills.searching` | `search_range`, `find_min`, `single_non_duplicate`, `single_non_duplicate_xor` |
| `algodrills.arithmetic` | `add_two_numbers`, `add_two_numbers_forward`, `get_decimal_value` |
| `algodrills.inspection` | `has_cycle`, `detect_cycle`, `get_intersection_node`, `middle_node`, `is_palindrome_list`, `nodes_between_critical_points` |
| `algodrills.removal` | `delete_node`, `delete_middle`, `delete_duplicates`, `delete_all_duplicates`, `remove_elements`, `remove_nth_from_end`, `remove_zero_sum_sublists` |
| `algodrills.special` | `RandomNode`, `MultilevelNode`, `copy_random_list`, `flatten` |
| `algodrills.reversal` | `reverse_list`, `reverse_between`, `reverse_even_length_groups`, `reverse_k_group`, `swap_pairs`, `swap_nodes` |
| `algodrills.rearrange` | `rotate_right`, `reorder_list`, `odd_even_list`, `partition`, `insertion_sort_list`, `merge_in_between`, `merge_two_lists`, `split_list_to_parts` |
| `algodrills.browser` | `BrowserHistory` (`visit`, `back`, `forward`, `current`) |
| `algodrills.singly_list` | `MyLinkedList` (`get`, `add_at_head`, `add_at_tail`, `add_at_index`, `delete_at_index`) |
| `algodrills.lru` | `LRUCache` (`get`, `put`) |
| `algodrills.sampler` | `ListSampler` (`get_random`) |

## Linked lists

`ListNode` has a `val` and a `next`. Nodes compare by identity, and iterating
over a node yields the values from it to the end of the list.
`build_list(values)` builds a list from any iterable (an empty one gives
`None`), and `list_values(head)` reads it back as a Python list.

```python
from algodrills.nodes import build_list, list_values
from algodrills.reversal import reverse_list
from algodrills.arithmetic import add_two_numbers

head = build_list([1, 2, 3, 4])
print(list_values(reverse_list(head)))        # [4, 3, 2, 1]

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
print(list_values(total))                     # [7, 0, 8]
```

The functions in `removal`, `reversal`, `rearrange` and `special.flatten`
relink or modify the nodes they are given in place; build a fresh list with
`build_list` if the original is still needed. The functions in `inspection`
only read, and those in `arithmetic` return new lists.

Invalid arguments raise `ValueError`: for example `middle_node(None)`,
`delete_node` on a tail node, out-of-range positions in `reverse_between`,
`swap_nodes` and `merge_in_between`, or a non-positive `k` in
`split_list_to_parts`.

## Arrays and searching

```python
from algodrills.arrays import fizz_buzz
from algodrills.searching import search_range

print(fizz_buzz(5))                           # ['1', '2', 'Fizz', '4', 'Buzz']
print(search_range([5, 7, 7, 8, 8, 10], 8))   # [3, 4]
```

## Data structures

```python
from algodrills.lru import LRUCache
from algodrills.browser import BrowserHistory
from algodrills.sampler import ListSampler
from algodrills.nodes import build_list
import random

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)        # 1
cache.put(3, 3)     # evicts key 2
cache.get(2)        # -1

history = BrowserHistory("home.example.com")
history.visit("a.example.com")
history.back(1)     # 'home.example.com'

sampler = ListSampler(build_list([1, 2, 3]), rng=random.Random(0))
sampler.get_random()  # one of 1, 2, 3
```

`LRUCache` requires a positive capacity and supports `len()`. `MyLinkedList`
supports `len()` and iteration; out-of-range positions are ignored by its
mutating methods and give `-1` from `get`. `ListSampler` accepts an optional
`random.Random` for reproducible results and raises `ValueError` when
sampling from an empty list.

## What it does not do

This is a library only: it installs no command-line program, and nothing in
it reads or writes files.