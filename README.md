# algokit

A collection of classic algorithms written in plain Python. It has no
runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Modules

- `algokit.arrays` holds single-pass and greedy computations over integer
  sequences. It includes `trap`, `max_subarray`, `max_profit`,
  `max_profit_unlimited`, `single_number`, `majority_element`,
  `majority_elements_third`, `rotate`, `contains_duplicate`, `missing_number`,
  `content_children`, `lemonade_change`, `min_increment_for_unique`,
  `sorted_squares`, `shuffle`, `identical_pairs`, `chalk_replacer`,
  `sort_people`, `is_special`, `special_queries`, `max_score`,
  `results_array`, `max_energy_boost`, `final_state`, `sneaky_numbers` and
  `stable_mountains`.
- `algokit.two_pointers` holds two-pointer techniques. It includes `three_sum`,
  `four_sum`, `two_sum_sorted`, `remove_duplicates`,
  `remove_duplicates_keep_two`, `sort_colors`, `merge_sorted`, `move_zeroes`,
  `reverse_in_place`, `intersect`, `is_subsequence`, `append_characters`,
  `min_swaps_to_balance` and `minimum_steps`.
- `algokit.searching` holds binary searches. It includes `binary_search`,
  `search_rotated`, `search_range`, `search_matrix`, `search_sorted_matrix`,
  `find_min_rotated`, `find_peak_element`, `is_perfect_square`,
  `single_non_duplicate` and `is_sum_of_two_squares`.
- `algokit.matrices` holds operations on grids stored as lists of rows:
  `rotate_image`, `spiral_order`, `transpose`, `satisfies_conditions` and
  `final_snake_position`.
- `algokit.strings` holds string counting and rewriting. It includes
  `is_anagram`, `longest_palindrome`, `min_add_to_make_valid`, `defang_ip`,
  `get_lucky`, `count_seniors`, `min_length`, `score_of_string`,
  `string_hash`, `count_k_constraint_substrings`, `same_square_color`,
  `almost_equal` and `count_almost_equal_pairs`.
- `algokit.arithmetic` holds small numeric helpers: `convert_temperature`,
  `difference_of_sums` and `generate_key`.
- `algokit.linked` provides the `ListNode` class and the linked-list
  operations `list_length`, `swap_pairs`, `reverse_k_group`, `rotate_right`,
  `delete_duplicates`, `is_palindrome`, `delete_middle` and `remove_values`.
- `algokit.trees` provides the `TreeNode` class and the binary-tree operations
  `is_same_tree`, `is_symmetric`, `level_order`, `is_balanced`, `min_depth`,
  `flatten`, `postorder_traversal`, `lowest_common_ancestor`, `diameter`,
  `max_width` and `vertical_traversal`.

## Examples

```python
from algokit.two_pointers import three_sum
from algokit.searching import binary_search
from algokit.linked import ListNode, swap_pairs
from algokit.trees import TreeNode, level_order

three_sum([-1, 0, 1, 2, -1, -4])        # [[-1, -1, 2], [-1, 0, 1]]
binary_search([-1, 0, 3, 5, 9, 12], 9)  # 4

head = ListNode.from_values([1, 2, 3, 4])
swap_pairs(head).to_list()              # [2, 1, 4, 3]

root = TreeNode.from_level_order([3, 9, 20, None, None, 15, 7])
level_order(root)                       # [[3], [9, 20], [15, 7]]
```

`ListNode.from_values` builds a list from any iterable and returns `None` for
an empty one. A `ListNode` can be iterated over for its values, and
`to_list` returns them as a list. `TreeNode.from_level_order` builds a tree from
level-order values, where `None` marks a missing child.

## In-place operations

Some functions modify their input in place and return `None`. These are
`sort_colors`, `move_zeroes`, `reverse_in_place`, `merge_sorted`, `rotate`,
`rotate_image` and `flatten`. The linked-list operations relink the nodes they
are given. `remove_duplicates` and `remove_duplicates_keep_two` shorten the
sequence in place and return its new length.

## Errors

Where an input has no meaningful answer, a `ValueError` is raised. Some
examples follow:

- `two_sum_sorted` raises it when no two entries add up to the target.
- `find_min_rotated`, `find_peak_element`, `single_non_duplicate`,
  `max_subarray`, `max_profit` and `majority_element` raise it on an empty
  sequence.
- `reverse_k_group` and `results_array` raise it for a group or window size
  below 1.
- `string_hash` raises it for a length that is not a multiple of the block
  size.

## Scope

This is a library only. It has no command-line program, and it does not read
or write files.

## Running the tests

```
pytest
```