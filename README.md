# dsakit

A small library of classic data-structure and algorithm routines, written
as plain functions and classes over Python's own lists and objects. It has
no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.arrays`

- `min_max`, `largest`, `second_largest` - extremes of a sequence.
  `second_largest` returns the largest value strictly below the maximum.
- `rotate_left_by_one`, `rotate_right(values, k)` - return rotated copies.
- `max_subarray_sum(values, clamp_to_zero=False)` - Kadane's algorithm;
  with `clamp_to_zero` a negative best sum (or an empty input) gives 0.
- `longest_subarray_with_sum(values, k)` - sliding window, meant for
  non-negative values.
- `trapped_water`, `trapped_water_two_pointer` - rain water trapped by an
  elevation map.
- `candy`, `candy_constant_space` - fewest candies so that a higher-rated
  child gets more than its neighbours.
- `median_of_sorted(first, second)` - median of the two sequences combined.
- `count_good_pairs` - number of index pairs with equal values.
- `three_sum` - distinct triplets summing to zero.
- `n_choose_r`, `pascal_element(row, col)` - binomial coefficients and
  1-based Pascal's triangle entries.
- `allocate_pages(pages, students)`, `allocate_pages_brute_force`,
  `is_feasible(pages, students, limit)` - book allocation: minimise the
  largest contiguous run of pages any student reads.

### `dsakit.sorting`

- `bubble_sort`, `quick_sort` - return sorted copies; `partition` is the
  in-place last-element-pivot step used by quick sort.
- `merge_in_place(first, second)` - gap-method merge of two sorted lists,
  leaving the smallest elements in `first`; `next_gap` is its gap step.
- `merge_sorted(first, second)` - ordinary merge into a new list.

### `dsakit.lookup`

- `two_repeated` - the two repeated values, in the order their second
  copies appear.
- `two_sum(values, target)` - indices `(later, earlier)` of a pair adding up
  to `target`, or `None`.
- `is_anagram`, `is_symmetric(matrix)`, `can_make_palindrome(words)`.

### `dsakit.stacks`

- `next_greater_elements` - the next larger element to the right, or -1.
- `insert_at_bottom(stack, item)`, `reverse_stack(stack)` - work on a list
  used as a stack (top at the end), in place.
- `LinkedStack` - `push`, `pop`, `peek`, `is_empty`, iteration from top to
  bottom, `len()`, and `str()` as `"top -> ... -> bottom"`.
- `LinkedQueue` - `enqueue`, `dequeue`, `front`, `rear`, `is_empty`,
  iteration from front to rear, and `len()`.

### `dsakit.binary_tree`

- `TreeNode` with `data`, `left`, `right`.
- Building: `build_tree(text)` from space-separated level-order values with
  `N` for a gap; `build_level_order(values, missing=-1)`;
  `tree_from_values` where 0 marks an empty slot (using
  `insert_skipping_zeros` and `prune_zero_nodes`); `insert_complete`;
  `tree_from_preorder_inorder`, `tree_from_postorder_inorder`.
- Traversals returning lists: `preorder`, `inorder`, `postorder`,
  `level_order`.
- `to_doubly_linked_list(root)` relinks the tree in place in in-order
  sequence and returns the head; `iter_doubly_linked(head)` yields its values.
- `is_same_tree`, `has_duplicate_values`, `max_path_sum`.

### `dsakit.nary_tree`

- `NaryNode` with `data` and `children`.
- `read_level_wise(tokens)` - root value, then for each node in
  breadth-first order a child count and the child values.
- `max_data_node(root)` - the node with the largest value.

### `dsakit.bst`

Works on `TreeNode` trees. `insert` (equal values go left), `from_values`,
`height`, `levels`, `is_balanced_at_root`, `find_ceil`, `find_floor`,
`lowest_common_ancestor(root, first, second)` and
`has_pair_with_sum(root, target)`.

### `dsakit.avl`

`AvlNode` with a stored `height`; `height`, `balance_factor`,
`rotate_left`, `rotate_right`, `insert` (rebalancing, duplicates ignored),
`min_node`, `delete` and `inorder`. `delete` removes a value as in a plain
search tree and does not rebalance afterwards.

## Examples

```python
from dsakit.arrays import max_subarray_sum, trapped_water
from dsakit.sorting import quick_sort
from dsakit.stacks import LinkedStack
from dsakit.binary_tree import build_tree, inorder
from dsakit import avl

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
quick_sort([24, 9, 29, 14, 19, 27])                  # [9, 14, 19, 24, 27, 29]

stack = LinkedStack()
for item in (11, 22, 33, 44):
    stack.push(item)
str(stack)   # "44 -> 33 -> 22 -> 11"

root = build_tree("1 2 3 N 4")
inorder(root)  # [2, 4, 1, 3]

tree = None
for value in (4, 7, 6, 0, 2, 1, 8):
    tree = avl.insert(tree, value)
avl.inorder(tree)  # [0, 1, 2, 4, 6, 7, 8]
```

## Errors and missing results

Input that has no meaningful answer raises an exception: for example
`largest([])` raises `ValueError` and popping or peeking an empty
`LinkedStack` raises `IndexError`. Where "nothing found" is an ordinary
outcome the result is `None` instead: `two_sum` with no matching pair,
`find_ceil` / `find_floor` with no such value, and `LinkedQueue.dequeue`,
`front` and `rear` on an empty queue.

## What it does not do

dsakit is a library only. It has no command-line program and reads nothing
from standard input; every routine is called from Python with ordinary
lists, strings and node objects.