# leetsolve

Solutions to well-known algorithm exercises, written as plain Python functions
and one small class. Useful for studying, comparing approaches, or checking
your own answers. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

The tests use pytest, available through the `test` extra:

```
pip install ".[test]"
pytest
```

## Contents

### `leetsolve.linked_list`

- `ListNode` — a singly linked list node, a dataclass with `val` and `next`.
- `add_two_numbers(l1, l2)` — add two numbers stored as little-endian digit
  lists; a shorter list counts as padded with zeros. Returns a new list and
  leaves the inputs untouched.
- `merge_two_lists(list1, list2)` — merge two sorted lists into a sorted list.
  On equal values the node from `list2` comes first; the leftover tail of the
  longer list is attached as it is.
- `reverse_list(head)` — reverse a list in place and return the new head.

### `leetsolve.tree`

- `TreeNode` — a binary tree node, a dataclass with `val`, `left` and `right`.
- `inorder_traversal(root)` — values in in-order sequence.
- `is_symmetric(root)` — whether the tree mirrors itself (an empty tree does).
- `max_depth(root)` — number of nodes on the longest root-to-leaf path.
- `sorted_array_to_bst(nums)` — height-balanced search tree from a sorted list;
  a two-element list gives the first value as root with the second on its right.
- `right_side_view(root)` — the rightmost value at each level, top to bottom.
- `invert_tree(root)` — a new tree that is the mirror of the given one.

### `leetsolve.min_stack`

- `MinStack` — a stack of integers with `push`, `pop`, `top` and constant-time
  `get_min`. `len()` gives the number of values held. `pop`, `top` and
  `get_min` raise `IndexError` on an empty stack.

### `leetsolve.strings`

- `length_of_longest_substring(s)` — length of the longest run of characters
  with no repeats, in one pass.
- `length_of_longest_substring_slow(s)` — the same, by checking every start.
- `is_valid(s)` — whether the brackets `()[]{}` are balanced and correctly
  nested; any other character makes the string invalid. The empty string is valid.

### `leetsolve.arrays`

- Trapping rain water, three ways: `trap` (left-to-right scan),
  `trap_on_memory` (prefix maxima) and `trap_o1_memory` (two pointers).
- `my_sqrt(x)` — integer square root by binary search; any `x` below 2 gives 1.
- `climb_stairs(n)` — ways to climb `n` steps taking 1 or 2 at a time.
- `sort_colors(nums)` — sort a list of 0s, 1s and 2s in place; any other
  value raises `ValueError`.
- `max_profit(prices)` and `max_profit_simple(prices)` — best profit from one
  buy followed by one sell, or 0.
- `single_number(nums)` — the value that appears exactly once; raises
  `ValueError` if there is none.
- `two_sum2(numbers, target)` — 1-based positions of two entries of a sorted
  list that sum to `target`; raises `ValueError` if there are none.
- `majority_element(nums)` — the majority value by the Boyer–Moore vote.

### `leetsolve.grid`

- `is_valid_sudoku(board)` — whether no digit repeats in any row, column or
  3×3 box of a 9×9 board of one-character strings; anything other than `"1"`
  to `"9"` counts as an empty cell.
- `rotate(matrix)` — rotate a square matrix a quarter turn clockwise, in place.
- `num_islands(grid)` — count groups of `"1"` cells joined side to side. The
  grid is modified: every land cell is turned into `"0"`.
- `flood_fill(image, sr, sc, color)` — repaint the region around `(sr, sc)`
  that shares its colour, in place, and return the image.
- `transpose(matrix)` — the transpose as a new list of lists.

## Example

```python
from leetsolve.arrays import trap_o1_memory
from leetsolve.min_stack import MinStack

print(trap_o1_memory([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]))  # 6

stack = MinStack()
stack.push(-2)
stack.push(0)
stack.push(-3)
print(stack.get_min())  # -3
stack.pop()
print(stack.top(), stack.get_min())  # 0 -2
```

## What it does not do

This is a library of functions only: it has no command-line program and keeps
no data between calls.