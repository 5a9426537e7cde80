# dsakit

A small collection of classic data-structure and algorithm exercises in plain
Python. There are no runtime dependencies.

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

### `dsakit.strings`

- `roman_to_int(s)`: converts a Roman numeral such as `"MCMXCIV"` to an integer (1994). It reads right to left; characters that are not upper-case Roman digits are ignored.
- `is_valid_parentheses(s)`: returns `True` when every opening `(`, `[` or `{` is closed. While a bracket is open, a closing character that does not match the innermost open bracket is skipped; any closing or other character met with no bracket open makes the string invalid.

### `dsakit.numbers`

- `is_ugly(n)`: `True` when `n` is positive and has no prime factor above 5 (trial division up to the square root).
- `is_ugly_by_division(n)`: `True` when dividing out 2, 3 and 5 leaves exactly 1; `0` is never ugly.
- `is_palindrome(x)`: `True` when the decimal digits of `x` read the same both ways; negative numbers never are.
- `is_palindrome_by_reversal(n)`: reverses the digits of `n`, keeping the sign, and compares; a negative number with palindromic digits counts as a palindrome.

### `dsakit.arrays`

- `subarrays(items)`: yields every contiguous sub-array as a list, ordered by start index, then end index.
- `subarrays_recursive(items)`: yields the same sub-arrays, ordered by end index, then start index.
- `max_subarray_sum(values)`: the largest sum of a non-empty contiguous sub-array, found by trying them all.
- `max_subarray_sum_kadane(values)`: the same result in one pass (Kadane's algorithm).

Both sum functions raise `ValueError` for an empty sequence.

### `dsakit.linked_list`

- `ListNode(val=0, next=None)`: a singly linked list node. Iterating over a node yields the values from that node to the end of the list.
- `from_iterable(values)` builds a list (`None` when empty), and `to_list(head)` turns one back into a Python list.
- `append(head, value)` adds a value at the end and returns the head (a new node when `head` is `None`).
- `reverse_list(head)` reverses a list in place and returns the new head.
- `remove_nodes(head)` removes, in place, every node that has a strictly greater value somewhere after it.
- `merge_two_lists(list1, list2)` splices two sorted lists into one sorted list; on equal values the node from `list1` comes first.
- `add_two_numbers(l1, l2)` adds two numbers whose digits are stored least significant first, returning a new list.

```python
from dsakit.linked_list import from_iterable, merge_two_lists, to_list

merged = merge_two_lists(from_iterable([1, 2, 4]), from_iterable([1, 3, 4]))
assert to_list(merged) == [1, 1, 2, 3, 4, 4]
```

### `dsakit.trees`

- `Node(data, left=None, right=None)`: a binary tree node.
- `pre_order(root)`, `in_order(root)` and `post_order(root)`: generators yielding values in depth-first order.
- `is_bst(root)`: `True` when the in-order values are strictly increasing.
- `search(root, key)`: `True` when `key` is in the binary search tree.
- `search_recursive(root, key)`: returns the node holding `key`, or `None`.
- `insert(root, value)`: adds `value` as a new leaf and returns the root (a new node when `root` is `None`); raises `ValueError` if the value is already present.

### `dsakit.heap`

`MaxHeap(values=(), capacity=999)` is a binary max-heap of integers with a fixed capacity. Use `push(value)` to add a value (raises `OverflowError` when full), `top()` to read the largest one, `pop()` to remove and return it (both raise `IndexError` on an empty heap), `items()` to get the values in heap order, and `len()` for the size.

```python
from dsakit.heap import MaxHeap

heap = MaxHeap([8, 9, 7, 6, 2, 10, 5])
assert heap.top() == 10
assert heap.pop() == 10
assert heap.top() == 9
```

## What it does not do

`dsakit` is a library only: it has no command-line program. The binary search
tree supports insertion and lookup but not deletion, and the tree and list
functions do not print or render structures; they return values and nodes.