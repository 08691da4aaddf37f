# dsakit

Five classic comparison sorts and a small set of elementary list operations.
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Sorting

`dsakit.sorting` has five sorts. Each one takes a mutable sequence, usually a
list, sorts it in place in ascending order, and returns the same object. The
elements only need to support `<`, `<=` and `>` against each other.

```python
from dsakit.sorting import (
    selection_sort,
    bubble_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
)

nums = [5, 2, 9, 1, 5, 6]
result = merge_sort(nums)
result        # [1, 2, 5, 5, 6, 9]
result is nums  # True
```

| Function         | How it works                                                            |
|------------------|-------------------------------------------------------------------------|
| `selection_sort` | Moves the smallest remaining element to the front, one position per pass |
| `bubble_sort`    | Swaps adjacent out-of-order pairs and stops after a pass with no swaps   |
| `insertion_sort` | Inserts each element into the already sorted prefix before it            |
| `merge_sort`     | Splits into halves, sorts each, and merges them. The sort is stable      |
| `quick_sort`     | Partitions each range around its first element and sorts both sides      |

`quick_sort` keeps its pending ranges on an explicit stack rather than
recursing, so already sorted input does not hit Python's recursion limit.

## List operations

`dsakit.arrays`:

```python
from dsakit.arrays import (
    linear_search,
    largest_element,
    largest_element_scan,
    second_largest_element,
    find_max_consecutive_ones,
    rotate_left_by_one,
    rotate_left,
    rotate_left_by_reversal,
)

linear_search([4, 7, 7, 2], 7)                 # 1 (first matching index)
linear_search([4, 7, 2], 9)                    # -1
largest_element([3, 8, 1])                     # 8
largest_element_scan([3, 8, 1])                # 8
second_largest_element([3, 8, 8, 1])           # 3
second_largest_element([5, 5])                 # -1 (no value below the maximum)
find_max_consecutive_ones([1, 1, 0, 1, 1, 1])  # 3

nums = [1, 2, 3, 4, 5]
rotate_left_by_one(nums)          # nums is now [2, 3, 4, 5, 1]
rotate_left(nums, 2)              # nums is now [4, 5, 1, 2, 3]
rotate_left_by_reversal(nums, 7)  # k is taken modulo len(nums): [1, 2, 3, 4, 5]
```

- `largest_element` uses the built-in `max`. `largest_element_scan` makes a
  single pass starting from the first element. Both raise `ValueError` for an
  empty sequence.
- `second_largest_element` returns `-1` when the sequence has fewer than two
  elements or when no value is strictly smaller than the maximum.
- `find_max_consecutive_ones` returns `0` when there are no 1s.
- The three rotations modify the list in place and return `None`. They raise
  `ValueError` for an empty list, and `rotate_left` and
  `rotate_left_by_reversal` also raise it for a negative `k`.
  `rotate_left_by_reversal` reaches the same result with three reversals:
  the whole list, then the first `n - k` elements, then the last `k`.

## Command line

```
dsakit-hello
```

This prints `Hello, World!` with no trailing newline. `python -m dsakit.basics`
does the same thing. The same text is available from `dsakit.basics.greeting()`.

The command takes no options. The package has no other commands.