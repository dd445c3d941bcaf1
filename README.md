# algonotes

A small collection of well-known array, string, matrix and linked-list
algorithms, written as plain Python functions. It has no dependencies
outside the standard library.

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

- `algonotes.hashing`
  - `two_sum(nums, target)`: indices of the first pair summing to `target`,
    or `[]` when there is none.
  - `longest_consecutive(nums)`: length of the longest run of consecutive integers.
  - `group_anagrams(strs)`: anagram groups, in the order their first word appears.
  - `subarray_sum(nums, k)`: number of contiguous subarrays summing to `k`.
- `algonotes.two_pointers`
  - `max_area(height)`: most water held between two walls.
  - `three_sum(nums)`: every distinct sorted triplet summing to zero.
  - `move_zeroes(nums)`: moves zeros to the end, in place.
  - `trap(height)`: rain water held by an elevation map.
- `algonotes.arrays`
  - `rotate(nums, k)`: rotates right by `k` steps, in place.
  - `product_except_self(nums)`: product of all other elements at each position.
  - `first_missing_positive(nums)`: smallest positive integer not present.
  - `max_sub_array(nums)`: largest sum of a non-empty contiguous subarray;
    raises `ValueError` on an empty list.
  - `merge_intervals(intervals)`: merges overlapping `[start, end]` pairs.
  - `find_median_sorted_arrays(nums1, nums2)`: median of two sorted sequences
    as a float; raises `ValueError` when both are empty.
- `algonotes.matrix`
  - `spiral_order(matrix)`: elements of a rectangular matrix in clockwise spiral order.
  - `set_zeroes(matrix)`: zeroes every row and column holding a zero, in place.
- `algonotes.windows`
  - `max_sliding_window(nums, k)`: maximum of each window of `k` elements;
    raises `ValueError` when `k < 1`.
  - `length_of_longest_substring(s)`: longest substring without repeated characters.
  - `find_anagrams(s, p)`: start indices of every anagram of `p` in `s`.
  - `min_window(s, t)`: shortest substring of `s` containing all of `t`
    (with multiplicity), or `""` when there is none.
- `algonotes.strings`
  - `longest_palindrome(s)`: longest palindromic substring.
  - `zigzag_convert(s, num_rows)`: zigzag writing of `s`, read row by row.
  - `reverse_integer(x)`: reverses the digits of a 32-bit signed integer,
    returning `0` when the result overflows; raises `ValueError` if `x` is
    outside the 32-bit range.
- `algonotes.linked_list`
  - `ListNode`: a dataclass node with `val` and `next`; iterating over a node
    yields the values from it to the end of the list.
  - `build_list(values)`: builds a list from an iterable, `None` when empty.
  - `add_two_numbers(l1, l2)`: adds two numbers stored least-significant digit first.

## Examples

```python
from algonotes.hashing import two_sum
from algonotes.two_pointers import trap
from algonotes.windows import max_sliding_window
from algonotes.strings import zigzag_convert
from algonotes.linked_list import build_list, add_two_numbers

two_sum([2, 7, 11, 15], 9)                      # [0, 1]
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])      # 6
max_sliding_window([7, 2, 4], 2)                # [7, 4]
zigzag_convert("PAYPALISHIRING", 3)             # "PAHNAPLSIIGYIR"

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
list(total)                                     # [7, 0, 8]
```

`rotate`, `move_zeroes` and `set_zeroes` change the list they are given in
place and return `None`, the same way `list.sort` does.

## What it does not do

The package is a library only: it has no command-line program, and it does
not read input from files or standard input.