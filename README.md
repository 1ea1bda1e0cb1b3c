# leetsolve

A small collection of well-known algorithm puzzles, each solved in plain
Python with the usual time and memory bounds. Every puzzle lives in its own
module and exposes a single function.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from leetsolve.two_sum import two_sum
from leetsolve.median import find_median_sorted_arrays
from leetsolve.palindrome import is_palindrome
from leetsolve.container import max_area
from leetsolve.remove_duplicates import remove_duplicates
from leetsolve.remove_element import remove_element

two_sum([2, 7, 11, 15], 9)                    # (0, 1)
two_sum([1, 2], 10)                           # None
find_median_sorted_arrays([1, 2], [3, 4])      # 2.5
is_palindrome(121)                             # True
max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])          # 49

nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
k = remove_duplicates(nums)                    # 5; nums == [0, 1, 2, 3, 4]

nums = [3, 2, 2, 3]
k = remove_element(nums, 3)                    # 2; nums == [2, 2]
```

## What is included

- `leetsolve.two_sum.two_sum(nums, target)`: finds indices `(i, j)` with
  `i < j` whose values add up to `target`, in one pass with a dictionary.
  It returns a tuple, or `None` when no pair exists.
- `leetsolve.median.find_median_sorted_arrays(nums1, nums2)`: gives the
  median of two ascending sequences as a `float`, by binary search over the
  shorter one, in O(log(min(m, n))). It raises `ValueError` when both
  sequences are empty or when the inputs are not sorted.
- `leetsolve.palindrome.is_palindrome(x)`: tells whether the decimal digits
  of an integer read the same backwards, reversing only half of the digits.
  Negative numbers are never palindromes.
- `leetsolve.container.max_area(height)`: finds the largest water container
  formed by two walls, using two pointers moving in from the ends. It returns
  0 when there are fewer than two walls.
- `leetsolve.remove_duplicates.remove_duplicates(nums)`: collapses runs of
  equal values in a sorted list in place, so the list then holds each
  distinct value once, and returns how many distinct values there are.
- `leetsolve.remove_element.remove_element(nums, val)`: removes every item
  equal to `val` from the list in place, keeping the order of the rest, and
  returns how many items remain.