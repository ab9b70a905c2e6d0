# arraykit

A small library of well-known algorithms on integer sequences and strings,
written as plain functions that take ordinary Python sequences and return
ordinary Python values. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `arraykit.sums`

- `two_sum(nums, target)` – a tuple `(i, j)` of indices, `i < j`, whose
  values add up to `target`; the first pair met scanning left to right.
  Returns `None` when there is no such pair.
- `three_sum(nums)` – every distinct triplet summing to zero, each in
  non-decreasing order.
- `four_sum(nums, target)` – every distinct quadruplet summing to `target`,
  each in non-decreasing order.
- `subarray_sum(nums, k)` / `subarray_sum_brute(nums, k)` – the number of
  contiguous, non-empty runs whose sum is `k` (prefix-sum counting, and a
  check of every run).

None of these modify their input.

### `arraykit.scans`

- `longest_consecutive(nums)` / `longest_consecutive_sorted(nums)` – length
  of the longest run of consecutive integers (set-based, and sort-based).
  Both return 0 for an empty sequence.
- `max_consecutive_ones(nums)` – length of the longest run of 1s.
- `max_product(nums)` – largest product of a contiguous run; raises
  `ValueError` for an empty sequence.
- `max_product_brute(nums)` – the same by trying every run; returns 0 for
  an empty sequence.
- `max_subarray(nums)` – largest sum of a contiguous run (Kadane's
  algorithm); raises `ValueError` for an empty sequence.
- `missing_number(nums)` – the one value of `0..len(nums)` that is absent.

### `arraykit.rearrange`

- `move_zeroes(nums)` – moves every zero to the end in place, keeping the
  order of the other values.
- `rearrange_by_sign(nums)` – a new list alternating non-negative and
  negative values, starting with a non-negative one and keeping each sign's
  order; raises `ValueError` if the two counts differ.
- `remove_duplicates(nums)` – moves the distinct values of a sorted list to
  its front in place and returns how many there are; later positions are
  left as they were.
- `remove_duplicates_brute(nums)` – deletes repeated values of a sorted list
  in place and returns the new length.
- `rotate(nums, k)` – rotates right by `k` steps in place; raises
  `ValueError` for a negative `k`.
- `is_sorted_and_rotated(nums)` – whether the sequence is a non-decreasing
  sequence rotated by some amount; `False` for an empty sequence.
- `merge_intervals(intervals)` – merges overlapping `[start, end]` intervals
  (touching end points count as overlapping), sorted by start.

### `arraykit.strings`

- `reverse_words(s)` – the space-separated words in reverse order, joined by
  single spaces; raises `ValueError` when `s` holds no words.
- `is_palindrome(s)` – compares only ASCII letters and digits, ignoring
  case.

### `arraykit.search`

- `search_insert(nums, target)` – index of `target` in a sorted sequence, or
  where it would be inserted.
- `search_range(nums, target)` – tuple of the first and last index of
  `target`, or `(-1, -1)`.
- `search_rotated(nums, target)` – index of `target` in a rotated sorted
  sequence, or -1.
- `find_min_rotated(nums)` – smallest value of a rotated sorted sequence of
  distinct values; raises `ValueError` when empty.
- `single_non_duplicate(nums)` – the unpaired value of a sorted sequence in
  which every other value appears twice; raises `ValueError` when empty.
- `min_eating_speed(piles, h)` – the slowest whole speed that clears all
  piles within `h` hours (the largest pile's size if none does); raises
  `ValueError` for no piles.

## Example

```python
from arraykit.sums import three_sum
from arraykit.scans import max_subarray
from arraykit.search import search_range

three_sum([-1, 0, 1, 2, -1, -4])   # [[-1, -1, 2], [-1, 0, 1]]
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
search_range([5, 7, 7, 8, 8, 10], 8)   # (3, 4)
```

## What it does not do

The package is a library only: it installs no command-line tool, and the
functions work on in-memory sequences without reading or writing files.