"""Single-pass scans over integer sequences: runs, products, sums and gaps."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, groupby, pairwise
from operator import mul


def longest_consecutive(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in ``nums``.

    Uses a set and only counts upward from values that start a run.
    """
    values = set(nums)
    best = 0
    for value in values:
        if value - 1 in values:
            continue
        end = value
        while end in values:
            end += 1
        best = max(best, end - value)
    return best


def longest_consecutive_sorted(nums: Sequence[int]) -> int:
    """Return the same result as :func:`longest_consecutive` by sorting first."""
    if not nums:
        return 0
    run = best = 1
    for previous, current in pairwise(sorted(nums)):
        if current == previous + 1:
            run += 1
        elif current != previous:
            run = 1
        best = max(best, run)
    return best


def max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s in ``nums``."""
    return max(
        (sum(1 for _ in run) for is_one, run in groupby(nums, key=lambda v: v == 1) if is_one),
        default=0,
    )


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a contiguous, non-empty run of ``nums``.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("max_product() needs at least one number")
    best = max(nums)
    cur_max = cur_min = 1
    for value in nums:
        if value == 0:
            cur_max = cur_min = 1
            continue
        candidates = (value, value * cur_max, value * cur_min)
        cur_max, cur_min = max(candidates), min(candidates)
        best = max(best, cur_max)
    return best


def max_product_brute(nums: Sequence[int]) -> int:
    """Return the largest run product by trying every run; 0 for an empty sequence."""
    if not nums:
        return 0
    return max(
        product
        for start in range(len(nums))
        for product in accumulate(nums[start:], mul)
    )


def max_subarray(nums: Sequence[int]) -> int:
    """Return the largest sum of a contiguous, non-empty run of ``nums``.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("max_subarray() needs at least one number")
    running = 0
    best = nums[0]
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def missing_number(nums: Sequence[int]) -> int:
    """Return the one value of ``0..len(nums)`` that ``nums`` lacks."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)