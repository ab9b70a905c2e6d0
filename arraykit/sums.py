"""Searches for groups of values, and runs of values, that add up to a target."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from itertools import accumulate


def _pairs_summing_to(values: Sequence[int], start: int, goal: int) -> Iterator[tuple[int, int]]:
    """Yield each distinct pair from the sorted ``values[start:]`` whose sum is ``goal``."""
    left, right = start, len(values) - 1
    while left < right:
        total = values[left] + values[right]
        if total > goal:
            right -= 1
        elif total < goal:
            left += 1
        else:
            yield values[left], values[right]
            left += 1
            right -= 1
            while left < right and values[left] == values[left - 1]:
                left += 1
            while left < right and values[right] == values[right + 1]:
                right -= 1


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct quadruplet from ``nums`` whose sum is ``target``.

    Each quadruplet is in non-decreasing order; the input is not modified.
    """
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        for j in range(i + 1, len(values)):
            second = values[j]
            if j > i + 1 and second == values[j - 1]:
                continue
            goal = target - first - second
            result.extend([first, second, a, b] for a, b in _pairs_summing_to(values, j + 1, goal))
    return result


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triplet from ``nums`` whose sum is zero.

    Each triplet is in non-decreasing order; the input is not modified.
    """
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        result.extend([first, a, b] for a, b in _pairs_summing_to(values, i + 1, -first))
    return result


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return the indices of two values in ``nums`` that add up to ``target``.

    The pair found first while scanning left to right is returned, earlier
    index first. ``None`` is returned when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return partner, index
        seen[value] = index
    return None


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count the contiguous, non-empty runs of ``nums`` that sum to ``k``."""
    prefix_counts: Counter[int] = Counter({0: 1})
    total = 0
    found = 0
    for value in nums:
        total += value
        found += prefix_counts[total - k]
        prefix_counts[total] += 1
    return found


def subarray_sum_brute(nums: Sequence[int], k: int) -> int:
    """Count runs summing to ``k`` by checking every start and end position."""
    return sum(
        1
        for start in range(len(nums))
        for total in accumulate(nums[start:])
        if total == k
    )