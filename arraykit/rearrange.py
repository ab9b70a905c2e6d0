"""Reordering operations on integer sequences: moves, rotations, de-duplication and merging."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from itertools import chain, groupby


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero in ``nums`` to the end, in place.

    The non-zero values keep their relative order.
    """
    non_zero = [value for value in nums if value != 0]
    zeros = [value for value in nums if value == 0]
    nums[:] = non_zero + zeros


def rearrange_by_sign(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` with non-negative and negative values alternating.

    The result starts with a non-negative value, and values of the same sign
    keep the order they had in ``nums``. Raises ValueError unless there are
    as many non-negative values as negative ones.
    """
    positives = [value for value in nums if value >= 0]
    negatives = [value for value in nums if value < 0]
    if len(positives) != len(negatives):
        raise ValueError(
            "rearrange_by_sign() needs as many non-negative values as negative ones"
        )
    return list(chain.from_iterable(zip(positives, negatives)))


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Move the distinct values of the sorted ``nums`` to its front, in place.

    Returns how many distinct values there are; the values after that many
    positions are left as they were.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def remove_duplicates_brute(nums: MutableSequence[int]) -> int:
    """Delete the repeated values of the sorted ``nums`` in place.

    Returns the number of values left, all of them distinct.
    """
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` steps, in place.

    Raises ValueError if ``k`` is negative.
    """
    if k < 0:
        raise ValueError("rotate() needs a non-negative number of steps")
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` is a non-decreasing sequence rotated by some amount.

    An empty sequence is not considered sorted and rotated.
    """
    if not nums:
        return False
    values = list(nums)
    following = values[1:] + values[:1]
    descents = sum(1 for current, nxt in zip(values, following) if current > nxt)
    return descents <= 1


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals.

    Intervals that share an end point are merged. The result is sorted by
    start; the input is not modified.
    """
    merged: list[list[int]] = []
    for start, end in sorted([list(interval) for interval in intervals]):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged