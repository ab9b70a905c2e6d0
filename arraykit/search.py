"""Binary searches over sorted and rotated sorted integer sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return the first and last index of ``target`` in the sorted ``nums``.

    ``(-1, -1)`` is returned when ``target`` does not occur.
    """
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return -1, -1
    return first, bisect_right(nums, target, lo=first) - 1


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted sequence of distinct values.

    Raises ValueError for an empty sequence.
    """
    if not nums:
        raise ValueError("find_min_rotated() needs at least one number")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if nums[mid] > nums[high]:
            low = mid + 1
        else:
            high = mid
    return nums[low]


def _hours_needed(piles: Sequence[int], speed: int) -> int:
    return sum(-(-pile // speed) for pile in piles)


def min_eating_speed(piles: Sequence[int], h: int) -> int:
    """Return the slowest whole eating speed that clears ``piles`` within ``h`` hours.

    When no speed is fast enough, the size of the largest pile is returned.
    Raises ValueError for an empty sequence of piles.
    """
    if not piles:
        raise ValueError("min_eating_speed() needs at least one pile")
    largest = max(piles)
    low, high = 1, largest
    answer = largest
    while low <= high:
        mid = (low + high) // 2
        if _hours_needed(piles, mid) <= h:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in the sorted ``nums``, or where it would go."""
    return bisect_left(nums, target)


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one value of the sorted ``nums`` that is not paired.

    Every other value must appear exactly twice. Raises ValueError for an
    empty sequence.
    """
    if not nums:
        raise ValueError("single_non_duplicate() needs at least one number")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (low + high) // 2
        if mid % 2:
            mid -= 1
        if nums[mid] == nums[mid + 1]:
            low = mid + 2
        else:
            high = mid
    return nums[low]