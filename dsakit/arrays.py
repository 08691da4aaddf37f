"""Elementary operations on integer lists."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby
from typing import Any, MutableSequence


def linear_search(nums: Sequence[Any], target: Any) -> int:
    """Return the smallest index holding ``target``, or -1 if absent."""
    return next((i for i, value in enumerate(nums) if value == target), -1)


def largest_element(nums: Sequence[Any]) -> Any:
    """Return the largest element; raise ValueError for an empty sequence."""
    if not nums:
        raise ValueError("largest_element() of an empty sequence")
    return max(nums)


def largest_element_scan(nums: Sequence[Any]) -> Any:
    """Return the largest element by a single pass from the first one."""
    iterator = iter(nums)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("largest_element_scan() of an empty sequence") from None
    for value in iterator:
        if value > best:
            best = value
    return best


def second_largest_element(nums: Sequence[int]) -> int:
    """Return the largest value strictly below the maximum, or -1 if none."""
    if len(nums) < 2:
        return -1
    largest: int | None = None
    second: int | None = None
    for value in nums:
        if largest is None or value > largest:
            second = largest
            largest = value
        elif value < largest and (second is None or value > second):
            second = value
    return -1 if second is None else second


def find_max_consecutive_ones(nums: Sequence[int]) -> int:
    """Return the length of the longest run of 1s."""
    return max(
        (sum(1 for _ in run) for key, run in groupby(nums) if key == 1),
        default=0,
    )


def _check_rotatable(nums: Sequence[Any], k: int = 0) -> None:
    if not nums:
        raise ValueError("cannot rotate an empty sequence")
    if k < 0:
        raise ValueError("rotation count must be non-negative")


def rotate_left_by_one(nums: MutableSequence[Any]) -> None:
    """Rotate the list one place to the left, in place."""
    _check_rotatable(nums)
    nums.append(nums.pop(0))


def rotate_left(nums: MutableSequence[Any], k: int) -> None:
    """Rotate the list ``k`` places to the left, in place."""
    _check_rotatable(nums, k)
    k %= len(nums)
    if k:
        nums[:] = [*nums[k:], *nums[:k]]


def rotate_left_by_reversal(nums: MutableSequence[Any], k: int) -> None:
    """Rotate left by ``k`` using three reversals, in place."""
    _check_rotatable(nums, k)
    n = len(nums)
    k %= n
    if not k:
        return
    nums.reverse()
    nums[: n - k] = nums[n - k - 1 :: -1]
    nums[n - k :] = nums[: n - k - 1 : -1]