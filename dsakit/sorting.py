"""Classic comparison sorts.

Each function sorts the given list in place and returns that same list.
"""

from __future__ import annotations

from typing import Any, MutableSequence, TypeVar

_S = TypeVar("_S", bound=MutableSequence[Any])


def selection_sort(nums: _S) -> _S:
    """Repeatedly move the smallest remaining element to the front."""
    n = len(nums)
    for i in range(n - 1):
        min_index = min(range(i, n), key=nums.__getitem__)
        if min_index != i:
            nums[i], nums[min_index] = nums[min_index], nums[i]
    return nums


def bubble_sort(nums: _S) -> _S:
    """Swap adjacent out-of-order pairs, stopping after a pass with no swaps."""
    for end in range(len(nums) - 1, -1, -1):
        swapped = False
        for j in range(end):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]
                swapped = True
        if not swapped:
            break
    return nums


def insertion_sort(nums: _S) -> _S:
    """Insert each element into the sorted prefix before it."""
    for i in range(1, len(nums)):
        key = nums[i]
        j = i - 1
        while j >= 0 and nums[j] > key:
            nums[j + 1] = nums[j]
            j -= 1
        nums[j + 1] = key
    return nums


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] <= right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def _merge_sorted(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(_merge_sorted(items[:mid]), _merge_sorted(items[mid:]))


def merge_sort(nums: _S) -> _S:
    """Split in halves, sort each, and merge them back (stable)."""
    nums[:] = _merge_sorted(list(nums))
    return nums


def _partition(nums: MutableSequence[Any], low: int, high: int) -> int:
    pivot = nums[low]
    i, j = low, high
    while i < j:
        while nums[i] <= pivot and i <= high - 1:
            i += 1
        while nums[j] > pivot and j >= low + 1:
            j -= 1
        if i < j:
            nums[i], nums[j] = nums[j], nums[i]
    nums[low], nums[j] = nums[j], nums[low]
    return j


def quick_sort(nums: _S) -> _S:
    """Partition around the first element of each range and sort both sides."""
    pending = [(0, len(nums) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        p = _partition(nums, low, high)
        pending.append((low, p - 1))
        pending.append((p + 1, high))
    return nums