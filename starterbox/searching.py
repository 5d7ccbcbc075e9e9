"""Searching helpers over sequences."""

from collections.abc import Iterable, Sequence
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of target in the sorted sequence, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return None


def linear_search(values: Iterable[Any], key: Any) -> int | None:
    """Return the index of the first item equal to key, or None if absent."""
    for index, item in enumerate(values):
        if item == key:
            return index
    return None


def largest(values: Iterable[int]) -> int:
    """Return the largest value, never less than zero (the running maximum starts at 0)."""
    return max([0, *values])