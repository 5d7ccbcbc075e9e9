"""Simple in-memory sorting routines."""

from collections.abc import Iterable
from typing import Any


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted with Shell sort, halving the gap each pass."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new list sorted with bubble sort."""
    items = list(values)
    for done in range(1, len(items)):
        for i in range(len(items) - done):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def reversed_list(values: Iterable[Any]) -> list[Any]:
    """Return the values as a list in reverse order."""
    return list(values)[::-1]