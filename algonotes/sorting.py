"""Classic comparison sorts; each returns a new sorted list."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")


def bubble_sort(data: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order items."""
    items = list(data)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j + 1] < items[j]:  # type: ignore[operator]
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insert_sort(data: Iterable[T]) -> list[T]:
    """Sort by inserting each item into the sorted prefix."""
    items = list(data)
    for i in range(1, len(items)):
        value = items[i]
        j = i
        while j > 0 and value < items[j - 1]:  # type: ignore[operator]
            items[j] = items[j - 1]
            j -= 1
        items[j] = value
    return items


def selection_sort(data: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining item to the front."""
    items = list(data)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def merge_sort(data: Iterable[T]) -> list[T]:
    """Bottom-up merge sort."""
    items = list(data)
    n = len(items)
    width = 1
    while width < n:
        for begin in range(0, n, 2 * width):
            middle = min(begin + width, n)
            end = min(begin + 2 * width, n)
            items[begin:end] = list(heapq.merge(items[begin:middle], items[middle:end]))
        width *= 2
    return items


def heapify(data: MutableSequence[Any], k: int, n: int) -> None:
    """Sift ``data[k]`` down within the max-heap ``data[:n]``, in place."""
    while 2 * k + 1 < n:
        child = 2 * k + 1
        if child + 1 < n and data[child] < data[child + 1]:
            child += 1
        if not data[k] < data[child]:
            break
        data[k], data[child] = data[child], data[k]
        k = child


def heap_sort(data: Iterable[T]) -> list[T]:
    """Sort through an in-place binary max-heap."""
    items = list(data)
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        heapify(items, i, n)
    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        heapify(items, 0, end)
    return items