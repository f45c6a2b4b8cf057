"""Comparison sorts: two-way merge sort, four-way merge sort and quicksort."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with ``values`` in ascending order, by two-way merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2
    left = merge_sort(items[: mid + 1])
    right = merge_sort(items[mid + 1 :])
    return list(heapq.merge(left, right))


def _half_toward_zero(value: int) -> int:
    return -((-value) // 2) if value < 0 else value // 2


def _sort_4way(items: list[T]) -> list[T]:
    end = len(items) - 1
    if end <= 0:
        return items
    quarter2 = end // 2
    quarter1 = _half_toward_zero(quarter2 - 1)
    quarter3 = (quarter2 + end) // 2
    parts = (
        items[: quarter1 + 1],
        items[quarter1 + 1 : quarter2 + 1],
        items[quarter2 + 1 : quarter3 + 1],
        items[quarter3 + 1 :],
    )
    return list(heapq.merge(*(_sort_4way(part) for part in parts)))


def merge_sort_4way(values: Iterable[T]) -> list[T]:
    """Return a new ascending list, splitting into four runs at each level."""
    return _sort_4way(list(values))


def quick_sort(values: Iterable[T]) -> list[T]:
    """Return a new ascending list by quicksort, using the last element as pivot."""
    items = list(values)
    if len(items) <= 1:
        return items
    *rest, pivot = items
    smaller = [value for value in rest if value <= pivot]
    larger = [value for value in rest if not value <= pivot]
    return quick_sort(smaller) + [pivot] + quick_sort(larger)