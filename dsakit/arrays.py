"""Contiguous sub-array enumeration and maximum sub-array sum."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TypeVar

__all__ = [
    "subarrays",
    "subarrays_recursive",
    "max_subarray_sum",
    "max_subarray_sum_kadane",
]

T = TypeVar("T")


def subarrays(items: Sequence[T]) -> Iterator[list[T]]:
    """Yield every contiguous sub-array, ordered by start then end."""
    values = list(items)
    for start in range(len(values)):
        for end in range(start + 1, len(values) + 1):
            yield values[start:end]


def subarrays_recursive(items: Sequence[T]) -> Iterator[list[T]]:
    """Yield every contiguous sub-array, ordered by end then start."""
    values = list(items)

    def _from_end(end: int) -> Iterator[list[T]]:
        if end == len(values):
            return
        for start in range(end + 1):
            yield values[start : end + 1]
        yield from _from_end(end + 1)

    return _from_end(0)


def max_subarray_sum(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous sub-array, by trying them all."""
    if not values:
        raise ValueError("max_subarray_sum() needs at least one value")
    best = values[0]
    for start in range(len(values)):
        running = 0
        for value in values[start:]:
            running += value
            best = max(best, running)
    return best


def max_subarray_sum_kadane(values: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous sub-array, in one pass."""
    if not values:
        raise ValueError("max_subarray_sum_kadane() needs at least one value")
    best = current = values[0]
    for value in values[1:]:
        current = max(current + value, value)
        best = max(best, current)
    return best