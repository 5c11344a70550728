"""Reorderings of integer sequences, each returning a new list."""

from __future__ import annotations

from collections.abc import Iterable


def push_zeros_to_end(values: Iterable[int]) -> list[int]:
    """Move every zero to the end, keeping the other values in their order."""
    items = list(values)
    nonzero = [value for value in items if value != 0]
    return nonzero + [0] * (len(items) - len(nonzero))


def reverse_array(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(reversed(list(values)))


def rotate_left(values: Iterable[int], d: int) -> list[int]:
    """Rotate the values d places to the left (counter-clockwise)."""
    items = list(values)
    if not items:
        return []
    d %= len(items)
    return items[d:] + items[:d]


def next_permutation(values: Iterable[int]) -> list[int]:
    """Return the next lexicographic permutation, wrapping to the smallest one."""
    items = list(values)
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        return items[::-1]
    successor = next(
        i for i in range(len(items) - 1, pivot, -1) if items[i] > items[pivot]
    )
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return items