"""Selections of particular elements from integer sequences."""

from __future__ import annotations

from collections.abc import Iterable


def second_largest(values: Iterable[int]) -> int:
    """Return the largest value strictly below the maximum, or -1 if there is none.

    Values that are not greater than -1 are never reported.
    """
    items = iter(values)
    try:
        first = next(items)
    except StopIteration:
        raise ValueError("second_largest() arg is an empty sequence") from None
    second = -1
    for value in items:
        if value > first:
            second, first = first, value
        elif second < value < first:
            second = value
    return second


def majority_elements(values: Iterable[int]) -> list[int]:
    """Return, in ascending order, the values occurring more than len/3 times."""
    items = list(values)
    candidate1 = candidate2 = None
    count1 = count2 = 0
    for value in items:
        if count1 == 0 and value != candidate2:
            candidate1, count1 = value, 1
        elif count2 == 0 and value != candidate1:
            candidate2, count2 = value, 1
        elif value == candidate1:
            count1 += 1
        elif value == candidate2:
            count2 += 1
        else:
            count1 -= 1
            count2 -= 1

    threshold = len(items) // 3 + 1
    return sorted(
        candidate
        for candidate in (candidate1, candidate2)
        if candidate is not None and items.count(candidate) >= threshold
    )


def min_height_difference(heights: Iterable[int], k: int) -> int:
    """Return the smallest possible spread of heights after raising or lowering each by k.

    No height may become negative. The input is left untouched.
    """
    ordered = sorted(heights)
    if not ordered:
        raise ValueError("min_height_difference() arg is an empty sequence")
    lowest, highest = ordered[0], ordered[-1]
    best = highest - lowest
    for previous, current in zip(ordered, ordered[1:]):
        if current - k < 0:
            continue
        smallest = min(lowest + k, current - k)
        largest = max(previous + k, highest - k)
        best = min(best, largest - smallest)
    return best