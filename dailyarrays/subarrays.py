"""Maximum sums and products over contiguous subarrays."""

from __future__ import annotations

from collections.abc import Iterable


def _nonempty(values: Iterable[int], name: str) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError(f"{name}() arg is an empty sequence")
    return items


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of any non-empty contiguous subarray."""
    first, *rest = _nonempty(values, "max_subarray_sum")
    best = current = first
    for value in rest:
        current = max(current + value, value)
        best = max(best, current)
    return best


def max_product_subarray(values: Iterable[int]) -> int:
    """Return the largest product of any non-empty contiguous subarray."""
    items = _nonempty(values, "max_product_subarray")
    prefix = suffix = 1
    best = None
    for forward, backward in zip(items, reversed(items)):
        prefix = (prefix or 1) * forward
        suffix = (suffix or 1) * backward
        candidate = max(prefix, suffix)
        best = candidate if best is None else max(best, candidate)
    return best


def max_circular_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest subarray sum when the sequence wraps around."""
    items = _nonempty(values, "max_circular_subarray_sum")
    current_max = current_min = total = 0
    max_sum = min_sum = items[0]
    for value in items:
        current_max = max(current_max + value, value)
        max_sum = max(max_sum, current_max)
        current_min = min(current_min + value, value)
        min_sum = min(min_sum, current_min)
        total += value
    if min_sum == total:
        return max_sum
    return max(total - min_sum, max_sum)