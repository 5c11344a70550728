"""Array algorithms: extrema, rearrangements, subarray sums, stock profits and a batch command."""

__version__ = "0.1.0"

__all__ = ["extrema", "rearrange", "subarrays", "stocks", "cli"]