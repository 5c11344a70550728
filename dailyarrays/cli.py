"""Command-line driver that reads test cases from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from dailyarrays.extrema import majority_elements, min_height_difference, second_largest
from dailyarrays.rearrange import (
    next_permutation,
    push_zeros_to_end,
    reverse_array,
    rotate_left,
)
from dailyarrays.stocks import max_profit_many_trades, max_profit_one_trade
from dailyarrays.subarrays import (
    max_circular_subarray_sum,
    max_product_subarray,
    max_subarray_sum,
)


def _ints(line: str) -> list[int]:
    return [int(token) for token in line.split()]


def _format_list(values: list[int]) -> str:
    return "".join(f"{value} " for value in values)


def _format_majority(values: list[int]) -> str:
    return _format_list(values) if values else "[]"


@dataclass(frozen=True)
class _Problem:
    solve: Callable[[Iterator[str]], str]
    tilde: bool = True


def _scalar(func: Callable[[list[int]], int]) -> Callable[[Iterator[str]], str]:
    return lambda lines: str(func(_ints(next(lines))))


def _listed(
    func: Callable[[list[int]], list[int]], fmt: Callable[[list[int]], str] = _format_list
) -> Callable[[Iterator[str]], str]:
    return lambda lines: fmt(func(_ints(next(lines))))


def _solve_rotate(lines: Iterator[str]) -> str:
    values = _ints(next(lines))
    d = _ints(next(lines))[0]
    return _format_list(rotate_left(values, d))


def _solve_min_height(lines: Iterator[str]) -> str:
    k = _ints(next(lines))[0]
    heights = _ints(next(lines))
    return str(min_height_difference(heights, k))


PROBLEMS: dict[str, _Problem] = {
    "second-largest": _Problem(_scalar(second_largest)),
    "push-zeros": _Problem(_listed(push_zeros_to_end)),
    "reverse": _Problem(_listed(reverse_array)),
    "rotate": _Problem(_solve_rotate),
    "next-permutation": _Problem(_listed(next_permutation), tilde=False),
    "majority": _Problem(_listed(majority_elements, _format_majority), tilde=False),
    "stock-many": _Problem(_scalar(max_profit_many_trades)),
    "stock-one": _Problem(_scalar(max_profit_one_trade), tilde=False),
    "min-height-diff": _Problem(_solve_min_height),
    "max-subarray": _Problem(_scalar(max_subarray_sum)),
    "max-product": _Problem(_scalar(max_product_subarray)),
    "circular-subarray": _Problem(_scalar(max_circular_subarray_sum)),
}


def run(problem: str, lines: Iterable[str]) -> list[str]:
    """Solve every test case in the input lines and return the output lines.

    The first line holds the number of test cases.
    """
    try:
        spec = PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    stream = iter(lines)
    try:
        count = int(next(stream).strip())
    except StopIteration:
        raise ValueError("missing test case count") from None
    output: list[str] = []
    for _ in range(count):
        try:
            output.append(spec.solve(stream))
        except StopIteration:
            raise ValueError("input ended before all test cases were read") from None
        if spec.tilde:
            output.append("~")
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dailyarrays", description="Solve array problems read from standard input."
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    args = parser.parse_args(argv)
    try:
        output = run(args.problem, sys.stdin.read().splitlines())
    except ValueError as exc:
        print(f"dailyarrays: {exc}", file=sys.stderr)
        return 1
    for line in output:
        print(line)
    return 0