# dailyarrays

A small collection of well-known array algorithms. Each one is a plain function that takes an iterable of integers. Functions that reorder return a new list and leave the input unchanged.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Functions

`dailyarrays.extrema`

- `second_largest(values)` returns the largest value strictly below the maximum. It returns `-1` if there is no such value. Values of `-1` or below are never reported.
- `majority_elements(values)` returns the values that occur more than `len // 3` times, in ascending order.
- `min_height_difference(heights, k)` returns the smallest possible gap between the tallest and the shortest height after each height is raised or lowered by `k`. No height may go negative.

`dailyarrays.rearrange`

- `push_zeros_to_end(values)` moves every zero to the end and keeps the other values in their order.
- `reverse_array(values)` returns the values in reverse order.
- `rotate_left(values, d)` rotates the values `d` places to the left. `d` is taken modulo the length, and an empty input gives `[]`.
- `next_permutation(values)` returns the next permutation in lexicographic order. After the last permutation it wraps round to the first.

`dailyarrays.subarrays`

- `max_subarray_sum(values)` returns the largest sum of a non-empty contiguous subarray.
- `max_product_subarray(values)` returns the largest product of a non-empty contiguous subarray.
- `max_circular_subarray_sum(values)` returns the largest subarray sum when the sequence wraps around.

`dailyarrays.stocks`

- `max_profit_many_trades(prices)` returns the best profit when any number of buy-then-sell trades is allowed.
- `max_profit_one_trade(prices)` returns the best profit from a single buy followed by a single sell.

`second_largest`, `min_height_difference` and the functions in `subarrays` and `stocks` raise `ValueError` when given an empty sequence.

## Examples

```python
from dailyarrays.extrema import second_largest, majority_elements
from dailyarrays.subarrays import max_subarray_sum
from dailyarrays.stocks import max_profit_one_trade

second_largest([12, 35, 1, 10, 34, 1])        # 34
majority_elements([2, 2, 3, 1, 3, 2, 1, 1])   # [1, 2]
max_subarray_sum([2, 3, -8, 7, -1, 2, 3])     # 11
max_profit_one_trade([7, 10, 1, 3, 6, 9, 2])  # 8
```

## Command line

The `dailyarrays` command solves a batch of test cases for one problem. It reads them from standard input:

```
dailyarrays PROBLEM < input.txt
```

The first line of the input holds the number of test cases. Each case gives its array as one line of whitespace-separated integers. Two problems need an extra line per case:

- `rotate`: the array line, then a line whose first number is `d`.
- `min-height-diff`: a line whose first number is `k`, then the heights line.

The problem names are `second-largest`, `push-zeros`, `reverse`, `rotate`, `next-permutation`, `majority`, `stock-many`, `stock-one`, `min-height-diff`, `max-subarray`, `max-product` and `circular-subarray`.

Output depends on the kind of problem:

- Single results are printed one per case.
- List results are printed as space-separated values, each followed by a space.
- For `majority`, an empty result is printed as `[]`.
- Every problem except `next-permutation`, `majority` and `stock-one` prints a line holding `~` after each case.

If the input is malformed or ends early, the command prints an error to standard error and exits with status 1.

The same processing is available in code as `dailyarrays.cli.run(problem, lines)`. It returns the output lines as a list of strings.