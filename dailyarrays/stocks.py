"""Best achievable profit from a sequence of daily prices."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import pairwise


def max_profit_many_trades(prices: Iterable[int]) -> int:
    """Return the best profit when any number of buy-then-sell trades is allowed."""
    items = list(prices)
    if not items:
        raise ValueError("max_profit_many_trades() arg is an empty sequence")
    return sum(max(later - earlier, 0) for earlier, later in pairwise(items))


def max_profit_one_trade(prices: Iterable[int]) -> int:
    """Return the best profit from a single buy followed by a single sell."""
    items = iter(prices)
    try:
        bought = previous = next(items)
    except StopIteration:
        raise ValueError("max_profit_one_trade() arg is an empty sequence") from None
    profit = 0
    for price in items:
        bought = min(bought, price)
        if price > previous:
            profit = max(profit, price - bought)
        previous = price
    return profit