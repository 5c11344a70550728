import pytest

from dailyarrays.stocks import max_profit_many_trades, max_profit_one_trade


def test_many_trades_example():
    assert max_profit_many_trades([100, 180, 260, 310, 40, 535, 695]) == 865


@pytest.mark.parametrize("prices", [[4, 2, 2, 2, 4], [1, 2, 3], [5]])
def test_many_trades_nondecreasing(prices):
    if prices == sorted(prices):
        assert max_profit_many_trades(prices) == prices[-1] - prices[0]
    else:
        assert max_profit_many_trades(prices) >= prices[-1] - min(prices)


@pytest.mark.parametrize("prices", [[9, 7, 5, 3], [3, 3, 3], [1]])
def test_no_profit_when_falling(prices):
    assert max_profit_many_trades(prices) == 0
    assert max_profit_one_trade(prices) == 0


def test_one_trade_example():
    assert max_profit_one_trade([7, 10, 1, 3, 6, 9, 2]) == 8


@pytest.mark.parametrize("prices", [[1, 4, 8, 20], [2, 3]])
def test_one_trade_rising(prices):
    assert max_profit_one_trade(prices) == prices[-1] - prices[0]


@pytest.mark.parametrize(
    "prices", [[7, 10, 1, 3, 6, 9, 2], [100, 180, 260, 310, 40, 535, 695], [5, 1, 5, 1, 5]]
)
def test_one_trade_never_beats_many(prices):
    assert max_profit_one_trade(prices) <= max_profit_many_trades(prices)


@pytest.mark.parametrize("func", [max_profit_many_trades, max_profit_one_trade])
def test_empty_raises(func):
    with pytest.raises(ValueError):
        func([])