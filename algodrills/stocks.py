"""Best profit from a series of stock prices."""

from itertools import pairwise


def max_profit(prices):
    """Return the best profit from one buy followed by one later sell.

    Returns 0 when no profitable trade exists or there are no prices.
    """
    best = 0
    lowest = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def max_profit_unlimited(prices):
    """Return the best profit when any number of trades is allowed."""
    return sum(max(0, later - earlier) for earlier, later in pairwise(prices))