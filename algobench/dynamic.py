"""Dynamic-programming and greedy problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    ``dims`` has one more entry than there are matrices: matrix ``i`` is
    ``dims[i - 1]`` by ``dims[i]``.
    """
    dims = list(dims)
    count = len(dims) - 1
    if count < 1:
        raise ValueError("need the dimensions of at least one matrix")

    @lru_cache(maxsize=None)
    def cost(i: int, j: int) -> int:
        if i == j:
            return 0
        return min(
            cost(i, k) + cost(k + 1, j) + dims[i - 1] * dims[k] * dims[j]
            for k in range(i, j)
        )

    return cost(1, count)


def wine_profit(prices: Sequence[int]) -> int:
    """Best income from selling one bottle a day from either end of the shelf.

    A bottle sold on day ``d`` (counting from 1) earns its price times ``d``.
    """
    prices = list(prices)
    n = len(prices)

    @lru_cache(maxsize=None)
    def best(i: int, j: int) -> int:
        if i > j:
            return 0
        day = n - (j - i)
        return max(
            prices[i] * day + best(i + 1, j),
            prices[j] * day + best(i, j - 1),
        )

    return best(0, n - 1)


def wine_table(prices: Sequence[int]) -> list[list[int]]:
    """Bottom-up table: cell ``[i][j]`` is the best income from bottles ``i..j``.

    Cells below the diagonal are zero; the full answer is ``table[0][-1]``.
    """
    prices = list(prices)
    n = len(prices)
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i in reversed(range(n)):
        table[i][i] = prices[i] * n
        for j in range(i + 1, n):
            day = n - (j - i)
            table[i][j] = max(
                prices[i] * day + table[i + 1][j],
                prices[j] * day + table[i][j - 1],
            )
    return [row[:n] for row in table[:n]]


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fractional_knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> float:
    """Greatest value that fits, allowing the last item taken to be split.

    ``items`` holds ``(price, weight)`` pairs; they are taken in order of
    falling price per unit of weight, ties keeping their given order.
    """
    goods = list(items)
    if any(weight <= 0 for _, weight in goods):
        raise ValueError("every weight must be positive")
    goods.sort(key=lambda item: item[0] / item[1], reverse=True)
    total = 0.0
    remaining = capacity
    for price, weight in goods:
        if remaining <= 0:
            break
        if remaining >= weight:
            total += price
            remaining -= weight
        else:
            total += remaining / weight * price
            remaining = 0
    return total