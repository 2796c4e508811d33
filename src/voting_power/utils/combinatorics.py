from __future__ import annotations

from typing import List, Sequence


def factorial_table(n: int) -> List[float]:
    """Return ``[0!, 1!, ..., n!]`` as floats."""
    table = [1.0]
    for k in range(1, n + 1):
        table.append(table[-1] * k)
    return table


def shapley_weight(size: int, n: int, factorials: Sequence[float]) -> float:
    # probability that exactly the given `size` players precede a fixed one
    return factorials[size] * factorials[n - size - 1] / factorials[n]
