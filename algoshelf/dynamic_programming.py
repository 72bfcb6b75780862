"""Tabulated dynamic-programming solutions."""

from __future__ import annotations

from typing import Sequence


def binomial_coefficient(n: int, k: int) -> int:
    """Number of ways to choose ``k`` of ``n`` items, built from Pascal's rule."""
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")
    if k > n:
        return 0
    row = [1] + [0] * k
    for i in range(1, n + 1):
        for j in range(min(i, k), 0, -1):
            row[j] += row[j - 1]
    return row[k]


def knapsack(capacity: int, weights: Sequence[int], profits: Sequence[int]) -> int:
    """Best total profit of items, each taken at most once, within ``capacity``."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, profit in zip(weights, profits):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + profit)
    return best[capacity]