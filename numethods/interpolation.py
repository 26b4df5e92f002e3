"""Polynomial interpolation: Lagrange and Newton difference formulas."""

from __future__ import annotations

import math
from typing import Sequence


def _validate(xs: Sequence[float], ys: Sequence[float]) -> tuple[list[float], list[float]]:
    xs = [float(v) for v in xs]
    ys = [float(v) for v in ys]
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    if not xs:
        raise ValueError("at least one data point is required")
    return xs, ys


def _step(xs: list[float]) -> float:
    h = xs[1] - xs[0]
    if h == 0:
        raise ValueError("step size between the first two points is zero")
    return h


def lagrange(xs: Sequence[float], ys: Sequence[float], x: float) -> float:
    """Evaluate the Lagrange interpolating polynomial through the points at ``x``."""
    xs, ys = _validate(xs, ys)
    if len(set(xs)) != len(xs):
        raise ValueError("x values must be distinct")
    total = 0.0
    for i, (xi, yi) in enumerate(zip(xs, ys)):
        weight = 1.0
        for j, xj in enumerate(xs):
            if i != j:
                weight *= (x - xj) / (xi - xj)
        total += weight * yi
    return total


def difference_table(ys: Sequence[float]) -> list[list[float]]:
    """Build the forward difference table.

    Row ``i`` holds ``y[i]`` followed by its successive forward differences
    ``Δy[i], Δ²y[i], ...``; row ``i`` has ``len(ys) - i`` entries.
    """
    column = [float(v) for v in ys]
    columns = [column]
    while len(column) > 1:
        column = [b - a for a, b in zip(column, column[1:])]
        columns.append(column)
    n = len(columns[0])
    return [[col[i] for col in columns[: n - i]] for i in range(n)]


def newton_forward(xs: Sequence[float], ys: Sequence[float], x: float) -> float:
    """Interpolate at ``x`` with Newton's forward difference formula.

    The points are assumed equally spaced with step ``xs[1] - xs[0]``.
    """
    xs, ys = _validate(xs, ys)
    if len(xs) == 1:
        return ys[0]
    h = _step(xs)
    deltas = difference_table(ys)[0]
    total = deltas[0]
    product = 1.0
    for order, (delta, node) in enumerate(zip(deltas[1:], xs), start=1):
        product *= x - node
        total += delta * product / (h**order * math.factorial(order))
    return total


def newton_backward(xs: Sequence[float], ys: Sequence[float], x: float) -> float:
    """Interpolate at ``x`` with Newton's backward difference formula.

    The points are assumed equally spaced with step ``xs[1] - xs[0]``.
    """
    xs, ys = _validate(xs, ys)
    if len(xs) == 1:
        return ys[0]
    h = _step(xs)
    table = difference_table(ys)
    n = len(xs)
    nablas = [table[n - 1 - order][order] for order in range(n)]
    total = nablas[0]
    product = 1.0
    for order, (nabla, node) in enumerate(zip(nablas[1:], reversed(xs)), start=1):
        product *= x - node
        total += nabla * product / (h**order * math.factorial(order))
    return total