"""Numerical quadrature: Newton–Cotes rules, Gauss–Legendre and Romberg."""

from __future__ import annotations

import math
from typing import Callable

Function = Callable[[float], float]

_GAUSS_2 = (
    (-1 / math.sqrt(3), 1.0),
    (1 / math.sqrt(3), 1.0),
)
_GAUSS_3 = (
    (-math.sqrt(0.6), 5 / 9),
    (0.0, 8 / 9),
    (math.sqrt(0.6), 5 / 9),
)


def _check_intervals(n: int, multiple: int = 1) -> None:
    if n <= 0 or n % multiple:
        if multiple == 1:
            raise ValueError("the number of sub-intervals must be a positive integer")
        raise ValueError(
            f"the number of sub-intervals must be a positive multiple of {multiple}"
        )


def trapezoidal(f: Function, a: float, b: float, n: int) -> float:
    """Composite trapezoidal rule with ``n`` sub-intervals."""
    _check_intervals(n)
    h = (b - a) / n
    inner = sum(f(a + i * h) for i in range(1, n))
    return h * ((f(a) + f(b)) / 2 + inner)


def simpson_13(f: Function, a: float, b: float, n: int) -> float:
    """Composite Simpson's 1/3 rule; ``n`` must be a positive even number."""
    _check_intervals(n, 2)
    h = (b - a) / n
    total = f(a) + f(b)
    total += sum((2 if i % 2 == 0 else 4) * f(a + i * h) for i in range(1, n))
    return total * h / 3


def simpson_38(f: Function, a: float, b: float, n: int) -> float:
    """Composite Simpson's 3/8 rule; ``n`` must be a positive multiple of 3."""
    _check_intervals(n, 3)
    h = (b - a) / n
    total = f(a) + f(b)
    total += sum((2 if i % 3 == 0 else 3) * f(a + i * h) for i in range(1, n))
    return total * 3 * h / 8


def _gauss(f: Function, a: float, b: float, rule) -> float:
    half = (b - a) / 2
    mid = (b + a) / 2
    return half * sum(w * f(half * z + mid) for z, w in rule)


def gauss_legendre_2(f: Function, a: float, b: float) -> float:
    """Two-point Gauss–Legendre quadrature over ``[a, b]``."""
    return _gauss(f, a, b, _GAUSS_2)


def gauss_legendre_3(f: Function, a: float, b: float) -> float:
    """Three-point Gauss–Legendre quadrature over ``[a, b]``."""
    return _gauss(f, a, b, _GAUSS_3)


def romberg(f: Function, a: float, b: float, n: int = 5) -> float:
    """Romberg integration using an ``n``-row extrapolation table.

    Returns the bottom-right entry of the table.
    """
    if n < 1:
        raise ValueError("the Romberg table needs at least one row")
    h = b - a
    previous = [0.5 * h * (f(a) + f(b))]
    for i in range(1, n):
        h /= 2
        fresh = sum(f(a + (2 * k - 1) * h) for k in range(1, 2 ** (i - 1) + 1))
        row = [0.5 * previous[0] + fresh * h]
        for j in range(1, i + 1):
            row.append(row[j - 1] + (row[j - 1] - previous[j - 1]) / (4**j - 1))
        previous = row
    return previous[-1]