"""Bracketing and open methods for finding a root of a scalar function."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

Function = Callable[[float], float]


@dataclass(frozen=True)
class RootResult:
    """A located root and the number of iterations it took."""

    root: float
    iterations: int


class NoBracketError(ValueError):
    """The two starting values do not enclose a root."""


class ConvergenceError(RuntimeError):
    """The iteration did not reach the tolerance within its budget."""


def bisection(
    f: Function,
    x1: float,
    x2: float,
    tol: float = 1e-5,
    max_iter: int = 20,
) -> RootResult:
    """Find a root of ``f`` between ``x1`` and ``x2`` by interval halving.

    The bracket is expected to satisfy ``f(x1) < 0 < f(x2)``; the
    iteration stops once ``|f(midpoint)| < tol``.
    """
    if f(x1) * f(x2) > 0:
        raise NoBracketError(
            "the guess values don't bracket a root; change the guess values"
        )
    count = 0
    while True:
        x0 = (x1 + x2) / 2
        fx0 = f(x0)
        if abs(fx0) < tol:
            return RootResult(x0, count)
        if fx0 > 0:
            x2 = x0
        elif fx0 < 0:
            x1 = x0
        else:
            raise ConvergenceError(f"function value at {x0!r} is not a number")
        count += 1
        if count >= max_iter:
            raise ConvergenceError("the process doesn't converge")


def _relative_change(new: float, old: float) -> float:
    if new == 0:
        return math.inf
    return abs((new - old) / new)


def secant(
    f: Function,
    x1: float,
    x2: float,
    tol: float = 1e-4,
    max_iter: int = 20,
) -> RootResult:
    """Find a root of ``f`` with the secant method from two starting guesses.

    Stops when the relative change between successive estimates is below
    ``tol``.
    """
    count = 1
    f1, f2 = f(x1), f(x2)
    while True:
        if f2 == f1:
            raise ConvergenceError(
                "secant line is horizontal; function values coincide"
            )
        x3 = x2 - f2 * (x2 - x1) / (f2 - f1)
        if _relative_change(x3, x2) < tol:
            return RootResult(x3, count)
        x1, f1 = x2, f2
        x2, f2 = x3, f(x3)
        count += 1
        if count >= max_iter:
            raise ConvergenceError("the process doesn't converge")


def fixed_point(
    g: Function,
    x0: float,
    tol: float = 1e-4,
    max_iter: int = 20,
) -> RootResult:
    """Iterate ``x = g(x)`` from ``x0`` until successive values agree to ``tol``."""
    count = 1
    while True:
        x1 = g(x0)
        if abs(x1 - x0) < tol:
            return RootResult(x1, count)
        x0 = x1
        count += 1
        if count >= max_iter:
            raise ConvergenceError("the process doesn't converge")