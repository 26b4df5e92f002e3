"""Single-step solvers for the initial value problem ``y' = f(x, y)``."""

from __future__ import annotations

from typing import Callable

Derivative = Callable[[float, float], float]
Step = Callable[[float, float, float], float]


def _step_count(x0: float, xp: float, h: float) -> int:
    if h == 0:
        raise ValueError("step size must be non-zero")
    return int((xp - x0) / h)


def _march(step: Step, x0: float, y0: float, xp: float, h: float) -> tuple[float, float]:
    x, y = x0, y0
    for _ in range(_step_count(x0, xp, h)):
        y = step(x, y, h)
        x += h
    return x, y


def euler(f: Derivative, x0: float, y0: float, xp: float, h: float) -> tuple[float, float]:
    """Advance from ``(x0, y0)`` towards ``xp`` with Euler's method.

    Takes ``int((xp - x0) / h)`` steps and returns the final ``(x, y)``.
    """
    return _march(lambda x, y, h: y + h * f(x, y), x0, y0, xp, h)


def heun(f: Derivative, x0: float, y0: float, xp: float, h: float) -> tuple[float, float]:
    """Advance from ``(x0, y0)`` towards ``xp`` with Heun's method.

    Takes ``int((xp - x0) / h)`` steps and returns the final ``(x, y)``.
    """

    def step(x: float, y: float, h: float) -> float:
        m1 = f(x, y)
        m2 = f(x + h, y + m1 * h)
        return y + (m1 + m2) * h / 2

    return _march(step, x0, y0, xp, h)


def runge_kutta4(
    f: Derivative, x0: float, y0: float, xp: float, h: float
) -> tuple[float, float]:
    """Advance from ``(x0, y0)`` towards ``xp`` with the classical fourth-order
    Runge–Kutta method.

    Takes ``int((xp - x0) / h)`` steps and returns the final ``(x, y)``.
    """

    def step(x: float, y: float, h: float) -> float:
        m1 = f(x, y)
        m2 = f(x + h / 2, y + m1 * h / 2)
        m3 = f(x + h / 2, y + m2 * h / 2)
        m4 = f(x + h, y + m3 * h)
        return y + (m1 + 2 * m2 + 2 * m3 + m4) * h / 6

    return _march(step, x0, y0, xp, h)