"""Finite-difference relaxation for Laplace's and Poisson's equations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

Grid = list[list[float]]
Source = Union[float, Callable[[int, int], float]]

TOP_BOUNDARY = 100.0


@dataclass
class GridSolution:
    """A relaxed grid, the sweeps it took and the last maximum change."""

    grid: Grid
    iterations: int
    max_diff: float
    converged: bool


def _check_size(m: int, n: int) -> None:
    if m < 1 or n < 1:
        raise ValueError("grid dimensions must be positive")


def laplace_grid(m: int, n: int) -> Grid:
    """Initial ``m x n`` grid: top row held at 100, everything else 0."""
    _check_size(m, n)
    return [[TOP_BOUNDARY if i == 0 else 0.0 for _ in range(n)] for i in range(m)]


def _relax(u: Grid, offset: Grid, tol: float, max_iter: int) -> GridSolution:
    m, n = len(u), len(u[0])
    iterations = 0
    while True:
        diff = 0.0
        for i in range(1, m - 1):
            for j in range(1, n - 1):
                new = 0.25 * (
                    u[i + 1][j] + u[i - 1][j] + u[i][j + 1] + u[i][j - 1] - offset[i][j]
                )
                diff = max(diff, abs(new - u[i][j]))
                u[i][j] = new
        iterations += 1
        if diff <= tol or iterations >= max_iter:
            return GridSolution(u, iterations, diff, diff <= tol)


def solve_laplace(
    m: int, n: int, tol: float = 1e-6, max_iter: int = 1000
) -> GridSolution:
    """Relax Laplace's equation on an ``m x n`` grid by Gauss–Seidel sweeps."""
    u = laplace_grid(m, n)
    return _relax(u, [[0.0] * n for _ in range(m)], tol, max_iter)


def solve_poisson(
    m: int,
    n: int,
    h: float,
    source: Source = 1.0,
    tol: float = 1e-6,
    max_iter: int = 10000,
) -> GridSolution:
    """Relax Poisson's equation with zero boundaries on an ``m x n`` grid.

    ``source`` is a constant or a function of the grid indices ``(i, j)``.
    """
    _check_size(m, n)
    term = source if callable(source) else (lambda i, j: source)
    offset = [[h * h * term(i, j) for j in range(n)] for i in range(m)]
    u = [[0.0] * n for _ in range(m)]
    return _relax(u, offset, tol, max_iter)


def format_grid(grid: Grid) -> str:
    """Render a grid, each value as ``%8.4f`` followed by a space, one row per line."""
    return "".join("".join(f"{v:8.4f} " for v in row) + "\n" for row in grid)