"""Direct and iterative solvers for square linear systems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

Matrix = list[list[float]]


@dataclass(frozen=True)
class IterationResult:
    """Solution of an iterative solver with the estimate after every sweep."""

    solution: tuple[float, ...]
    iterations: int
    history: tuple[tuple[float, ...], ...]


class NotConvergedError(RuntimeError):
    """The iteration did not converge within the allowed number of sweeps."""


def _augmented(augmented: Sequence[Sequence[float]]) -> Matrix:
    rows = [[float(v) for v in row] for row in augmented]
    n = len(rows)
    if n == 0:
        raise ValueError("the system must have at least one equation")
    if any(len(row) != n + 1 for row in rows):
        raise ValueError(f"augmented matrix must be {n}x{n + 1}")
    return rows


def _square(matrix: Sequence[Sequence[float]]) -> Matrix:
    rows = [[float(v) for v in row] for row in matrix]
    n = len(rows)
    if n == 0 or any(len(row) != n for row in rows):
        raise ValueError("matrix must be square and non-empty")
    return rows


def _eliminate(row: list[float], pivot_row: list[float], k: int) -> None:
    pivot = pivot_row[k]
    if pivot == 0:
        raise ValueError(f"zero pivot in column {k}")
    c = row[k] / pivot
    row[k:] = [r - c * p for r, p in zip(row[k:], pivot_row[k:])]


def forward_eliminate(augmented: Sequence[Sequence[float]]) -> Matrix:
    """Reduce an ``n x (n+1)`` augmented matrix to upper echelon form.

    No pivoting is done; a zero pivot raises ``ValueError``.
    """
    a = _augmented(augmented)
    for k, pivot_row in enumerate(a[:-1]):
        for row in a[k + 1 :]:
            _eliminate(row, pivot_row, k)
    return a


def back_substitute(echelon: Sequence[Sequence[float]]) -> list[float]:
    """Solve an upper-triangular augmented system by back substitution."""
    a = _augmented(echelon)
    n = len(a)
    x = [0.0] * n
    for i in reversed(range(n)):
        row = a[i]
        if row[i] == 0:
            raise ValueError(f"zero diagonal element in row {i}")
        known = sum(c * v for c, v in zip(row[i + 1 : n], x[i + 1 :]))
        x[i] = (row[n] - known) / row[i]
    return x


def gauss_elimination(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve the system by Gaussian elimination and back substitution."""
    return back_substitute(forward_eliminate(augmented))


def gauss_jordan(augmented: Sequence[Sequence[float]]) -> list[float]:
    """Solve the system by Gauss–Jordan elimination."""
    a = _augmented(augmented)
    n = len(a)
    for k, pivot_row in enumerate(a):
        for i, row in enumerate(a):
            if i != k:
                _eliminate(row, pivot_row, k)
    return [row[n] / row[i] for i, row in enumerate(a)]


def doolittle(matrix: Sequence[Sequence[float]]) -> tuple[Matrix, Matrix]:
    """Factor a square matrix as ``L @ U`` with unit-diagonal ``L``."""
    a = _square(matrix)
    n = len(a)
    lower = [[0.0] * n for _ in range(n)]
    upper = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i, n):
            upper[i][j] = a[i][j] - sum(lower[i][k] * upper[k][j] for k in range(i))
        lower[i][i] = 1.0
        for j in range(i + 1, n):
            if upper[i][i] == 0:
                raise ValueError(f"zero pivot in column {i}")
            residual = a[j][i] - sum(lower[j][k] * upper[k][i] for k in range(i))
            lower[j][i] = residual / upper[i][i]
    return lower, upper


def _jacobi_sweep(a: Matrix, previous: list[float]) -> list[float]:
    n = len(a)
    return [
        (row[n] - sum(c * v for j, (c, v) in enumerate(zip(row[:n], previous)) if j != i))
        / row[i]
        for i, row in enumerate(a)
    ]


def _seidel_sweep(a: Matrix, previous: list[float]) -> list[float]:
    n = len(a)
    x = list(previous)
    for i, row in enumerate(a):
        off = sum(c * v for j, (c, v) in enumerate(zip(row[:n], x)) if j != i)
        x[i] = (row[n] - off) / row[i]
    return x


def _converged(new: float, old: float, tol: float) -> bool:
    change = abs(new - old)
    if new == 0:
        return change == 0
    return change / abs(new) < tol


def _iterate(
    augmented: Sequence[Sequence[float]],
    sweep: Callable[[Matrix, list[float]], list[float]],
    tol: float,
    max_iter: int,
) -> IterationResult:
    a = _augmented(augmented)
    if any(row[i] == 0 for i, row in enumerate(a)):
        raise ValueError("diagonal elements must be non-zero")
    previous = [0.0] * len(a)
    history: list[tuple[float, ...]] = []
    for k in range(1, max_iter + 1):
        current = sweep(a, previous)
        history.append(tuple(current))
        if _converged(current[0], previous[0], tol):
            return IterationResult(tuple(current), k, tuple(history))
        previous = current
    raise NotConvergedError("maximum number of iterations exceeded")


def jacobi(
    augmented: Sequence[Sequence[float]], tol: float = 1e-4, max_iter: int = 100
) -> IterationResult:
    """Solve the system with Jacobi iteration from a zero start.

    Stops when the relative change of the first unknown is below ``tol``.
    """
    return _iterate(augmented, _jacobi_sweep, tol, max_iter)


def gauss_seidel(
    augmented: Sequence[Sequence[float]], tol: float = 1e-4, max_iter: int = 100
) -> IterationResult:
    """Solve the system with Gauss–Seidel iteration from a zero start.

    Stops when the relative change of the first unknown is below ``tol``.
    """
    return _iterate(augmented, _seidel_sweep, tol, max_iter)