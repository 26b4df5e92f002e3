import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from numethods.linear import (
    IterationResult,
    NotConvergedError,
    back_substitute,
    doolittle,
    forward_eliminate,
    gauss_elimination,
    gauss_jordan,
    gauss_seidel,
    jacobi,
)

A = [[10.0, -1.0, 2.0], [-1.0, 11.0, -1.0], [2.0, -1.0, 10.0]]
X = [1.0, 2.0, -1.0]


def _matmul(p, q):
    return [[sum(a * b for a, b in zip(row, col)) for col in zip(*q)] for row in p]


def _augment(a, x):
    return [row + [sum(c * v for c, v in zip(row, x))] for row in a]


@st.composite
def dominant_systems(draw):
    n = draw(st.integers(min_value=1, max_value=4))
    cells = st.integers(min_value=-9, max_value=9)
    a = [[float(draw(cells)) for _ in range(n)] for _ in range(n)]
    for i, row in enumerate(a):
        row[i] = sum(abs(v) for j, v in enumerate(row) if j != i) + 1.0
    x = [float(draw(cells)) for _ in range(n)]
    return a, x


@pytest.mark.parametrize("solver", [gauss_elimination, gauss_jordan])
def test_direct_solvers_recover_solution(solver):
    assert solver(_augment(A, X)) == pytest.approx(X)


@settings(max_examples=50)
@given(dominant_systems())
def test_elimination_round_trip(system):
    a, x = system
    assert gauss_elimination(_augment(a, x)) == pytest.approx(x, abs=1e-9)
    assert gauss_jordan(_augment(a, x)) == pytest.approx(x, abs=1e-9)


def test_forward_eliminate_is_upper_triangular():
    echelon = forward_eliminate(_augment(A, X))
    for i, row in enumerate(echelon):
        assert all(v == pytest.approx(0.0) for v in row[:i])
    assert back_substitute(echelon) == pytest.approx(X)


def test_forward_eliminate_leaves_input_untouched():
    system = _augment(A, X)
    snapshot = [row[:] for row in system]
    forward_eliminate(system)
    assert system == snapshot


def test_zero_pivot_raises():
    with pytest.raises(ValueError):
        gauss_elimination([[0.0, 1.0, 1.0], [1.0, 0.0, 1.0]])


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        gauss_jordan([[1.0, 2.0], [3.0, 4.0]])


def test_doolittle_factors_matrix():
    lower, upper = doolittle(A)
    assert _matmul(lower, upper) == [pytest.approx(row) for row in A]
    for i in range(3):
        assert lower[i][i] == 1.0
        assert all(v == 0.0 for v in lower[i][i + 1 :])
        assert all(v == 0.0 for v in upper[i][:i])


@settings(max_examples=50)
@given(dominant_systems())
def test_doolittle_round_trip(system):
    a, _ = system
    lower, upper = doolittle(a)
    product = _matmul(lower, upper)
    for got, want in zip(product, a):
        assert got == pytest.approx(want, abs=1e-9)


def test_doolittle_rejects_non_square():
    with pytest.raises(ValueError):
        doolittle([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])


@pytest.mark.parametrize("solver", [jacobi, gauss_seidel])
def test_iterative_solvers_converge(solver):
    result = solver(_augment(A, X))
    assert isinstance(result, IterationResult)
    assert list(result.solution) == pytest.approx(X, abs=1e-3)
    assert len(result.history) == result.iterations
    assert result.history[-1] == result.solution


def test_gauss_seidel_needs_no_more_sweeps_than_jacobi():
    system = _augment(A, X)
    assert gauss_seidel(system).iterations <= jacobi(system).iterations


@pytest.mark.parametrize("solver", [jacobi, gauss_seidel])
def test_iteration_budget_exceeded(solver):
    with pytest.raises(NotConvergedError):
        solver(_augment(A, X), max_iter=1)


@pytest.mark.parametrize("solver", [jacobi, gauss_seidel])
def test_zero_diagonal_rejected(solver):
    with pytest.raises(ValueError):
        solver([[0.0, 1.0, 1.0], [1.0, 1.0, 2.0]])