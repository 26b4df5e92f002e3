# numethods

A collection of classic numerical methods written in plain Python. It needs no
third-party packages.

## Modules

- `numethods.roots` provides `bisection`, `secant` and `fixed_point`.
  - Each function returns a `RootResult` with `root` and `iterations`.
  - `bisection` raises `NoBracketError` (a `ValueError`) when `f(x1) * f(x2) > 0`.
  - All three raise `ConvergenceError` (a `RuntimeError`) when `max_iter` is
    reached.
  - `secant` also raises `ConvergenceError` when two successive function values
    are equal.
- `numethods.interpolation` provides the following:
  - `lagrange` evaluates the Lagrange polynomial through a set of points.
  - `difference_table` builds the forward difference table.
  - `newton_forward` and `newton_backward` apply Newton's difference formulas
    to equally spaced points.
- `numethods.integration` provides these rules:
  - `trapezoidal` is the composite trapezoidal rule.
  - `simpson_13` is Simpson's 1/3 rule. `n` must be positive and even.
  - `simpson_38` is Simpson's 3/8 rule. `n` must be a positive multiple of 3.
  - `gauss_legendre_2` and `gauss_legendre_3` are Gauss–Legendre quadrature
    with two and three points.
  - `romberg` is Romberg integration with an `n`-row table. The default is 5
    rows.
- `numethods.ode` provides `euler`, `heun` and `runge_kutta4` for
  `y' = f(x, y)`. Each one takes `int((xp - x0) / h)` steps and returns the
  final `(x, y)` pair.
- `numethods.linear` solves square systems given as an `n x (n+1)` augmented
  matrix. None of the solvers pivot, so a zero pivot raises `ValueError`.
  - `forward_eliminate`, `back_substitute`, `gauss_elimination` and
    `gauss_jordan` are direct solvers.
  - `doolittle(matrix)` returns `(L, U)`. `L` has a unit diagonal.
  - `jacobi` and `gauss_seidel` start from zero and return an
    `IterationResult` with `solution`, `iterations` and the `history` of every
    sweep. They stop when the relative change of the first unknown falls below
    `tol`. They raise `NotConvergedError` after `max_iter` sweeps.
- `numethods.pde` relaxes equations on a grid with Gauss–Seidel sweeps.
  - `laplace_grid(m, n)` builds the starting grid. The top row is 100 and every
    other cell is 0.
  - `solve_laplace` solves Laplace's equation.
  - `solve_poisson` solves Poisson's equation with zero boundaries. Its source
    term is a constant or a function of the indices `(i, j)`.
  - Both solvers return a `GridSolution` with `grid`, `iterations`, `max_diff`
    and `converged`. They do not raise when `max_iter` is reached.
    `converged` is then `False`.
  - `format_grid` renders a grid as text.

## Installation

```
pip install .
```

## Examples

Find a root of x² − 4x − 10 between 5 and 6:

```python
from numethods.roots import bisection

result = bisection(lambda x: x * x - 4 * x - 10, 5.0, 6.0)
print(result.root, result.iterations)
```

Integrate x² over [0, 3] with Simpson's 1/3 rule on six sub-intervals:

```python
from numethods.integration import simpson_13

area = simpson_13(lambda x: x * x, 0.0, 3.0, 6)
```

Solve a linear system given as an augmented matrix:

```python
from numethods.linear import gauss_elimination

solution = gauss_elimination([
    [2.0, 1.0, 5.0],
    [1.0, 3.0, 10.0],
])
```

Advance dy/dx = x² + y² from (0, 0) to x = 0.4 with fourth-order Runge–Kutta:

```python
from numethods.ode import runge_kutta4

x, y = runge_kutta4(lambda x, y: x * x + y * y, 0.0, 0.0, 0.4, 0.1)
```

## Command line

The `numethods` command relaxes Laplace's or Poisson's equation and prints the
number of sweeps, the last maximum change and the resulting grid.

```
numethods laplace 5 5
numethods poisson 6 6 0.1
```

`laplace` takes the rows `m` and the columns `n`. It also accepts `--tol`
(default `1e-6`) and `--max-iter` (default `1000`).

`poisson` also takes the grid spacing `h`. It accepts `--source` (a constant,
default `1.0`), `--tol` (default `1e-6`) and `--max-iter` (default `10000`).

## What it does not do

The command line only covers the grid solvers. The other methods are
functions you call from Python code. There is no interactive prompt for
entering data, and the package does not plot anything.

## Running the tests

```
pip install .[test]
pytest
```