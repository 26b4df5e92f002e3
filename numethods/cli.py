"""Command line entry point for the Laplace and Poisson grid solvers."""

from __future__ import annotations

import argparse
from typing import Sequence

from numethods.pde import GridSolution, format_grid, solve_laplace, solve_poisson


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numethods", description="Relax Laplace's or Poisson's equation on a grid."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    laplace = commands.add_parser("laplace", help="top edge at 100, others at 0")
    laplace.add_argument("m", type=_positive_int, help="number of rows")
    laplace.add_argument("n", type=_positive_int, help="number of columns")
    laplace.add_argument("--tol", type=float, default=1e-6)
    laplace.add_argument("--max-iter", type=_positive_int, default=1000)

    poisson = commands.add_parser("poisson", help="zero edges, unit source")
    poisson.add_argument("m", type=_positive_int, help="number of rows")
    poisson.add_argument("n", type=_positive_int, help="number of columns")
    poisson.add_argument("h", type=float, help="grid spacing")
    poisson.add_argument("--source", type=float, default=1.0)
    poisson.add_argument("--tol", type=float, default=1e-6)
    poisson.add_argument("--max-iter", type=_positive_int, default=10000)
    return parser


def _report(result: GridSolution) -> None:
    print(
        f"Converged in {result.iterations} iterations "
        f"with max diff = {result.max_diff:e}"
    )
    print("Resulting grid:")
    print(format_grid(result.grid), end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, solve the requested equation and print the grid."""
    args = _parser().parse_args(argv)
    if args.command == "laplace":
        result = solve_laplace(args.m, args.n, args.tol, args.max_iter)
    else:
        result = solve_poisson(
            args.m, args.n, args.h, args.source, args.tol, args.max_iter
        )
    _report(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())