import pytest

from numethods.cli import main
from numethods.pde import format_grid, solve_laplace, solve_poisson


def test_laplace_output(capsys):
    assert main(["laplace", "4", "5"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    expected = solve_laplace(4, 5)
    assert lines[0] == (
        f"Converged in {expected.iterations} iterations "
        f"with max diff = {expected.max_diff:e}"
    )
    assert lines[1] == "Resulting grid:"
    assert "\n".join(lines[2:]) + "\n" == format_grid(expected.grid)


def test_poisson_output(capsys):
    assert main(["poisson", "4", "4", "0.5"]) == 0
    out = capsys.readouterr().out
    expected = solve_poisson(4, 4, 0.5)
    assert out.startswith(f"Converged in {expected.iterations} iterations")
    assert out.endswith(format_grid(expected.grid))
    assert len(out.splitlines()) == 2 + 4


def test_max_iter_option(capsys):
    main(["laplace", "8", "8", "--max-iter", "2"])
    assert capsys.readouterr().out.startswith("Converged in 2 iterations")


@pytest.mark.parametrize(
    "argv",
    [["laplace", "0", "3"], ["poisson", "3", "-1", "0.1"], ["laplace", "3"], []],
)
def test_bad_arguments_exit(argv, capsys):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2