import pytest

from core import EvalError
from expression import Expression
from numeric import solve_root


def test_finds_left_root(quadratic):
    assert quadratic.solve("x", 100, -10, 0) == pytest.approx(-2, abs=1e-9)


def test_finds_right_root(quadratic):
    assert quadratic.solve("x", 100, 0, 10) == pytest.approx(3, abs=1e-9)


@pytest.mark.parametrize("iterations", [1, 2, 3, 5, 8, 13, 21])
def test_error_is_bounded_by_halved_bracket(quadratic, iterations):
    root = quadratic.solve("x", iterations, -10, 0)
    assert abs(root + 2) <= 10 / 2 ** (iterations + 1)


def test_more_iterations_tighten_the_estimate(quadratic):
    errors = [abs(quadratic.solve("x", n, 0, 10) - 3) for n in (5, 15, 30)]
    assert errors[2] < errors[1] < errors[0]


def test_stops_when_midpoint_is_a_root():
    expr = Expression("x-t")
    assert expr.solve("x", 50, 0, 1, bindings={"t": 0.5}) == 0.5


def test_works_on_a_bare_program(quadratic):
    assert solve_root(quadratic.program, "x", 60, 0, 10) == pytest.approx(3, abs=1e-9)


def test_unbracketed_interval_raises_when_checked():
    expr = Expression("x^2+1")
    with pytest.raises(EvalError, match="not bracketed"):
        expr.solve("x", 20, -1, 1, check_bracket=True)


def test_unbracketed_interval_is_caller_responsibility_by_default():
    expr = Expression("x^2+1")
    root = expr.solve("x", 20, -1, 1)
    assert -1 <= root <= 1


def test_unbound_variable_surfaces_from_solver():
    with pytest.raises(EvalError, match="unbound variable"):
        Expression("x+k").solve("x", 10, -1, 1)
