import pandas as pd
import pytest

from expression import Expression
from numeric import sample


def test_sample_visits_at_least_n_points_inside_interval():
    expr = Expression("x^2")
    low, high, n = 0.0, 1.0, 10
    step = (high - low) / n
    seen = []
    expr.sample("x", low, high, step, visit=lambda i, v: seen.append((i, v)))
    assert len(seen) >= n
    assert all(low <= i < high + step for i, _ in seen)
    assert all(v == pytest.approx(i * i) for i, v in seen)


def test_sample_returns_points_when_no_callback():
    points = Expression("2x").sample("x", 0, 2, 1)
    assert points == [(0, 0.0), (1, 2.0), (2, 4.0)]


def test_default_step_uses_thousand_divisions():
    points = Expression("x").sample("x", 0, 1)
    assert len(points) >= 1000
    assert points[1][0] == pytest.approx(0.001)


def test_reversed_interval_samples_nothing():
    assert Expression("x").sample("x", 1, 0, 0.1) == []


def test_reversed_interval_with_default_step_samples_nothing():
    assert Expression("x").sample("x", 1, 0) == []


def test_degenerate_interval_samples_single_point():
    seen = []
    points = Expression("x*2").sample("x", 1, 1, visit=lambda i, v: seen.append(i))
    assert points == [(1, 2.0)]
    assert seen == [1]


def test_degenerate_interval_ignores_step():
    assert Expression("x").sample("x", 3, 3, 0) == [(3, 3.0)]


@pytest.mark.parametrize("step", [0, -0.5])
def test_non_positive_step_is_rejected(step):
    with pytest.raises(ValueError):
        Expression("x").sample("x", 0, 1, step)


def test_other_variables_come_from_bindings():
    points = Expression("x+t").sample("x", 0, 1, 0.5, bindings={"t": 10})
    assert [v for _, v in points] == [10, 10.5, 11]


def test_sampled_variable_overrides_binding():
    points = Expression("x").sample("x", 0, 1, 1, bindings={"x": 99})
    assert [v for _, v in points] == [0, 1]


def test_sample_on_bare_program():
    expr = Expression("x*3")
    assert sample(expr.program, "x", 1, 1, 1) == [(1, 3.0)]


def test_sample_series_is_indexed_by_input():
    expr = Expression("(x-1)^2")
    series = expr.sample_series("x", 0, 2, 1)
    assert isinstance(series, pd.Series)
    assert series.index.name == "x"
    assert series.name == "(x-1)^2"
    assert list(series.index) == [0, 1, 2]
    assert list(series.values) == [1, 0, 1]


def test_nmin_finds_grid_minimum():
    x, value = Expression("(x-1)^2+3").nmin("x", -10, 10, 0.5)
    assert x == 1
    assert value == 3


def test_nsolve_finds_closest_grid_point():
    x, error = Expression("x^2").nsolve("x", 4, 0, 5, 0.25)
    assert x == 2
    assert error == 0
