import pytest

from expression import Expression


@pytest.fixture
def quadratic() -> Expression:
    # roots at -2 and 3
    return Expression("(x+2)*(x-3)")


@pytest.fixture
def wave() -> Expression:
    return Expression("sin(x+t) + cos(3^(1/2)*(x-t))")
