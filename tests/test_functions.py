import math

import pytest

from core import FUNCTION_TABLE, EvalError, evaluate, list_functions, parse, tokenize

REQUIRED_ARITY = {
    "abs": 1, "sin": 1, "cos": 1, "tan": 1, "asin": 1, "acos": 1, "atan": 1,
    "sec": 1, "csc": 1, "cot": 1, "ceil": 1, "round": 1, "floor": 1, "rand": 0,
    "ln": 1, "log": 1, "logn": 2, "sqrt": 1, "sign": 1, "max": 2, "min": 2, "iff": 3,
}


def _eval(source):
    return evaluate(parse(tokenize(source)))


def test_list_functions_reports_declared_arity():
    assert list_functions() == REQUIRED_ARITY


def test_function_names_are_multi_character():
    assert all(len(name) >= 2 for name in FUNCTION_TABLE)


def test_function_table_is_read_only():
    with pytest.raises(TypeError):
        FUNCTION_TABLE["foo"] = abs


@pytest.mark.parametrize("name,arity", sorted(REQUIRED_ARITY.items()))
def test_every_function_consumes_its_arity(name, arity):
    args = ",".join(["0.5"] * arity)
    result = _eval(f"{name}({args})")
    assert isinstance(result, float)


@pytest.mark.parametrize("name,arity", sorted(REQUIRED_ARITY.items()))
def test_one_argument_too_many_leaves_extra_operand(name, arity):
    args = ",".join(["0.5"] * (arity + 1))
    with pytest.raises(EvalError, match="extra operands"):
        _eval(f"{name}({args})")


@pytest.mark.parametrize("source,expected", [
    ("abs(-2)", 2),
    ("sin(0)", 0),
    ("cos(0)", 1),
    ("sec(0)", 1),
    ("atan(1)*4", math.pi),
    ("ceil(1.2)", 2),
    ("floor(-1.2)", -2),
    ("round(2.5)", 3),
    ("round(-2.5)", -2),
    ("round(2.4)", 2),
    ("ln(1)", 0),
    ("log(1000)", 3),
    ("sqrt(16)", 4),
    ("sign(-3)", -1),
    ("sign(0)", 0),
    ("max(2,5)", 5),
    ("min(2,5)", 2),
    ("iff(1,7,9)", 7),
])
def test_function_values(source, expected):
    assert _eval(source) == pytest.approx(expected)


def test_domain_errors_are_nan():
    assert math.isnan(_eval("asin(2)"))
    assert math.isnan(_eval("sqrt(0-1)"))


def test_cot_of_zero_is_infinite():
    assert _eval("cot(0)") == math.inf


def test_rand_is_in_unit_interval():
    for _ in range(20):
        assert 0 <= _eval("rand()") < 1
