import pytest

from core import Token, TokenType, Tokenizer, ExpressionSyntaxError, tokenize


def _types(tokens):
    return [t.type for t in tokens]


def test_tokenize_simple_sum():
    tokens = tokenize("x+1")
    assert _types(tokens) == [TokenType.VARIABLE, TokenType.OPERATOR, TokenType.NUMBER]
    assert tokens[2].value == 1.0


def test_decimal_without_leading_digit():
    (token,) = tokenize(".5")
    assert token.type == TokenType.NUMBER
    assert token.value == 0.5


def test_implied_multiplication_inserts_operator():
    tokens = tokenize("10x")
    assert tokens == [Token(TokenType.NUMBER, "10", value=10.0), Token.operator("*"), Token.variable("x")]


def test_implied_multiplication_can_be_disabled():
    tokens = tokenize("10x", implied_multiplication=False)
    assert _types(tokens) == [TokenType.NUMBER, TokenType.VARIABLE]


def test_function_names_are_not_split_into_variables():
    tokens = tokenize("sin(x)")
    assert _types(tokens) == [
        TokenType.FUNCTION, TokenType.PAREN_OPEN, TokenType.VARIABLE, TokenType.PAREN_CLOSE
    ]
    assert tokens[0].name == "sin"


def test_function_arguments_are_separated():
    tokens = tokenize("max(x, 2)")
    assert TokenType.ARG_SEPARATOR in _types(tokens)


def test_multi_letter_identifier_without_call_is_rejected():
    with pytest.raises(ExpressionSyntaxError, match="unrecognized identifier"):
        tokenize("ab+1")


def test_unknown_function_is_rejected():
    with pytest.raises(ExpressionSyntaxError, match="unknown function 'foo'"):
        tokenize("foo(x)")


def test_unrecognized_character():
    with pytest.raises(ExpressionSyntaxError, match="unrecognized character"):
        tokenize("x $ 1")


def test_leading_minus_is_unary():
    tokens = tokenize("-x")
    assert tokens[0] == Token.operator("neg")


def test_minus_after_operand_is_binary():
    tokens = tokenize("2-x")
    assert tokens[1] == Token.operator("-")


@pytest.mark.parametrize("source", ["2*-x", "(-x)", "max(1,-x)"])
def test_minus_without_left_operand_is_unary(source):
    assert Token.operator("neg") in tokenize(source)


def test_normalized_source_drops_whitespace():
    assert Tokenizer.normalize_source(tokenize("sin( x + t )")) == "sin(x+t)"


def test_normalized_source_shows_implied_multiplication():
    assert Tokenizer.normalize_source(tokenize("10x+20y+10")) == "10*x+20*y+10"


def test_normalized_source_keeps_unary_minus():
    assert Tokenizer.normalize_source(tokenize("2 * -x")) == "2*-x"


def test_non_string_source_is_rejected():
    with pytest.raises(TypeError):
        tokenize(42)


def test_tokens_cannot_be_modified():
    token = tokenize("x")[0]
    with pytest.raises(AttributeError):
        token.name = "y"
    with pytest.raises(AttributeError):
        del token.value
    assert token == Token.variable("x")
