"""core/tokenizer.py - 把中缀源文本切分为带类型的 Token"""
import logging
import re

from config.config import TOKENIZER_CONFIG
from core.errors import ExpressionSyntaxError
from core.functions import is_function
from core.token_system import (
    Token, TokenType, ARG_SEPARATOR, PAREN_OPEN, PAREN_CLOSE
)

logger = logging.getLogger(__name__)

NUMBER_PATTERN = r"\d*\.?\d+"

# 数字紧跟字母视为隐式乘法：10x -> 10*x
_IMPLIED_MULTIPLY = re.compile(rf"({NUMBER_PATTERN})(?=[A-Za-z])")

# 按顺序尝试：函数名必须先于单字符变量，否则 sin 会被拆成 s i n
_TOKEN_PATTERN = re.compile(rf"""
    (?P<separator>,)
  | (?P<number>{NUMBER_PATTERN})
  | (?P<function>[A-Za-z]{{2,}})(?=\s*\()
  | (?P<variable>[A-Za-z])(?![A-Za-z])
  | (?P<identifier>[A-Za-z]{{2,}})
  | (?P<operator>[-+*/%^=<>])
  | (?P<paren>[()])
""", re.VERBOSE)

_WHITESPACE = re.compile(r"\s+")

# 这些 token 之后出现的 '-' 没有左操作数，是一元负号
_UNARY_CONTEXT = (TokenType.OPERATOR, TokenType.PAREN_OPEN, TokenType.ARG_SEPARATOR)


class Tokenizer:

    @staticmethod
    def apply_implied_multiplication(source):
        """文本预处理，只做一次"""
        return _IMPLIED_MULTIPLY.sub(r"\1*", source)

    @staticmethod
    def tokenize(source, implied_multiplication=None):
        """
        从左到右扫描源文本
        Args:
            source: 中缀表达式文本
            implied_multiplication: 是否启用隐式乘法，默认读配置
        Returns:
            Token 列表（中缀顺序）
        Raises:
            ExpressionSyntaxError: 有子串不匹配任何 token 模式
        """
        if not isinstance(source, str):
            raise TypeError(f"Expression source must be a string, got {type(source).__name__}")

        if implied_multiplication is None:
            implied_multiplication = TOKENIZER_CONFIG['implied_multiplication']
        text = Tokenizer.apply_implied_multiplication(source) if implied_multiplication else source

        tokens = []
        pos = 0
        while pos < len(text):
            blank = _WHITESPACE.match(text, pos)
            if blank:
                pos = blank.end()
                continue

            match = _TOKEN_PATTERN.match(text, pos)
            if match is None:
                raise ExpressionSyntaxError(
                    f"unrecognized character '{text[pos]}' at position {pos}", source)

            kind = match.lastgroup
            lexeme = match.group(kind)

            if kind == 'separator':
                tokens.append(ARG_SEPARATOR)
            elif kind == 'number':
                tokens.append(Token(TokenType.NUMBER, lexeme, value=float(lexeme)))
            elif kind == 'function':
                if not is_function(lexeme):
                    raise ExpressionSyntaxError(f"unknown function '{lexeme}'", source)
                tokens.append(Token.function(lexeme))
            elif kind == 'variable':
                tokens.append(Token.variable(lexeme))
            elif kind == 'identifier':
                # 多字符标识符只能是函数调用
                raise ExpressionSyntaxError(
                    f"unrecognized identifier '{lexeme}' (function names must be followed by '(')", source)
            elif kind == 'operator':
                if lexeme == '-' and (not tokens or tokens[-1].type in _UNARY_CONTEXT):
                    tokens.append(Token.operator('neg'))
                else:
                    tokens.append(Token.operator(lexeme))
            else:
                tokens.append(PAREN_OPEN if lexeme == '(' else PAREN_CLOSE)

            pos = match.end()

        logger.debug(f"infix: {' '.join(t.name for t in tokens)}")
        return tokens

    @staticmethod
    def normalize_source(tokens):
        """Token 重新拼接成去掉空白的显示文本"""
        return ''.join(token.text for token in tokens)


def tokenize(source, implied_multiplication=None):
    return Tokenizer.tokenize(source, implied_multiplication)
