"""core/parser.py - 调度场算法：中缀 Token 序列 -> 后缀 Program"""
import logging

from core.errors import ExpressionSyntaxError
from core.token_system import TokenType, OPERATOR_DEFINITIONS, program_to_string

logger = logging.getLogger(__name__)


class ShuntingYardParser:
    """
    经典调度场算法，扩展支持函数调用与参数分隔符
    参考 https://en.wikipedia.org/wiki/Shunting-yard_algorithm
    """

    @staticmethod
    def _should_pop(token, top):
        """栈顶操作符是否先于当前操作符输出"""
        if top.type != TokenType.OPERATOR:
            return False
        current = OPERATOR_DEFINITIONS[token.name]
        previous = OPERATOR_DEFINITIONS[top.name]
        if current.right_associative:
            return current.precedence < previous.precedence
        return current.precedence <= previous.precedence

    @staticmethod
    def parse(tokens, source=None):
        """
        Args:
            tokens: 中缀 Token 序列
            source: 原文，仅用于错误信息
        Returns:
            后缀顺序的 Token 元组
        Raises:
            ExpressionSyntaxError: 括号不匹配 / 参数分隔符不在括号内
        """
        output, opstack = [], []

        for i, token in enumerate(tokens):
            if token.type in (TokenType.NUMBER, TokenType.VARIABLE):
                output.append(token)

            elif token.type == TokenType.FUNCTION:
                # 函数名后面必须紧跟左括号
                if i + 1 >= len(tokens) or tokens[i + 1].type != TokenType.PAREN_OPEN:
                    raise ExpressionSyntaxError(f"function '{token.name}' must be followed by '('", source)
                opstack.append(token)

            elif token.type == TokenType.ARG_SEPARATOR:
                while opstack and opstack[-1].type != TokenType.PAREN_OPEN:
                    output.append(opstack.pop())
                if not opstack:
                    raise ExpressionSyntaxError("mismatched parenthesis in function", source)

            elif token.type == TokenType.OPERATOR:
                while opstack and ShuntingYardParser._should_pop(token, opstack[-1]):
                    output.append(opstack.pop())
                opstack.append(token)

            elif token.type == TokenType.PAREN_OPEN:
                opstack.append(token)

            elif token.type == TokenType.PAREN_CLOSE:
                found = False
                while opstack:
                    if opstack[-1].type == TokenType.PAREN_OPEN:
                        found = True
                        opstack.pop()
                        break
                    output.append(opstack.pop())
                if not found:
                    raise ExpressionSyntaxError("mismatched parenthesis", source)
                # 左括号属于函数调用时，把函数名接到参数之后
                if opstack and opstack[-1].type == TokenType.FUNCTION:
                    output.append(opstack.pop())

            else:
                raise ExpressionSyntaxError(f"unexpected token {token!r}", source)

        while opstack:
            token = opstack.pop()
            if token.type == TokenType.PAREN_OPEN:
                raise ExpressionSyntaxError("mismatched parenthesis", source)
            output.append(token)

        program = tuple(output)
        logger.debug(f"postfix: {program_to_string(program)}")
        return program


def parse(tokens, source=None):
    return ShuntingYardParser.parse(tokens, source)
