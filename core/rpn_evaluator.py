"""RPN表达式求值器 - 操作数栈 + 函数表"""
import logging

import numpy as np

from core.errors import EvalError
from core.functions import FUNCTION_TABLE, FUNCTION_ARITY
from core.token_system import Token, TokenType, OPERATOR_DEFINITIONS

logger = logging.getLogger(__name__)


# 内置操作符，返回 float64；比较结果用 1.0 / 0.0 表示
BUILTIN_OPERATORS = {
    '+': np.add,
    '-': np.subtract,
    '*': np.multiply,
    '/': np.divide,
    '%': np.fmod,  # 余数符号与被除数一致
    '^': np.power,
    '=': lambda a, b: np.float64(a == b),
    '<': lambda a, b: np.float64(a < b),
    '>': lambda a, b: np.float64(a > b),
    'neg': np.negative,
}


class RPNEvaluator:
    """在操作数栈上执行后缀 Program"""

    @staticmethod
    def substitute(program, bindings):
        """
        纯函数：把 bindings 中出现的变量替换为数值 Token，其余原样复制
        Args:
            program: 后缀 Token 序列
            bindings: {变量名: 数值}
        Returns:
            新的 Token 元组
        """
        if not bindings:
            return tuple(program)
        return tuple(
            Token.number(bindings[token.name])
            if token.type == TokenType.VARIABLE and token.name in bindings
            else token
            for token in program
        )

    @staticmethod
    def _apply(token, stack):
        """弹出 arity 个操作数，调用后把结果压栈"""
        if token.name in FUNCTION_TABLE:
            func = FUNCTION_TABLE[token.name]
            arity = FUNCTION_ARITY[token.name]
        elif token.name in BUILTIN_OPERATORS:
            func = BUILTIN_OPERATORS[token.name]
            arity = OPERATOR_DEFINITIONS[token.name].arity
        else:
            raise EvalError(f"unknown operator or function '{token.name}'")

        if len(stack) < arity:
            raise EvalError("incomplete expression: too few operands")

        # 最后声明的参数最先出栈
        args = [stack.pop() for _ in range(arity)][::-1]
        stack.append(np.float64(func(*args)))

    @staticmethod
    def evaluate(program, bindings=None, source=None):
        """
        Args:
            program: 后缀 Token 序列
            bindings: {变量名: 数值}，可选
            source: 原文，仅用于错误信息
        Returns:
            float 结果
        Raises:
            EvalError: 操作数不足 / 多余操作数 / 未绑定变量
        """
        program = RPNEvaluator.substitute(program, bindings)
        stack = []

        # 除零等按 IEEE 规则得到 inf / nan，不抛异常
        with np.errstate(all='ignore'):
            for token in program:
                if token.type == TokenType.NUMBER:
                    stack.append(np.float64(token.value))
                elif token.type == TokenType.VARIABLE:
                    # 不支持符号运算
                    raise EvalError(f"unbound variable '{token.name}'", source)
                elif token.type in (TokenType.OPERATOR, TokenType.FUNCTION):
                    try:
                        RPNEvaluator._apply(token, stack)
                    except EvalError as e:
                        e.source = source
                        raise
                else:
                    raise EvalError(f"unexpected token {token!r} in program", source)

        if not stack:
            raise EvalError("incomplete expression: too few operands", source)
        if len(stack) > 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvalError("incomplete expression: extra operands", source)

        return float(stack[0])


def evaluate(program, bindings=None, source=None):
    return RPNEvaluator.evaluate(program, bindings, source)


def substitute(program, bindings):
    return RPNEvaluator.substitute(program, bindings)
