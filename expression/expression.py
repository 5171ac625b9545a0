import logging
from typing import Callable, Dict, Iterable, List, Optional, Tuple

import pandas as pd

from core import (
    Tokenizer, ShuntingYardParser, RPNEvaluator, TokenType, program_to_string
)
from numeric import sampler, solver

logger = logging.getLogger(__name__)


class Expression:
    """
    中缀表达式的门面：持有后缀 Program 和规范化后的源文本

    Program 是不可变的 Token 元组，同一个 Expression 可以被多次、并发地
    用不同的 bindings 求值。
    """

    def __init__(self, source: str, implied_multiplication: Optional[bool] = None):
        tokens = Tokenizer.tokenize(source, implied_multiplication)
        self.tokens = tuple(tokens)
        self.source = Tokenizer.normalize_source(tokens)
        self.program = ShuntingYardParser.parse(tokens, self.source)
        logger.debug(f"Parsed '{source}' -> {program_to_string(self.program)}")

    @classmethod
    def from_program(cls, program: Iterable, source: str = '', tokens: Iterable = ()) -> 'Expression':
        """直接包装已经是后缀顺序的 Token 序列（替换时使用）"""
        expr = cls.__new__(cls)
        expr.program = tuple(program)
        expr.source = source
        expr.tokens = tuple(tokens)
        return expr

    def clone(self) -> 'Expression':
        return Expression.from_program(self.program, self.source, self.tokens)

    @property
    def variables(self) -> List[str]:
        """尚未绑定的变量名（按首次出现排序）"""
        names = []
        for token in self.program:
            if token.type == TokenType.VARIABLE and token.name not in names:
                names.append(token.name)
        return names

    def label(self, lhs: str = 'y') -> str:
        return f"{lhs} = {self.source}"

    def substitute(self, bindings: Optional[Dict[str, float]]) -> 'Expression':
        """返回新的 Expression，原对象不变；显示文本保持原样"""
        program = RPNEvaluator.substitute(self.program, bindings)
        return Expression.from_program(program, self.source, self.tokens)

    def eval(self, bindings: Optional[Dict[str, float]] = None) -> float:
        return RPNEvaluator.evaluate(self.program, bindings, self.source)

    def sample(self, variable: str, low: float, high: float, step: Optional[float] = None,
               visit: Optional[Callable[[float, float], None]] = None,
               bindings: Optional[Dict[str, float]] = None) -> List[Tuple[float, float]]:
        return sampler.sample(self.program, variable, low, high, step, visit, bindings, self.source)

    def sample_series(self, variable: str, low: float, high: float, step: Optional[float] = None,
                      bindings: Optional[Dict[str, float]] = None) -> pd.Series:
        return sampler.sample_series(self.program, variable, low, high, step, bindings, self.source)

    def solve(self, variable: str, iterations: Optional[int] = None, low: float = -1.0, high: float = 1.0,
              bindings: Optional[Dict[str, float]] = None, check_bracket: Optional[bool] = None) -> float:
        return solver.solve_root(self.program, variable, iterations, low, high,
                                 bindings, check_bracket, self.source)

    def nmin(self, variable: str, low: float, high: float, step: Optional[float] = None,
             bindings: Optional[Dict[str, float]] = None) -> Tuple[float, float]:
        return sampler.nmin(self.program, variable, low, high, step, bindings, self.source)

    def nsolve(self, variable: str, value: float, low: float, high: float, step: Optional[float] = None,
               bindings: Optional[Dict[str, float]] = None) -> Tuple[float, float]:
        return sampler.nsolve(self.program, variable, value, low, high, step, bindings, self.source)

    def __eq__(self, other):
        if not isinstance(other, Expression):
            return NotImplemented
        return self.program == other.program

    def __hash__(self):
        return hash(self.program)

    def __str__(self):
        return self.source

    def __repr__(self):
        return f"Expression({self.source!r})"
