"""numeric/solver.py - 二分法求根"""
import logging

import numpy as np

from config.config import SOLVER_CONFIG
from core.errors import EvalError
from core.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


def solve_root(program, variable, iterations=None, low=-1.0, high=1.0,
               bindings=None, check_bracket=None, source=None):
    """
    二分法（区间套）求根，不求导数，只要区间有效就不会发散，收敛为线性

    前提：函数在 [low, high] 上连续且恰好变号一次。默认不检查，由调用方保证；
    check_bracket=True 时端点同号会抛 EvalError。

    Args:
        program: 后缀 Token 序列
        variable: 求解变量名
        iterations: 最大迭代次数
        low, high: 区间端点
        bindings: 其他变量的绑定
    Returns:
        近似根 x3
    """
    if iterations is None:
        iterations = SOLVER_CONFIG['iterations']
    if check_bracket is None:
        check_bracket = SOLVER_CONFIG['check_bracket']
    zero_tol = SOLVER_CONFIG['zero_tolerance']
    width_tol = SOLVER_CONFIG['width_tolerance']

    base = RPNEvaluator.substitute(program, {k: v for k, v in (bindings or {}).items() if k != variable})

    def f(x):
        return RPNEvaluator.evaluate(base, {variable: x}, source)

    if check_bracket:
        y_low, y_high = f(low), f(high)
        if y_low != 0 and y_high != 0 and np.sign(y_low) == np.sign(y_high):
            raise EvalError(f"root is not bracketed in [{low}, {high}]", source)

    x1, x2 = low, high
    x3 = (x1 + x2) / 2
    for n in range(iterations):
        y1, y2, y3 = f(x1), f(x2), f(x3)
        logger.debug(f"iter {n}: x1={x1} ({y1}), x2={x2} ({y2}), x3={x3} ({y3})")

        if abs(y3) < zero_tol or abs(x2 - x1) / 2 < width_tol:
            logger.debug(f"Converged after {n} iterations")
            break

        if np.sign(y3) == np.sign(y1):
            x1 = x3
        else:
            x2 = x3
        x3 = (x1 + x2) / 2

    return x3
