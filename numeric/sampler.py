"""numeric/sampler.py - 线性区间采样，以及基于采样的网格极小值/网格求解"""
import logging
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from config.config import SAMPLER_CONFIG
from core.rpn_evaluator import RPNEvaluator

logger = logging.getLogger(__name__)


def default_step(low, high):
    return (high - low) / SAMPLER_CONFIG['default_resolution']


def sample(program, variable: str, low: float, high: float, step: Optional[float] = None,
           visit: Optional[Callable[[float, float], None]] = None,
           bindings: Optional[Dict[str, float]] = None, source=None) -> List[Tuple[float, float]]:
    """
    i 从 low 走到 high（含），每步 step，绑定 variable=i 后求值并回调 visit(i, value)

    Args:
        program: 后缀 Token 序列
        variable: 采样变量名
        low, high: 区间端点
        step: 步长，默认 (high-low)/1000
        visit: 回调 visit(i, value)
        bindings: 其他变量的绑定（如动画时间 t）
        source: 原文，仅用于错误信息
    Returns:
        [(i, value), ...]
    """
    if low > high:
        return []
    if step is None:
        step = default_step(low, high)
    if low < high and not step > 0:
        # 非正步长会无限循环
        raise ValueError(f"Sampling step must be positive, got {step}")

    # 其他变量先替换一次，循环内只替换采样变量
    base = RPNEvaluator.substitute(program, {k: v for k, v in (bindings or {}).items() if k != variable})

    points = []
    i = low
    while i <= high:
        value = RPNEvaluator.evaluate(base, {variable: i}, source)
        if visit is not None:
            visit(i, value)
        points.append((i, value))
        if low == high:
            # 区间退化为一个点
            break
        i += step

    logger.debug(f"Sampled {len(points)} points of '{variable}' over [{low}, {high}] step={step}")
    return points


def sample_series(program, variable: str, low: float, high: float, step: Optional[float] = None,
                  bindings: Optional[Dict[str, float]] = None, source=None) -> pd.Series:
    """采样结果转换为以输入值为索引的 Series"""
    points = sample(program, variable, low, high, step, bindings=bindings, source=source)
    index = pd.Index([p[0] for p in points], name=variable, dtype=float)
    return pd.Series([p[1] for p in points], index=index, name=source, dtype=float)


def nmin(program, variable: str, low: float, high: float, step: Optional[float] = None,
         bindings=None, source=None) -> Tuple[float, float]:
    """
    在采样网格上求最小值
    Returns:
        (input, min_value)；全部为 NaN 时 input 为 low、min_value 为 inf
    """
    data = {'input': low, 'min_value': np.inf}

    def visit(i, value):
        if value < data['min_value']:
            data['input'] = i
            data['min_value'] = value

    sample(program, variable, low, high, step, visit, bindings, source)
    return data['input'], data['min_value']


def nsolve(program, variable: str, value: float, low: float, high: float, step: Optional[float] = None,
           bindings=None, source=None) -> Tuple[float, float]:
    """
    在采样网格上求使 |f(i) - value| 最小的输入
    Returns:
        (input, error)
    """
    data = {'input': low, 'error': np.inf}

    def visit(i, result):
        error = abs(result - value)
        if error < data['error']:
            data['input'] = i
            data['error'] = error

    sample(program, variable, low, high, step, visit, bindings, source)
    return data['input'], data['error']
