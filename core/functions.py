"""core/functions.py - 函数表"""
import inspect
import logging
from types import MappingProxyType

import numpy as np

logger = logging.getLogger(__name__)

_RNG = np.random.default_rng()


class Functions:
    """所有具名函数的静态方法集合，参数个数即 arity"""

    # 一元函数====================

    @staticmethod
    def abs(x):
        return np.abs(x)

    @staticmethod
    def sin(x):
        return np.sin(x)

    @staticmethod
    def cos(x):
        return np.cos(x)

    @staticmethod
    def tan(x):
        return np.tan(x)

    @staticmethod
    def asin(x):
        return np.arcsin(x)

    @staticmethod
    def acos(x):
        return np.arccos(x)

    @staticmethod
    def atan(x):
        return np.arctan(x)

    @staticmethod
    def sec(x):
        return 1.0 / np.cos(x)

    @staticmethod
    def csc(x):
        return 1.0 / np.sin(x)

    @staticmethod
    def cot(x):
        return 1.0 / np.tan(x)

    @staticmethod
    def ceil(x):
        return np.ceil(x)

    @staticmethod
    def round(x):
        """四舍五入，.5 向上取整（-2.5 -> -2）"""
        return np.floor(x + 0.5)

    @staticmethod
    def floor(x):
        return np.floor(x)

    @staticmethod
    def ln(x):
        return np.log(x)

    @staticmethod
    def log(x):
        """以10为底"""
        return np.log10(x)

    @staticmethod
    def sqrt(x):
        return np.sqrt(x)

    @staticmethod
    def sign(x):
        return np.sign(x)

    # 零元函数====================

    @staticmethod
    def rand():
        """[0, 1) 均匀分布随机数"""
        return _RNG.random()

    # 二元函数====================

    @staticmethod
    def logn(x, base):
        """以 base 为底的对数：logn(8, 2) == 3"""
        return np.log(x) / np.log(base)

    @staticmethod
    def max(a, b):
        return np.maximum(a, b)

    @staticmethod
    def min(a, b):
        return np.minimum(a, b)

    # 三元函数====================

    @staticmethod
    def iff(condition, then_value, else_value):
        """条件选择：condition 非零（且非NaN）取 then_value"""
        if condition and not np.isnan(condition):
            return then_value
        return else_value


FUNCTION_NAMES = (
    'abs', 'sin', 'cos', 'tan', 'asin', 'acos', 'atan', 'sec', 'csc', 'cot',
    'ceil', 'round', 'floor', 'rand', 'ln', 'log', 'logn', 'sqrt', 'sign',
    'max', 'min', 'iff',
)


def _build_function_table():
    table = {}
    for name in FUNCTION_NAMES:
        func = getattr(Functions, name)
        if len(name) < 2:
            # 单字符标识符总是变量
            raise ValueError(f"Function name must have at least 2 characters: {name}")
        table[name] = func
    logger.debug(f"Function table built with {len(table)} entries")
    return MappingProxyType(table)


# 进程级只读函数表，导入时构建一次
FUNCTION_TABLE = _build_function_table()


def get_arity(name):
    """通过参数个数得到 arity"""
    return len(inspect.signature(FUNCTION_TABLE[name]).parameters)


# arity 同样只计算一次
FUNCTION_ARITY = MappingProxyType({name: get_arity(name) for name in FUNCTION_TABLE})


def is_function(name):
    return name in FUNCTION_TABLE


def list_functions():
    """返回 {name: arity}，供“可用函数列表”展示"""
    return dict(FUNCTION_ARITY)
