"""数值模块 - 区间采样和二分法求根"""
from .sampler import sample, sample_series, nmin, nsolve, default_step
from .solver import solve_root

__all__ = ['sample', 'sample_series', 'nmin', 'nsolve', 'default_step', 'solve_root']
