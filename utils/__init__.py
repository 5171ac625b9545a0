"""工具模块"""
from .bench import bench, benchmark_parse, benchmark_eval

__all__ = ['bench', 'benchmark_parse', 'benchmark_eval']
