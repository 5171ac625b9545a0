"""表达式模块 - 解析、求值、求根、采样的统一入口"""
from .expression import Expression

__all__ = ['Expression']
