"""core/errors.py - 表达式引擎的两类错误"""


class ExpressionError(Exception):
    """表达式引擎错误基类"""

    def __init__(self, message, source=None):
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self):
        if self.source:
            return f"{self.message} (in '{self.source}')"
        return self.message


class ExpressionSyntaxError(ExpressionError):
    """分词/解析错误：非法字符、括号不匹配、参数分隔符位置错误"""


class EvalError(ExpressionError):
    """求值错误：操作数不足、多余操作数、未绑定变量"""


__all__ = ['ExpressionError', 'ExpressionSyntaxError', 'EvalError']
