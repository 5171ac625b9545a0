"""core/token_system.py"""
from enum import Enum


class TokenType(Enum):
    NUMBER = "number"              # 数值字面量
    VARIABLE = "variable"          # 单字符变量
    FUNCTION = "function"          # 函数名（≥2字符）
    OPERATOR = "operator"          # 操作符
    ARG_SEPARATOR = "arg_separator"  # 参数分隔符 ,
    PAREN_OPEN = "paren_open"
    PAREN_CLOSE = "paren_close"


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class Token:
    """
    词法单元。类型在分词阶段一次性确定，之后各阶段只看 type，不再重新匹配文本。
    Token 创建后不应再修改（可哈希、可比较）。
    """
    __slots__ = ('type', 'name', 'value')

    def __init__(self, token_type, name, value=None):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'value', value)

    def __setattr__(self, key, value):
        raise AttributeError(f"Token is immutable, cannot set '{key}'")

    def __delattr__(self, key):
        raise AttributeError(f"Token is immutable, cannot delete '{key}'")

    @classmethod
    def number(cls, value):
        value = float(value)
        return cls(TokenType.NUMBER, format_number(value), value=value)

    @classmethod
    def variable(cls, name):
        return cls(TokenType.VARIABLE, name)

    @classmethod
    def function(cls, name):
        return cls(TokenType.FUNCTION, name)

    @classmethod
    def operator(cls, symbol):
        return cls(TokenType.OPERATOR, symbol)

    @property
    def text(self):
        """用于回显的源文本"""
        if self.type == TokenType.OPERATOR and self.name == 'neg':
            return '-'
        return self.name

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.name, self.value) == (other.type, other.name, other.value)

    def __hash__(self):
        return hash((self.type, self.name, self.value))

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name}, {self.name!r})"


class OperatorInfo:
    def __init__(self, symbol, precedence, associativity=Associativity.LEFT, arity=2):
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity
        self.arity = arity

    @property
    def right_associative(self):
        return self.associativity == Associativity.RIGHT


# 操作符定义：优先级由低到高  = < >  |  - +  |  * / %  |  ^  |  neg（一元负号）
# 同一层内左结合；= ^ < > 以及一元负号为右结合
OPERATOR_DEFINITIONS = {
    '=': OperatorInfo('=', 0, Associativity.RIGHT),
    '<': OperatorInfo('<', 0, Associativity.RIGHT),
    '>': OperatorInfo('>', 0, Associativity.RIGHT),
    '-': OperatorInfo('-', 1),
    '+': OperatorInfo('+', 1),
    '*': OperatorInfo('*', 2),
    '/': OperatorInfo('/', 2),
    '%': OperatorInfo('%', 2),
    '^': OperatorInfo('^', 3, Associativity.RIGHT),
    'neg': OperatorInfo('neg', 4, Associativity.RIGHT, arity=1),
}

ARG_SEPARATOR = Token(TokenType.ARG_SEPARATOR, ',')
PAREN_OPEN = Token(TokenType.PAREN_OPEN, '(')
PAREN_CLOSE = Token(TokenType.PAREN_CLOSE, ')')


def format_number(value):
    """数值的回显形式：整数值不带小数点"""
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def program_to_string(program):
    """后缀序列的调试字符串"""
    return ' '.join(token.name for token in program)
