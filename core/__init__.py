"""核心模块 - Token系统、分词器、解析器、RPN求值器和函数表"""
from .token_system import (
    TokenType, Token, Associativity, OperatorInfo, OPERATOR_DEFINITIONS,
    format_number, program_to_string
)
from .errors import ExpressionError, ExpressionSyntaxError, EvalError
from .functions import Functions, FUNCTION_TABLE, FUNCTION_ARITY, list_functions
from .tokenizer import Tokenizer, tokenize
from .parser import ShuntingYardParser, parse
from .rpn_evaluator import RPNEvaluator, evaluate, substitute

__all__ = [
    'TokenType', 'Token', 'Associativity', 'OperatorInfo', 'OPERATOR_DEFINITIONS',
    'format_number', 'program_to_string',
    'ExpressionError', 'ExpressionSyntaxError', 'EvalError',
    'Functions', 'FUNCTION_TABLE', 'FUNCTION_ARITY', 'list_functions',
    'Tokenizer', 'tokenize', 'ShuntingYardParser', 'parse',
    'RPNEvaluator', 'evaluate', 'substitute'
]
