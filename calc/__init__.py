"""核心模块 - 扫描器、解析器、RPN求值器和操作符注册表"""
from .errors import (
    CalculatorError, ParseError, EvaluationError, OperatorError,
    UnexpectedEndOfExpressionError, ExpectOperatorError, UnknownPrefixOperatorError,
    UnknownOperatorError, MissingOpenParenError, MissingCloseParenError,
    StackUnderflowError, MalformedExpressionError, DivisionByZeroError,
    DomainError, RegistryFrozenError
)
from .operators import Arity, OperatorDescriptor, Operators, DEFAULT_OPERATORS
from .registry import OperatorRegistry
from .token_system import TokenType, Token
from .tokenizer import scan
from .parser import Parser, ParserState, parse
from .rpn_evaluator import RPNEvaluator
from .calculator import Calculator

__all__ = [
    'CalculatorError', 'ParseError', 'EvaluationError', 'OperatorError',
    'UnexpectedEndOfExpressionError', 'ExpectOperatorError', 'UnknownPrefixOperatorError',
    'UnknownOperatorError', 'MissingOpenParenError', 'MissingCloseParenError',
    'StackUnderflowError', 'MalformedExpressionError', 'DivisionByZeroError',
    'DomainError', 'RegistryFrozenError',
    'Arity', 'OperatorDescriptor', 'Operators', 'DEFAULT_OPERATORS',
    'OperatorRegistry', 'TokenType', 'Token', 'scan',
    'Parser', 'ParserState', 'parse', 'RPNEvaluator', 'Calculator'
]
