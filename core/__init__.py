"""核心模块 - Token系统、调度场转换、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, TOKEN_DEFINITIONS, FUNCTION_NAMES,
    preprocess_expression, tokenize
)
from .shunting_yard import ShuntingYardConverter
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .errors import (
    ParseError, ParseErrorKind, UnrecognizedTokenError, MissingOperatorError,
    MissingOperandError, MalformedNumberError, MismatchedBracketError
)

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'FUNCTION_NAMES',
    'preprocess_expression', 'tokenize',
    'ShuntingYardConverter', 'RPNEvaluator', 'Operators',
    'ParseError', 'ParseErrorKind', 'UnrecognizedTokenError', 'MissingOperatorError',
    'MissingOperandError', 'MalformedNumberError', 'MismatchedBracketError'
]
