"""core/errors.py - 解析和求值错误"""
from enum import Enum


class ParseErrorKind(Enum):
    UNRECOGNIZED_TOKEN = "unrecognized_token"
    MISSING_OPERATOR = "missing_operator"
    MISSING_OPERAND = "missing_operand"
    MALFORMED_NUMBER = "malformed_number"
    MISMATCHED_BRACKET = "mismatched_bracket"


class ParseError(Exception):
    """所有解析失败的基类，携带可读信息、错误类别和原始表达式"""
    kind = None

    def __init__(self, message, expression=None):
        super().__init__(message)
        self.message = message
        self.expression = expression

    def __str__(self):
        if self.expression is not None:
            return f"{self.message} (expression: {self.expression!r})"
        return self.message


class UnrecognizedTokenError(ParseError):
    kind = ParseErrorKind.UNRECOGNIZED_TOKEN


class MissingOperatorError(ParseError):
    kind = ParseErrorKind.MISSING_OPERATOR


class MissingOperandError(ParseError):
    kind = ParseErrorKind.MISSING_OPERAND


class MalformedNumberError(ParseError):
    kind = ParseErrorKind.MALFORMED_NUMBER


class MismatchedBracketError(ParseError):
    kind = ParseErrorKind.MISMATCHED_BRACKET
