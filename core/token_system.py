"""core/token_system.py"""
import math
import re
import logging
from enum import Enum

from config.config import PARSER_CONFIG, PRECEDENCE_CONFIG
from core.errors import UnrecognizedTokenError

logger = logging.getLogger(__name__)

IMAGINARY = PARSER_CONFIG["imaginary_symbol"]
VARIABLE = PARSER_CONFIG["variable_token"]
SEPARATOR = PARSER_CONFIG["separator"]
OPEN_BRACKET = PARSER_CONFIG["open_bracket"]
CLOSE_BRACKET = PARSER_CONFIG["close_bracket"]
OPERATORS = PARSER_CONFIG["operators"]

# 十进制实数字面量（指数不带符号，因为 +/- 会被分词器切开）
NUMBER_PATTERN = re.compile(r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE]\d+)?")


class TokenType(Enum):
    NUMBER = "number"  # 实数或含虚数单位的字面量
    VARIABLE = "variable"
    OPERATOR = "operator"  # + - * /
    FUNCTION = "function"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    SEPARATOR = "separator"  # 函数参数分隔符


class Token:
    __slots__ = ("type", "name", "arity", "precedence")

    def __init__(self, token_type, name, arity=0, precedence=0):
        object.__setattr__(self, "type", token_type)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "arity", arity)
        object.__setattr__(self, "precedence", precedence)

    def __setattr__(self, key, value):
        raise AttributeError("Token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.name) == (other.type, other.name)

    def __hash__(self):
        return hash((self.type, self.name))

    def __repr__(self):
        return f"Token({self.type.name}, {self.name!r})"


# Token定义字典：运算符和函数是封闭集合
TOKEN_DEFINITIONS = {
    # 二元运算符
    '+': Token(TokenType.OPERATOR, '+', arity=2, precedence=PRECEDENCE_CONFIG['+']),
    '-': Token(TokenType.OPERATOR, '-', arity=2, precedence=PRECEDENCE_CONFIG['-']),
    '*': Token(TokenType.OPERATOR, '*', arity=2, precedence=PRECEDENCE_CONFIG['*']),
    '/': Token(TokenType.OPERATOR, '/', arity=2, precedence=PRECEDENCE_CONFIG['/']),

    # 一元函数
    'abs': Token(TokenType.FUNCTION, 'abs', arity=1),
    'acos': Token(TokenType.FUNCTION, 'acos', arity=1),
    'arg': Token(TokenType.FUNCTION, 'arg', arity=1),
    'asin': Token(TokenType.FUNCTION, 'asin', arity=1),
    'atan': Token(TokenType.FUNCTION, 'atan', arity=1),
    'conj': Token(TokenType.FUNCTION, 'conj', arity=1),
    'cos': Token(TokenType.FUNCTION, 'cos', arity=1),
    'cosh': Token(TokenType.FUNCTION, 'cosh', arity=1),
    'exp': Token(TokenType.FUNCTION, 'exp', arity=1),
    'imag': Token(TokenType.FUNCTION, 'imag', arity=1),
    'log': Token(TokenType.FUNCTION, 'log', arity=1),
    'neg': Token(TokenType.FUNCTION, 'neg', arity=1),
    'real': Token(TokenType.FUNCTION, 'real', arity=1),
    'sin': Token(TokenType.FUNCTION, 'sin', arity=1),
    'sinh': Token(TokenType.FUNCTION, 'sinh', arity=1),
    'sqrt': Token(TokenType.FUNCTION, 'sqrt', arity=1),
    'tan': Token(TokenType.FUNCTION, 'tan', arity=1),
    'tanh': Token(TokenType.FUNCTION, 'tanh', arity=1),

    # 二元函数
    'pow': Token(TokenType.FUNCTION, 'pow', arity=2),
}

FUNCTION_NAMES = frozenset(name for name, token in TOKEN_DEFINITIONS.items()
                           if token.type == TokenType.FUNCTION)

_DELIMITERS = OPERATORS + SEPARATOR + OPEN_BRACKET + CLOSE_BRACKET
# 分隔字符（以及角度符号）两侧的空白没有意义
_PADDING_PATTERN = re.compile(
    r"\s*([" + re.escape(_DELIMITERS + PARSER_CONFIG["degree_symbol"]) + r"])\s*"
)
# 剩余的空白中，只有两侧都是数字或小数点时才作为切分边界（"2 3"）
_NUMERIC_GAP_PATTERN = re.compile(r"(?<=[\d.])\s+(?=[\d.])")
_SPLIT_PATTERN = re.compile("([" + re.escape(_DELIMITERS) + r"])|\s+")


def is_number(text):
    """实数字面量或任何包含虚数单位的片段都视为数字"""
    return NUMBER_PATTERN.fullmatch(text) is not None or IMAGINARY in text


def is_operator(text):
    return len(text) == 1 and text in OPERATORS


def is_function(text):
    return text in FUNCTION_NAMES


def preprocess_expression(expression):
    """
    分词前的文本改写:
    1. 去掉空白（两个数字之间的空白压缩为一个空格，其余直接拼接，
       所以 "4 I" 得到 "4I"，"sin 30" 得到 "sin30"）
    2. 角度符号替换为 *π/180
    3. 紧跟在 '(' 或 ',' 之后的 +/- 改写为 0+/0-
    4. 表达式以 +/- 开头时补一个 0
    """
    expression = _PADDING_PATTERN.sub(r"\1", expression.strip())
    pieces = _NUMERIC_GAP_PATTERN.split(expression)
    expression = " ".join("".join(piece.split()) for piece in pieces)
    expression = expression.replace(
        PARSER_CONFIG["degree_symbol"], "*" + repr(math.pi) + "/180"
    )
    for sign in "-+":
        expression = expression.replace(OPEN_BRACKET + sign, OPEN_BRACKET + "0" + sign)
        expression = expression.replace(SEPARATOR + sign, SEPARATOR + "0" + sign)
    if expression[:1] in ("-", "+"):
        expression = "0" + expression
    return expression


def split_tokens(expression):
    """按运算符、分隔符、括号和空格切分，分隔字符本身也作为单独的片段"""
    for piece in _SPLIT_PATTERN.split(expression):
        if piece:
            yield piece


def classify_token(text):
    if text == OPEN_BRACKET:
        return Token(TokenType.OPEN_BRACKET, text)
    if text == CLOSE_BRACKET:
        return Token(TokenType.CLOSE_BRACKET, text)
    if text == SEPARATOR:
        return Token(TokenType.SEPARATOR, text)
    if is_operator(text) or is_function(text):
        return TOKEN_DEFINITIONS[text]
    if text == VARIABLE:
        return Token(TokenType.VARIABLE, text)
    if is_number(text):
        return Token(TokenType.NUMBER, text)
    logger.debug(f"Unrecognized token: {text!r}")
    raise UnrecognizedTokenError(f"Unrecognized token: {text}")


def tokenize(expression):
    """惰性地生成 Token 序列"""
    for piece in split_tokens(preprocess_expression(expression)):
        yield classify_token(piece)
