"""expression/parser.py"""
import logging
from typing import List, Optional

from config.config import PARSER_CONFIG
from core import ParseError, ShuntingYardConverter, RPNEvaluator, UnrecognizedTokenError
from utils.complex_format import ComplexFormat

logger = logging.getLogger(__name__)


class ExpressionParser:
    """
    解析并计算复数数学表达式。

    parse() 把中缀表达式转换为逆序存放的RPN序列并保存在实例上，
    之后 evaluate() 可以用不同的变量值反复求值而无需重新解析。
    实例不是线程安全的。
    """

    def __init__(self, precision: int = PARSER_CONFIG["default_precision"]):
        self.complex_format = ComplexFormat(precision, PARSER_CONFIG["imaginary_symbol"])
        self._stack_rpn: List[str] = []

    @property
    def precision(self) -> int:
        return self.complex_format.precision

    @precision.setter
    def precision(self, value: int):
        self.complex_format.precision = value

    def set_precision(self, precision: int):
        """设置实部和虚部保留的小数位数，不需要重新解析"""
        self.precision = precision

    def get_precision(self) -> int:
        return self.precision

    def parse(self, expression: str):
        """
        Args:
            expression: 中缀表达式，例如 "-sin(3+4I)" 或 "var*2"
        Raises:
            ParseError: 表达式无法解析；此前保存的RPN序列保持不变
        """
        if not expression or not expression.strip():
            raise UnrecognizedTokenError("Empty expression", expression=expression)

        try:
            stack_rpn = ShuntingYardConverter.convert_expression(expression, self.complex_format)
        except ParseError as e:
            e.expression = expression
            logger.debug(f"Failed to parse expression {expression!r}: {e.message}")
            raise

        self._stack_rpn = stack_rpn
        logger.debug(f"Parsed {expression!r} into {len(stack_rpn)} RPN tokens")

    def _evaluate_value(self, variable_value: Optional[float]) -> complex:
        try:
            return RPNEvaluator.evaluate(self._stack_rpn, self.complex_format, variable_value)
        except ParseError as e:
            logger.debug(f"Evaluation failed: {e.message}")
            raise

    def evaluate(self, variable_value: Optional[float] = None) -> str:
        """
        计算已解析的表达式。

        Args:
            variable_value: "var" 的取值；省略时表达式中不能包含变量
        Returns:
            "<实部> <符号> <虚部>I" 形式的字符串；尚未解析时返回空字符串
        """
        if not self._stack_rpn:
            return ""
        result = self.format(self._evaluate_value(variable_value))
        logger.debug(f"Result: {result}")
        return result

    def evaluate_complex(self, variable_value: Optional[float] = None) -> complex:
        """与 evaluate 相同，但把格式化后的结果解析回 complex"""
        return self.complex_format.parse(self.evaluate(variable_value))

    def format(self, value: complex) -> str:
        return self.complex_format.format(value)

    def get_stack_rpn(self) -> List[str]:
        """返回保存的RPN序列副本（逆序，最后一个元素最先求值）"""
        return list(self._stack_rpn)
