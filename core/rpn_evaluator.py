"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.token_system import TOKEN_DEFINITIONS, VARIABLE
from core.operators import Operators
from core.errors import MissingOperandError, MissingOperatorError, UnrecognizedTokenError

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估逆序存放的RPN序列的值"""

    @staticmethod
    def substitute_variable(stack_rpn, variable_value):
        """返回代入变量值后的副本，原序列不变"""
        value_text = repr(float(variable_value))
        return [value_text if token == VARIABLE else token for token in stack_rpn]

    @staticmethod
    def evaluate(stack_rpn, complex_format, variable_value=None):
        """
        Args:
            stack_rpn: 逆序的RPN字符串序列（最后一个元素最先处理）
            complex_format: 用于解析数字字面量的 ComplexFormat
            variable_value: 变量值；为 None 时序列中不允许出现变量
        Returns:
            complex 结果
        """
        if variable_value is None:
            if VARIABLE in stack_rpn:
                raise UnrecognizedTokenError(f"Unrecognized token: {VARIABLE}")
            tokens = list(stack_rpn)
        else:
            tokens = RPNEvaluator.substitute_variable(stack_rpn, variable_value)

        stack = []
        while tokens:
            token = tokens.pop()

            definition = TOKEN_DEFINITIONS.get(token)
            if definition is None:
                # 数字字面量，格式错误时由格式化器抛出 MalformedNumberError
                stack.append(complex_format.parse(token))
                continue

            if len(stack) < definition.arity:
                logger.debug(f"Insufficient operands for {token}: {len(stack)}")
                raise MissingOperandError(f"Missing operand for {token}")

            # 先弹出的是右操作数（pow 的指数）
            operands = [stack.pop() for _ in range(definition.arity)][::-1]
            result = complex(Operators.apply(token, *operands))
            # 每个中间结果都按当前精度舍入后再参与后续运算
            stack.append(complex_format.parse(complex_format.format(result)))

        if len(stack) > 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise MissingOperatorError("Some operator is missing")
        if not stack:
            raise MissingOperandError("Nothing to evaluate")

        return stack.pop()
