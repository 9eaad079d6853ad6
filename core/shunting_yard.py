"""中缀表达式转逆波兰表达式 - 调度场算法"""
import logging

from core.token_system import TokenType, IMAGINARY, tokenize
from core.errors import MismatchedBracketError, UnrecognizedTokenError

logger = logging.getLogger(__name__)


class ShuntingYardConverter:
    """将 Token 序列转换为逆序存放的逆波兰序列"""

    @staticmethod
    def _number_literal(token, complex_format):
        """实数原样输出；含虚数单位的字面量经格式化器规范化"""
        if token.name == IMAGINARY:
            return complex_format.format(complex(0, 1))
        if IMAGINARY in token.name:
            return complex_format.format(complex_format.parse("0+" + token.name))
        return token.name

    @staticmethod
    def convert(tokens, complex_format):
        """
        Args:
            tokens: Token 可迭代对象（通常来自 tokenize）
            complex_format: 用于规范化虚数字面量的 ComplexFormat
        Returns:
            逆序的逆波兰字符串列表，最后一个元素最先求值
        """
        operations = []
        output = []

        for token in tokens:
            if token.type == TokenType.SEPARATOR:
                while operations and operations[-1].type != TokenType.OPEN_BRACKET:
                    output.append(operations.pop().name)

            elif token.type == TokenType.OPEN_BRACKET:
                operations.append(token)

            elif token.type == TokenType.CLOSE_BRACKET:
                while operations and operations[-1].type != TokenType.OPEN_BRACKET:
                    output.append(operations.pop().name)
                if not operations:
                    raise MismatchedBracketError("Closing bracket without matching opening bracket")
                operations.pop()
                # 函数名紧贴在它的参数列表之前
                if operations and operations[-1].type == TokenType.FUNCTION:
                    output.append(operations.pop().name)

            elif token.type == TokenType.NUMBER:
                output.append(ShuntingYardConverter._number_literal(token, complex_format))

            elif token.type == TokenType.VARIABLE:
                output.append(token.name)

            elif token.type == TokenType.OPERATOR:
                while (operations and operations[-1].type == TokenType.OPERATOR
                       and token.precedence <= operations[-1].precedence):
                    output.append(operations.pop().name)
                operations.append(token)

            elif token.type == TokenType.FUNCTION:
                operations.append(token)

            else:
                raise UnrecognizedTokenError(f"Unrecognized token: {token.name}")

        while operations:
            token = operations.pop()
            # 未闭合的左括号直接丢弃
            if token.type != TokenType.OPEN_BRACKET:
                output.append(token.name)

        output.reverse()
        logger.debug(f"RPN stack: {output}")
        return output

    @staticmethod
    def convert_expression(expression, complex_format):
        return ShuntingYardConverter.convert(tokenize(expression), complex_format)
