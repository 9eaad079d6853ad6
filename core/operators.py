"""core/operators.py"""
import numpy as np
import logging

from core.errors import UnrecognizedTokenError

logger = logging.getLogger(__name__)

# 运算符符号到方法名的映射
OPERATOR_METHODS = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
}


class Operators:
    """所有运算符和函数的静态方法集合，操作数和结果都是复数"""

    @staticmethod
    def ensure_complex(operand):
        """确保操作数是 complex128"""
        return np.complex128(operand)

    @staticmethod
    def _real_result(value):
        """实值函数的结果也按虚部为零的复数返回"""
        return np.complex128(complex(float(value), 0.0))

    # 二元运算符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法"""
        with np.errstate(all='ignore'):
            return Operators.ensure_complex(operand1) + Operators.ensure_complex(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法"""
        with np.errstate(all='ignore'):
            return Operators.ensure_complex(operand1) - Operators.ensure_complex(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法"""
        with np.errstate(all='ignore'):
            return Operators.ensure_complex(operand1) * Operators.ensure_complex(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法：除以零得到非有限值而不是异常"""
        with np.errstate(all='ignore'):
            return np.divide(Operators.ensure_complex(operand1), Operators.ensure_complex(operand2))

    # 实值函数====================
    @staticmethod
    def abs(operand):
        """模"""
        return Operators._real_result(np.abs(Operators.ensure_complex(operand)))

    @staticmethod
    def arg(operand):
        """辐角"""
        return Operators._real_result(np.angle(Operators.ensure_complex(operand)))

    @staticmethod
    def real(operand):
        return Operators._real_result(np.real(Operators.ensure_complex(operand)))

    @staticmethod
    def imag(operand):
        return Operators._real_result(np.imag(Operators.ensure_complex(operand)))

    # 一元函数====================
    @staticmethod
    def acos(operand):
        with np.errstate(all='ignore'):
            return np.arccos(Operators.ensure_complex(operand))

    @staticmethod
    def asin(operand):
        with np.errstate(all='ignore'):
            return np.arcsin(Operators.ensure_complex(operand))

    @staticmethod
    def atan(operand):
        with np.errstate(all='ignore'):
            return np.arctan(Operators.ensure_complex(operand))

    @staticmethod
    def conj(operand):
        """共轭"""
        return np.conj(Operators.ensure_complex(operand))

    @staticmethod
    def cos(operand):
        with np.errstate(all='ignore'):
            return np.cos(Operators.ensure_complex(operand))

    @staticmethod
    def cosh(operand):
        with np.errstate(all='ignore'):
            return np.cosh(Operators.ensure_complex(operand))

    @staticmethod
    def exp(operand):
        with np.errstate(all='ignore'):
            return np.exp(Operators.ensure_complex(operand))

    @staticmethod
    def log(operand):
        """自然对数（主值）"""
        with np.errstate(all='ignore'):
            return np.log(Operators.ensure_complex(operand))

    @staticmethod
    def neg(operand):
        return np.negative(Operators.ensure_complex(operand))

    @staticmethod
    def sin(operand):
        with np.errstate(all='ignore'):
            return np.sin(Operators.ensure_complex(operand))

    @staticmethod
    def sinh(operand):
        with np.errstate(all='ignore'):
            return np.sinh(Operators.ensure_complex(operand))

    @staticmethod
    def sqrt(operand):
        """主平方根"""
        with np.errstate(all='ignore'):
            return np.sqrt(Operators.ensure_complex(operand))

    @staticmethod
    def tan(operand):
        with np.errstate(all='ignore'):
            return np.tan(Operators.ensure_complex(operand))

    @staticmethod
    def tanh(operand):
        with np.errstate(all='ignore'):
            return np.tanh(Operators.ensure_complex(operand))

    # 二元函数====================
    @staticmethod
    def pow(base, exponent):
        """base ** exponent"""
        with np.errstate(all='ignore'):
            return np.power(Operators.ensure_complex(base), Operators.ensure_complex(exponent))

    @staticmethod
    def apply(name, *operands):
        """按运算符符号或函数名分派"""
        method_name = OPERATOR_METHODS.get(name, name)
        if method_name.startswith('_') or method_name in ('apply', 'ensure_complex'):
            op_method = None
        else:
            op_method = getattr(Operators, method_name, None)
        if op_method is None:
            logger.error(f"Unknown operator: {name}")
            raise UnrecognizedTokenError(f"Unrecognized token: {name}")
        return op_method(*operands)
