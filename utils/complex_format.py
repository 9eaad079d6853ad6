"""utils/complex_format.py"""
import re
import logging

import numpy as np

from core.errors import MalformedNumberError

logger = logging.getLogger(__name__)

_UNSIGNED = r"(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?|\(NaN\)|\(-?Infinity\))"
_NON_FINITE = {
    "(NaN)": np.nan,
    "(Infinity)": np.inf,
    "(-Infinity)": -np.inf,
}


class ComplexFormat:
    """复数格式化器: "<实部> <符号> <虚部>I"，实部虚部共用同一精度"""

    def __init__(self, precision=3, imaginary_symbol="I"):
        self.imaginary_symbol = imaginary_symbol
        self.precision = precision

        symbol = re.escape(imaginary_symbol)
        self._full_pattern = re.compile(
            rf"(?P<re>[+-]?{_UNSIGNED})(?:(?P<sign>[+-])(?P<im>{_UNSIGNED})?{symbol})?"
        )
        self._imaginary_pattern = re.compile(
            rf"(?P<sign>[+-]?)(?P<im>{_UNSIGNED})?{symbol}"
        )

    @property
    def precision(self):
        return self._precision

    @precision.setter
    def precision(self, value):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 0:
            raise ValueError(f"Precision must be a non-negative integer, got {value!r}")
        self._precision = int(value)

    def _format_part(self, value):
        """格式化单个实数分量"""
        if np.isnan(value):
            return "(NaN)"
        if np.isinf(value):
            return "(Infinity)" if value > 0 else "(-Infinity)"

        text = f"{value:.{self._precision}f}"
        # 四舍五入为零的负数不保留负号
        if text.startswith("-") and float(text) == 0:
            text = text[1:]
        return text

    def format(self, value):
        value = complex(value)
        real, imag = value.real, value.imag

        imag_text = self._format_part(abs(imag))
        sign = "-" if imag < 0 and not self._is_zero(imag_text) else "+"
        return f"{self._format_part(real)} {sign} {imag_text}{self.imaginary_symbol}"

    @staticmethod
    def _is_zero(text):
        return text not in _NON_FINITE and float(text) == 0

    @staticmethod
    def _parse_part(text):
        if text in _NON_FINITE:
            return _NON_FINITE[text]
        if text[1:] in _NON_FINITE:
            value = _NON_FINITE[text[1:]]
            return -value if text[0] == "-" else value
        return float(text)

    def parse(self, text):
        """将字符串解析为复数，支持纯实数、纯虚数和 "a + bI" 形式"""
        if not isinstance(text, str):
            raise MalformedNumberError(f"Cannot parse complex number from {type(text).__name__}")
        compact = "".join(text.split())

        match = self._full_pattern.fullmatch(compact)
        if match:
            real = self._parse_part(match.group("re"))
            imag = 0.0
            if match.group("sign"):
                imag = self._parse_part(match.group("im")) if match.group("im") else 1.0
                if match.group("sign") == "-":
                    imag = -imag
            return complex(real, imag)

        match = self._imaginary_pattern.fullmatch(compact)
        if match:
            imag = self._parse_part(match.group("im")) if match.group("im") else 1.0
            if match.group("sign") == "-":
                imag = -imag
            return complex(0.0, imag)

        logger.debug(f"Unparseable complex literal: {text!r}")
        raise MalformedNumberError(f"Malformed number: {text}")
