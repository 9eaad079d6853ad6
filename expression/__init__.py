"""表达式模块 - 解析器门面"""
from .parser import ExpressionParser

__all__ = ['ExpressionParser']
