"""工具模块"""
from .complex_format import ComplexFormat

__all__ = ['ComplexFormat']
