"""Shared fixtures for the parser tests."""

import pytest

from expression import ExpressionParser
from utils import ComplexFormat


@pytest.fixture
def parser():
    """Parser with the default three-digit precision."""
    return ExpressionParser(3)


@pytest.fixture
def complex_format():
    return ComplexFormat(3)
