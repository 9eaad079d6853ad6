"""Tests for preprocessing, splitting and classifying expression tokens."""

import pytest

from core.errors import UnrecognizedTokenError
from core.token_system import (
    FUNCTION_NAMES,
    TOKEN_DEFINITIONS,
    Token,
    TokenType,
    classify_token,
    is_number,
    preprocess_expression,
    split_tokens,
    tokenize,
)


class TestPreprocessExpression:
    """Textual rewriting done before splitting."""

    def test_strips_whitespace_around_delimiters(self):
        assert preprocess_expression(" 2 + 3 * ( 4 ) ") == "2+3*(4)"

    def test_keeps_boundary_between_operands(self):
        assert preprocess_expression("2   3") == "2 3"
        assert preprocess_expression("1. 5") == "1. 5"

    def test_joins_gap_next_to_non_digit(self):
        assert preprocess_expression("4 I") == "4I"
        assert preprocess_expression("3 + 4 I") == "3+4I"
        assert preprocess_expression("sin 30") == "sin30"
        assert preprocess_expression("v ar") == "var"

    def test_leading_minus_gets_zero(self):
        assert preprocess_expression("-3+5") == "0-3+5"

    def test_leading_plus_gets_zero(self):
        assert preprocess_expression("+3") == "0+3"

    def test_sign_after_open_bracket(self):
        assert preprocess_expression("(-2)*(+3)") == "(0-2)*(0+3)"

    def test_sign_after_separator(self):
        assert preprocess_expression("pow(2,-1)") == "pow(2,0-1)"
        assert preprocess_expression("pow(2,+1)") == "pow(2,0+1)"

    def test_sign_after_operator_is_left_alone(self):
        """Only '(' and ',' trigger the unary rewrite."""
        assert preprocess_expression("2*-3") == "2*-3"

    def test_spaced_unary_sign(self):
        assert preprocess_expression("sin ( - 1 )") == "sin(0-1)"

    def test_degree_symbol(self):
        assert preprocess_expression("90°") == "90*3.141592653589793/180"

    def test_degree_symbol_with_space(self):
        assert preprocess_expression("90 °") == "90*3.141592653589793/180"

    def test_empty(self):
        assert preprocess_expression("") == ""


class TestSplitTokens:
    def test_delimiters_are_own_tokens(self):
        assert list(split_tokens("sin(3+4I,2)")) == ["sin", "(", "3", "+", "4I", ",", "2", ")"]

    def test_space_separates_operands(self):
        assert list(split_tokens("2 3")) == ["2", "3"]


class TestClassifyToken:
    def test_numbers(self):
        for text in ("2", "3.5", ".5", "1.", "1e5"):
            assert classify_token(text).type == TokenType.NUMBER

    def test_imaginary_literals(self):
        for text in ("I", "4I", "2.5I"):
            assert classify_token(text).type == TokenType.NUMBER

    def test_variable(self):
        assert classify_token("var").type == TokenType.VARIABLE

    def test_operators_and_functions_come_from_definitions(self):
        assert classify_token("*") is TOKEN_DEFINITIONS["*"]
        assert classify_token("pow") is TOKEN_DEFINITIONS["pow"]

    def test_brackets_and_separator(self):
        assert classify_token("(").type == TokenType.OPEN_BRACKET
        assert classify_token(")").type == TokenType.CLOSE_BRACKET
        assert classify_token(",").type == TokenType.SEPARATOR

    def test_unknown_token(self):
        with pytest.raises(UnrecognizedTokenError) as exc_info:
            classify_token("foo")
        assert "foo" in str(exc_info.value)

    def test_signed_exponent_is_not_one_token(self):
        """'1e-5' is split at '-', leaving an invalid '1e'."""
        assert not is_number("1e")
        with pytest.raises(UnrecognizedTokenError):
            classify_token("1e")


class TestTokenize:
    def test_function_call(self):
        types = [token.type for token in tokenize("sin(2)")]
        assert types == [
            TokenType.FUNCTION,
            TokenType.OPEN_BRACKET,
            TokenType.NUMBER,
            TokenType.CLOSE_BRACKET,
        ]

    def test_variable_and_imaginary(self):
        tokens = list(tokenize("var*4I"))
        assert [t.name for t in tokens] == ["var", "*", "4I"]
        assert tokens[0].type == TokenType.VARIABLE
        assert tokens[2].type == TokenType.NUMBER

    def test_function_name_glued_to_argument(self):
        """'sin 30' becomes 'sin30', which is not a known token."""
        with pytest.raises(UnrecognizedTokenError):
            list(tokenize("sin 30"))

    def test_is_lazy(self):
        """The error only surfaces when the bad token is reached."""
        tokens = tokenize("1+foo")
        assert next(tokens).name == "1"
        assert next(tokens).name == "+"
        with pytest.raises(UnrecognizedTokenError):
            next(tokens)


class TestTokenDefinitions:
    def test_function_set(self):
        assert FUNCTION_NAMES == {
            "abs", "acos", "arg", "asin", "atan", "conj", "cos", "cosh", "exp",
            "imag", "log", "neg", "pow", "real", "sin", "sinh", "sqrt", "tan", "tanh",
        }

    def test_arity(self):
        assert TOKEN_DEFINITIONS["pow"].arity == 2
        assert TOKEN_DEFINITIONS["sqrt"].arity == 1
        assert TOKEN_DEFINITIONS["-"].arity == 2

    def test_precedence(self):
        assert TOKEN_DEFINITIONS["+"].precedence == TOKEN_DEFINITIONS["-"].precedence == 1
        assert TOKEN_DEFINITIONS["*"].precedence == TOKEN_DEFINITIONS["/"].precedence == 2

    def test_token_is_immutable(self):
        token = Token(TokenType.NUMBER, "1")
        with pytest.raises(AttributeError):
            token.name = "2"

    def test_token_equality(self):
        assert Token(TokenType.NUMBER, "1") == Token(TokenType.NUMBER, "1")
        assert Token(TokenType.NUMBER, "1") != Token(TokenType.VARIABLE, "1")
