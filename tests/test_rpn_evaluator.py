"""Unit tests for postfix evaluation."""

import numpy as np
import pytest

from core import (
    Associativity,
    DomainError,
    EvaluationError,
    RPNEvaluator,
    Token,
    TokenType,
    evaluate,
    number_token,
    operator_token,
    shunt,
)
from validation.fixtures import EVALUATION_FIXTURES


def calc(expression):
    return evaluate(shunt(expression))


class TestEvaluationFixtures:
    """The fixed expression/result table used by the self-test."""

    @pytest.mark.parametrize("expression,expected", EVALUATION_FIXTURES)
    def test_fixture(self, expression, expected):
        assert float(calc(expression)) == pytest.approx(expected)


class TestArithmetic:
    """Results of complete expressions."""

    def test_whitespace_insensitive(self):
        assert calc("3+4") == calc("3 + 4") == 7

    def test_right_associative_power(self):
        assert float(calc("2^3^4")) == 2.0 ** 81

    def test_round_trip(self):
        assert calc("3 + 4 * 2 / ( 1 - 5 )") == 1

    def test_implicit_multiplication_with_factorial(self):
        assert calc("(4)3!") == 24

    def test_leading_unary_minus(self):
        assert calc("-5 + 3") == -2
        assert calc("-5") == -5

    def test_fractional_power(self):
        assert float(calc("4^0.5")) == pytest.approx(2.0)

    def test_negative_base_fractional_power_is_nan(self):
        assert np.isnan(calc("(-8)^0.5"))

    def test_result_is_extended_precision(self):
        assert isinstance(calc("1/3"), np.longdouble)

    def test_evaluator_class_and_function_agree(self):
        tokens = shunt("2 * (3 + 4)")
        assert RPNEvaluator.evaluate(tokens) == evaluate(tokens) == 14

    def test_accepts_any_iterable(self):
        assert evaluate(iter(shunt("6 / 3"))) == 2


class TestUnaryOperators:
    """Negation and factorial on the operand stack."""

    def test_negation_pops_existing_operand(self):
        tokens = [number_token("4"), operator_token("neg")]
        assert evaluate(tokens) == -4

    def test_negation_with_empty_stack_consumes_next_number(self):
        tokens = [operator_token("neg"), number_token("4"), number_token("1"), operator_token("add")]
        assert evaluate(tokens) == -3

    def test_negation_with_empty_stack_and_no_number(self):
        with pytest.raises(EvaluationError, match="Unary minus"):
            evaluate([operator_token("neg")])

    def test_factorial_with_empty_stack(self):
        with pytest.raises(EvaluationError, match="Insufficient operands"):
            evaluate([operator_token("fact")])

    def test_factorial(self):
        assert calc("3!") == 6
        assert calc("0!") == 1


class TestEvaluationErrors:
    """Malformed postfix sequences."""

    def test_empty_sequence(self):
        with pytest.raises(EvaluationError, match="0 values left"):
            evaluate(shunt(""))

    def test_insufficient_operands(self):
        with pytest.raises(EvaluationError, match="Insufficient operands for '\\+'"):
            evaluate([number_token("1"), operator_token("add")])

    def test_too_many_values(self):
        tokens = [number_token("1"), number_token("2")]
        with pytest.raises(EvaluationError) as exc_info:
            evaluate(tokens)
        message = str(exc_info.value)
        assert "1 2" in message
        assert "2 values left" in message

    def test_unknown_operator(self):
        modulo = Token(TokenType.OPERATOR, "mod", "*", precedence=2, associativity=Associativity.LEFT, arity=2)
        with pytest.raises(EvaluationError, match="Unknown operator"):
            evaluate([number_token("5"), number_token("2"), modulo])

    def test_parenthesis_in_sequence(self):
        with pytest.raises(EvaluationError, match="Unexpected token"):
            evaluate([Token(TokenType.PARENTHESIS, "lparen", "(")])


class TestDomainErrors:
    """Mathematically undefined operations."""

    def test_division_by_zero(self):
        with pytest.raises(DomainError, match="Division by zero"):
            calc("5 / 0")

    def test_negative_factorial(self):
        with pytest.raises(DomainError, match="negative"):
            calc("(-1)!")

    def test_non_integral_factorial(self):
        with pytest.raises(DomainError, match="integers"):
            calc("2.5!")
