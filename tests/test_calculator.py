"""Unit tests for the Calculator facade and its postfix cache."""

import pytest

from core import Calculator, DomainError, ExpressionSyntaxError
from utils.formatting import postfix_to_string


class TestCalculator:
    """shunt + evaluate in one call."""

    def test_evaluate(self, calculator):
        assert calculator.evaluate("3 + 4 * 2 / ( 1 - 5 )") == 1

    def test_to_postfix(self, calculator):
        assert postfix_to_string(calculator.to_postfix("(2)(3)")) == "2 3 *"

    def test_errors_propagate(self, calculator):
        with pytest.raises(ExpressionSyntaxError):
            calculator.evaluate("(1+2")
        with pytest.raises(DomainError):
            calculator.evaluate("1/0")


class TestPostfixCache:
    """LRU cache keyed on the whitespace-free expression."""

    def test_hit_on_equivalent_expression(self, calculator):
        first = calculator.to_postfix("3 + 4")
        second = calculator.to_postfix("3+4")
        assert first is second
        assert calculator.cache_info["hits"] == 1
        assert calculator.cache_info["misses"] == 1

    def test_eviction(self):
        calculator = Calculator(cache_size=2)
        for expression in ("1+1", "2+2", "3+3"):
            calculator.to_postfix(expression)
        assert calculator.cache_info["size"] == 2
        calculator.to_postfix("1+1")
        assert calculator.cache_info["misses"] == 4

    def test_recently_used_entry_survives(self):
        calculator = Calculator(cache_size=2)
        calculator.to_postfix("1+1")
        calculator.to_postfix("2+2")
        calculator.to_postfix("1+1")
        calculator.to_postfix("3+3")
        calculator.to_postfix("1+1")
        assert calculator.cache_info["hits"] == 2

    def test_disabled_cache(self):
        calculator = Calculator(cache_size=0)
        calculator.to_postfix("1+1")
        calculator.to_postfix("1+1")
        assert calculator.cache_info["size"] == 0
        assert calculator.cache_info["hits"] == 0

    def test_syntax_errors_not_cached(self, calculator):
        with pytest.raises(ExpressionSyntaxError):
            calculator.to_postfix("2 $ 2")
        assert calculator.cache_info["size"] == 0

    def test_clear_cache(self, calculator):
        calculator.evaluate("1+1")
        calculator.evaluate("1+1")
        calculator.clear_cache()
        assert calculator.cache_info == {"hits": 0, "misses": 0, "size": 0, "max_size": 4}
