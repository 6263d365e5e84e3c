"""Shared pytest fixtures for calculator tests."""

import pytest

from core import Calculator, shunt
from utils.formatting import postfix_to_string


@pytest.fixture
def calculator() -> Calculator:
    """Return a calculator with a small cache."""
    return Calculator(cache_size=4)


@pytest.fixture
def to_postfix():
    """Return a helper rendering shunt() output as 'a b op' text."""
    def _to_postfix(expression: str) -> str:
        return postfix_to_string(shunt(expression))
    return _to_postfix
