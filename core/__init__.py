"""核心模块 - Token系统、Shunting Yard转换器、RPN评估器和操作符"""
from .errors import ExpressionError, ExpressionSyntaxError, EvaluationError, DomainError
from .token_system import (
    TokenType, Associativity, Token, OPERATOR_DEFINITIONS, PARENTHESIS_DEFINITIONS,
    BINARY_OPERATORS, number_token, operator_token, parenthesis_token
)
from .shunting_yard import shunt
from .rpn_evaluator import RPNEvaluator, evaluate
from .operators import Operators
from .calculator import Calculator

__all__ = [
    'ExpressionError', 'ExpressionSyntaxError', 'EvaluationError', 'DomainError',
    'TokenType', 'Associativity', 'Token', 'OPERATOR_DEFINITIONS', 'PARENTHESIS_DEFINITIONS',
    'BINARY_OPERATORS', 'number_token', 'operator_token', 'parenthesis_token',
    'shunt', 'RPNEvaluator', 'evaluate', 'Operators', 'Calculator'
]
