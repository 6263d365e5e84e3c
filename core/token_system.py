"""core/token_system.py"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.errors import ExpressionSyntaxError


class TokenType(Enum):
    NUMBER = "number"            # 数字字面量
    OPERATOR = "operator"        # 操作符
    PARENTHESIS = "parenthesis"  # 括号


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


# 括号的优先级只作为哨兵，不参与调度比较
PARENTHESIS_PRECEDENCE = 6

_NUMBER_PATTERN = re.compile(r'^(\d+\.?\d*|\.\d+)$')
OPERATOR_TEXTS = set("+-*/^!")
PARENTHESIS_TEXTS = set("()")


@dataclass(frozen=True)
class Token:
    type: TokenType
    name: str
    text: str
    precedence: Optional[int] = None
    associativity: Optional[Associativity] = None
    arity: int = 0

    def __post_init__(self):
        if not self.text:
            raise ExpressionSyntaxError(f"Token created with an empty string. Type: {self.type.value}")
        if self.type == TokenType.NUMBER and not _NUMBER_PATTERN.match(self.text):
            raise ExpressionSyntaxError(f"Invalid number literal: '{self.text}'")
        if self.type == TokenType.OPERATOR and self.text not in OPERATOR_TEXTS:
            raise ExpressionSyntaxError(f"Invalid operator: '{self.text}'", char=self.text)
        if self.type == TokenType.PARENTHESIS and self.text not in PARENTHESIS_TEXTS:
            raise ExpressionSyntaxError(f"Invalid parenthesis: '{self.text}'", char=self.text)

    @property
    def is_unary(self):
        """仅一元负号和阶乘为True"""
        return self.type == TokenType.OPERATOR and self.arity == 1


# 操作符定义字典（静态元数据，所有Token实例共享）
OPERATOR_DEFINITIONS = {
    # 二元操作符
    'add': Token(TokenType.OPERATOR, 'add', '+', precedence=1, associativity=Associativity.LEFT, arity=2),
    'sub': Token(TokenType.OPERATOR, 'sub', '-', precedence=1, associativity=Associativity.LEFT, arity=2),
    'mul': Token(TokenType.OPERATOR, 'mul', '*', precedence=2, associativity=Associativity.LEFT, arity=2),
    'div': Token(TokenType.OPERATOR, 'div', '/', precedence=2, associativity=Associativity.LEFT, arity=2),
    'pow': Token(TokenType.OPERATOR, 'pow', '^', precedence=3, associativity=Associativity.RIGHT, arity=2),

    # 一元操作符：负号与减号共用文本 '-'，但名字不同
    'neg': Token(TokenType.OPERATOR, 'neg', '-', precedence=4, associativity=Associativity.RIGHT, arity=1),
    'fact': Token(TokenType.OPERATOR, 'fact', '!', precedence=5, associativity=Associativity.RIGHT, arity=1),
}

PARENTHESIS_DEFINITIONS = {
    '(': Token(TokenType.PARENTHESIS, 'lparen', '(', precedence=PARENTHESIS_PRECEDENCE),
    ')': Token(TokenType.PARENTHESIS, 'rparen', ')', precedence=PARENTHESIS_PRECEDENCE),
}

# 可作二元操作符的符号 -> 操作符名
BINARY_OPERATORS = {
    '+': 'add',
    '-': 'sub',
    '*': 'mul',
    '/': 'div',
    '^': 'pow',
}


def number_token(text):
    return Token(TokenType.NUMBER, 'number', text)


def operator_token(name):
    """按名字取操作符Token；未知名字视为非法Token"""
    try:
        return OPERATOR_DEFINITIONS[name]
    except KeyError:
        raise ExpressionSyntaxError(f"Operator '{name}' is not recognized.") from None


def parenthesis_token(char):
    try:
        return PARENTHESIS_DEFINITIONS[char]
    except KeyError:
        raise ExpressionSyntaxError(f"'{char}' is not a parenthesis.", char=char) from None
