"""
core/shunting_yard.py - 中缀表达式转后缀（RPN）

算法参考 https://en.wikipedia.org/wiki/Shunting_yard_algorithm#The_algorithm_in_detail
在此基础上增加了一元负号、后缀阶乘和隐式乘法 (2(3), (2)(3), (4)3!) 的处理。
"""
import logging

from core.errors import ExpressionSyntaxError
from core.token_system import (
    TokenType, Associativity, BINARY_OPERATORS,
    number_token, operator_token, parenthesis_token
)

logger = logging.getLogger(__name__)

DIGIT_CHARS = set('0123456789.')


class ShuntState:
    """单次 shunt 调用的临时状态，调用结束即丢弃"""

    def __init__(self):
        self.output = []      # 输出队列（后缀顺序）
        self.operators = []   # 操作符栈
        self.number = ''      # 正在累积的数字字面量
        self.previous = None  # 上一个Token，用于判断隐式乘法和一元负号

    def top(self):
        return self.operators[-1] if self.operators else None

    def top_is_unary_minus(self):
        top = self.top()
        return top is not None and top.name == 'neg'

    def flush_number(self):
        """把缓冲区中的数字输出"""
        if self.number:
            token = number_token(self.number)
            self.output.append(token)
            self.number = ''
            self.previous = token

    def flush_unary_minus(self):
        """栈顶若是待处理的一元负号，把它移到输出（-5 -> '- 5'）"""
        if self.top_is_unary_minus():
            self.output.append(self.operators.pop())

    def push_binary(self, token):
        """按优先级和结合性弹出栈顶操作符，然后压入 token"""
        while self.operators:
            top = self.operators[-1]
            if top.type == TokenType.PARENTHESIS:
                break
            if top.precedence > token.precedence or (
                    top.precedence == token.precedence and token.associativity == Associativity.LEFT):
                self.output.append(self.operators.pop())
            else:
                break
        self.operators.append(token)


def _kind(token):
    """把Token归类为隐式乘法规则中使用的类别"""
    if token is None:
        return None
    if token.type == TokenType.NUMBER:
        return 'number'
    return token.text


# (上一个Token, 当前Token) 之间存在隐式乘法的组合
IMPLIED_MULTIPLICATION = {
    (')', '('),        # (2)(3)
    ('number', '('),   # 2(3)
    (')', 'number'),   # (2)3, (4)3!
    ('!', '('),        # 3!(4)
    ('!', 'number'),   # (2+3)!4
}


def is_implied_multiplication(previous, current):
    """
    判断上一个Token与当前Token之间是否存在隐式乘法
    current 为 'number' 或 '('
    """
    return (_kind(previous), current) in IMPLIED_MULTIPLICATION


def _is_unary_minus(previous):
    """'-' 位于表达式开头，或跟在操作符/左括号之后时为一元负号"""
    if previous is None:
        return True
    if previous.type == TokenType.NUMBER:
        return False
    return previous.text not in (')', '!')


def shunt(expression):
    """
    把中缀表达式转换为后缀Token序列
    Args:
        expression: 中缀表达式字符串（只读）
    Returns:
        后缀顺序的Token列表；空输入返回空列表
    Raises:
        ExpressionSyntaxError: 非法字符、非法数字、括号不匹配
    """
    state = ShuntState()

    for position, c in enumerate(expression):
        if c.isspace():
            continue

        if c in DIGIT_CHARS:
            state.flush_unary_minus()
            if not state.number and is_implied_multiplication(state.previous, 'number'):
                state.push_binary(operator_token('mul'))
            state.number += c

        elif c == '!':
            # 阶乘优先级最高，直接输出，不进操作符栈
            state.flush_number()
            token = operator_token('fact')
            state.output.append(token)
            state.previous = token

        elif c in BINARY_OPERATORS:
            state.flush_number()
            if c == '-' and _is_unary_minus(state.previous):
                token = operator_token('neg')
                state.operators.append(token)
            else:
                token = operator_token(BINARY_OPERATORS[c])
                state.push_binary(token)
            state.previous = token

        elif c == '(':
            state.flush_number()
            state.flush_unary_minus()
            if is_implied_multiplication(state.previous, '('):
                state.push_binary(operator_token('mul'))
            token = parenthesis_token('(')
            state.operators.append(token)
            state.previous = token

        elif c == ')':
            state.flush_number()
            while state.operators and state.top().text != '(':
                state.output.append(state.operators.pop())
            if not state.operators:
                raise ExpressionSyntaxError(
                    f"Mismatched parentheses: unexpected ')' at position {position}",
                    char=c, position=position)
            state.operators.pop()  # 丢弃 '('
            state.previous = parenthesis_token(')')

        else:
            raise ExpressionSyntaxError(f"Invalid token: {c}", char=c, position=position)

    # 处理末尾的数字
    state.flush_number()

    while state.operators:
        token = state.operators.pop()
        if token.type == TokenType.PARENTHESIS:
            raise ExpressionSyntaxError("Mismatched parentheses: missing ')'", char='(')
        state.output.append(token)

    logger.debug(f"Shunted '{expression}' -> {' '.join(t.text for t in state.output)}")
    return state.output
