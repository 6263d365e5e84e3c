"""core/errors.py - 表达式解析与求值的异常类型"""


class ExpressionError(Exception):
    """所有表达式错误的基类"""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ExpressionSyntaxError(ExpressionError):
    """词法/语法错误：非法字符、空Token、括号不匹配"""

    def __init__(self, message, char=None, position=None):
        super().__init__(message)
        self.char = char
        self.position = position


class EvaluationError(ExpressionError):
    """后缀序列格式错误：操作数不足、未知操作符、栈中剩余值不为1"""


class DomainError(ExpressionError):
    """数学上无定义的运算：除零、负数阶乘"""
