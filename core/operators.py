"""core/operators.py"""
import logging

import numpy as np

from core.errors import DomainError

logger = logging.getLogger(__name__)

ZERO = np.longdouble(0)
ONE = np.longdouble(1)


class Operators:
    """所有操作符的静态方法集合，方法名与 OPERATOR_DEFINITIONS 中的名字一致"""

    # 二元操作符====================

    @staticmethod
    def add(left, right):
        with np.errstate(over='ignore'):
            return left + right

    @staticmethod
    def sub(left, right):
        with np.errstate(over='ignore'):
            return left - right

    @staticmethod
    def mul(left, right):
        with np.errstate(over='ignore'):
            return left * right

    @staticmethod
    def div(left, right):
        """除法，除数为0时抛出DomainError"""
        if right == 0:
            raise DomainError(f"Division by zero: {left} / {right}")
        with np.errstate(over='ignore'):
            return left / right

    @staticmethod
    def pow(left, right):
        """一般实数幂；负底数的非整数次幂得到nan，溢出得到inf"""
        with np.errstate(all='ignore'):
            return np.power(np.longdouble(left), np.longdouble(right))

    # 一元操作符====================

    @staticmethod
    def neg(operand):
        return -operand

    @staticmethod
    def fact(operand):
        """
        阶乘：迭代计算 1·2·…·x
        要求 x >= 0 且为整数
        """
        if operand < 0:
            raise DomainError(f"Factorial of a negative number is undefined: {operand}!")
        if operand != np.floor(operand):
            raise DomainError(f"Factorial is only defined for integers: {operand}!")

        result = ONE
        i = np.longdouble(2)
        with np.errstate(over='ignore'):
            while i <= operand:
                result = result * i
                if np.isinf(result):
                    # 已溢出，继续乘下去没有意义
                    logger.debug(f"Factorial overflow at {i} while computing {operand}!")
                    break
                i += 1
        return result
