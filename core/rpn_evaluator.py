"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

import numpy as np

from core.errors import EvaluationError
from core.operators import Operators, ZERO
from core.token_system import TokenType, OPERATOR_DEFINITIONS

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀Token序列的值"""

    @staticmethod
    def evaluate(token_sequence):
        """
        评估后缀表达式
        Args:
            token_sequence: shunt() 产生的后缀Token序列（只遍历一次）
        Returns:
            np.longdouble 结果
        Raises:
            EvaluationError: 操作数不足、未知操作符、结束时栈中不是恰好一个值
            DomainError: 除零、负数阶乘
        """
        tokens = list(token_sequence)
        stack = []

        i = 0
        while i < len(tokens):
            token = tokens[i]

            # ================== 操作数 ==================
            if token.type == TokenType.NUMBER:
                stack.append(np.longdouble(token.text))

            elif token.type == TokenType.OPERATOR:
                if token.name not in OPERATOR_DEFINITIONS:
                    raise EvaluationError(f"Unknown operator: '{token.text}'")
                op_method = getattr(Operators, token.name)

                # ================== 一元操作符 ==================
                if token.is_unary:
                    if not stack and token.name == 'neg':
                        # 表达式以一元负号开头：'- 5' 中负号位于操作数之前，
                        # 栈为空时把它作用于后面紧跟的数字
                        if i + 1 >= len(tokens) or tokens[i + 1].type != TokenType.NUMBER:
                            raise EvaluationError("Unary minus is not followed by a number")
                        i += 1
                        operand = np.longdouble(tokens[i].text)
                        stack.append(Operators.sub(ZERO, operand))
                    elif not stack:
                        raise EvaluationError(f"Insufficient operands for '{token.text}'")
                    else:
                        operand = stack.pop()
                        stack.append(op_method(operand))

                # ================== 二元操作符 ==================
                else:
                    if len(stack) < 2:
                        raise EvaluationError(f"Insufficient operands for '{token.text}'")
                    right = stack.pop()
                    left = stack.pop()
                    stack.append(op_method(left, right))

            else:
                raise EvaluationError(f"Unexpected token in postfix sequence: '{token.text}'")

            i += 1

        if len(stack) != 1:
            expression = ' '.join(t.text for t in tokens)
            contents = ', '.join(str(value) for value in stack)
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise EvaluationError(
                f"Invalid expression '{expression}': {len(stack)} values left on the stack [{contents}]")

        return stack[0]


def evaluate(token_sequence):
    return RPNEvaluator.evaluate(token_sequence)
