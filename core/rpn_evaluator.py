"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.exceptions import (
    EmptyExpressionError, EvaluationError, MalformedExpressionError, StackUnderflowError
)
from core.operators import OPERATOR_FUNCTIONS
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(token_sequence, allow_partial=True):
        """
        评估RPN表达式
        Args:
            token_sequence: 逆波兰 Token 序列
            allow_partial: 栈中剩余多个值时是否返回栈顶值
        Returns:
            float 结果
        """
        stack = []

        for token in token_sequence:
            if token.type == TokenType.NUMBER:
                stack.append(token.value)
                continue

            if token.type != TokenType.OPERATOR:
                # 转换阶段不应输出括号或未解析项
                raise EvaluationError(f"Unexpected token '{token.text}' in RPN sequence")

            if len(stack) < 2:
                logger.error(f"Insufficient operands for {token.text}")
                raise StackUnderflowError(token.text, len(stack))

            operand2 = stack.pop()
            operand1 = stack.pop()
            stack.append(OPERATOR_FUNCTIONS[token.text](operand1, operand2))

        if not stack:
            logger.error("Empty stack after evaluation")
            raise EmptyExpressionError()

        if len(stack) > 1:
            if not allow_partial:
                logger.error(f"Stack has {len(stack)} elements after evaluation, expected 1")
                logger.error(f"RPN expression: {' '.join(t.text for t in token_sequence)}")
                raise MalformedExpressionError(len(stack))
            logger.warning(f"Partial expression with {len(stack)} stack elements, using top value")

        return stack[-1]
