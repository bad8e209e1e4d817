"""RPN表达式求值器 - 调用 Token 上绑定的操作符描述"""
import logging

from calc.errors import StackUnderflowError, MalformedExpressionError
from calc.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def _pop(stack, token):
        if not stack:
            logger.debug(f"Insufficient operands for {token.name}")
            raise StackUnderflowError(f"Stack underflow at {token.name}")
        return stack.pop()

    @staticmethod
    def evaluate(token_sequence):
        """
        Args:
            token_sequence: 逆波兰顺序的 Token 序列（Parser 的输出）
        Returns:
            表达式的值
        """
        stack = []

        for token in token_sequence:
            if token.type is TokenType.VALUE:
                stack.append(token.value)
                continue

            descriptor = token.operator
            if descriptor is None:
                raise MalformedExpressionError(f"Unresolved token {token.name!r} in expression")

            # 出栈：二元为 (left, right)，先入栈的是左操作数
            args = [RPNEvaluator._pop(stack, token) for _ in range(descriptor.operand_count)][::-1]
            stack.append(descriptor.evaluate(*args))

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise MalformedExpressionError(
                f"Malformed expression: {len(stack)} values left after evaluation, expected 1")
        return stack[0]
