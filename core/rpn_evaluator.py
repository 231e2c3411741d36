"""RPN（后缀）程序求值器 - 调用统一的Operators类"""
import logging

from core.errors import MalformedExpressionError
from core.operators import Operators, check_division_policy
from core.token_system import TokenType

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估后缀程序的值"""

    @staticmethod
    def evaluate(program, division_by_zero='raise'):
        """
        Args:
            program: 后缀 Token 序列
            division_by_zero: 'raise' 或 'ieee'
        Returns:
            float 结果
        Raises:
            MalformedExpressionError: 操作数不足或结束时栈中不是正好1个值
            DivisionByZeroError: division_by_zero='raise' 时除数为0
        """
        check_division_policy(division_by_zero)
        stack = []

        for position, token in enumerate(program):
            if token.type == TokenType.NUMBER:
                stack.append(token.value)

            elif token.type == TokenType.OPERATOR:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {token} at position {position}")
                    raise MalformedExpressionError(
                        f"Operator {token} at position {position} needs 2 operands, found {len(stack)}"
                    )
                b = stack.pop()
                a = stack.pop()
                stack.append(Operators.apply(token.symbol, a, b, division_by_zero))

            else:
                raise MalformedExpressionError(f"Parenthesis in postfix program at position {position}")

        if len(stack) != 1:
            raise MalformedExpressionError(f"Stack has {len(stack)} elements after evaluation, expected 1")
        return stack[0]
