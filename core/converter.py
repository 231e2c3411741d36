"""core/converter.py - 中缀 Token 序列转后缀（调度场算法）"""
import logging

from core.errors import MalformedExpressionError, UnmatchedParenthesisError
from core.token_system import TokenType

logger = logging.getLogger(__name__)


def _should_pop(top, incoming):
    """栈顶操作符是否应先于 incoming 输出"""
    if top.type != TokenType.OPERATOR:
        return False  # 左括号挡住
    if top.precedence > incoming.precedence:
        return True
    # 优先级相同时只有左结合才弹出，保证 a^b^c = a^(b^c)
    return top.precedence == incoming.precedence and incoming.spec.is_left_associative


def to_postfix(tokens):
    """
    Args:
        tokens: tokenize() 的输出
    Returns:
        后缀 Token 元组（只含 NUMBER 和 OPERATOR）
    Raises:
        UnmatchedParenthesisError: 括号不配对
        MalformedExpressionError: 操作数/操作符位置不对，或表达式为空
    """
    output = []
    operator_stack = []
    expect_operand = True  # 下一个应该是数字或左括号

    for index, token in enumerate(tokens):
        if token.type == TokenType.NUMBER:
            if not expect_operand:
                raise MalformedExpressionError(f"Unexpected number {token} at token {index}")
            output.append(token)
            expect_operand = False

        elif token.type == TokenType.OPERATOR:
            if expect_operand:
                raise MalformedExpressionError(f"Operator {token} at token {index} is missing its left operand")
            while operator_stack and _should_pop(operator_stack[-1], token):
                output.append(operator_stack.pop())
            operator_stack.append(token)
            expect_operand = True

        elif token.type == TokenType.LEFT_PAREN:
            if not expect_operand:
                raise MalformedExpressionError(f"Unexpected '(' at token {index}")
            operator_stack.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            if expect_operand:
                raise MalformedExpressionError(f"Unexpected ')' at token {index}")
            while True:
                if not operator_stack:
                    raise UnmatchedParenthesisError(f"Unmatched ')' at token {index}")
                top = operator_stack.pop()
                if top.type == TokenType.LEFT_PAREN:
                    break
                output.append(top)

        else:
            raise MalformedExpressionError(f"Unknown token type: {token.type}")

    if expect_operand:
        raise MalformedExpressionError("Expression ended where an operand was expected")

    while operator_stack:
        top = operator_stack.pop()
        if top.type == TokenType.LEFT_PAREN:
            raise UnmatchedParenthesisError("Unclosed '('")
        output.append(top)

    logger.debug(f"Postfix: {' '.join(str(t) for t in output)}")
    return tuple(output)
