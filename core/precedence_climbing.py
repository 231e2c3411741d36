"""单遍的优先级爬升求值器，不生成后缀程序，直接在中缀 Token 上求值"""
import logging

from core.errors import MalformedExpressionError, UnmatchedParenthesisError
from core.operators import Operators, check_division_policy
from core.token_system import TokenType

logger = logging.getLogger(__name__)

MIN_PRECEDENCE = 1


class _Frame:
    """
    显式栈上的一层 compute_expr
    kind: root（整个表达式）/ paren（括号内）/ rhs（某个操作符的右操作数）
    """
    __slots__ = ('min_prec', 'kind', 'lhs', 'op')

    def __init__(self, min_prec, kind):
        self.min_prec = min_prec
        self.kind = kind
        self.lhs = None  # None 表示还在等原子
        self.op = None   # 等待右操作数的操作符


class PrecedenceClimbingEvaluator:
    """
    用显式帧栈代替递归，嵌套深度不受 Python 递归限制
    左结合操作符的右侧以 precedence + 1 爬升，右结合以 precedence 爬升
    """

    def __init__(self, tokens, division_by_zero='raise'):
        self.tokens = list(tokens)
        self.pos = 0
        self.division_by_zero = check_division_policy(division_by_zero)

    def peek(self):
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def advance(self):
        token = self.peek()
        self.pos += 1
        return token

    def evaluate(self):
        frames = [_Frame(MIN_PRECEDENCE, 'root')]

        while True:
            top = frames[-1]

            # 原子：数字或者开一个括号帧
            if top.lhs is None:
                token = self.advance()
                if token is None:
                    raise MalformedExpressionError("Unexpected end of input")
                if token.type == TokenType.NUMBER:
                    top.lhs = token.value
                elif token.type == TokenType.LEFT_PAREN:
                    frames.append(_Frame(MIN_PRECEDENCE, 'paren'))
                else:
                    raise MalformedExpressionError(f"Unexpected token {token} at token {self.pos - 1}")
                continue

            token = self.peek()
            if token is not None and token.type == TokenType.OPERATOR and token.precedence >= top.min_prec:
                self.advance()
                top.op = token
                next_prec = token.precedence + 1 if token.spec.is_left_associative else token.precedence
                frames.append(_Frame(next_prec, 'rhs'))
                continue

            # 当前帧结束
            frames.pop()
            value = top.lhs

            if top.kind == 'root':
                self._check_trailing()
                return value

            parent = frames[-1]
            if top.kind == 'paren':
                closing = self.advance()
                if closing is None:
                    raise UnmatchedParenthesisError("Unclosed '('")
                if closing.type != TokenType.RIGHT_PAREN:
                    raise MalformedExpressionError(f"Expected ')' but found {closing} at token {self.pos - 1}")
                parent.lhs = value
            else:
                parent.lhs = Operators.apply(parent.op.symbol, parent.lhs, value, self.division_by_zero)
                parent.op = None

    def _check_trailing(self):
        token = self.peek()
        if token is None:
            return
        if token.type == TokenType.RIGHT_PAREN:
            raise UnmatchedParenthesisError(f"Unmatched ')' at token {self.pos}")
        raise MalformedExpressionError(f"Unexpected token {token} at token {self.pos}")
