"""core/token_system.py"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenType(Enum):
    NUMBER = "number"            # 数值字面量
    OPERATOR = "operator"        # 二元操作符
    LEFT_PAREN = "left_paren"    # (
    RIGHT_PAREN = "right_paren"  # )


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


class OperatorSpec:
    def __init__(self, symbol, name, precedence, associativity):
        self.symbol = symbol
        self.name = name  # 对应 Operators 中的方法名
        self.precedence = precedence
        self.associativity = associativity

    @property
    def is_left_associative(self):
        return self.associativity == Associativity.LEFT


# 操作符定义表：优先级和结合性只在这里定义
OPERATOR_DEFINITIONS = {
    '+': OperatorSpec('+', 'add', 1, Associativity.LEFT),
    '-': OperatorSpec('-', 'sub', 1, Associativity.LEFT),
    '*': OperatorSpec('*', 'mul', 2, Associativity.LEFT),
    '/': OperatorSpec('/', 'div', 2, Associativity.LEFT),
    '^': OperatorSpec('^', 'pow', 3, Associativity.RIGHT),  # 幂运算右结合
}


def _format_number(value):
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[float] = None  # 仅 NUMBER
    symbol: Optional[str] = None   # 仅 OPERATOR

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, value=float(value))

    @classmethod
    def operator(cls, symbol):
        if symbol not in OPERATOR_DEFINITIONS:
            raise ValueError(f"Unknown operator symbol: {symbol!r}")
        return cls(TokenType.OPERATOR, symbol=symbol)

    @property
    def is_number(self):
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    @property
    def spec(self) -> OperatorSpec:
        return OPERATOR_DEFINITIONS[self.symbol]

    @property
    def precedence(self):
        return self.spec.precedence

    @property
    def associativity(self):
        return self.spec.associativity

    def __str__(self):
        if self.type == TokenType.NUMBER:
            return _format_number(self.value)
        if self.type == TokenType.OPERATOR:
            return self.symbol
        return '(' if self.type == TokenType.LEFT_PAREN else ')'


LEFT_PAREN = Token(TokenType.LEFT_PAREN)
RIGHT_PAREN = Token(TokenType.RIGHT_PAREN)

PAREN_TOKENS = {'(': LEFT_PAREN, ')': RIGHT_PAREN}


class PostfixValidator:
    """只模拟栈深度，不计算数值"""

    @staticmethod
    def calculate_stack_size(program):
        """计算程序执行完后栈中的元素数量（不检查中途下溢）"""
        stack_size = 0
        for token in program:
            if token.is_number:
                stack_size += 1
            elif token.is_operator:
                stack_size -= 1
        return stack_size

    @staticmethod
    def is_well_formed(program):
        """
        合法的后缀程序：
        - 不含括号
        - 每个操作符执行前栈中至少有2个操作数
        - 结束时栈中正好1个元素
        """
        stack_size = 0
        for token in program:
            if token.is_number:
                stack_size += 1
            elif token.is_operator:
                if stack_size < 2:
                    return False
                stack_size -= 1
            else:
                return False
        return stack_size == 1
