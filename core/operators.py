"""core/operators.py"""
import logging

import numpy as np

from core.errors import DivisionByZeroError
from core.token_system import OPERATOR_DEFINITIONS

logger = logging.getLogger(__name__)

DIVISION_POLICIES = ('raise', 'ieee')


def check_division_policy(policy):
    """未知的除零策略直接报错，不能悄悄按 ieee 处理"""
    if policy not in DIVISION_POLICIES:
        raise ValueError(f"Unknown division_by_zero policy: {policy!r}, expected one of {DIVISION_POLICIES}")
    return policy


class Operators:
    """二元操作符的静态方法集合，全部按 float64 计算"""

    @staticmethod
    def add(a, b):
        with np.errstate(over='ignore'):
            return float(np.float64(a) + np.float64(b))

    @staticmethod
    def sub(a, b):
        with np.errstate(over='ignore'):
            return float(np.float64(a) - np.float64(b))

    @staticmethod
    def mul(a, b):
        with np.errstate(over='ignore'):
            return float(np.float64(a) * np.float64(b))

    @staticmethod
    def div(a, b, division_by_zero='raise'):
        """
        除法
        - raise: 除数恰好为0时抛出 DivisionByZeroError
        - ieee: 按IEEE-754返回 inf / -inf / nan
        """
        check_division_policy(division_by_zero)
        if b == 0.0 and division_by_zero == 'raise':
            raise DivisionByZeroError(f"Division by zero: {a} / {b}")
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return float(np.divide(np.float64(a), np.float64(b)))

    @staticmethod
    def pow(a, b):
        # 负数的分数次幂返回 nan，溢出返回 inf（不会得到 complex 或 OverflowError）
        with np.errstate(all='ignore'):
            return float(np.power(np.float64(a), np.float64(b)))

    @staticmethod
    def apply(symbol, a, b, division_by_zero='raise'):
        """按符号调用对应的操作符方法"""
        spec = OPERATOR_DEFINITIONS.get(symbol)
        op_method = getattr(Operators, spec.name, None) if spec else None
        if op_method is None:
            raise ValueError(f"Unknown operator: {symbol!r}")

        if spec.name == 'div':
            return op_method(a, b, division_by_zero)
        return op_method(a, b)
