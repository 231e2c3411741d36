"""
Test configuration and fixtures
"""

import pytest

from expression.evaluator import ExpressionEvaluator


@pytest.fixture
def evaluator():
    """默认配置的求值器"""
    return ExpressionEvaluator()


@pytest.fixture
def ieee_evaluator():
    """除零按 IEEE-754 处理的求值器"""
    return ExpressionEvaluator(division_by_zero='ieee')
