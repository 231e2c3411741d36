"""表达式模块 - 带缓存的求值器和批量求值"""
from .evaluator import ExpressionEvaluator

__all__ = ['ExpressionEvaluator']
