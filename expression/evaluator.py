import logging
from collections import OrderedDict
from typing import Dict, Iterable, Tuple

import numpy as np
import pandas as pd

from config.config import EVALUATOR_CONFIG
from core import (
    ParseError, Token, RPNEvaluator, PrecedenceClimbingEvaluator,
    compile_expression, tokenize
)
from core.operators import check_division_policy

logger = logging.getLogger(__name__)


class ExpressionEvaluator:
    """
    带编译缓存的表达式求值器
    缓存的是后缀程序而不是结果，同一表达式多次求值结果一致。
    实例不是线程安全的；跨线程请直接用 core.parse_and_evaluate。
    """

    def __init__(self, cache_size=None, division_by_zero=None, strategy=None):
        self.cache_size = EVALUATOR_CONFIG['cache_size'] if cache_size is None else cache_size
        self.division_by_zero = check_division_policy(division_by_zero or EVALUATOR_CONFIG['division_by_zero'])
        self.strategy = strategy or EVALUATOR_CONFIG['strategy']
        if self.strategy not in ('postfix', 'climbing'):
            raise ValueError(f"Unknown strategy: {self.strategy!r}")
        # 使用有限大小的OrderedDict实现LRU缓存
        self._program_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._program_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._program_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._program_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    def cache_info(self) -> Dict[str, int]:
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._program_cache),
            'max_size': self.cache_size,
        }

    def compile(self, expression: str) -> Tuple[Token, ...]:
        """编译为后缀程序，命中缓存时直接返回"""
        key = expression.strip()

        if key in self._program_cache:
            # 移到末尾（最近使用）
            self._program_cache.move_to_end(key)
            self._cache_hits += 1
            logger.debug(f"Cache hit for expression: {key[:50]}")
            return self._program_cache[key]

        self._cache_misses += 1
        program = compile_expression(key)
        if self.cache_size > 0:
            self._program_cache[key] = program
            self._manage_cache()
        return program

    def evaluate(self, expression: str) -> float:
        """
        Args:
            expression: 中缀表达式
        Returns:
            float 结果
        Raises:
            ParseError: 表达式非法
        """
        if self.strategy == 'climbing':
            return PrecedenceClimbingEvaluator(tokenize(expression), self.division_by_zero).evaluate()
        return RPNEvaluator.evaluate(self.compile(expression), self.division_by_zero)

    def evaluate_batch(self, expressions: Iterable[str]) -> pd.Series:
        """
        批量求值，失败的表达式记为 NaN 并记录日志，不会抛出
        Returns:
            以表达式文本为索引的 float Series
        """
        expressions = list(expressions)
        results = []
        failures = 0

        for expression in expressions:
            try:
                results.append(self.evaluate(expression))
            except ParseError as e:
                failures += 1
                logger.error(f"Error evaluating expression '{expression[:50]}': {type(e).__name__}: {e}")
                results.append(np.nan)

        if failures:
            logger.warning(f"{failures}/{len(expressions)} expressions failed")
        return pd.Series(results, index=pd.Index(expressions, name='expression'), dtype=float, name='result')
