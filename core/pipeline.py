"""core/pipeline.py - 入口：编译、求值、后缀程序的序列化"""
import logging

import numpy as np

from config.config import EVALUATOR_CONFIG
from core.converter import to_postfix
from core.errors import InvalidNumberError, MalformedExpressionError
from core.operators import check_division_policy
from core.precedence_climbing import PrecedenceClimbingEvaluator
from core.rpn_evaluator import RPNEvaluator
from core.token_system import Token, OPERATOR_DEFINITIONS, PAREN_TOKENS, PostfixValidator
from core.tokenizer import tokenize

logger = logging.getLogger(__name__)

STRATEGIES = ('postfix', 'climbing')


def compile_expression(expression):
    """中缀字符串 -> 后缀程序（元组，可重复求值）"""
    return to_postfix(tokenize(expression))


def parse_and_evaluate(expression, division_by_zero=None, strategy=None):
    """
    解析并计算中缀表达式，每次调用都使用新的栈，无共享状态
    Args:
        expression: 例如 "92 + 5 + 5 * 27 - (92 - 12) / 4 + 26"
        division_by_zero: 'raise' / 'ieee'，默认取 EVALUATOR_CONFIG
        strategy: 'postfix'（两阶段）或 'climbing'（单遍递归），默认取 EVALUATOR_CONFIG
    Returns:
        float
    Raises:
        ParseError 的子类
    """
    division_by_zero = division_by_zero or EVALUATOR_CONFIG['division_by_zero']
    strategy = strategy or EVALUATOR_CONFIG['strategy']
    check_division_policy(division_by_zero)

    if strategy == 'postfix':
        return RPNEvaluator.evaluate(compile_expression(expression), division_by_zero)
    if strategy == 'climbing':
        return PrecedenceClimbingEvaluator(tokenize(expression), division_by_zero).evaluate()
    raise ValueError(f"Unknown strategy: {strategy!r}, expected one of {STRATEGIES}")


def format_postfix(program):
    """后缀程序 -> 空格分隔的 RPN 文本，例如 "3 4 2 * +" """
    return ' '.join(str(token) for token in program)


def parse_postfix(text):
    """
    RPN 文本 -> 后缀程序，format_postfix 的逆操作
    Raises:
        InvalidNumberError: 无法识别的片段
        MalformedExpressionError: 含括号，或栈不平衡
    """
    program = []
    for lexeme in text.split():
        if lexeme in OPERATOR_DEFINITIONS:
            program.append(Token.operator(lexeme))
            continue
        if lexeme in PAREN_TOKENS:
            raise MalformedExpressionError(f"Parenthesis {lexeme!r} is not allowed in a postfix program")
        try:
            value = float(lexeme)
        except ValueError:
            raise InvalidNumberError(lexeme) from None
        if not np.isfinite(value):
            raise InvalidNumberError(lexeme)
        program.append(Token.number(value))

    if not PostfixValidator.is_well_formed(program):
        raise MalformedExpressionError(
            f"Postfix program {text!r} leaves {PostfixValidator.calculate_stack_size(program)} values"
        )
    return tuple(program)
