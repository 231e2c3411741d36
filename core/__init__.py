"""核心模块 - Token系统、词法分析、调度场转换和RPN求值"""
from .token_system import (
    TokenType, Token, Associativity, OperatorSpec, OPERATOR_DEFINITIONS,
    LEFT_PAREN, RIGHT_PAREN, PostfixValidator
)
from .errors import (
    ParseError, InvalidCharacterError, InvalidNumberError,
    UnmatchedParenthesisError, MalformedExpressionError, DivisionByZeroError
)
from .operators import Operators, DIVISION_POLICIES, check_division_policy
from .tokenizer import tokenize
from .converter import to_postfix
from .rpn_evaluator import RPNEvaluator
from .precedence_climbing import PrecedenceClimbingEvaluator
from .pipeline import compile_expression, parse_and_evaluate, format_postfix, parse_postfix

__all__ = [
    'TokenType', 'Token', 'Associativity', 'OperatorSpec', 'OPERATOR_DEFINITIONS',
    'LEFT_PAREN', 'RIGHT_PAREN', 'PostfixValidator',
    'ParseError', 'InvalidCharacterError', 'InvalidNumberError',
    'UnmatchedParenthesisError', 'MalformedExpressionError', 'DivisionByZeroError',
    'Operators', 'DIVISION_POLICIES', 'check_division_policy', 'tokenize', 'to_postfix', 'RPNEvaluator', 'PrecedenceClimbingEvaluator',
    'compile_expression', 'parse_and_evaluate', 'format_postfix', 'parse_postfix'
]
