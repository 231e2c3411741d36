"""core/tokenizer.py - 把表达式字符串切分为 Token 序列"""
import logging

import numpy as np

from core.errors import InvalidCharacterError, InvalidNumberError
from core.token_system import Token, OPERATOR_DEFINITIONS, PAREN_TOKENS

logger = logging.getLogger(__name__)

NUMBER_CHARS = frozenset('0123456789.')


def _flush_number(buffer, tokens):
    """把暂存的数字串转成 NUMBER Token 并清空缓冲区"""
    if not buffer:
        return
    lexeme = ''.join(buffer)
    buffer.clear()
    try:
        value = float(lexeme)
    except ValueError:
        raise InvalidNumberError(lexeme) from None
    # 超出 float64 范围的字面量会变成 inf
    if not np.isfinite(value):
        raise InvalidNumberError(lexeme)
    tokens.append(Token.number(value))


def tokenize(text):
    """
    从左到右逐字符扫描
    Args:
        text: 中缀表达式字符串，例如 "3 + 4 * 2"
    Returns:
        Token 列表；只做字符分类，不检查语法
    Raises:
        InvalidCharacterError: 非法字符
        InvalidNumberError: 数字串不是合法浮点数（如 "1.2.3"）
    """
    tokens = []
    buffer = []

    for position, ch in enumerate(text):
        if ch in NUMBER_CHARS:
            buffer.append(ch)
        elif ch in OPERATOR_DEFINITIONS:
            _flush_number(buffer, tokens)
            tokens.append(Token.operator(ch))
        elif ch in PAREN_TOKENS:
            _flush_number(buffer, tokens)
            tokens.append(PAREN_TOKENS[ch])
        elif ch.isspace():
            _flush_number(buffer, tokens)
        else:
            raise InvalidCharacterError(ch, position)

    _flush_number(buffer, tokens)

    logger.debug(f"Tokenized {text!r} into {len(tokens)} tokens")
    return tokens
