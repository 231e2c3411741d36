"""core/errors.py - 表达式解析/求值的错误类型"""


class ParseError(Exception):
    """所有表达式错误的基类，调用方只需捕获它"""
    pass


class InvalidCharacterError(ParseError):
    """词法扫描遇到不认识的字符"""

    def __init__(self, char, position):
        self.char = char
        self.position = position
        super().__init__(f"Invalid character {char!r} at position {position}")


class InvalidNumberError(ParseError):
    """数字串无法解析为浮点数（例如 1.2.3）"""

    def __init__(self, lexeme):
        self.lexeme = lexeme
        super().__init__(f"Invalid number literal {lexeme!r}")


class UnmatchedParenthesisError(ParseError):
    pass


class MalformedExpressionError(ParseError):
    pass


class DivisionByZeroError(ParseError):
    pass
