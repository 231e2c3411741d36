"""共享的测试用例"""

# 合法表达式及其期望值（手算）
VALID_CASES = [
    ("3+2", 5.0),
    ("3*2", 6.0),
    ("6/2", 3.0),
    ("2^3", 8.0),
    ("3+4*2", 11.0),
    ("(3+4)*2", 14.0),
    ("8-3-2", 3.0),
    ("2^3^2", 512.0),
    ("100/10/5", 2.0),
    ("3 + 4 * 2 / ( 1 - 5 ) ^ 2", 3.5),
    ("92 + 5 + 5 * 27 - (92 - 12) / 4 + 26", 238.0),
    ("((((7))))", 7.0),
    ("2.5 * 4", 10.0),
    (".5 + 5.", 5.5),
    ("4^0.5", 2.0),
    ("2^(0-1)", 0.5),
]

MALFORMED_CASES = ["3 + )", "(3+4", "+3", "+ 3", "3 4", "", "   ", "()", "3 +", "3+4)", "(3)(4)", "3 * * 4"]
