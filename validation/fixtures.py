"""validation/fixtures.py - 自检用的固定输入/输出表"""

# (中缀表达式, 期望后缀输出)
# 期望输出不含首尾空格，操作数和操作符之间用单个空格分隔
SHUNT_FIXTURES = [
    ("3 + 4", "3 4 +"),
    ("3 + 4 * 2 / ( 1 - 5 )", "3 4 2 * 1 5 - / +"),
    ("( 1 + 2 ) * 3", "1 2 + 3 *"),
    ("5 + ( 6 - 2 ) * 3", "5 6 2 - 3 * +"),
    ("( 7 + 3 ) / ( 2 - 1 )", "7 3 + 2 1 - /"),
    ("8 * 9 + 2", "8 9 * 2 +"),
    ("3+4*2-5!", "3 4 2 * + 5 ! -"),
    ("2^3^4", "2 3 4 ^ ^"),
    ("3+4*2/(1-5)^2^3", "3 4 2 * 1 5 - 2 3 ^ ^ / +"),
    ("50000- 1000", "50000 1000 -"),
    ("100-80+25", "100 80 - 25 +"),
    ("5!", "5 !"),
    ("5! * 2", "5 ! 2 *"),
    ("3", "3"),
    ("(3)", "3"),
    ("(10 + 3)", "10 3 +"),
    ("10.5-9.8", "10.5 9.8 -"),
    ("3(5)", "3 5 *"),
    ("(4)5", "4 5 *"),
    ("(12)(15)", "12 15 *"),
    ("(1.2) (1.5)", "1.2 1.5 *"),
    ("3!*(4)", "3 ! 4 *"),
    ("3!(4)", "3 ! 4 *"),
    ("(4)3!", "4 3 ! *"),
    ("-5", "- 5"),
    ("-5 + 3", "- 5 3 +"),
    ("-5 * 3", "- 5 3 *"),
    ("(-5)", "- 5"),
    ("-(5)", "- 5"),
    ("(-5 + 3)", "- 5 3 +"),
    ("-5(3)", "- 5 3 *"),
    ("-(5 + 3)", "- 5 3 +"),
    ("-5 - 3", "- 5 3 -"),
    ("-3 + 4 * 2", "- 3 4 2 * +"),
    ("-(2+3)", "- 2 3 +"),
    ("-5!", "- 5 !"),
    ("-(5!)", "- 5 !"),
    ("(2+3)4", "2 3 + 4 *"),
    ("(2+3)(4-1)", "2 3 + 4 1 - *"),
    ("10(2+3)", "10 2 3 + *"),
    ("(2+3)!4", "2 3 + ! 4 *"),
    ("(3 + 4) * 2", "3 4 + 2 *"),
    ("", ""),
]

# (中缀表达式, 期望结果)
EVALUATION_FIXTURES = [
    ("2 + 3", 5),
    ("6 - 5", 1),
    ("10 - 8", 2),
    ("555 - 123", 432),
    ("3 * 4", 12),
    ("3 * 2 - 1", 5),
    ("1 + 2 + 2", 5),
    ("5 * 2 - 1", 9),
    ("3 * 4 - 1", 11),
    ("1 + 2 + 3", 6),
    ("5 - 2", 3),
    ("4 * 3", 12),
    ("15 / 3", 5),
    ("3!", 6),
    ("3! - 5", 1),
    ("(2 + 3) * 5", 25),
    ("5 + (1 + 2) * 4 - 3", 14),
    ("2.5 + 3.5", 6.0),
    ("(3 + 4) * 2 / 7", 2),
    ("(2 + 3) * (4 + 5)", 45),
    ("(2 + 3) + (4 + 5) + 6", 20),
    ("-2 + 3", 1),
    ("5 - 2 + 3", 6),
    ("5 - (2 + 3)", 0),
    ("10 + 2 * (3 - 1)", 14),
    ("(2 + 3) * 2 - 1", 9),
    ("-2 + 3 * 2.5", 5.5),
    ("2! + 3 ^ 2 - 1", 10),
    ("-(10 / 2)-2", -7),
    ("-(10 / 2) - 2 + 1.5", -5.5),
    ("(-2+10 / 2) - 2 + 1.5", 2.5),
    ("3 + 4 * 2 / ( 1 - 5 )", 1.0),
    ("2^3^4", 2.0 ** 81),
    ("(4)3!", 24),
]

# (中缀表达式, 期望的异常类名)
ERROR_FIXTURES = [
    ("(1+2", "ExpressionSyntaxError"),
    ("1+2)", "ExpressionSyntaxError"),
    ("2 % 3", "ExpressionSyntaxError"),
    ("1.2.3", "ExpressionSyntaxError"),
    ("5 / 0", "DomainError"),
    ("(-1)!", "DomainError"),
    ("", "EvaluationError"),
    ("5 +", "EvaluationError"),
]
