"""utils/formatting.py"""
import numpy as np


def postfix_to_string(token_sequence):
    """后缀序列 -> 以单个空格分隔的字符串，如 '3 4 +'"""
    return ' '.join(token.text for token in token_sequence)


def format_result(value, precision=18):
    """
    格式化求值结果
    整数值去掉小数部分，其余按给定有效位数输出
    """
    value = np.longdouble(value)
    if not np.isfinite(value):
        return str(float(value))
    return np.format_float_positional(value, precision=precision, unique=True, trim='-')
