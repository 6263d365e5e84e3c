"""工具模块"""
from .formatting import postfix_to_string, format_result

__all__ = ['postfix_to_string', 'format_result']
