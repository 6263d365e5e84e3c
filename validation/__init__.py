"""验证模块"""
from .self_test import run_shunt_fixtures, run_evaluation_fixtures, run_error_fixtures, run_self_test

__all__ = ['run_shunt_fixtures', 'run_evaluation_fixtures', 'run_error_fixtures', 'run_self_test']
