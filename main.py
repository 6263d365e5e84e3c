"""主程序入口 - 自检模式 / 交互模式 / 单表达式求值"""
import argparse
import logging

import pandas as pd

from config.config import CALCULATOR_CONFIG, REPL_CONFIG, LOGGING_CONFIG, validate_config
from core import Calculator, ExpressionError
from utils.formatting import postfix_to_string, format_result
from validation.self_test import run_self_test

logger = logging.getLogger(__name__)


def setup_logging(level=None):
    logging.basicConfig(
        level=getattr(logging, (level or LOGGING_CONFIG["level"]).upper()),
        format=LOGGING_CONFIG["format"]
    )


def evaluate_line(calculator, line):
    """
    计算一行输入，返回要打印的文本
    错误不会中断调用方，只转换成错误信息
    """
    try:
        result = calculator.evaluate(line)
        return f"Result: {format_result(result, CALCULATOR_CONFIG['result_precision'])}"
    except ExpressionError as e:
        logger.debug(f"Failed to evaluate '{line}': {e}")
        return f"Error: {e}"


def interactive_mode(calculator, input_func=None, output_func=print):
    """交互模式：逐行读取表达式，直到输入退出命令或EOF"""
    input_func = input_func or input
    output_func(REPL_CONFIG["banner"])
    while True:
        try:
            line = input_func(REPL_CONFIG["prompt"])
        except EOFError:
            break
        if line.strip() in REPL_CONFIG["exit_commands"]:
            break
        output_func(evaluate_line(calculator, line))


def self_test_mode(output_func=print):
    """运行自检表并打印报告；失败只报告，不影响退出码"""
    output_func("Tests started:")
    report = run_self_test()
    with pd.option_context('display.max_rows', None, 'display.width', 200,
                           'display.max_colwidth', 60):
        output_func(report.to_string(index=False))

    failed = report[~report['passed']]
    output_func(f"\n{len(report) - len(failed)}/{len(report)} fixtures passed")
    if len(failed):
        logger.warning(f"{len(failed)} fixtures failed")
    output_func("Done")
    return report


def single_expression_mode(calculator, expression, output_func=print):
    try:
        postfix = calculator.to_postfix(expression)
        output_func(f"Postfix: {postfix_to_string(postfix)}")
    except ExpressionError as e:
        output_func(f"Error: {e}")
        return
    output_func(evaluate_line(calculator, expression))


def main(args):
    setup_logging(args.log_level)
    validate_config()

    calculator = Calculator(cache_size=CALCULATOR_CONFIG["cache_size"])

    if args.expression is not None:
        single_expression_mode(calculator, args.expression)
    elif args.interactive:
        interactive_mode(calculator)
    else:
        self_test_mode()
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Shunting Yard calculator")

    parser.add_argument(
        "-i", "--interactive",
        action="store_true",
        help="Enter interactive mode instead of running the self-test fixtures"
    )
    parser.add_argument(
        "-e", "--expression",
        type=str,
        default=None,
        help="Evaluate a single expression and print its postfix form and result"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default taken from config)"
    )
    args = parser.parse_args()

    raise SystemExit(main(args))
