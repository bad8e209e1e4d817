"""主程序入口 - 逐行读取表达式并输出结果"""
import argparse
import logging
import sys

from calc import Calculator
from config.config import CLI_CONFIG, PLUGIN_CONFIG, validate_config
from plugins import discover_providers
from utils import format_result, evaluate_lines, save_report
from utils.report import evaluate_line

logger = logging.getLogger(__name__)


def build_calculator(args):
    """按命令行参数加载插件并构造计算器"""
    if args.no_plugins:
        logger.info("Plugins disabled, using default operators only")
        return Calculator()
    providers = discover_providers(args.plugin_dir, args.entry_point)
    return Calculator(providers)


def run_repl(calculator, stdin, stdout, rpn=False):
    """读到输入结束为止；任何错误都只打印，不中断循环"""
    for line in stdin:
        line = line.strip()
        if not line:
            continue
        result, error = evaluate_line(calculator, line, rpn)
        if error is not None:
            print(error, file=stdout)
        elif rpn:
            print(result, file=stdout)
        else:
            print(format_result(result), file=stdout)
        stdout.flush()


def main(args, stdin=None, stdout=None):
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format=CLI_CONFIG["log_format"]
    )
    validate_config()

    calculator = build_calculator(args)
    logger.info(f"Operators: {', '.join(op.token for op in calculator.operators)}")

    source = stdin
    if args.input:
        source = open(args.input, encoding='utf-8')

    try:
        if args.output:
            # 批量模式：收集结果写 CSV
            df = evaluate_lines(calculator, source, rpn=args.rpn)
            save_report(df, args.output)
        else:
            run_repl(calculator, source, stdout, rpn=args.rpn)
    finally:
        if source is not stdin:
            source.close()

    return 0


def build_arg_parser():
    parser = argparse.ArgumentParser(description="Expression calculator with pluggable operators")

    parser.add_argument(
        "--plugin_dir",
        type=str,
        default=PLUGIN_CONFIG["plugin_dir"],
        help="Directory to load operator plugins from"
    )
    parser.add_argument(
        "--entry_point",
        type=str,
        default=PLUGIN_CONFIG["entry_point"],
        help="Name of the function each plugin exports"
    )
    parser.add_argument(
        "--no_plugins",
        action="store_true",
        help="Use the default operators only"
    )
    parser.add_argument(
        "--rpn",
        action="store_true",
        help="Print the reverse polish form instead of the value"
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Read expressions from a file instead of stdin"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write expression/result/error rows to a CSV file"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=CLI_CONFIG["log_level"],
        help="Logging level (default: WARNING)"
    )
    return parser


def cli():
    return main(build_arg_parser().parse_args())


if __name__ == "__main__":
    sys.exit(cli())
