"""主程序入口 - 计算中缀算术表达式"""
import argparse
import logging
import sys

from config.config import EVALUATOR_CONFIG, LOGGING_CONFIG, validate_config
from core import ParseError, format_postfix
from expression.evaluator import ExpressionEvaluator

logger = logging.getLogger(__name__)


def read_expressions(path):
    """每行一个表达式，跳过空行和 # 注释"""
    expressions = []
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#'):
                expressions.append(line)
    return expressions


def main(args):
    # 设置日志
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG['format']
    )
    validate_config()

    expressions = list(args.expressions)
    if args.file:
        expressions.extend(read_expressions(args.file))
    if not expressions:
        logger.error("No expressions given")
        return 2

    evaluator = ExpressionEvaluator(
        division_by_zero=args.division_by_zero,
        strategy=args.strategy
    )
    logger.info(f"Evaluating {len(expressions)} expressions with strategy={evaluator.strategy}")

    failed = 0
    for expression in expressions:
        try:
            result = evaluator.evaluate(expression)
        except ParseError as e:
            failed += 1
            logger.error(f"{expression}: {type(e).__name__}: {e}")
            print(f"{expression} = error: {e}")
            continue

        if args.show_postfix:
            print(f"{expression} => {format_postfix(evaluator.compile(expression))}")
        print(f"{expression} = {result:g}" if args.short else f"{expression} = {result}")

    logger.info(f"Done: {len(expressions) - failed} succeeded, {failed} failed")
    return 1 if failed else 0


def build_parser():
    parser = argparse.ArgumentParser(description="Infix arithmetic expression evaluator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. \"3 + 4 * 2\""
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Read expressions from a file, one per line"
    )
    parser.add_argument(
        "--strategy",
        choices=["postfix", "climbing"],
        default=EVALUATOR_CONFIG["strategy"],
        help="Evaluation strategy (default: %(default)s)"
    )
    parser.add_argument(
        "--division_by_zero",
        choices=["raise", "ieee"],
        default=EVALUATOR_CONFIG["division_by_zero"],
        help="Division by zero policy (default: %(default)s)"
    )
    parser.add_argument(
        "--show_postfix",
        action="store_true",
        help="Print the compiled postfix program for each expression"
    )
    parser.add_argument(
        "--short",
        action="store_true",
        help="Print results in %%g format"
    )
    parser.add_argument(
        "--log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: %(default)s)"
    )
    return parser


def cli():
    return main(build_parser().parse_args())


if __name__ == "__main__":
    sys.exit(cli())
