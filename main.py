"""主程序入口 - 单个表达式或批量文件计算"""
import argparse
import logging
import sys

from config.config import *
from calculator import Calculator, evaluate_many, load_expressions
from core import CalculatorError

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description="RPN Expression Calculator")

    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to evaluate, e.g. \"(2 + 3) * 4\""
    )
    parser.add_argument(
        "--file",
        type=str,
        help="Evaluate every expression in a .csv or text file"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG["expression_column"],
        help="Expression column name when --file is a CSV"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the diagnostic JSON dump instead of 'expression = result'"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log tokens and RPN for the expression"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unparseable operands instead of substituting 0"
    )
    parser.add_argument(
        "--no_partial",
        action="store_true",
        help="Fail when operands are left over after evaluation"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        help="Write batch results to this CSV file"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=LOGGING_CONFIG["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level"
    )
    return parser


def main(args):
    validate_config()

    options = {
        "on_parse_error": "raise" if args.strict else PARSER_CONFIG["on_parse_error"],
        "allow_partial": False if args.no_partial else EVALUATOR_CONFIG["allow_partial"],
    }

    try:
        if args.file:
            expressions = load_expressions(args.file, args.column)
            results = evaluate_many(expressions, **options)
            if args.output_path:
                results.to_csv(args.output_path, index=False, float_format=BATCH_CONFIG["float_format"])
                logger.info(f"Results saved to {args.output_path}")
            else:
                print(results.to_string(index=False))
            return 0

        calc = Calculator(args.expression, **options)
    except CalculatorError as e:
        logger.error(e.message)
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read expressions: {e}")
        return 1

    print(calc.jsonify() if args.json else calc.to_string(verbose=args.verbose))
    return 0


def run(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.expression is None and not args.file:
        parser.error("either an expression or --file is required")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_CONFIG["format"]
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(run())
