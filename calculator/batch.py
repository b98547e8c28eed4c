"""批量计算：从文件加载表达式，结果汇总为 DataFrame"""
import logging

import numpy as np
import pandas as pd

from calculator.calculator import Calculator
from config.config import BATCH_CONFIG
from core import CalculatorError

logger = logging.getLogger(__name__)

RESULT_COLUMNS = ['expression', 'tokens', 'rpn', 'result', 'error']


def load_expressions(file_path, column=None):
    """
    加载表达式列表。

    Parameters:
    - file_path: .csv 文件按列读取，其他文件每个非空行一个表达式
    - column: CSV 中表达式所在列，默认 BATCH_CONFIG['expression_column']

    Returns:
    - 表达式字符串列表
    """
    column = column or BATCH_CONFIG["expression_column"]
    logger.info(f"Loading expressions from {file_path}")

    if str(file_path).endswith('.csv'):
        frame = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if column not in frame.columns:
            raise ValueError(f"Expression column '{column}' not found in {file_path}.")
        expressions = frame[column].tolist()
    else:
        with open(file_path, encoding='utf-8') as f:
            expressions = [line.rstrip('\n') for line in f if line.strip()]

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def evaluate_many(expressions, **kwargs):
    """
    逐个计算表达式，单个表达式失败不影响其他行。

    Returns:
    - DataFrame，列为 expression/tokens/rpn/result/error；失败行 result 为 NaN
    """
    rows = []
    failed = 0
    for expression in expressions:
        try:
            calc = Calculator(expression, **kwargs)
        except CalculatorError as e:
            logger.warning(f"Failed to evaluate {expression!r}: {e.message}")
            failed += 1
            rows.append({
                'expression': expression,
                'tokens': None,
                'rpn': None,
                'result': np.nan,
                'error': e.message,
            })
            continue

        rows.append({
            'expression': expression,
            'tokens': ' '.join(calc.token_texts()),
            'rpn': ' '.join(calc.rpn_texts()),
            'result': calc.result,
            'error': '; '.join(error.message for error in calc.errors) or None,
        })

    logger.info(f"Evaluated {len(rows)} expressions, {failed} failed")
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
