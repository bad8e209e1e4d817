"""utils/report.py - 批量求值并生成结果表"""
import logging

import numpy as np
import pandas as pd

from config.config import CALC_CONFIG, CLI_CONFIG

logger = logging.getLogger(__name__)


def evaluate_line(calculator, line, rpn=False):
    """
    对单行求值。

    Returns:
        (result, error)：成功时 error 为 None，失败时 result 为 NaN（rpn 模式下为 None）
    """
    if len(line) > CALC_CONFIG["max_expression_length"]:
        return (None if rpn else np.nan), "Expression is too long"
    try:
        if rpn:
            return calculator.to_rpn(line), None
        return calculator.evaluate(line), None
    except Exception as e:
        # 插件可能抛出任意异常，单行失败不影响后续行
        logger.debug(f"Failed to evaluate {line!r}: {e!r}")
        return (None if rpn else np.nan), str(e)


def evaluate_lines(calculator, lines, rpn=False):
    """
    Args:
        calculator: Calculator 实例
        lines: 表达式字符串的可迭代对象（空行跳过）
        rpn: True 时结果列为逆波兰形式而非数值
    Returns:
        DataFrame，列为 expression / result / error
    """
    rows = []
    for line in lines:
        line = line.strip()
        if not line:
            continue
        result, error = evaluate_line(calculator, line, rpn)
        rows.append((line, result, error))

    df = pd.DataFrame(rows, columns=CLI_CONFIG["csv_columns"])
    failed = df['error'].notna().sum()
    logger.info(f"Evaluated {len(df)} expressions, {failed} failed")
    return df


def save_report(df, output_path):
    logger.info(f"Saving results to {output_path}")
    df.to_csv(output_path, index=False)
