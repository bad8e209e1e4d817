"""utils/formatting.py"""
import numpy as np

from config.config import CALC_CONFIG


def format_result(value, fmt=None):
    """按 cout 的默认方式输出数值：6位有效数字，整数不带小数点"""
    fmt = fmt or CALC_CONFIG["number_format"]
    value = float(value)
    if np.isnan(value):
        return "nan"
    if np.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        # 去掉 -0
        value = 0.0
    return fmt % value
