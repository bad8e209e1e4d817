"""工具模块"""
from .formatting import format_result
from .report import evaluate_lines, save_report

__all__ = ['format_result', 'evaluate_lines', 'save_report']
