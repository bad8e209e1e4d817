"""calc/tokenizer.py - 把表达式字符串切分成 Token 序列"""
import logging
import string

from calc.token_system import Token

logger = logging.getLogger(__name__)

# 只认 ASCII（C locale），其他字符一律按单字符操作符处理
DIGITS = string.digits
LETTERS = string.ascii_letters
SPACES = string.whitespace


def _scan_number(text, pos):
    """
    读取数字字面量：整数部分 + 可选的 '.' 和小数部分。
    小数部分每读一位，权重除以10再累加。
    """
    num = 0.0
    while pos < len(text) and text[pos] in DIGITS:
        num = 10 * num + DIGITS.index(text[pos])
        pos += 1

    if pos < len(text) and text[pos] == '.':
        pos += 1
        weight = 1.0
        while pos < len(text) and text[pos] in DIGITS:
            weight /= 10
            num += weight * DIGITS.index(text[pos])
            pos += 1
    return num, pos


def scan(text):
    """
    从左到右扫描，永不失败（错误留给解析和求值阶段）

    Args:
        text: 表达式字符串
    Returns:
        Token 列表，保持输入顺序
    """
    tokens = []
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if ch in SPACES:
            pos += 1
            continue

        if ch == '.' or ch in DIGITS:
            num, pos = _scan_number(text, pos)
            tokens.append(Token.number(num))
            continue

        if ch in LETTERS:
            start = pos
            while pos < len(text) and text[pos] in LETTERS:
                pos += 1
            tokens.append(Token.symbol(text[start:pos]))
            continue

        # 其他字符：单字符操作符（不支持 '**' 这类多字符符号）
        tokens.append(Token.symbol(ch))
        pos += 1

    logger.debug(f"Scanned {len(tokens)} tokens from {text!r}")
    return tokens
