"""calc/operators.py - 操作符描述和默认操作符表"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from calc.errors import DivisionByZeroError


class Arity(Enum):
    PREFIX = "prefix"    # 前缀: -x, sin x
    POSTFIX = "postfix"  # 后缀: x!
    BINARY = "binary"    # 二元: x + y


@dataclass(frozen=True)
class OperatorDescriptor:
    """
    单个操作符的描述，创建后不可修改。

    Attributes:
        priority: 优先级，数值越大结合越紧
        token: 操作符文本
        arity: 元数类型
        evaluate: 求值函数；BINARY 接收 (left, right)，其余接收一个操作数
    """
    priority: int
    token: str
    arity: Arity
    evaluate: Callable[..., float]

    @property
    def operand_count(self):
        return 2 if self.arity is Arity.BINARY else 1

    def key(self):
        """查找时使用的身份 (token, arity)"""
        return self.token, self.arity

    def __repr__(self):
        return f"OperatorDescriptor({self.priority}, {self.token!r}, {self.arity.name})"


class Operators:
    """默认操作符的静态方法集合"""

    # 一元操作符====================
    @staticmethod
    def neg(operand):
        """取负"""
        return -operand

    # 二元操作符========================================
    @staticmethod
    def add(left, right):
        """加法操作符"""
        return left + right

    @staticmethod
    def sub(left, right):
        """减法操作符"""
        return left - right

    @staticmethod
    def mul(left, right):
        """乘法操作符"""
        return left * right

    @staticmethod
    def div(left, right):
        """除法操作符，右操作数恰好为0时报错"""
        if right == 0:
            raise DivisionByZeroError()
        return left / right


# 默认操作符表（顺序即查找顺序）
DEFAULT_OPERATORS = (
    OperatorDescriptor(20, '-', Arity.PREFIX, Operators.neg),
    OperatorDescriptor(30, '*', Arity.BINARY, Operators.mul),
    OperatorDescriptor(30, '/', Arity.BINARY, Operators.div),
    OperatorDescriptor(10, '+', Arity.BINARY, Operators.add),
    OperatorDescriptor(10, '-', Arity.BINARY, Operators.sub),
)
