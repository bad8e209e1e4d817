"""幂和三角函数插件"""
import numpy as np

from calc import Arity, OperatorDescriptor, DomainError


def power(base, exponent):
    """x ^ y，负底数或 0 的负数次幂无定义"""
    if base < 0 or (base == 0 and exponent < 0):
        raise DomainError("Incorrect pow arguments")
    return float(np.power(base, exponent))


def sin(operand):
    return float(np.sin(operand))


def get_operators():
    return [
        OperatorDescriptor(40, '^', Arity.BINARY, power),
        OperatorDescriptor(20, 'sin', Arity.PREFIX, sin),
    ]
