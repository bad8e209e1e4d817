"""阶乘插件"""
import numpy as np
from scipy import special

from calc import Arity, OperatorDescriptor, DomainError


def factorial(operand):
    """n! = gamma(n + 1)，只接受非负整数"""
    if operand < 0 or operand != np.floor(operand):
        raise DomainError(f"Factorial is undefined for {operand:g}")
    return float(special.gamma(operand + 1))


def get_operators():
    return [OperatorDescriptor(40, '!', Arity.POSTFIX, factorial)]
