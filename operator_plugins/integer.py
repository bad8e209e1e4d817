"""取整插件：x i 向零截断"""
import numpy as np

from calc import Arity, OperatorDescriptor


def get_operators():
    return [
        OperatorDescriptor(40, 'i', Arity.POSTFIX, lambda operand: float(np.trunc(operand))),
    ]
