import unittest

from calc.errors import StackUnderflowError, MalformedExpressionError, DivisionByZeroError
from calc.operators import Arity, OperatorDescriptor, DEFAULT_OPERATORS
from calc.rpn_evaluator import RPNEvaluator
from calc.token_system import Token

ADD, SUB = DEFAULT_OPERATORS[3], DEFAULT_OPERATORS[4]
NEG, DIV = DEFAULT_OPERATORS[0], DEFAULT_OPERATORS[2]


def num(value):
    return Token.number(value)


def op(descriptor):
    return Token.symbol(descriptor.token).bind(descriptor)


class TestRPNEvaluator(unittest.TestCase):
    def test_value(self):
        self.assertEqual(RPNEvaluator.evaluate([num(7)]), 7.0)

    def test_binary_operand_order(self):
        # 先入栈的是左操作数
        self.assertEqual(RPNEvaluator.evaluate([num(8), num(3), op(SUB)]), 5.0)
        self.assertEqual(RPNEvaluator.evaluate([num(1), num(4), op(DIV)]), 0.25)

    def test_unary(self):
        self.assertEqual(RPNEvaluator.evaluate([num(3), op(NEG), num(4), op(ADD)]), 1.0)

    def test_postfix_gets_one_operand(self):
        double = OperatorDescriptor(40, 'd', Arity.POSTFIX, lambda x: 2 * x)
        self.assertEqual(RPNEvaluator.evaluate([num(3), op(double)]), 6.0)

    def test_underflow(self):
        with self.assertRaises(StackUnderflowError):
            RPNEvaluator.evaluate([num(1), op(ADD)])
        with self.assertRaises(StackUnderflowError):
            RPNEvaluator.evaluate([op(NEG)])

    def test_empty(self):
        with self.assertRaises(MalformedExpressionError):
            RPNEvaluator.evaluate([])

    def test_leftover_values(self):
        with self.assertRaises(MalformedExpressionError):
            RPNEvaluator.evaluate([num(1), num(2)])

    def test_unresolved_operator(self):
        with self.assertRaises(MalformedExpressionError):
            RPNEvaluator.evaluate([num(1), num(2), Token.symbol('+')])

    def test_operator_error_propagates(self):
        with self.assertRaises(DivisionByZeroError):
            RPNEvaluator.evaluate([num(1), num(0), op(DIV)])
