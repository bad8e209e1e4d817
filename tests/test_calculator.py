import threading
import unittest

from calc import (
    Calculator, Arity, OperatorDescriptor, DivisionByZeroError, MissingCloseParenError,
    MissingOpenParenError, UnknownOperatorError, CalculatorError, RegistryFrozenError
)


class TestCalculator(unittest.TestCase):
    def setUp(self):
        self.calc = Calculator()

    def test_precedence(self):
        self.assertEqual(self.calc.evaluate("1+2*3"), 7)
        self.assertEqual(self.calc.evaluate("(1+2)*3"), 9)

    def test_left_associative(self):
        self.assertEqual(self.calc.evaluate("8-3-2"), 3)
        self.assertEqual(self.calc.evaluate("16/4/2"), 2)

    def test_prefix(self):
        self.assertEqual(self.calc.evaluate("-3+4"), 1)
        self.assertEqual(self.calc.evaluate("2*-3"), -6)
        self.assertEqual(self.calc.evaluate("-(2+3)*2"), -10)

    def test_fractions(self):
        self.assertAlmostEqual(self.calc.evaluate("1.5*4"), 6.0)
        self.assertAlmostEqual(self.calc.evaluate(".5+.25"), 0.75)

    def test_result_is_float(self):
        self.assertIsInstance(self.calc.evaluate("2"), float)

    def test_whitespace_insensitive(self):
        expected = self.calc.evaluate("(1+2)*3-4/2")
        self.assertEqual(self.calc.evaluate("  ( 1 + 2 ) * 3 - 4 / 2  "), expected)
        self.assertEqual(self.calc.evaluate("(1+2)\t*3 -4/ 2"), expected)

    def test_division_by_zero(self):
        with self.assertRaises(DivisionByZeroError):
            self.calc.evaluate("1/0")
        with self.assertRaises(ZeroDivisionError):
            self.calc.evaluate("1/(2-2)")

    def test_unbalanced(self):
        with self.assertRaises(MissingCloseParenError):
            self.calc.evaluate("(1+2")
        with self.assertRaises(MissingOpenParenError):
            self.calc.evaluate("1+2)")

    def test_unknown_operator(self):
        with self.assertRaises(UnknownOperatorError):
            self.calc.evaluate("1 # 2")

    def test_errors_share_base(self):
        for text in ["", "1 2", "+1", "1 # 2", "(1", "1)", "1/0"]:
            with self.assertRaises(CalculatorError):
                self.calc.evaluate(text)

    def test_idempotent(self):
        self.assertEqual(self.calc.evaluate("2*(3+4)"), self.calc.evaluate("2*(3+4)"))
        with self.assertRaises(DivisionByZeroError):
            self.calc.evaluate("1/0")
        self.assertEqual(self.calc.evaluate("1+1"), 2)

    def test_to_rpn(self):
        self.assertEqual(self.calc.to_rpn("1+2*3"), "1 2 3 * +")
        self.assertEqual(self.calc.to_rpn("-(1.5+2)"), "1.5 2 + -")

    def test_registry_frozen(self):
        self.assertTrue(self.calc.registry.frozen)
        with self.assertRaises(RegistryFrozenError):
            self.calc.registry.extend([])

    def test_concurrent_evaluate(self):
        results = []

        def work():
            results.append(self.calc.evaluate("(1+2)*3-8/4"))

        threads = [threading.Thread(target=work) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(results, [7.0] * 8)


class TestCalculatorProviders(unittest.TestCase):
    def test_provider_operators(self):
        mod = OperatorDescriptor(30, '%', Arity.BINARY, lambda left, right: left % right)
        twice = OperatorDescriptor(40, 'twice', Arity.PREFIX, lambda x: 2 * x)
        calc = Calculator([[mod], [twice]])
        self.assertEqual(calc.evaluate("7%4+1"), 4)
        self.assertEqual(calc.evaluate("twice 3*2"), 12)
        self.assertEqual(len(calc.operators), 7)

    def test_empty_providers_skipped(self):
        calc = Calculator([[], None])
        self.assertEqual(len(calc.operators), 5)

    def test_provider_callable(self):
        half = OperatorDescriptor(40, 'h', Arity.POSTFIX, lambda x: x / 2)
        calc = Calculator(lambda: [[half]])
        self.assertEqual(calc.evaluate("5h"), 2.5)

    def test_postfix_followed_by_binary(self):
        half = OperatorDescriptor(40, 'h', Arity.POSTFIX, lambda x: x / 2)
        calc = Calculator([[half]])
        with self.assertRaises(UnknownOperatorError):
            calc.evaluate("5h+1")
        with self.assertRaises(UnknownOperatorError):
            calc.evaluate("(5h)")
        self.assertEqual(calc.evaluate("1+5h"), 3.5)

    def test_defaults_take_precedence(self):
        times = OperatorDescriptor(30, '+', Arity.BINARY, lambda left, right: left * right)
        calc = Calculator([[times]])
        self.assertEqual(calc.evaluate("2+3"), 5)

    def test_provider_error_propagates(self):
        class NegativeRootError(Exception):
            pass

        def root(x):
            if x < 0:
                raise NegativeRootError("negative root")
            return x ** 0.5

        calc = Calculator([[OperatorDescriptor(20, 'sqrt', Arity.PREFIX, root)]])
        self.assertEqual(calc.evaluate("sqrt 16"), 4)
        with self.assertRaises(NegativeRootError):
            calc.evaluate("sqrt(0-4)")
