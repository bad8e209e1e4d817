"""calc/errors.py - 计算器异常体系"""


class CalculatorError(Exception):
    """所有计算错误的基类，消息可直接展示给用户"""


# 解析阶段 =====================================

class ParseError(CalculatorError):
    """表达式结构错误"""


class UnexpectedEndOfExpressionError(ParseError):
    def __init__(self, message="Unexpected end of expression"):
        super().__init__(message)


class ExpectOperatorError(ParseError):
    def __init__(self, message="Expect operation"):
        super().__init__(message)


class UnknownPrefixOperatorError(ParseError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown prefix operation {name}")


class UnknownOperatorError(ParseError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown operation {name}")


class MissingOpenParenError(ParseError):
    def __init__(self, message="Missing '('"):
        super().__init__(message)


class MissingCloseParenError(ParseError):
    def __init__(self, message="Missing ')'"):
        super().__init__(message)


# 求值阶段 =====================================

class EvaluationError(CalculatorError):
    """后缀序列不合法（正常情况下解析器不会产生）"""


class StackUnderflowError(EvaluationError):
    def __init__(self, message="Stack underflow"):
        super().__init__(message)


class MalformedExpressionError(EvaluationError):
    def __init__(self, message="Malformed expression"):
        super().__init__(message)


# 操作符自身的错误 ==============================

class OperatorError(CalculatorError):
    """操作符实现抛出的错误，插件可以继承它定义自己的错误"""


class DivisionByZeroError(OperatorError, ZeroDivisionError):
    def __init__(self, message="Division by zero"):
        super().__init__(message)


class DomainError(OperatorError, ValueError):
    """参数超出操作符定义域"""


class RegistryFrozenError(CalculatorError):
    def __init__(self, message="Operator registry is read-only after construction"):
        super().__init__(message)
