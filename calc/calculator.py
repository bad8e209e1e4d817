"""calc/calculator.py - 求值入口"""
import logging

from calc.operators import DEFAULT_OPERATORS
from calc.parser import Parser
from calc.registry import OperatorRegistry
from calc.rpn_evaluator import RPNEvaluator
from calc.tokenizer import scan

logger = logging.getLogger(__name__)


class Calculator:
    """
    可扩展操作符的表达式计算器。

    构造时建立注册表：先放默认操作符，再按顺序吸收每个插件返回的操作符列表，
    然后冻结。构造完成之后 evaluate 是纯计算，可在多线程中共享同一个实例。
    """

    def __init__(self, providers=None, defaults=DEFAULT_OPERATORS):
        """
        Args:
            providers: 插件操作符列表的序列（每个元素是 OperatorDescriptor 的可迭代对象），
                       或者返回这种序列的无参函数；None 或空列表会被跳过
            defaults: 默认操作符表
        """
        self.registry = OperatorRegistry().register(defaults)

        if callable(providers):
            providers = providers()

        for descriptors in providers or []:
            if not descriptors:
                continue
            count = self.registry.extend(descriptors)
            logger.debug(f"Absorbed {count} provider operators")

        self.registry.freeze()
        self.parser = Parser(self.registry)
        logger.debug(f"Calculator ready: {self.registry!r}")

    @property
    def operators(self):
        """所有已注册的操作符（按查找顺序）"""
        return tuple(self.registry)

    def compile(self, text):
        """表达式 -> 逆波兰 Token 序列（每次调用重新生成，不做缓存）"""
        return self.parser.parse(scan(text))

    def evaluate(self, text):
        """
        Args:
            text: 表达式字符串
        Returns:
            float 结果；失败时抛出 CalculatorError 的子类
        """
        return float(RPNEvaluator.evaluate(self.compile(text)))

    def to_rpn(self, text):
        """逆波兰形式的字符串，用于调试"""
        return ' '.join(str(token) for token in self.compile(text))
