"""calc/registry.py - 操作符注册表"""
import logging

from calc.errors import RegistryFrozenError
from calc.operators import OperatorDescriptor

logger = logging.getLogger(__name__)


class OperatorRegistry:
    """
    有序、只追加的操作符集合。

    默认操作符先注册，插件提供的操作符按发现顺序追加在后面。
    find 返回第一个匹配项，因此 (token, arity) 冲突时默认操作符优先。
    构造完成后调用 freeze()，之后只读，可以被多个线程同时查询。
    """

    def __init__(self):
        self._operators = []
        self._frozen = False

    def register(self, defaults):
        """注册默认操作符"""
        self.extend(defaults)
        return self

    def extend(self, descriptors):
        """
        吸收一组操作符描述（复制到注册表，不保留调用方的集合）

        Args:
            descriptors: OperatorDescriptor 的可迭代对象
        Returns:
            实际加入的数量
        """
        if self._frozen:
            raise RegistryFrozenError()

        absorbed = list(descriptors)
        for descriptor in absorbed:
            if not isinstance(descriptor, OperatorDescriptor):
                raise TypeError(f"Expected OperatorDescriptor, got {type(descriptor).__name__}")

        for descriptor in absorbed:
            if self.find(descriptor.token, descriptor.arity) is not None:
                logger.debug(f"Operator {descriptor!r} is shadowed by an earlier registration")
            self._operators.append(descriptor)
        return len(absorbed)

    def find(self, token, arity):
        """按注册顺序线性查找 (token, arity)，找不到返回 None"""
        key = (token, arity)
        for descriptor in self._operators:
            if descriptor.key() == key:
                return descriptor
        return None

    def freeze(self):
        self._frozen = True
        return self

    @property
    def frozen(self):
        return self._frozen

    def __iter__(self):
        return iter(tuple(self._operators))

    def __len__(self):
        return len(self._operators)

    def __repr__(self):
        return f"OperatorRegistry({len(self._operators)} operators, frozen={self._frozen})"
