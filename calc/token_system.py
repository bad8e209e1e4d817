"""calc/token_system.py"""
from enum import Enum


class TokenType(Enum):
    VALUE = "value"        # 数值
    OPERATOR = "operator"  # 操作符、括号、标识符


class Token:
    def __init__(self, token_type, name=None, value=None, operator=None):
        self.type = token_type
        self.name = name          # 操作符文本（VALUE 为 None）
        self.value = value        # 数值（OPERATOR 为 None）
        self.operator = operator  # 解析后绑定的 OperatorDescriptor

    @classmethod
    def number(cls, value):
        return cls(TokenType.VALUE, value=float(value))

    @classmethod
    def symbol(cls, name):
        return cls(TokenType.OPERATOR, name=name)

    def bind(self, operator):
        """返回绑定了操作符描述的新 Token，原 Token 不变"""
        return Token(self.type, self.name, self.value, operator)

    @property
    def is_value(self):
        return self.type is TokenType.VALUE

    def is_symbol(self, name):
        return self.type is TokenType.OPERATOR and self.name == name

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.name, self.value, self.operator) == \
            (other.type, other.name, other.value, other.operator)

    def __hash__(self):
        return hash((self.type, self.name, self.value))

    def __repr__(self):
        if self.is_value:
            return f"Token({self.value})"
        return f"Token({self.name!r})"

    def __str__(self):
        if self.is_value:
            return f"{self.value:g}"
        return self.name


LEFT_PAREN = '('
RIGHT_PAREN = ')'
