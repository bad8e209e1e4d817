"""calc/parser.py - 中缀 Token 序列转逆波兰序列（调度场算法的状态机版本）"""
import logging
from enum import Enum

from calc.errors import (
    UnexpectedEndOfExpressionError, ExpectOperatorError, UnknownPrefixOperatorError,
    UnknownOperatorError, MissingOpenParenError, MissingCloseParenError
)
from calc.operators import Arity
from calc.token_system import Token, TokenType, LEFT_PAREN, RIGHT_PAREN

logger = logging.getLogger(__name__)


class ParserState(Enum):
    PREFIX = "prefix"  # 期待操作数或前缀操作符
    SUFFIX = "suffix"  # 期待二元/后缀操作符或 ')'
    DONE = "done"      # 输入结束，清空操作符栈
    END = "end"


# 输入结束时用来清栈的隐式右括号
_IMPLICIT_CLOSE = Token.symbol(RIGHT_PAREN)


def _pops_before(top, incoming):
    """
    操作符栈顶 top 是否应该在 incoming 入栈前弹出。
    '(' 只能被显式的 ')' 移除；incoming 没有绑定操作符（右括号）时视为最低优先级。
    """
    if top.is_symbol(LEFT_PAREN):
        return False
    if incoming.operator is None:
        return True
    # 相等时弹出：左结合
    return top.operator.priority >= incoming.operator.priority


def _next_arity(tokens, pos):
    """根据下一个 Token 判断当前操作符是二元还是后缀"""
    if pos < len(tokens):
        nxt = tokens[pos]
        if nxt.type is TokenType.VALUE or not nxt.is_symbol(LEFT_PAREN):
            return Arity.BINARY
    return Arity.POSTFIX


class Parser:
    """把扫描结果转换成逆波兰序列，按需查询操作符注册表"""

    def __init__(self, registry):
        self.registry = registry

    @staticmethod
    def _drop_operators(output, op_stack, incoming):
        """把优先级不低于 incoming 的操作符从栈里移到输出"""
        while op_stack and _pops_before(op_stack[-1], incoming):
            output.append(op_stack.pop())

    def _resolve(self, token, arity):
        """解析二元/后缀操作符，后缀查不到时再按二元查找"""
        descriptor = self.registry.find(token.name, arity)
        if descriptor is None and arity is Arity.POSTFIX:
            descriptor = self.registry.find(token.name, Arity.BINARY)
        if descriptor is None:
            raise UnknownOperatorError(token.name)
        return descriptor

    def parse(self, tokens):
        """
        Args:
            tokens: scan() 的输出
        Returns:
            逆波兰顺序的 Token 列表，每个操作符 Token 都绑定了 OperatorDescriptor
        """
        output = []    # 操作数/输出累加器
        op_stack = []  # 操作符栈，'(' 作为边界
        state = ParserState.PREFIX
        pos = 0

        while state is not ParserState.END:
            token = None
            if state in (ParserState.PREFIX, ParserState.SUFFIX):
                if pos >= len(tokens):
                    if state is ParserState.PREFIX:
                        raise UnexpectedEndOfExpressionError()
                    state = ParserState.DONE
                else:
                    token = tokens[pos]
                    pos += 1

            # ================== 期待操作数 ==================
            if state is ParserState.PREFIX:
                if token.is_value:
                    output.append(token)
                    state = ParserState.SUFFIX
                elif token.is_symbol(LEFT_PAREN):
                    op_stack.append(token)
                else:
                    descriptor = self.registry.find(token.name, Arity.PREFIX)
                    if descriptor is None:
                        raise UnknownPrefixOperatorError(token.name)
                    op_stack.append(token.bind(descriptor))

            # ================== 期待操作符 ==================
            elif state is ParserState.SUFFIX:
                if token.is_value or token.is_symbol(LEFT_PAREN):
                    raise ExpectOperatorError()

                if token.is_symbol(RIGHT_PAREN):
                    self._drop_operators(output, op_stack, token)
                    if not op_stack or not op_stack[-1].is_symbol(LEFT_PAREN):
                        raise MissingOpenParenError()
                    op_stack.pop()
                    continue

                descriptor = self._resolve(token, _next_arity(tokens, pos))
                bound = token.bind(descriptor)
                self._drop_operators(output, op_stack, bound)
                op_stack.append(bound)
                if descriptor.arity is Arity.BINARY:
                    state = ParserState.PREFIX

            # ================== 输入结束 ==================
            elif state is ParserState.DONE:
                self._drop_operators(output, op_stack, _IMPLICIT_CLOSE)
                if op_stack or not output:
                    raise MissingCloseParenError()
                state = ParserState.END

        logger.debug(f"RPN: {' '.join(str(t) for t in output)}")
        return output


def parse(tokens, registry):
    """Parser(registry).parse(tokens) 的简写"""
    return Parser(registry).parse(tokens)
