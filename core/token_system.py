"""core/token_system.py"""
import re
from enum import Enum
from types import MappingProxyType
from typing import NamedTuple, Optional

import numpy as np


class TokenType(Enum):
    NUMBER = "number"            # 数值
    OPERATOR = "operator"        # 操作符
    LEFT_PAREN = "left_paren"    # (
    RIGHT_PAREN = "right_paren"  # )
    CONSTANT = "constant"        # 命名常量，如 pi
    TERM = "term"                # 无法识别的文本，留给转换阶段判定


class Token(NamedTuple):
    type: TokenType
    text: str
    value: Optional[float] = None
    position: Optional[int] = None  # 在原始表达式中的起始下标

    def __str__(self):
        return self.text


# 操作符优先级：数字越小结合越紧
OPERATORS = MappingProxyType({
    'SQRT': 1,
    'POWER': 2,
    '*': 3,
    '/': 3,
    '%': 3,
    '+': 4,
    '-': 4,
})

# 分隔符：结束多字符项，本身不进入数字或常量
SEPARATORS = frozenset({' ', '(', ')'})

# 常量名统一小写存储，匹配时忽略大小写
CONSTANTS = MappingProxyType({
    'pi': float(np.pi),
})

# 十进制数字：可选小数点、可选无符号指数
NUMBER_PATTERN = re.compile(r'(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][0-9]+)?')

# Token定义字典
TOKEN_DEFINITIONS = MappingProxyType({
    name: Token(TokenType.OPERATOR, name) for name in OPERATORS
})


def is_operator(text):
    return text in OPERATORS


def is_separator(text):
    return text in SEPARATORS


def is_precedent(incoming, top):
    """栈顶操作符 top 结合不弱于 incoming 时返回 True（同级左结合）"""
    return OPERATORS[incoming] - OPERATORS[top] >= 0


def classify_term(text, position=None):
    """把一个多字符项归类为 Token，只在分词时做一次"""
    if text in TOKEN_DEFINITIONS:
        return TOKEN_DEFINITIONS[text]._replace(position=position)
    if text.lower() in CONSTANTS:
        return Token(TokenType.CONSTANT, text, CONSTANTS[text.lower()], position)
    # 数字两侧的制表符、换行等空白不影响解析
    stripped = text.strip()
    if NUMBER_PATTERN.fullmatch(stripped):
        return Token(TokenType.NUMBER, text, float(stripped), position)
    return Token(TokenType.TERM, text, position=position)


def number_token(value, text=None, position=None):
    value = float(value)
    return Token(TokenType.NUMBER, text if text is not None else repr(value), value, position)
