"""分词器：把中缀表达式字符串切成 Token 序列"""
import logging

from core.token_system import (
    classify_term, is_operator, is_separator, Token, TOKEN_DEFINITIONS, TokenType
)

logger = logging.getLogger(__name__)

_PAREN_TYPES = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
}


class Tokenizer:
    """逐字符扫描，遇到操作符或分隔符时结束当前多字符项"""

    @staticmethod
    def tokenize(expression):
        """
        Args:
            expression: 原始表达式（调用方已检查括号平衡）
        Returns:
            Token 列表，空格被丢弃
        """
        tokens = []
        start = 0  # 当前多字符项的起点
        pending = 0  # 当前多字符项已累积的字符数

        for i, c in enumerate(expression):
            if is_operator(c) or is_separator(c):
                # 先收尾正在累积的多字符项
                if pending:
                    tokens.append(classify_term(expression[start:i], start))
                # 操作符和括号本身成为一个 Token
                if c != ' ':
                    if c in TOKEN_DEFINITIONS:
                        tokens.append(TOKEN_DEFINITIONS[c]._replace(position=i))
                    else:
                        tokens.append(Token(_PAREN_TYPES[c], c, position=i))
                start = i + 1
                pending = 0
            else:
                # 数字、关键字（SQRT/POWER）、常量或无法识别的字符
                pending += 1

        # 最后一个多字符项
        if pending:
            tokens.append(classify_term(expression[start:], start))

        logger.debug(f"Tokenized {expression!r} into {[t.text for t in tokens]}")
        return tokens
