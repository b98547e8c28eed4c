"""中缀 Token 序列转逆波兰序列（调度场算法）"""
import logging
from typing import NamedTuple, Optional

from core.exceptions import UnmatchedParenthesisError, UnparseableOperandError
from core.token_system import is_precedent, number_token, Token, TokenType

logger = logging.getLogger(__name__)

ON_PARSE_ERROR_CHOICES = ('recover', 'raise')


class ParseError(NamedTuple):
    token: str
    position: Optional[int]
    message: str


class PostfixConverter:
    """
    on_parse_error:
        'recover' - 无法解析的操作数替换为 0，记录 ParseError 后继续
        'raise'   - 直接抛出 UnparseableOperandError
    """

    def __init__(self, on_parse_error='recover'):
        if on_parse_error not in ON_PARSE_ERROR_CHOICES:
            raise ValueError(f"on_parse_error must be one of {ON_PARSE_ERROR_CHOICES}, got {on_parse_error!r}")
        self.on_parse_error = on_parse_error

    def to_postfix(self, tokens):
        """
        Returns:
            (rpn, errors)：逆波兰 Token 列表和 ParseError 列表
        """
        rpn = []
        errors = []
        stack = []  # 操作符和左括号

        for token in tokens:
            if token.type == TokenType.LEFT_PAREN:
                stack.append(token)

            elif token.type == TokenType.RIGHT_PAREN:
                while stack and stack[-1].type != TokenType.LEFT_PAREN:
                    rpn.append(stack.pop())
                if not stack:
                    raise UnmatchedParenthesisError(f"Unmatched ')' at position {token.position}")
                stack.pop()  # 丢弃左括号

            elif token.type == TokenType.OPERATOR:
                # 栈顶优先级不弱于当前操作符时先出栈（同级从左到右）
                while stack and stack[-1].type == TokenType.OPERATOR and is_precedent(token.text, stack[-1].text):
                    rpn.append(stack.pop())
                stack.append(token)

            elif token.type == TokenType.CONSTANT:
                # 常量不经过操作符栈
                rpn.append(number_token(token.value, position=token.position))

            elif token.type == TokenType.NUMBER:
                rpn.append(token)

            else:
                if self.on_parse_error == 'raise':
                    raise UnparseableOperandError(token.text, token.position)
                error = ParseError(
                    token.text, token.position,
                    f"Cannot parse operand '{token.text}' at position {token.position}",
                )
                logger.warning(f"{error.message}, substituting 0")
                errors.append(error)
                rpn.append(number_token(0.0, text='0', position=token.position))

        while stack:
            token = stack.pop()
            if token.type == TokenType.LEFT_PAREN:
                raise UnmatchedParenthesisError(f"Unmatched '(' at position {token.position}")
            rpn.append(token)

        logger.debug(f"RPN: {[t.text for t in rpn]}")
        return rpn, errors
