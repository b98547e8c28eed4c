"""表达式计算器：括号检查 -> 分词 -> 逆波兰 -> 求值"""
import json
import logging

from config.config import EVALUATOR_CONFIG, PARSER_CONFIG
from core import ImbalancedParenthesesError, PostfixConverter, RPNEvaluator, Tokenizer

logger = logging.getLogger(__name__)


def check_parentheses(expression):
    """左右括号数量不一致时抛出 ImbalancedParenthesesError"""
    if expression.count('(') != expression.count(')'):
        raise ImbalancedParenthesesError()


class Calculator:
    """
    构造时完成整个计算流程。

    Args:
        expression: 中缀表达式，如 "(2 + 3) * 4"
        on_parse_error: 'recover' 或 'raise'，默认取 PARSER_CONFIG
        allow_partial: 默认取 EVALUATOR_CONFIG
    """

    def __init__(self, expression, on_parse_error=None, allow_partial=None):
        if on_parse_error is None:
            on_parse_error = PARSER_CONFIG["on_parse_error"]
        if allow_partial is None:
            allow_partial = EVALUATOR_CONFIG["allow_partial"]

        # 原始输入，之后不再修改
        self.expression = expression
        self.tokens = []
        self.rpn = []
        self.errors = []
        self.result = 0.0

        check_parentheses(self.expression)
        self.tokens = Tokenizer.tokenize(self.expression)
        self.rpn, self.errors = PostfixConverter(on_parse_error).to_postfix(self.tokens)
        self.result = RPNEvaluator.evaluate(self.rpn, allow_partial=allow_partial)

    @property
    def ok(self):
        return not self.errors

    @property
    def display_expression(self):
        """有解析错误时返回提示信息，否则返回原始表达式"""
        if self.errors:
            return PARSER_CONFIG["error_template"].format(expression=self.expression)
        return self.expression

    def to_string(self, verbose=False):
        output = f"{self.display_expression} = {self.result}"
        if verbose:
            logger.info(f"Result: {output}")
            logger.info(f"Tokens: {self.token_texts()} , RPN: {self.rpn_texts()}")
        return output

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Calculator({self.expression!r})"

    def token_texts(self):
        return [t.text for t in self.tokens]

    def rpn_texts(self):
        return [t.text for t in self.rpn]

    def to_dict(self):
        return {
            "Original Expression": self.display_expression,
            "Tokenized Expression": self.token_texts(),
            "Reverse Polish Notation": self.rpn_texts(),
            "Final Result": self.result,
            "Errors": [error._asdict() for error in self.errors],
        }

    def jsonify(self):
        # inf/nan 按 json 模块默认输出为 Infinity/NaN
        return json.dumps(self.to_dict())


def calculate(expression, **kwargs):
    """计算表达式并只返回数值结果"""
    return Calculator(expression, **kwargs).result
