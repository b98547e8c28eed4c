"""计算器错误类型"""


class CalculatorError(Exception):
    """所有计算器错误的基类"""

    def __init__(self, message, code="CALCULATOR_ERROR"):
        super().__init__(message)
        self.code = code
        self.message = message


class ImbalancedParenthesesError(CalculatorError):
    """左右括号数量不一致，在分词前检测"""

    def __init__(self, message="Parentheses are imbalanced, please try again"):
        super().__init__(message, code="IMBALANCED_PARENTHESES")


class UnmatchedParenthesisError(CalculatorError):
    """转换阶段找不到配对的括号"""

    def __init__(self, message="Unmatched parenthesis in expression"):
        super().__init__(message, code="UNMATCHED_PARENTHESIS")


class UnparseableOperandError(CalculatorError):
    """严格模式下遇到无法解析的操作数"""

    def __init__(self, token, position=None):
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Cannot parse operand '{token}'{where}", code="UNPARSEABLE_OPERAND")
        self.token = token
        self.position = position


class EvaluationError(CalculatorError):
    """RPN求值失败，通常说明转换结果有缺陷"""


class StackUnderflowError(EvaluationError):
    def __init__(self, operator, available):
        super().__init__(
            f"Operator '{operator}' needs 2 operands, {available} available",
            code="STACK_UNDERFLOW",
        )
        self.operator = operator
        self.available = available


class EmptyExpressionError(EvaluationError):
    def __init__(self, message="Nothing to evaluate"):
        super().__init__(message, code="EMPTY_EXPRESSION")


class MalformedExpressionError(EvaluationError):
    def __init__(self, remaining):
        super().__init__(
            f"Stack has {remaining} elements after evaluation, expected 1",
            code="MALFORMED_EXPRESSION",
        )
        self.remaining = remaining
