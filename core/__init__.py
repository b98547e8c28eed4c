"""核心模块 - Token系统、分词器、逆波兰转换、RPN评估器和操作符"""
from .token_system import (
    TokenType, Token, OPERATORS, SEPARATORS, CONSTANTS, TOKEN_DEFINITIONS
)
from .tokenizer import Tokenizer
from .postfix import PostfixConverter, ParseError
from .rpn_evaluator import RPNEvaluator
from .operators import Operators, OPERATOR_FUNCTIONS
from .exceptions import (
    CalculatorError, ImbalancedParenthesesError, UnmatchedParenthesisError,
    UnparseableOperandError, EvaluationError, StackUnderflowError,
    EmptyExpressionError, MalformedExpressionError
)

__all__ = [
    'TokenType', 'Token', 'OPERATORS', 'SEPARATORS', 'CONSTANTS', 'TOKEN_DEFINITIONS',
    'Tokenizer', 'PostfixConverter', 'ParseError', 'RPNEvaluator',
    'Operators', 'OPERATOR_FUNCTIONS',
    'CalculatorError', 'ImbalancedParenthesesError', 'UnmatchedParenthesisError',
    'UnparseableOperandError', 'EvaluationError', 'StackUnderflowError',
    'EmptyExpressionError', 'MalformedExpressionError'
]
