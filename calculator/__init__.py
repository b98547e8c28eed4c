"""计算器模块 - 表达式计算和批量处理"""
from .calculator import Calculator, calculate, check_parentheses
from .batch import evaluate_many, load_expressions

__all__ = ['Calculator', 'calculate', 'check_parentheses', 'evaluate_many', 'load_expressions']
