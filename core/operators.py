"""core/operators.py"""
import numpy as np


def _as_float(operand1, operand2):
    return np.float64(operand1), np.float64(operand2)


def _power(base, exponent):
    # |base| == 1 且指数为无穷时结果为 nan（numpy 默认给 1.0）
    if np.abs(base) == 1 and np.isinf(exponent):
        return np.nan
    return float(np.power(base, exponent))


class Operators:
    """所有操作符的静态方法集合，按 IEEE 浮点语义计算（除零得 inf/nan，不抛异常）"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        operand1, operand2 = _as_float(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return float(operand1 + operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        operand1, operand2 = _as_float(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return float(operand1 - operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        operand1, operand2 = _as_float(operand1, operand2)
        with np.errstate(over='ignore', invalid='ignore'):
            return float(operand1 * operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符，除零不做特殊处理"""
        operand1, operand2 = _as_float(operand1, operand2)
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return float(operand1 / operand2)

    @staticmethod
    def mod(operand1, operand2):
        """浮点取余，结果符号跟随被除数"""
        operand1, operand2 = _as_float(operand1, operand2)
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.fmod(operand1, operand2))

    @staticmethod
    def power(operand1, operand2):
        """operand1 的 operand2 次方"""
        operand1, operand2 = _as_float(operand1, operand2)
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return _power(operand1, operand2)

    @staticmethod
    def sqrt(operand1, operand2):
        """
        开方：operand1 是根次，operand2 是被开方数，即 operand2 ** (1 / operand1)。
        "2 SQRT 9" 得 3.0。注意参数顺序与直觉相反。
        """
        operand1, operand2 = _as_float(operand1, operand2)
        with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
            return _power(operand2, np.float64(1.0) / operand1)


# 操作符符号 -> 实现
OPERATOR_FUNCTIONS = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '%': Operators.mod,
    'POWER': Operators.power,
    'SQRT': Operators.sqrt,
}
