"""
IEEE-754 數值運算
Python 的 float 運算在除以零或定義域錯誤時會拋出例外，
這裡將其還原為 Infinity / NaN，語義與 Java 的 double 運算一致。
"""

import math


def divide(dividend: float, divisor: float) -> float:
    """
    浮點除法，除以零時回傳 ±Infinity 或 NaN

    Args:
        dividend: 被除數
        divisor: 除數

    Returns:
        商
    """
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if math.isnan(dividend) or dividend == 0.0:
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def power(base: float, exponent: float) -> float:
    """
    浮點乘冪，特殊情況遵循 Java Math.pow

    負數底數配分數指數得到 NaN，零的負次方得到 ±Infinity，
    溢位得到 ±Infinity，任何情況都不會拋出例外。
    """
    if exponent == 0.0:
        return 1.0
    if math.isnan(exponent) or math.isnan(base):
        return math.nan
    # C 的 pow(±1, ±inf) 為 1，Java 為 NaN
    if math.isinf(exponent) and abs(base) == 1.0:
        return math.nan
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            if math.copysign(1.0, base) < 0.0 and _is_odd_integer(exponent):
                return -math.inf
            return math.inf
        return math.nan


def total_order_key(value: float):
    """全序比較所用的排序鍵，相等的鍵代表 compare 結果為零"""
    if math.isnan(value):
        return (1, 0.0, 0.0)
    return (0, value, math.copysign(1.0, value))


def compare(lhs: float, rhs: float) -> int:
    """
    全序比較，與 Java Double.compare 相同

    所有 NaN 彼此相等且大於任何數；-0.0 小於 0.0。

    Returns:
        負數、零或正數
    """
    left_key = total_order_key(lhs)
    right_key = total_order_key(rhs)
    return (left_key > right_key) - (left_key < right_key)
