"""
Форматирование float в нотации Double.toString

Правила:
- NaN / Infinity / -Infinity для специальных значений
- 1e-3 <= |x| < 1e7: десятичная запись, минимум одна цифра после точки
- иначе: научная запись d.dddEn (экспонента без '+', минимум одна
  цифра мантиссы после точки)

Цифры берутся из repr(), то есть кратчайшее представление,
восстанавливающее исходный float.
"""

import math
from typing import Final

# Границы десятичной записи: [1e-3, 1e7)
FIXED_NOTATION_MIN: Final[float] = 1e-3
FIXED_NOTATION_MAX: Final[float] = 1e7


def _shortest_digits(magnitude: float) -> tuple[str, int]:
    """
    Значащие цифры и позиция точки: magnitude == 0.DIGITS * 10**point.

    Args:
        magnitude: конечное положительное значение
    """
    mantissa, _, exponent = repr(magnitude).partition("e")
    whole, _, fraction = mantissa.partition(".")

    all_digits = whole + fraction
    stripped = all_digits.lstrip("0")
    point = len(whole) + int(exponent or 0) - (len(all_digits) - len(stripped))

    return stripped.rstrip("0"), point


def format_double(value: float) -> str:
    """
    Строковое представление float как в Double.toString.

    Examples:
        >>> format_double(-3.0)
        '-3.0'
        >>> format_double(1e200)
        '1.0E200'
        >>> format_double(0.0001)
        '1.0E-4'
        >>> format_double(float("nan"))
        'NaN'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0:
        return f"{sign}0.0"

    magnitude = abs(value)
    digits, point = _shortest_digits(magnitude)

    if FIXED_NOTATION_MIN <= magnitude < FIXED_NOTATION_MAX:
        if point <= 0:
            integer, fraction = "0", "0" * -point + digits
        elif point >= len(digits):
            integer, fraction = digits + "0" * (point - len(digits)), "0"
        else:
            integer, fraction = digits[:point], digits[point:]
        return f"{sign}{integer}.{fraction}"

    return f"{sign}{digits[0]}.{digits[1:] or '0'}E{point - 1}"
