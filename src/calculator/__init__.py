"""Discriminant Calculator — консольный ввод коэффициентов и запуск расчёта.

- CoefficientReader: ввод и валидация a, b, c
- run/main: точка входа (reader → engine)
"""

from .reader import (
    CoefficientParseError,
    CoefficientReader,
    EndOfInputError,
    parse_coefficient,
    parse_coefficient_strict,
)
from .app import main, run

__all__ = [
    "CoefficientReader",
    "CoefficientParseError",
    "EndOfInputError",
    "parse_coefficient",
    "parse_coefficient_strict",
    "main",
    "run",
]
