"""
Discriminant Engine — дискриминант и классификация числа корней

Модуль вычисляет D = b² - 4ac и классифицирует количество
вещественных корней по знаку D:
- D > 0  → два вещественных корня
- D == 0 → один вещественный корень (точное равенство, без epsilon)
- иначе  → нет вещественных корней (включая NaN)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. calculate() побитово совпадает с b * b - 4 * a * c (нативная IEEE-754 арифметика)
2. Арифметика никогда не бросает исключений (переполнение → inf, вырождение → NaN)
3. NaN не обрабатывается отдельно и попадает в ветку NO_REAL_ROOTS
4. Граница D == 0 сравнивается точно; для вычисленных (не введённых
   литералом) коэффициентов она численно хрупкая — это известное ограничение
"""

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

from src.core.domain.coefficients import Coefficients
from src.core.domain.formatting import format_double

logger = logging.getLogger(__name__)

RESULTS_HEADER = "=== Results ==="


class RootCount(str, Enum):
    """Количество вещественных корней квадратного уравнения."""

    TWO_REAL_ROOTS = "TWO_REAL_ROOTS"
    ONE_REAL_ROOT = "ONE_REAL_ROOT"
    NO_REAL_ROOTS = "NO_REAL_ROOTS"

    @property
    def message(self) -> str:
        """Строка классификации для вывода пользователю."""
        return _ROOT_COUNT_MESSAGES[self]


_ROOT_COUNT_MESSAGES = {
    RootCount.TWO_REAL_ROOTS: "Two real roots",
    RootCount.ONE_REAL_ROOT: "One real root",
    RootCount.NO_REAL_ROOTS: "No real roots",
}


@dataclass(frozen=True)
class DiscriminantResult:
    """Результат вычисления дискриминанта."""

    coefficients: Coefficients
    discriminant: float
    root_count: RootCount

    # Детали
    details: str


class DiscriminantEngine:
    """Вычисление, классификация и вывод дискриминанта.

    Порядок:
    1. calculate → D = b*b - 4*a*c
    2. classify → RootCount по знаку D
    3. report → печать уравнения, D и классификации
    """

    def __init__(self, output_stream: Optional[TextIO] = None):
        """
        Args:
            output_stream: поток вывода (default: sys.stdout на момент вызова)
        """
        self._output_stream = output_stream

    @property
    def output_stream(self) -> TextIO:
        return self._output_stream if self._output_stream is not None else sys.stdout

    def calculate(self, coefficients: Coefficients) -> float:
        """
        Дискриминант D = b*b - 4*a*c.

        Порядок операций фиксирован: (b*b) - ((4*a)*c).

        Examples:
            >>> DiscriminantEngine().calculate(Coefficients(a=1, b=-3, c=2))
            1.0
            >>> DiscriminantEngine().calculate(Coefficients(a=1, b=0, c=1))
            -4.0
        """
        a = coefficients.a
        b = coefficients.b
        c = coefficients.c

        return b * b - 4 * a * c

    def classify(self, discriminant: float) -> RootCount:
        """
        Классификация по знаку дискриминанта.

        Сравнение с нулём точное. NaN не проходит ни `> 0`, ни `== 0`
        и попадает в NO_REAL_ROOTS.
        """
        if discriminant > 0:
            return RootCount.TWO_REAL_ROOTS
        elif discriminant == 0:
            return RootCount.ONE_REAL_ROOT
        else:
            return RootCount.NO_REAL_ROOTS

    def evaluate(self, coefficients: Coefficients) -> DiscriminantResult:
        """Вычисление D и классификация без вывода."""
        discriminant = self.calculate(coefficients)
        root_count = self.classify(discriminant)

        logger.debug(
            "discriminant computed: a=%r b=%r c=%r D=%r -> %s",
            coefficients.a,
            coefficients.b,
            coefficients.c,
            discriminant,
            root_count.value,
        )

        return DiscriminantResult(
            coefficients=coefficients,
            discriminant=discriminant,
            root_count=root_count,
            details=f"D={format_double(discriminant)} for {coefficients.equation()}: {root_count.value}",
        )

    def report(self, coefficients: Coefficients) -> DiscriminantResult:
        """
        Вычисление и печать результата.

        Выводит (в указанном порядке):
        - пустую строку и заголовок результатов
        - уравнение с подставленными коэффициентами
        - значение дискриминанта
        - одну строку классификации

        Returns:
            DiscriminantResult (для вызывающего кода и тестов)
        """
        result = self.evaluate(coefficients)

        out = self.output_stream
        print("\n" + RESULTS_HEADER, file=out)
        print(f"Equation: {coefficients.equation()}", file=out)
        print(f"Discriminant = {format_double(result.discriminant)}", file=out)
        print(result.root_count.message, file=out)
        out.flush()

        return result
