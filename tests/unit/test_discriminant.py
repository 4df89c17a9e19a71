"""
Тесты для модуля Discriminant Engine

Проверяет:
1. Точность вычисления D = b*b - 4*a*c (побитовое совпадение)
2. Классификацию на границах (0.0, минимальные субнормальные числа)
3. Fall-through NaN в NO_REAL_ROOTS
4. Формат вывода report()
"""

import io
import math

import pytest

from src.core.domain import Coefficients
from src.core.math import (
    RESULTS_HEADER,
    DiscriminantEngine,
    DiscriminantResult,
    RootCount,
)

# Минимальное положительное субнормальное число
SMALLEST_SUBNORMAL = math.ulp(0.0)


@pytest.fixture
def engine():
    """Fixture для DiscriminantEngine без вывода."""
    return DiscriminantEngine(io.StringIO())


# =============================================================================
# CALCULATE
# =============================================================================


class TestCalculate:
    """Тесты для DiscriminantEngine.calculate"""

    @pytest.mark.parametrize(
        "a, b, c, expected",
        [
            (1.0, -3.0, 2.0, 1.0),
            (1.0, 2.0, 1.0, 0.0),
            (1.0, 0.0, 1.0, -4.0),
            (2.0, 5.0, -3.0, 49.0),
            (0.0, 0.0, 0.0, 0.0),
        ],
    )
    def test_known_values(self, engine, a, b, c, expected) -> None:
        assert engine.calculate(Coefficients(a=a, b=b, c=c)) == expected

    @pytest.mark.parametrize(
        "a, b, c",
        [
            (0.1, 0.3, 0.2),
            (1e-8, 1.0, 1e-8),
            (3.7, -12.345, 0.001),
            (-1.5e10, 2.5e5, 7.25e-3),
            (123456.789, -98765.4321, 0.5),
        ],
    )
    def test_bit_exact_with_native_arithmetic(self, engine, a, b, c) -> None:
        """Результат совпадает с b*b - 4*a*c без какой-либо коррекции"""
        assert engine.calculate(Coefficients(a=a, b=b, c=c)) == b * b - 4 * a * c

    def test_overflow_saturates_to_inf(self, engine) -> None:
        """Переполнение не бросает исключений"""
        result = engine.calculate(Coefficients(a=0.0, b=1e200, c=0.0))
        assert result == math.inf

    def test_inf_minus_inf_is_nan(self, engine) -> None:
        result = engine.calculate(Coefficients(a=1e200, b=1e200, c=1e200))
        assert math.isnan(result)

    def test_nan_input_propagates(self, engine) -> None:
        result = engine.calculate(Coefficients(a=float("nan"), b=1.0, c=1.0))
        assert math.isnan(result)


# =============================================================================
# CLASSIFY
# =============================================================================


class TestClassify:
    """Тесты для DiscriminantEngine.classify"""

    def test_exact_zero_is_one_root(self, engine) -> None:
        assert engine.classify(0.0) == RootCount.ONE_REAL_ROOT

    def test_negative_zero_is_one_root(self, engine) -> None:
        assert engine.classify(-0.0) == RootCount.ONE_REAL_ROOT

    def test_smallest_positive_is_two_roots(self, engine) -> None:
        """Без epsilon: любое D > 0 даёт два корня"""
        assert engine.classify(SMALLEST_SUBNORMAL) == RootCount.TWO_REAL_ROOTS

    def test_smallest_negative_is_no_roots(self, engine) -> None:
        assert engine.classify(-SMALLEST_SUBNORMAL) == RootCount.NO_REAL_ROOTS

    def test_nan_falls_through_to_no_roots(self, engine) -> None:
        assert engine.classify(float("nan")) == RootCount.NO_REAL_ROOTS

    def test_infinities(self, engine) -> None:
        assert engine.classify(math.inf) == RootCount.TWO_REAL_ROOTS
        assert engine.classify(-math.inf) == RootCount.NO_REAL_ROOTS

    @pytest.mark.parametrize("value", [1e-300, 1e-17, 2.2e-16])
    def test_no_tolerance_around_zero(self, engine, value) -> None:
        """Малые |D| не приравниваются к нулю (известная хрупкость границы)"""
        assert engine.classify(value) == RootCount.TWO_REAL_ROOTS
        assert engine.classify(-value) == RootCount.NO_REAL_ROOTS

    def test_messages(self) -> None:
        assert RootCount.TWO_REAL_ROOTS.message == "Two real roots"
        assert RootCount.ONE_REAL_ROOT.message == "One real root"
        assert RootCount.NO_REAL_ROOTS.message == "No real roots"


# =============================================================================
# EVALUATE / REPORT
# =============================================================================


class TestEvaluate:
    """Тесты для DiscriminantEngine.evaluate"""

    def test_result_fields(self, engine) -> None:
        coefficients = Coefficients(a=1, b=-3, c=2)
        result = engine.evaluate(coefficients)

        assert isinstance(result, DiscriminantResult)
        assert result.coefficients == coefficients
        assert result.discriminant == 1.0
        assert result.root_count == RootCount.TWO_REAL_ROOTS
        assert "TWO_REAL_ROOTS" in result.details

    def test_evaluate_writes_nothing(self) -> None:
        out = io.StringIO()
        DiscriminantEngine(out).evaluate(Coefficients(a=1, b=2, c=1))

        assert out.getvalue() == ""


class TestReport:
    """Тесты для DiscriminantEngine.report"""

    @pytest.mark.parametrize(
        "a, b, c, discriminant_line, classification",
        [
            (1, -3, 2, "Discriminant = 1.0", "Two real roots"),
            (1, 2, 1, "Discriminant = 0.0", "One real root"),
            (1, 0, 1, "Discriminant = -4.0", "No real roots"),
        ],
    )
    def test_report_lines(self, a, b, c, discriminant_line, classification) -> None:
        out = io.StringIO()
        engine = DiscriminantEngine(out)

        engine.report(Coefficients(a=a, b=b, c=c))

        assert out.getvalue().split("\n") == [
            "",
            RESULTS_HEADER,
            f"Equation: {float(a)}x² + {float(b)}x + {float(c)}",
            discriminant_line,
            classification,
            "",
        ]

    def test_report_returns_result(self) -> None:
        out = io.StringIO()
        result = DiscriminantEngine(out).report(Coefficients(a=1, b=0, c=1))

        assert result.root_count == RootCount.NO_REAL_ROOTS
        assert result.discriminant == -4.0

    def test_report_nan(self) -> None:
        """NaN печатается как есть и классифицируется как отсутствие корней"""
        out = io.StringIO()
        DiscriminantEngine(out).report(Coefficients(a=float("nan"), b=1, c=1))

        lines = out.getvalue().splitlines()
        assert lines[2] == "Equation: NaNx² + 1.0x + 1.0"
        assert lines[3] == "Discriminant = NaN"
        assert lines[4] == "No real roots"

    def test_default_stream_is_stdout(self, capsys) -> None:
        DiscriminantEngine().report(Coefficients(a=1, b=2, c=1))

        captured = capsys.readouterr()
        assert "One real root" in captured.out
        assert captured.err == ""
