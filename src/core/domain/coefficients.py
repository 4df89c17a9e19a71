"""
Coefficients — коэффициенты квадратного уравнения ax² + bx + c = 0

Immutable Pydantic модель. Создаётся один раз за запуск (CoefficientReader),
потребляется DiscriminantEngine.

ВАЖНО: NaN/Inf допускаются на уровне модели. Конечность значений
гарантирует только консольный reader; движок обязан сохранять
fall-through поведение для вырожденных входов.
"""

from pydantic import BaseModel, Field

from src.core.domain.formatting import format_double


class Coefficients(BaseModel):
    """
    Коэффициенты квадратного уравнения.

    Все три поля обязательны: экземпляр существует только когда
    a, b и c уже разобраны.
    """

    a: float = Field(..., description="Коэффициент при x²")
    b: float = Field(..., description="Коэффициент при x")
    c: float = Field(..., description="Свободный член")

    model_config = {"frozen": True}

    def equation(self) -> str:
        """Уравнение с подставленными значениями: '{a}x² + {b}x + {c}'."""
        return f"{format_double(self.a)}x² + {format_double(self.b)}x + {format_double(self.c)}"
