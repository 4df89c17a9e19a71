"""
Core math modules для Discriminant Calculator

Дискриминант квадратного уравнения и классификация числа корней.
"""

from src.core.math.discriminant import (
    RESULTS_HEADER,
    DiscriminantEngine,
    DiscriminantResult,
    RootCount,
)

__all__ = [
    # Constants
    "RESULTS_HEADER",
    # Types
    "DiscriminantResult",
    "RootCount",
    # Engine
    "DiscriminantEngine",
]
