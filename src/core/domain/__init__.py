"""
Domain models and value objects.

Contains the Coefficients value object of a quadratic equation and the
float rendering used in its console output.
"""

from src.core.domain.coefficients import Coefficients
from src.core.domain.formatting import format_double

__all__ = [
    "Coefficients",
    "format_double",
]
