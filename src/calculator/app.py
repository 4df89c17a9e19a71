"""Discriminant Calculator — точка входа программы.

Связывает CoefficientReader и DiscriminantEngine простой цепочкой
конструкторов: ввод → вычисление → классификация → вывод.

Коды выхода:
- 0: нормальное завершение
- 1: входной поток исчерпан до ввода всех коэффициентов
"""

import logging
import sys
from typing import TextIO

from pydantic import ValidationError

from src.calculator.reader import CoefficientReader, EndOfInputError
from src.core.config import Settings
from src.core.logging_config import setup_logging
from src.core.math.discriminant import DiscriminantEngine, DiscriminantResult

logger = logging.getLogger(__name__)

TITLE = "=== Discriminant Calculator ==="

EXIT_OK = 0
EXIT_END_OF_INPUT = 1


def run(input_stream: TextIO, output_stream: TextIO) -> DiscriminantResult:
    """Один запуск калькулятора на заданных потоках.

    Raises:
        EndOfInputError: если ввод закончился раньше трёх коэффициентов
    """
    print(TITLE, file=output_stream)

    reader = CoefficientReader(input_stream, output_stream)
    engine = DiscriminantEngine(output_stream)

    coefficients = reader.read_all()
    return engine.report(coefficients)


def _configure_logging() -> None:
    """Logging from settings; invalid DISCRIMINANT_* values fall back to defaults."""
    try:
        setup_logging()
    except ValidationError as e:
        setup_logging(Settings.model_construct())
        problems = "; ".join(f"{err['loc'][0]}: {err['msg']}" for err in e.errors())
        logger.warning("Invalid logging settings, using defaults: %s", problems)


def main() -> int:
    """Console entry point. The calculator takes no arguments."""
    _configure_logging()

    try:
        result = run(sys.stdin, sys.stdout)
    except EndOfInputError as e:
        sys.stdout.flush()
        logger.error("Aborted: %s", e)
        return EXIT_END_OF_INPUT

    logger.info("Done: %s", result.details)
    return EXIT_OK
