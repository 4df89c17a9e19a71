"""
CoefficientReader — ввод коэффициентов квадратного уравнения с консоли

Читает whitespace-разделённые токены из входного потока. Каждый
коэффициент запрашивается подсказкой без перевода строки; невалидный
токен отбрасывается, печатается сообщение об ошибке и чтение повторяется.

Ошибки:
- CoefficientParseError: токен не является конечным десятичным числом
  (локальная, перехватывается внутри цикла ввода)
- EndOfInputError: поток закрыт до получения валидного токена
  (фатальная, пробрасывается наверх)
"""

import logging
import math
import re
import sys
from collections import deque
from typing import Deque, Optional, TextIO

from src.core.domain.coefficients import Coefficients

logger = logging.getLogger(__name__)

HEADER = "Enter coefficients for quadratic equation ax² + bx + c = 0"
PROMPT_TEMPLATE = "Enter coefficient {name}: "
RETRY_MESSAGE = "Error: please enter a valid number! Try again: "

# Десятичный литерал: знак, целая/дробная часть, экспонента.
# nan/inf, подчёркивания и hex не принимаются.
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class CoefficientParseError(ValueError):
    """Токен не является конечным десятичным числом."""
    pass


class EndOfInputError(EOFError):
    """
    Входной поток исчерпан до получения всех коэффициентов.

    Фатальная ошибка: частичные результаты не печатаются, процесс
    завершается с ненулевым кодом.
    """
    pass


def parse_coefficient_strict(token: str) -> float:
    """
    Разбор токена в конечный float.

    Raises:
        CoefficientParseError: если токен не десятичный литерал
            или переполняется до бесконечности (например, 1e400)

    Examples:
        >>> parse_coefficient_strict("-3")
        -3.0
        >>> parse_coefficient_strict("2.5e-1")
        0.25
    """
    if not _DECIMAL_LITERAL.fullmatch(token):
        raise CoefficientParseError(f"Not a decimal number: {token!r}")

    value = float(token)
    if not math.isfinite(value):
        raise CoefficientParseError(f"Number out of range: {token!r}")

    return value


def parse_coefficient(token: str) -> Optional[float]:
    """Разбор токена; None если токен невалиден."""
    try:
        return parse_coefficient_strict(token)
    except CoefficientParseError:
        return None


class CoefficientReader:
    """Интерактивный ввод коэффициентов a, b, c.

    Токены извлекаются построчно: ожидание ввода блокирует только
    до следующей строки, остаток строки буферизуется для следующих
    запросов.
    """

    def __init__(
        self,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
    ):
        """
        Args:
            input_stream: поток ввода (default: sys.stdin на момент вызова)
            output_stream: поток вывода (default: sys.stdout на момент вызова)
        """
        self._input_stream = input_stream
        self._output_stream = output_stream
        self._pending: Deque[str] = deque()

    @property
    def input_stream(self) -> TextIO:
        return self._input_stream if self._input_stream is not None else sys.stdin

    @property
    def output_stream(self) -> TextIO:
        return self._output_stream if self._output_stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        out = self.output_stream
        out.write(text)
        out.flush()

    def _next_token(self) -> str:
        """Следующий токен; EndOfInputError если поток исчерпан."""
        while not self._pending:
            line = self.input_stream.readline()
            if line == "":
                raise EndOfInputError("Input stream closed before a valid number was entered")
            self._pending.extend(line.split())

        return self._pending.popleft()

    def read_coefficient(self, prompt: str) -> float:
        """
        Запрос одного коэффициента с повтором до валидного ввода.

        Args:
            prompt: подсказка (печатается без перевода строки)

        Returns:
            Конечное значение float

        Raises:
            EndOfInputError: если поток закрыт до валидного токена
        """
        self._write(prompt)

        while True:
            token = self._next_token()
            try:
                return parse_coefficient_strict(token)
            except CoefficientParseError as e:
                logger.debug("rejected token: %s", e)
                self._write(RETRY_MESSAGE)

    def read_all(self) -> Coefficients:
        """
        Ввод всех трёх коэффициентов в фиксированном порядке a, b, c.

        Returns:
            Coefficients
        """
        self._write(HEADER + "\n")

        a = self.read_coefficient(PROMPT_TEMPLATE.format(name="a"))
        b = self.read_coefficient(PROMPT_TEMPLATE.format(name="b"))
        c = self.read_coefficient(PROMPT_TEMPLATE.format(name="c"))

        return Coefficients(a=a, b=b, c=c)
