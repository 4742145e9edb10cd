"""
Errors — Таксономия ошибок калькулятора

Каждая ошибка несёт вид (CalcErrorKind) и поднимается сразу в точке
обнаружения. Локального восстановления или повторов нет.

Виды ошибок:
- INVALID_FORMAT: строка не является числом в формате с запятой
- DIVISION_BY_ZERO: делитель равен нулю
- NON_INTEGER_EXPONENT: показатель степени имеет дробную часть
- NEGATIVE_INPUT: отрицательный аргумент квадратного корня

Контрактом является только вид ошибки и условие её возникновения,
текст сообщения носит информативный характер.
"""

from enum import Enum
from typing import ClassVar


class CalcErrorKind(str, Enum):
    """Вид ошибки вычисления."""

    INVALID_FORMAT = "INVALID_FORMAT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    NON_INTEGER_EXPONENT = "NON_INTEGER_EXPONENT"
    NEGATIVE_INPUT = "NEGATIVE_INPUT"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CalculationError(Exception):
    """
    Базовая ошибка вычисления.

    Подклассы также наследуют встроенные исключения (ValueError,
    ZeroDivisionError), поэтому вызывающий код, перехватывающий их,
    продолжает работать.
    """

    kind: ClassVar[CalcErrorKind]


class InvalidFormatError(CalculationError, ValueError):
    """Строка не разбирается как число с запятой в качестве разделителя."""

    kind = CalcErrorKind.INVALID_FORMAT


class DivisionByZeroError(CalculationError, ZeroDivisionError):
    """Делитель равен нулю."""

    kind = CalcErrorKind.DIVISION_BY_ZERO


class NonIntegerExponentError(CalculationError, ValueError):
    """Показатель степени не является целым числом."""

    kind = CalcErrorKind.NON_INTEGER_EXPONENT


class NegativeInputError(CalculationError, ValueError):
    """Квадратный корень из отрицательного числа."""

    kind = CalcErrorKind.NEGATIVE_INPUT
