"""
Parsing — Разбор чисел в формате с запятой

Единственная точка валидации строковых входов. Все операции, принимающие
строки, проходят через parse_numeric_string.

Формат: дробная часть отделяется запятой ("5,5" == 5.5). Точка как
разделитель ("3.5") считается ошибкой формата.

Грамматика (только ASCII цифры):
    [пробелы] [+|-] (цифры [, [цифры]] | , цифры) [(e|E) [+|-] цифры] [пробелы]
"""

import re
from typing import Final, Union

from mathcalc.core.errors import InvalidFormatError

# Разделитель дробной части
DECIMAL_SEPARATOR: Final[str] = ","

_NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+(?:,[0-9]*)?|,[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

# Допустимые типы операнда: int, float или строка с запятой
NumericInput = Union[int, float, str]


def parse_numeric_string(text: str) -> float:
    """
    Преобразование строки с запятой в float.

    Args:
        text: Строка вида "5,5", "-0,25", "10", "1,5e3"

    Returns:
        Число double, равное float(text.replace(",", "."))

    Raises:
        InvalidFormatError: Если строка не является числом в формате с запятой
        TypeError: Если передана не строка

    Examples:
        >>> parse_numeric_string("5,5")
        5.5
        >>> parse_numeric_string(" -2 ")
        -2.0
        >>> parse_numeric_string("3.5")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidFormatError: ...
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    candidate = text.strip()
    if _NUMBER_PATTERN.fullmatch(candidate) is None:
        raise InvalidFormatError(
            f"Value must be a number: {text!r}. "
            f"Use {DECIMAL_SEPARATOR!r} as the decimal separator, not '.'"
        )

    return float(candidate.replace(DECIMAL_SEPARATOR, "."))


def to_float(value: NumericInput) -> float:
    """
    Приведение операнда к float.

    Тонкий адаптер вместо перегрузок int/double/string:
    - str → parse_numeric_string
    - int → float (точно в пределах мантиссы double)
    - float → без изменений

    Raises:
        InvalidFormatError: Если строка невалидна или int не помещается в double
        TypeError: Для bool и прочих типов
    """
    # bool является подклассом int, но числом здесь не считается
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric input")

    if isinstance(value, str):
        return parse_numeric_string(value)

    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError as e:
            raise InvalidFormatError(f"Integer too large for float: {value}") from e

    if isinstance(value, float):
        return value

    raise TypeError(f"Unsupported numeric input type: {type(value).__name__}")
