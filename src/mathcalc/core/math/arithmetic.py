"""
Arithmetic — Арифметические операции над int, float и строками

Операции:
- add, subtract, multiply, divide
- power: возведение в целую степень (итеративное умножение)
- sqrt: квадратный корень методом Ньютона

Каждый операнд сначала проходит через to_float (слева направо), затем
вычисление выполняется в double. Результат всегда float, в том числе для
целых входов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль проверяется после валидации обоих операндов
2. power(x, 0) == 1.0 для любого x, включая 0
3. Показатель степени с дробной частью → NonIntegerExponentError
4. sqrt от отрицательного числа → NegativeInputError
"""

from dataclasses import dataclass
from typing import NoReturn

from mathcalc.core.errors import (
    DivisionByZeroError,
    NegativeInputError,
    NonIntegerExponentError,
)
from mathcalc.core.math.numerical_safeguards import (
    SQRT_EPSILON,
    SQRT_MAX_ITERATIONS,
    has_converged,
    is_integral,
    is_valid_float,
    validate_positive,
)
from mathcalc.core.math.parsing import NumericInput, to_float


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SqrtConfig:
    """Параметры сходимости метода Ньютона.

    - epsilon: порог |delta| (1e-15)
    - relative: сравнивать |delta| с epsilon * current; False даёт
      классический абсолютный критерий |delta| < epsilon
    - max_iterations: жёсткий предел числа шагов
    """
    epsilon: float = SQRT_EPSILON
    relative: bool = True
    max_iterations: int = SQRT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        validate_positive(self.epsilon, "epsilon")
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be >= 1, got {self.max_iterations}"
            )


DEFAULT_SQRT_CONFIG = SqrtConfig()


# =============================================================================
# БАЗОВЫЕ ОПЕРАЦИИ
# =============================================================================


def add(a: NumericInput, b: NumericInput) -> float:
    """Сумма a + b."""
    x = to_float(a)
    y = to_float(b)
    return x + y


def subtract(a: NumericInput, b: NumericInput) -> float:
    """Разность a - b."""
    x = to_float(a)
    y = to_float(b)
    return x - y


def multiply(a: NumericInput, b: NumericInput) -> float:
    """Произведение a * b."""
    x = to_float(a)
    y = to_float(b)
    return x * y


def _raise_division_by_zero(divisor: NumericInput) -> NoReturn:
    raise DivisionByZeroError(
        f"Cannot divide by zero: divisor must differ from 0, got {divisor!r}"
    )


def divide(a: NumericInput, b: NumericInput) -> float:
    """
    Частное a / b.

    Порядок проверок:
    - числовой делитель (int, float) проверяется на ноль до преобразования
      делимого
    - строковый делитель проверяется на ноль после валидации обоих операндов

    Args:
        a: Делимое
        b: Делитель

    Returns:
        a / b

    Raises:
        InvalidFormatError: Если строковый операнд невалиден
        DivisionByZeroError: Если делитель равен 0 (0, 0.0, -0.0, "0,0")

    Examples:
        >>> divide(10, 4)
        2.5
        >>> divide("7,5", "2,5")
        3.0
    """
    if isinstance(b, (int, float)) and not isinstance(b, bool) and b == 0:
        _raise_division_by_zero(b)

    x = to_float(a)
    y = to_float(b)

    if y == 0.0:
        _raise_division_by_zero(b)

    return x / y


# =============================================================================
# СТЕПЕНЬ
# =============================================================================


def _repeated_product(base: float, times: int) -> float:
    # base^1, затем ещё (times - 1) умножений на base
    product = base
    for _ in range(times - 1):
        product *= base
    return product


def power(base: NumericInput, exponent: NumericInput) -> float:
    """
    Возведение в целую степень.

    Алгоритм:
    - exponent == 0 → 1.0 (для любого base, включая 0)
    - exponent > 0 → base * base * ... (exponent раз)
    - exponent < 0 → 1.0 / (base * base * ... |exponent| раз)

    Args:
        base: Основание
        exponent: Показатель (целое значение, например 3 или "3,0")

    Returns:
        base ** exponent

    Raises:
        InvalidFormatError: Если строковый операнд невалиден
        NonIntegerExponentError: Если exponent имеет дробную часть или не конечен
        DivisionByZeroError: Если exponent < 0 и произведение равно 0
            (base == 0 или исчезновение порядка)

    Examples:
        >>> power(2.0, 3)
        8.0
        >>> power(2.0, -3)
        0.125
        >>> power(0, 0)
        1.0
    """
    x = to_float(base)
    n = to_float(exponent)

    if not is_integral(n):
        raise NonIntegerExponentError(
            f"Exponent must be an integer without fractional part, got {exponent!r}"
        )

    if n == 0.0:
        return 1.0

    if n > 0.0:
        return _repeated_product(x, int(n))

    denominator = _repeated_product(x, int(-n))
    if denominator == 0.0:
        raise DivisionByZeroError(
            f"Cannot raise {base!r} to negative exponent {exponent!r}: "
            f"denominator is zero"
        )

    return 1.0 / denominator


# =============================================================================
# КВАДРАТНЫЙ КОРЕНЬ
# =============================================================================


def sqrt(number: NumericInput, config: SqrtConfig | None = None) -> float:
    """
    Квадратный корень методом Ньютона.

    Итерация:
        next = 0.5 * (current + number / current)
        delta = next - current

    Начальное приближение равно самому числу. Остановка по has_converged
    (по умолчанию |delta| < epsilon * current) или по достижении
    max_iterations. SqrtConfig(relative=False) даёт абсолютный критерий
    |delta| < 1e-15.

    Args:
        number: Неотрицательное число
        config: Параметры сходимости (default: DEFAULT_SQRT_CONFIG)

    Returns:
        Приближение sqrt(number). 0.0 для нуля; NaN и +Inf возвращаются как есть

    Raises:
        InvalidFormatError: Если строковый операнд невалиден
        NegativeInputError: Если number < 0

    Examples:
        >>> sqrt(25)
        5.0
        >>> sqrt(0)
        0.0
    """
    cfg = config or DEFAULT_SQRT_CONFIG
    value = to_float(number)

    if value < 0:
        raise NegativeInputError(f"Number cannot be negative, got {number!r}")

    if value == 0:
        return 0.0

    # NaN и +Inf: шаг Ньютона не определён (inf / inf)
    if not is_valid_float(value):
        return value

    current = value
    for _ in range(cfg.max_iterations):
        following = 0.5 * (current + value / current)
        delta = following - current
        current = following
        if has_converged(delta, current, cfg.epsilon, cfg.relative):
            break

    return current


# Алиас с исходным именем операции
pow = power
