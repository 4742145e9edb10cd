"""
Numerical Safeguards — Epsilon-параметры и проверки float

Модуль собирает численные примитивы, общие для всех операций:
- Epsilon-параметры сходимости итерационных методов
- Проверка конечности float (NaN/Inf)
- Проверка целочисленности значения
- Критерий сходимости (относительный или абсолютный)
- Валидация параметров конфигурации

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции не имеют состояния и побочных эффектов
2. NaN никогда не считается целым или сошедшимся значением
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог сходимости метода Ньютона для квадратного корня.
# В относительном режиме сравнивается с |delta| / current, в абсолютном с |delta|
SQRT_EPSILON: Final[float] = 1e-15

# Верхняя граница числа итераций метода Ньютона.
# Старт с x0 = number для 1e308 требует ~512 итераций до квадратичной фазы
SQRT_MAX_ITERATIONS: Final[int] = 2048


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_integral(value: float) -> bool:
    """
    Проверка, что значение не имеет дробной части (value % 1 == 0).

    NaN и Inf не являются целыми: для них value % 1 даёт NaN.

    Examples:
        >>> is_integral(3.0)
        True
        >>> is_integral(-2.0)
        True
        >>> is_integral(1.5)
        False
        >>> is_integral(float('inf'))
        False
    """
    return value % 1 == 0.0


def has_converged(
    delta: float,
    current: float,
    eps: float = SQRT_EPSILON,
    relative: bool = True,
) -> bool:
    """
    Критерий остановки итерационного метода.

    Алгоритм:
        relative=True:  abs(delta) < eps * abs(current)
        relative=False: abs(delta) < eps

    Абсолютный порог неточен на краях диапазона: для малых чисел
    останавливается слишком рано (sqrt(1e-40) → ~1e-15), для больших
    соседние double отстоят больше чем на eps и порог недостижим.
    Относительный порог масштабируется вместе со значением.

    Args:
        delta: Изменение приближения на последнем шаге
        current: Текущее приближение
        eps: Толерантность
        relative: Относительный (default) или абсолютный режим

    Returns:
        True если итерации можно прекратить

    Examples:
        >>> has_converged(1e-16, 5.0)
        True
        >>> has_converged(0.5, 5.0)
        False
        >>> has_converged(1e-5, 1e12)  # 1e-5 < 1e-15 * 1e12
        True
        >>> has_converged(1e-5, 1e12, relative=False)
        False
    """
    threshold = eps * abs(current) if relative else eps
    return abs(delta) < threshold


# =============================================================================
# ВАЛИДАЦИЯ ПАРАМЕТРОВ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение положительное и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
