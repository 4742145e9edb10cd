"""
Core math modules для mathcalc

Разбор чисел с запятой, арифметика, степень и квадратный корень.
"""

# Numerical Safeguards
from mathcalc.core.math.numerical_safeguards import (
    # Epsilon constants
    SQRT_EPSILON,
    SQRT_MAX_ITERATIONS,
    # Checks
    has_converged,
    is_integral,
    is_valid_float,
    # Validation
    validate_positive,
)

# Parsing
from mathcalc.core.math.parsing import (
    DECIMAL_SEPARATOR,
    NumericInput,
    parse_numeric_string,
    to_float,
)

# Arithmetic
from mathcalc.core.math.arithmetic import (
    DEFAULT_SQRT_CONFIG,
    SqrtConfig,
    add,
    divide,
    multiply,
    pow,
    power,
    sqrt,
    subtract,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "SQRT_EPSILON",
    "SQRT_MAX_ITERATIONS",
    # Numerical Safeguards — Checks
    "has_converged",
    "is_integral",
    "is_valid_float",
    # Numerical Safeguards — Validation
    "validate_positive",
    # Parsing
    "DECIMAL_SEPARATOR",
    "NumericInput",
    "parse_numeric_string",
    "to_float",
    # Arithmetic — Config
    "DEFAULT_SQRT_CONFIG",
    "SqrtConfig",
    # Arithmetic — Functions
    "add",
    "divide",
    "multiply",
    "pow",
    "power",
    "sqrt",
    "subtract",
]
