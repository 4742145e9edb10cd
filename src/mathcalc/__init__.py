"""
mathcalc — числовая библиотека: арифметика над int, float и строками с запятой

Пример:
    >>> from mathcalc import add, sqrt
    >>> add("5,5", "4,5")
    10.0
    >>> sqrt(25)
    5.0
"""

from mathcalc.calculator import (
    OPERATIONS,
    calculate,
    evaluate,
    evaluate_payload,
    try_evaluate,
)
from mathcalc.core.domain import CalculationRequest, Operation, OperationResult
from mathcalc.core.errors import (
    CalcErrorKind,
    CalculationError,
    DivisionByZeroError,
    InvalidFormatError,
    NegativeInputError,
    NonIntegerExponentError,
)
from mathcalc.core.math import (
    DECIMAL_SEPARATOR,
    SqrtConfig,
    add,
    divide,
    multiply,
    parse_numeric_string,
    pow,
    power,
    sqrt,
    subtract,
    to_float,
)

__version__ = "1.0.0"

__all__ = [
    # Operations
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "pow",
    "sqrt",
    # Parsing
    "DECIMAL_SEPARATOR",
    "parse_numeric_string",
    "to_float",
    # Config
    "SqrtConfig",
    # Errors
    "CalcErrorKind",
    "CalculationError",
    "DivisionByZeroError",
    "InvalidFormatError",
    "NegativeInputError",
    "NonIntegerExponentError",
    # Domain
    "CalculationRequest",
    "Operation",
    "OperationResult",
    # Facade
    "OPERATIONS",
    "calculate",
    "evaluate",
    "evaluate_payload",
    "try_evaluate",
]
