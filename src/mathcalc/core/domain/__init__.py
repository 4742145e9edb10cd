"""
Domain models and value objects.

Contains the request/result models exchanged with the calling application.
"""

from mathcalc.core.domain.calculation import (
    CalculationRequest,
    Operand,
    Operation,
    OperationResult,
)

__all__ = [
    "CalculationRequest",
    "Operand",
    "Operation",
    "OperationResult",
]
