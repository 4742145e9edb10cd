"""
Contract Validation Module

Модуль для валидации JSON контрактов запросов и результатов вычислений.
"""

from .validators import (
    CalculationRequestValidator,
    ContractValidator,
    OperationResultValidator,
    SchemaLoader,
    validate_calculation_request,
    validate_operation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CalculationRequestValidator",
    "OperationResultValidator",
    # Functions
    "validate_calculation_request",
    "validate_operation_result",
]
