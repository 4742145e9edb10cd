"""
Calculation — Модели запроса и результата вычисления

Immutable Pydantic модели для вызывающего приложения.
Полная совместимость с JSON Schema (core/contracts/schema/).

OperationResult является tagged union: либо value, либо error (вид ошибки).
"""

import math
from enum import Enum
from typing import Optional, Union

from pydantic import (
    BaseModel,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    computed_field,
    field_serializer,
    model_validator,
)

from mathcalc.core.errors import CalcErrorKind


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Операция калькулятора."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    POW = "pow"
    SQRT = "sqrt"

    @property
    def arity(self) -> int:
        """Число операндов операции."""
        return 1 if self is Operation.SQRT else 2


# Strict-типы: "5,5" остаётся строкой, 5 остаётся int, bool отклоняется
Operand = Union[StrictInt, StrictFloat, StrictStr]


# =============================================================================
# REQUEST
# =============================================================================


class CalculationRequest(BaseModel):
    """
    Запрос на вычисление.

    Immutable модель (frozen=True). Число операндов должно совпадать
    с арностью операции.
    """

    operation: Operation = Field(..., description="Операция")
    operands: tuple[Operand, ...] = Field(
        ..., description="Операнды: int, float или строка с запятой"
    )

    @model_validator(mode="after")
    def _check_arity(self) -> "CalculationRequest":
        expected = self.operation.arity
        if len(self.operands) != expected:
            raise ValueError(
                f"{self.operation.value} expects {expected} operand(s), "
                f"got {len(self.operands)}"
            )
        return self

    model_config = {"frozen": True}


# =============================================================================
# RESULT
# =============================================================================


class OperationResult(BaseModel):
    """
    Результат вычисления.

    Ровно одно из полей value/error заполнено.

    В JSON-режиме (model_dump(mode="json"), model_dump_json) неконечные
    value сериализуются строками "Infinity", "-Infinity", "NaN": JSON не
    имеет для них числового представления.
    """

    operation: Operation = Field(..., description="Выполненная операция")
    value: Optional[float] = Field(None, description="Результат (если успех)")
    error: Optional[CalcErrorKind] = Field(None, description="Вид ошибки (если неуспех)")
    message: Optional[str] = Field(None, description="Текст ошибки для диагностики")

    @model_validator(mode="after")
    def _check_exclusive(self) -> "OperationResult":
        if (self.value is None) == (self.error is None):
            raise ValueError("exactly one of value or error must be set")
        return self

    @computed_field
    @property
    def ok(self) -> bool:
        """True если вычисление успешно."""
        return self.error is None

    @field_serializer("value", when_used="json")
    def _serialize_value(self, value: Optional[float]) -> Union[float, str, None]:
        if value is None or math.isfinite(value):
            return value
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"

    model_config = {"frozen": True}
