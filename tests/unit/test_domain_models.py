"""
Тесты для Domain Models — CalculationRequest, OperationResult

Проверяет:
- Создание моделей и strict-типы операндов
- Проверку арности операции
- Immutability (frozen)
- Взаимоисключение value/error в OperationResult
- JSON сериализацию
"""

import pytest
from pydantic import ValidationError

from mathcalc.core.domain import CalculationRequest, Operation, OperationResult
from mathcalc.core.errors import CalcErrorKind


# =============================================================================
# OPERATION
# =============================================================================


def test_operation_values():
    assert Operation("add") is Operation.ADD
    assert Operation.POW.value == "pow"
    assert {op.value for op in Operation} == {
        "add",
        "subtract",
        "multiply",
        "divide",
        "pow",
        "sqrt",
    }


def test_operation_arity():
    assert Operation.SQRT.arity == 1
    for op in Operation:
        if op is not Operation.SQRT:
            assert op.arity == 2


# =============================================================================
# CALCULATION REQUEST
# =============================================================================


def test_request_creation():
    request = CalculationRequest(operation=Operation.ADD, operands=("5,5", "4,5"))
    assert request.operation == Operation.ADD
    assert request.operands == ("5,5", "4,5")


def test_request_from_string_operation():
    request = CalculationRequest(operation="sqrt", operands=[25])
    assert request.operation == Operation.SQRT
    assert request.operands == (25,)


def test_request_operand_types_preserved():
    """int остаётся int, float остаётся float, строка остаётся строкой"""
    request = CalculationRequest(operation="add", operands=(5, 2.5))
    assert isinstance(request.operands[0], int)
    assert isinstance(request.operands[1], float)

    request = CalculationRequest(operation="add", operands=("5", "2,5"))
    assert request.operands == ("5", "2,5")


def test_request_rejects_bool_operand():
    with pytest.raises(ValidationError):
        CalculationRequest(operation="add", operands=(True, 1))


def test_request_rejects_unknown_operation():
    with pytest.raises(ValidationError):
        CalculationRequest(operation="modulo", operands=(1, 2))


@pytest.mark.parametrize(
    "operation, operands",
    [
        ("add", (1,)),
        ("divide", (1, 2, 3)),
        ("sqrt", (1, 2)),
        ("sqrt", ()),
    ],
)
def test_request_arity_mismatch(operation, operands):
    with pytest.raises(ValidationError, match="operand"):
        CalculationRequest(operation=operation, operands=operands)


def test_request_immutability():
    request = CalculationRequest(operation="add", operands=(1, 2))
    with pytest.raises(ValidationError, match="frozen"):
        request.operation = Operation.SUBTRACT


def test_request_json_round_trip():
    request = CalculationRequest(operation="pow", operands=("2,0", 3))
    restored = CalculationRequest.model_validate_json(request.model_dump_json())
    assert restored == request


# =============================================================================
# OPERATION RESULT
# =============================================================================


def test_result_success():
    result = OperationResult(operation="add", value=10.0)
    assert result.ok
    assert result.value == 10.0
    assert result.error is None


def test_result_error():
    result = OperationResult(
        operation="divide",
        error=CalcErrorKind.DIVISION_BY_ZERO,
        message="Cannot divide by zero",
    )
    assert not result.ok
    assert result.value is None
    assert result.error == CalcErrorKind.DIVISION_BY_ZERO


def test_result_requires_exactly_one_field():
    with pytest.raises(ValidationError, match="exactly one"):
        OperationResult(operation="add")

    with pytest.raises(ValidationError, match="exactly one"):
        OperationResult(operation="add", value=1.0, error="INVALID_FORMAT")


def test_result_immutability():
    result = OperationResult(operation="add", value=1.0)
    with pytest.raises(ValidationError, match="frozen"):
        result.value = 2.0


def test_result_json_serialization():
    result = OperationResult(operation="sqrt", error=CalcErrorKind.NEGATIVE_INPUT)
    data = result.model_dump(mode="json")
    assert data["operation"] == "sqrt"
    assert data["error"] == "NEGATIVE_INPUT"
    assert data["value"] is None


def test_result_ok_serialized():
    data = OperationResult(operation="add", value=1.5).model_dump(mode="json")
    assert data["ok"] is True
    assert data["value"] == 1.5


@pytest.mark.parametrize(
    "value, expected",
    [(float("inf"), "Infinity"), (float("-inf"), "-Infinity"), (float("nan"), "NaN")],
)
def test_result_non_finite_json_serialization(value, expected):
    """Неконечный value в JSON-режиме становится строкой"""
    result = OperationResult(operation="multiply", value=value)
    assert result.model_dump(mode="json")["value"] == expected
    assert f'"value":"{expected}"' in result.model_dump_json()


def test_result_non_finite_python_mode_unchanged():
    result = OperationResult(operation="multiply", value=float("inf"))
    assert result.model_dump()["value"] == float("inf")
