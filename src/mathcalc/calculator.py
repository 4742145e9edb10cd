"""Calculator — единая точка входа для вызывающего приложения.

Диспетчеризация запроса на операцию и две формы результата:
- evaluate: float или исключение
- try_evaluate: OperationResult (value либо вид ошибки), без исключений
  для ошибок вычисления

evaluate_payload принимает dict (например, из JSON), проверяет его по
контракту calculation_request и возвращает dict по контракту operation_result.
"""

from typing import Any, Callable, Dict, Final

from mathcalc.core.contracts import (
    validate_calculation_request,
    validate_operation_result,
)
from mathcalc.core.domain import CalculationRequest, Operation, OperationResult
from mathcalc.core.errors import CalculationError
from mathcalc.core.math import add, divide, multiply, power, sqrt, subtract
from mathcalc.core.math.parsing import NumericInput


OPERATIONS: Final[Dict[Operation, Callable[..., float]]] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.DIVIDE: divide,
    Operation.POW: power,
    Operation.SQRT: sqrt,
}


def evaluate(request: CalculationRequest) -> float:
    """Выполнение запроса.

    Raises:
        CalculationError: подклассы по виду ошибки
    """
    func = OPERATIONS[request.operation]
    return func(*request.operands)


def try_evaluate(request: CalculationRequest) -> OperationResult:
    """Выполнение запроса с результатом в виде tagged union.

    Перехватываются только CalculationError; TypeError и прочие ошибки
    программирования пробрасываются.
    """
    try:
        value = evaluate(request)
    except CalculationError as e:
        return OperationResult(
            operation=request.operation,
            error=e.kind,
            message=str(e),
        )
    return OperationResult(operation=request.operation, value=value)


def calculate(operation: Operation | str, *operands: NumericInput) -> float:
    """Короткая форма: calculate("add", "5,5", "4,5") == 10.0."""
    request = CalculationRequest(operation=Operation(operation), operands=operands)
    return evaluate(request)


def evaluate_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Выполнение запроса из dict.

    Args:
        payload: {"operation": "add", "operands": ["5,5", "4,5"]}

    Returns:
        {"operation": ..., "ok": ..., "value": ..., "error": ..., "message": ...}
        Неконечный value передаётся строкой "Infinity", "-Infinity" или "NaN",
        поэтому результат сериализуется стандартным JSON.

    Raises:
        jsonschema.ValidationError: Если payload или результат не
            соответствует контракту
    """
    validate_calculation_request(payload)
    request = CalculationRequest.model_validate(payload)
    result = try_evaluate(request)

    data = result.model_dump(mode="json")
    validate_operation_result(data)
    return data
