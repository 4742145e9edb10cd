"""
JSON Schema Contract Validators

Контракты обмена с вызывающим приложением (Draft 2020-12, jsonschema):
- calculation_request.json: операция и операнды, арность через if/then/else
- operation_result.json: value либо вид ошибки, согласованно с полем ok

Схемы лежат в schema/ рядом с модулем и устанавливаются вместе с пакетом.
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение схем из каталога с meta-validation и кэшем.

    Кэшируются и сами схемы, и собранные по ним валидаторы.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Если файла schema_name.json нет
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """Собранный валидатор для схемы (создаётся один раз)."""
        if schema_name not in self._validators:
            self._validators[schema_name] = Draft202012Validator(
                self.load_schema(schema_name)
            )
        return self._validators[schema_name]


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Проверка dict против одного контракта."""

    def __init__(self, schema_name: str, loader: SchemaLoader = _SCHEMA_LOADER):
        self.schema_name = schema_name
        self._validator = loader.validator_for(schema_name)

    @property
    def schema(self) -> Dict[str, Any]:
        return self._validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Наиболее релевантное нарушение контракта
        """
        self._validator.validate(data)


class CalculationRequestValidator(ContractValidator):
    """Контракт calculation_request."""

    def __init__(self):
        super().__init__("calculation_request")


class OperationResultValidator(ContractValidator):
    """Контракт operation_result."""

    def __init__(self):
        super().__init__("operation_result")


_REQUEST_VALIDATOR = CalculationRequestValidator()
_RESULT_VALIDATOR = OperationResultValidator()


def validate_calculation_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если запрос не соответствует calculation_request
    """
    _REQUEST_VALIDATOR.validate(data)


def validate_operation_result(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если результат не соответствует operation_result
    """
    _RESULT_VALIDATOR.validate(data)
