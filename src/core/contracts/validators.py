"""
JSON Schema Contract Validators

Модуль для валидации JSON вывода согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- primality_verdict.json (вердикт Miller–Rabin)
- arithmetic_result.json (результат add/sub)
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain import ArithmeticResult, PrimalityVerdict


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = schema_dir or (
            Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        )
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'primality_verdict')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика (создаётся при первом обращении)
_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Глобальный SchemaLoader, создаётся лениво."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
        self.schema_name = schema_name
        self.schema = get_schema_loader().load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """True если данные валидны, без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class PrimalityVerdictValidator(ContractValidator):
    """Валидатор для primality_verdict контракта."""

    def __init__(self):
        super().__init__("primality_verdict")


class ArithmeticResultValidator(ContractValidator):
    """Валидатор для arithmetic_result контракта."""

    def __init__(self):
        super().__init__("arithmetic_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


# Валидаторы компилируются один раз на процесс
_VALIDATORS: Dict[str, ContractValidator] = {}


def get_validator(schema_name: str) -> ContractValidator:
    """Закэшированный ContractValidator для схемы."""
    validator = _VALIDATORS.get(schema_name)
    if validator is None:
        validator = ContractValidator(schema_name)
        _VALIDATORS[schema_name] = validator
    return validator


def validate_primality_verdict(data: Dict[str, Any]) -> None:
    """
    Валидация primality_verdict данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator("primality_verdict").validate(data)


def validate_arithmetic_result(data: Dict[str, Any]) -> None:
    """
    Валидация arithmetic_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    get_validator("arithmetic_result").validate(data)


def dump_primality_verdict(verdict: PrimalityVerdict) -> Dict[str, Any]:
    """
    JSON-представление вердикта, проверенное по контракту primality_verdict.

    Raises:
        ValidationError: Если модель сериализовалась вне контракта
    """
    data = verdict.model_dump(mode="json")
    validate_primality_verdict(data)
    return data


def dump_arithmetic_result(outcome: ArithmeticResult) -> Dict[str, Any]:
    """JSON-представление add/sub, проверенное по контракту arithmetic_result."""
    data = outcome.model_dump(mode="json")
    validate_arithmetic_result(data)
    return data
