"""
JSON Schema Contract Validators

Модуль для валидации JSON-представления обёрток float согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema (draft 2020-12).

Схемы (ordfloat/core/contracts/schema/):
- ordered_float.json: OrderedFloat (NaN допускается)
- not_nan.json: NotNan (строка "NaN" запрещена схемой)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

_LOGGER = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом (package data) в каталоге schema/
    рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'ordered_float')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
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

        _LOGGER.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            _LOGGER.debug("Contract %s violated: %s", self.schema_name, e.message)
            raise

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class OrderedFloatValidator(ContractValidator):
    """Валидатор для ordered_float контракта."""

    def __init__(self):
        super().__init__("ordered_float")


class NotNanValidator(ContractValidator):
    """Валидатор для not_nan контракта."""

    def __init__(self):
        super().__init__("not_nan")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_ordered_float(data: Dict[str, Any]) -> None:
    """
    Валидация ordered_float данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OrderedFloatValidator().validate(data)


def validate_not_nan(data: Dict[str, Any]) -> None:
    """
    Валидация not_nan данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NotNanValidator().validate(data)
