"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- divider_state.json (снимок CumulativeDivider)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


# Схемы поставляются внутри пакета (package data), рядом с этим модулем
SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем.

    По умолчанию читает схемы из SCHEMA_DIR; каталог проверяется при
    создании загрузчика, а не при импорте модуля.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-валидация схемы по имени (без расширения).

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


@lru_cache(maxsize=1)
def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик, создаётся при первом обращении."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
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
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации (ValidationError)."""
        return self.validator.iter_errors(data)


class DividerStateValidator(ContractValidator):
    """Валидатор для divider_state контракта."""

    def __init__(self):
        super().__init__("divider_state")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_divider_state(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного снимка CumulativeDivider.

    Схема проверяет структуру и типы; согласованность значений
    (разрядность, допустимость carry) проверяет DividerState.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DividerStateValidator().validate(data)


__all__ = [
    "SCHEMA_DIR",
    "SchemaLoader",
    "get_schema_loader",
    "ContractValidator",
    "DividerStateValidator",
    "ValidationError",
    "validate_divider_state",
]
