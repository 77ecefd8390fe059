"""
Contract Validation Module

Модуль для валидации JSON контрактов (сериализованное состояние аккумулятора).
Схемы лежат в подкаталоге schema/ и устанавливаются вместе с пакетом.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    DividerStateValidator,
    SchemaLoader,
    get_schema_loader,
    validate_divider_state,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DividerStateValidator",
    # Functions
    "get_schema_loader",
    "validate_divider_state",
    # Constants
    "SCHEMA_DIR",
]
