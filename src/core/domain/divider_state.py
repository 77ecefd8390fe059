"""
DividerState — Снимок состояния CumulativeDivider

Immutable Pydantic модель для сохранения/восстановления аккумулятора
(продолжение последовательности делений после перезапуска).
Полная совместимость с JSON Schema (src/core/contracts/schema/divider_state.json).
Целые поля строгие (StrictInt): строки, float и bool не приводятся к int.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator

from src.core.math.int_width import SUPPORTED_WIDTH_BITS, IntWidth
from src.core.math.rounding_divide import RoundingMode, is_valid_remainder


# =============================================================================
# DIVIDER STATE MODEL
# =============================================================================


class DividerState(BaseModel):
    """
    Снимок аккумулятора: конфигурация (divisor, mode, width_bits) + carry.

    Immutable модель (frozen=True).
    """

    schema_version: str = Field("1", description="Версия схемы снимка")
    divisor: StrictInt = Field(..., description="Фиксированный делитель (ненулевой)")
    mode: RoundingMode = Field(..., description="Режим округления")
    width_bits: Optional[StrictInt] = Field(
        64, description="Разрядность знакового целого (None = без ограничений)"
    )
    carry: StrictInt = Field(0, description="Накопленная ошибка (остаток последнего шага)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("divisor")
    @classmethod
    def validate_divisor_nonzero(cls, v: int) -> int:
        if v == 0:
            raise ValueError("divisor must be nonzero")
        return v

    @field_validator("width_bits")
    @classmethod
    def validate_width_bits(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v not in SUPPORTED_WIDTH_BITS:
            raise ValueError(f"width_bits must be one of {SUPPORTED_WIDTH_BITS} or null, got {v}")
        return v

    @model_validator(mode="after")
    def validate_representable(self) -> "DividerState":
        """
        Проверка согласованности снимка.

        - divisor и carry представимы в width_bits
        - carry является допустимым остатком для (divisor, mode)
        """
        width = self.width()
        for name in ("divisor", "carry"):
            value = getattr(self, name)
            if not width.contains(value):
                raise ValueError(f"{name}={value} is not representable in {width}")

        if not is_valid_remainder(self.carry, self.divisor, self.mode):
            raise ValueError(
                f"carry={self.carry} is not a valid {self.mode.value} remainder "
                f"for divisor={self.divisor}"
            )
        return self

    def width(self) -> IntWidth:
        """Разрядность как IntWidth."""
        return IntWidth(self.width_bits)
