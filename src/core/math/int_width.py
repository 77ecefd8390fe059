"""
IntWidth — Checked Signed Integer Arithmetic

Python int не ограничен по разрядности, поэтому разрядность целого
(32-bit, 64-bit, ...) задаётся явно через IntWidth. Все операции
выполняются точно и проверяются на границы выбранной разрядности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не "заворачивается" (wrapping), только IntegerOverflow
2. Результат checked_* всегда равен точному математическому результату
3. UNBOUNDED (bits=None) никогда не переполняется
"""

from dataclasses import dataclass
from typing import Final, Optional


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IntegerOverflow(OverflowError):
    """
    Значение не представимо в выбранной разрядности.

    Возникает для операндов вне диапазона и для промежуточных/итоговых
    результатов (quotient*divisor, dividend - quotient*divisor, dividend + carry).
    """

    def __init__(self, message: str, value: Optional[int] = None, width: Optional["IntWidth"] = None):
        super().__init__(message)
        self.value = value
        self.width = width


# =============================================================================
# INT WIDTH
# =============================================================================

# Допустимые разрядности (None = без ограничений)
SUPPORTED_WIDTH_BITS: Final[tuple[int, ...]] = (8, 16, 32, 64, 128)


@dataclass(frozen=True)
class IntWidth:
    """
    Разрядность знакового целого (two's complement).

    bits=None означает неограниченную разрядность (обычный Python int).
    """

    bits: Optional[int] = 64

    def __post_init__(self) -> None:
        if self.bits is None:
            return
        if isinstance(self.bits, bool) or not isinstance(self.bits, int):
            raise TypeError(f"bits must be int or None, got {type(self.bits).__name__}")
        if self.bits not in SUPPORTED_WIDTH_BITS:
            raise ValueError(
                f"bits must be one of {SUPPORTED_WIDTH_BITS} or None, got {self.bits}"
            )

    @classmethod
    def from_bits(cls, bits: Optional[int]) -> "IntWidth":
        """Создание IntWidth с валидацией разрядности."""
        return cls(bits=bits)

    @property
    def is_bounded(self) -> bool:
        return self.bits is not None

    @property
    def min_value(self) -> Optional[int]:
        """Минимальное представимое значение: -2**(bits-1)."""
        if self.bits is None:
            return None
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> Optional[int]:
        """Максимальное представимое значение: 2**(bits-1) - 1."""
        if self.bits is None:
            return None
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        """
        Проверка, представимо ли value в данной разрядности.

        Examples:
            >>> INT8.contains(127)
            True
            >>> INT8.contains(128)
            False
            >>> UNBOUNDED.contains(2**200)
            True
        """
        if self.bits is None:
            return True
        return self.min_value <= value <= self.max_value

    def check(self, value: int, name: str = "value") -> int:
        """
        Валидация, что value представимо.

        Args:
            value: Проверяемое значение
            name: Имя значения (для сообщения об ошибке)

        Returns:
            value без изменений

        Raises:
            IntegerOverflow: Если value вне [min_value, max_value]
        """
        if not self.contains(value):
            raise IntegerOverflow(
                f"{name}={value} is not representable in {self}: "
                f"range [{self.min_value}, {self.max_value}]",
                value=value,
                width=self,
            )
        return value

    def checked_add(self, a: int, b: int, name: str = "sum") -> int:
        """Точная сумма a + b или IntegerOverflow."""
        return self.check(a + b, name)

    def checked_sub(self, a: int, b: int, name: str = "difference") -> int:
        """Точная разность a - b или IntegerOverflow."""
        return self.check(a - b, name)

    def checked_mul(self, a: int, b: int, name: str = "product") -> int:
        """Точное произведение a * b или IntegerOverflow."""
        return self.check(a * b, name)

    def __str__(self) -> str:
        if self.bits is None:
            return "unbounded int"
        return f"int{self.bits}"


INT8: Final[IntWidth] = IntWidth(8)
INT16: Final[IntWidth] = IntWidth(16)
INT32: Final[IntWidth] = IntWidth(32)
INT64: Final[IntWidth] = IntWidth(64)
INT128: Final[IntWidth] = IntWidth(128)
UNBOUNDED: Final[IntWidth] = IntWidth(None)

# Разрядность по умолчанию для всей библиотеки
DEFAULT_INT_WIDTH: Final[IntWidth] = INT64
