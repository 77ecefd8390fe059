"""
Rounding Divide — Integer Division with Selectable Rounding

Модуль вычисляет quotient = round_mode(dividend / divisor) без float и
точный знаковый остаток этого решения округления:

    remainder = dividend - quotient * divisor

Это НЕ машинный остаток (%), а остаток, соответствующий выбранному режиму.

АЛГОРИТМ:
1. t = truncating_quotient(dividend, divisor), r = dividend - t * divisor
   (r имеет знак dividend или равен 0)
2. Коррекция t на ±1 по правилу режима округления
3. remainder пересчитывается от итогового quotient

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. quotient * divisor + remainder == dividend (точно, для всех режимов)
2. Directed режимы: |remainder| < |divisor|
3. Nearest режимы: 2 * |remainder| <= |divisor|
4. divisor == 0 → DivisionByZero; непредставимый результат → IntegerOverflow
5. Функция чистая (без состояния), безопасна для конкурентных вызовов
"""

from enum import Enum
from typing import Final, NamedTuple, Union

from src.core.math.int_width import DEFAULT_INT_WIDTH, IntWidth


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """Делитель равен нулю (проверяется при каждом вызове divide и при создании аккумулятора)."""

    pass


# =============================================================================
# ROUNDING MODES
# =============================================================================


class RoundingMode(str, Enum):
    """
    Политика преобразования точного рационального частного в целое.

    Directed:
    - TRUNC: к нулю
    - FLOOR: к -inf
    - CEILING: к +inf
    - AWAY_FROM_ZERO: от нуля

    Nearest (различаются только на точной половине):
    - NEAREST_TIES_AWAY_FROM_ZERO: половина → от нуля
    - NEAREST_TIES_TO_EVEN: половина → к чётному
    - NEAREST_TIES_TOWARD_ZERO: половина → к нулю
    """

    TRUNC = "trunc"
    FLOOR = "floor"
    CEILING = "ceiling"
    AWAY_FROM_ZERO = "away_from_zero"
    NEAREST_TIES_AWAY_FROM_ZERO = "nearest_ties_away_from_zero"
    NEAREST_TIES_TO_EVEN = "nearest_ties_to_even"
    NEAREST_TIES_TOWARD_ZERO = "nearest_ties_toward_zero"

    @property
    def is_nearest(self) -> bool:
        return self in _NEAREST_MODES


_NEAREST_MODES: Final[frozenset[RoundingMode]] = frozenset(
    {
        RoundingMode.NEAREST_TIES_AWAY_FROM_ZERO,
        RoundingMode.NEAREST_TIES_TO_EVEN,
        RoundingMode.NEAREST_TIES_TOWARD_ZERO,
    }
)

DEFAULT_ROUNDING_MODE: Final[RoundingMode] = RoundingMode.NEAREST_TIES_AWAY_FROM_ZERO


# =============================================================================
# RESULT TYPE
# =============================================================================


class DivisionResult(NamedTuple):
    """Результат деления: quotient * divisor + remainder == dividend."""

    quotient: int
    remainder: int


# =============================================================================
# VALIDATION HELPERS
# =============================================================================


def coerce_mode(mode: Union[RoundingMode, str]) -> RoundingMode:
    """
    Приведение режима к RoundingMode.

    Raises:
        ValueError: Если значение не является известным режимом
    """
    if isinstance(mode, RoundingMode):
        return mode
    return RoundingMode(mode)


def validate_int(value: int, name: str) -> int:
    """
    Проверка, что value является int (bool отвергается).

    Raises:
        TypeError: Если value не int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


def validate_divisor(divisor: int, width: IntWidth = DEFAULT_INT_WIDTH) -> int:
    """
    Валидация делителя: целое, ненулевое, представимое.

    Raises:
        TypeError: Если divisor не int
        DivisionByZero: Если divisor == 0
        IntegerOverflow: Если divisor вне разрядности
    """
    validate_int(divisor, "divisor")
    if divisor == 0:
        raise DivisionByZero("divisor must be nonzero")
    return width.check(divisor, "divisor")


def is_valid_remainder(remainder: int, divisor: int, mode: Union[RoundingMode, str]) -> bool:
    """
    Проверка, может ли remainder быть остатком деления на divisor в режиме mode.

    - FLOOR: 0 или знак divisor, |remainder| < |divisor|
    - CEILING: 0 или знак, противоположный divisor, |remainder| < |divisor|
    - TRUNC, AWAY_FROM_ZERO: |remainder| < |divisor|
    - Nearest: 2 * |remainder| <= |divisor|

    Examples:
        >>> is_valid_remainder(1, 3, RoundingMode.FLOOR)
        True
        >>> is_valid_remainder(-1, 3, RoundingMode.FLOOR)
        False
        >>> is_valid_remainder(2, 3, RoundingMode.NEAREST_TIES_TO_EVEN)
        False
    """
    mode = coerce_mode(mode)
    abs_divisor = abs(divisor)

    if mode.is_nearest:
        return 2 * abs(remainder) <= abs_divisor

    if abs(remainder) >= abs_divisor:
        return False

    if remainder == 0:
        return True

    same_sign = (remainder < 0) == (divisor < 0)
    if mode is RoundingMode.FLOOR:
        return same_sign
    if mode is RoundingMode.CEILING:
        return not same_sign
    return True


# =============================================================================
# ROUNDING DIVIDE
# =============================================================================


def _truncating_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    # Python // округляет к -inf, поэтому делим модули и восстанавливаем знак
    t = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        t = -t
    return t, dividend - t * divisor


def _adjust_quotient(t: int, r: int, divisor: int, direction: int, mode: RoundingMode) -> int:
    """
    Коррекция усечённого частного t по режиму.

    direction: +1 если точное частное положительно, -1 если отрицательно.
    Вызывается только при r != 0.
    """
    if mode is RoundingMode.TRUNC:
        return t

    if mode is RoundingMode.FLOOR:
        # r противоположного с divisor знака → частное отрицательно, уходим к -inf
        return t if (r < 0) == (divisor < 0) else t - 1

    if mode is RoundingMode.CEILING:
        return t + 1 if (r < 0) == (divisor < 0) else t

    if mode is RoundingMode.AWAY_FROM_ZERO:
        return t + direction

    twice_r = 2 * abs(r)
    abs_divisor = abs(divisor)

    if twice_r < abs_divisor:
        return t
    if twice_r > abs_divisor:
        return t + direction

    # Точная половина
    if mode is RoundingMode.NEAREST_TIES_AWAY_FROM_ZERO:
        return t + direction
    if mode is RoundingMode.NEAREST_TIES_TOWARD_ZERO:
        return t
    # NEAREST_TIES_TO_EVEN
    return t if t % 2 == 0 else t + direction


def divide(
    dividend: int,
    divisor: int,
    mode: Union[RoundingMode, str] = DEFAULT_ROUNDING_MODE,
    width: IntWidth = DEFAULT_INT_WIDTH,
) -> DivisionResult:
    """
    Целочисленное деление с выбранным режимом округления.

    Args:
        dividend: Делимое
        divisor: Делитель (ненулевой)
        mode: Режим округления (RoundingMode или его строковое значение)
        width: Разрядность, в которой проверяется переполнение

    Returns:
        DivisionResult(quotient, remainder), где
        quotient * divisor + remainder == dividend

    Raises:
        TypeError: Если dividend/divisor не int
        ValueError: Если mode неизвестен
        DivisionByZero: Если divisor == 0
        IntegerOverflow: Если операнды, quotient, quotient*divisor или
            remainder не представимы в width

    Examples:
        >>> divide(20, 3, RoundingMode.NEAREST_TIES_AWAY_FROM_ZERO)
        DivisionResult(quotient=7, remainder=-1)
        >>> divide(-20, 3, RoundingMode.FLOOR)
        DivisionResult(quotient=-7, remainder=1)
        >>> divide(5, 2, RoundingMode.NEAREST_TIES_TO_EVEN)
        DivisionResult(quotient=2, remainder=1)
    """
    mode = coerce_mode(mode)
    validate_int(dividend, "dividend")
    validate_divisor(divisor, width)
    width.check(dividend, "dividend")

    t, r = _truncating_divmod(dividend, divisor)

    if r == 0:
        quotient = t
    else:
        direction = 1 if (dividend < 0) == (divisor < 0) else -1
        quotient = _adjust_quotient(t, r, divisor, direction, mode)

    width.check(quotient, "quotient")
    product = width.checked_mul(quotient, divisor, "quotient*divisor")
    remainder = width.checked_sub(dividend, product, "remainder")

    return DivisionResult(quotient=quotient, remainder=remainder)
