"""
Cumulative Divider — Error-Carrying Sequence Division

Последовательность делений с одним фиксированным делителем, в которой
остаток каждого решения округления (carry, "накопленная ошибка")
добавляется к следующему делимому:

    adjusted_i = dividend_i + carry_{i-1}
    quotient_i, carry_i = divide(adjusted_i, divisor, mode)

Телескопически: sum(quotient_i) * divisor + carry_k == sum(dividend_i),
поэтому сумма округлённых долей отслеживает round_mode(T / divisor).

Пример (divisor=3, NEAREST_TIES_AWAY_FROM_ZERO):
    dividends [20, 20, 20] → quotients [7, 6, 7], carry [-1, 1, 0], sum 20

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. divisor, mode и width не меняются после создания
2. carry обновляется ровно один раз на успешный step
3. Ошибочный step оставляет carry без изменений (step атомарен)
4. step_many атомарен целиком: ошибка в пакете возвращает carry к исходному
5. Экземпляр НЕ потокобезопасен: порядок вызовов step определяет результат;
   для конкурентных долей нужен отдельный аккумулятор на поток или внешний lock
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, Union

from src.core.math.int_width import DEFAULT_INT_WIDTH, IntWidth
from src.core.math.rounding_divide import (
    DEFAULT_ROUNDING_MODE,
    DivisionResult,
    RoundingMode,
    coerce_mode,
    divide,
    is_valid_remainder,
    validate_divisor,
    validate_int,
)

if TYPE_CHECKING:
    from src.core.domain.divider_state import DividerState


logger = logging.getLogger(__name__)


# =============================================================================
# CUMULATIVE DIVIDER
# =============================================================================


class CumulativeDivider:
    """
    Аккумулятор деления с переносом ошибки округления.

    Создаётся с (divisor, mode), carry = 0. Изменяется только через step/reset.
    """

    def __init__(
        self,
        divisor: int,
        mode: Union[RoundingMode, str] = DEFAULT_ROUNDING_MODE,
        width: IntWidth = DEFAULT_INT_WIDTH,
        carry: int = 0,
    ):
        """
        Инициализация аккумулятора.

        Args:
            divisor: Фиксированный делитель (ненулевой)
            mode: Режим округления
            width: Разрядность для проверки переполнения
            carry: Начальный перенос (для продолжения последовательности)

        Raises:
            DivisionByZero: Если divisor == 0
            IntegerOverflow: Если divisor или carry не представимы в width
            ValueError: Если carry не может быть остатком для (divisor, mode)
        """
        self._mode = coerce_mode(mode)
        self._width = width
        self._divisor = validate_divisor(divisor, width)

        validate_int(carry, "carry")
        width.check(carry, "carry")
        if not is_valid_remainder(carry, self._divisor, self._mode):
            raise ValueError(
                f"carry={carry} is not a valid {self._mode.value} remainder "
                f"for divisor={self._divisor}"
            )
        self._carry = carry

        logger.debug(
            "CumulativeDivider created: divisor=%d mode=%s width=%s carry=%d",
            self._divisor,
            self._mode.value,
            self._width,
            self._carry,
        )

    # -------------------------------------------------------------------------
    # Read-only accessors
    # -------------------------------------------------------------------------

    @property
    def divisor(self) -> int:
        return self._divisor

    @property
    def mode(self) -> RoundingMode:
        return self._mode

    @property
    def width(self) -> IntWidth:
        return self._width

    @property
    def carry(self) -> int:
        """Текущая накопленная ошибка (остаток последнего шага)."""
        return self._carry

    # -------------------------------------------------------------------------
    # Sequence operations
    # -------------------------------------------------------------------------

    def step_result(self, dividend: int) -> DivisionResult:
        """
        Один шаг последовательности с полным результатом.

        Args:
            dividend: Очередное делимое

        Returns:
            DivisionResult для carry-скорректированного делимого;
            remainder становится новым carry

        Raises:
            TypeError: Если dividend не int
            IntegerOverflow: Если dividend + carry или результат деления
                не представимы (carry не меняется)
        """
        validate_int(dividend, "dividend")
        self._width.check(dividend, "dividend")
        adjusted = self._width.checked_add(dividend, self._carry, "dividend+carry")

        result = divide(adjusted, self._divisor, self._mode, self._width)

        self._carry = result.remainder
        return result

    def step(self, dividend: int) -> int:
        """
        Один шаг последовательности.

        Returns:
            quotient для dividend + carry

        Raises:
            IntegerOverflow: см. step_result
        """
        return self.step_result(dividend).quotient

    def step_many(self, dividends: Iterable[int]) -> list[int]:
        """
        Последовательное применение step ко всему пакету (all-or-nothing).

        При ошибке на любом элементе carry восстанавливается к значению
        до вызова, и исключение пробрасывается: частичный результат не
        возвращается, пакет можно повторить с исправленными данными.
        """
        saved_carry = self._carry
        try:
            return [self.step(dividend) for dividend in dividends]
        except Exception:
            self._carry = saved_carry
            raise

    def reset(self) -> None:
        """Сброс carry в 0 (divisor/mode/width сохраняются)."""
        logger.debug("CumulativeDivider reset: carry %d -> 0", self._carry)
        self._carry = 0

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def snapshot(self) -> "DividerState":
        """Неизменяемый снимок состояния аккумулятора."""
        # domain-модели импортируют src.core.math, поэтому импорт отложенный
        from src.core.domain.divider_state import DividerState

        return DividerState(
            divisor=self._divisor,
            mode=self._mode,
            width_bits=self._width.bits,
            carry=self._carry,
        )

    @classmethod
    def from_state(cls, state: "DividerState") -> "CumulativeDivider":
        """Восстановление аккумулятора из снимка."""
        logger.debug("CumulativeDivider restored from state: %s", state)
        return cls(
            divisor=state.divisor,
            mode=state.mode,
            width=IntWidth(state.width_bits),
            carry=state.carry,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Сериализованный снимок, проверенный по контракту divider_state.

        Raises:
            jsonschema.ValidationError: Если снимок не соответствует схеме
        """
        from src.core.contracts import validate_divider_state

        data = self.snapshot().model_dump(mode="json")
        validate_divider_state(data)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CumulativeDivider":
        """
        Восстановление из сериализованного снимка.

        Сначала структура проверяется по JSON Schema, затем согласованность
        значений (разрядность, допустимость carry) проверяет DividerState.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
            pydantic.ValidationError: Если значения несогласованы
        """
        from src.core.contracts import validate_divider_state
        from src.core.domain.divider_state import DividerState

        validate_divider_state(data)
        return cls.from_state(DividerState.model_validate(data))

    def __repr__(self) -> str:
        return (
            f"CumulativeDivider(divisor={self._divisor}, mode={self._mode.value}, "
            f"width={self._width}, carry={self._carry})"
        )


# =============================================================================
# CONVENIENCE
# =============================================================================


def divide_sequence(
    dividends: Iterable[int],
    divisor: int,
    mode: Union[RoundingMode, str] = DEFAULT_ROUNDING_MODE,
    width: IntWidth = DEFAULT_INT_WIDTH,
) -> list[int]:
    """
    Деление долей p_1..p_k одного целого T на divisor с переносом ошибки.

    Examples:
        >>> divide_sequence([20, 20, 20], 3)
        [7, 6, 7]
        >>> divide_sequence([1] * 4, 4, RoundingMode.FLOOR)
        [0, 0, 0, 1]
    """
    return CumulativeDivider(divisor, mode, width).step_many(dividends)
