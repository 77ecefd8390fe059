"""
Core math modules

Целочисленное деление с выбранным режимом округления и переносом ошибки
округления между делениями с общим делителем.
"""

# Integer widths
from src.core.math.int_width import (
    DEFAULT_INT_WIDTH,
    INT8,
    INT16,
    INT32,
    INT64,
    INT128,
    SUPPORTED_WIDTH_BITS,
    UNBOUNDED,
    IntegerOverflow,
    IntWidth,
)

# Rounding Divide
from src.core.math.rounding_divide import (
    DEFAULT_ROUNDING_MODE,
    DivisionByZero,
    DivisionResult,
    RoundingMode,
    coerce_mode,
    divide,
    is_valid_remainder,
)

# Cumulative Divider
from src.core.math.cumulative_divider import (
    CumulativeDivider,
    divide_sequence,
)

__all__ = [
    # Integer widths — Constants
    "DEFAULT_INT_WIDTH",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "INT128",
    "SUPPORTED_WIDTH_BITS",
    "UNBOUNDED",
    # Integer widths — Types
    "IntWidth",
    # Exceptions
    "DivisionByZero",
    "IntegerOverflow",
    # Rounding Divide — Constants
    "DEFAULT_ROUNDING_MODE",
    # Rounding Divide — Types
    "DivisionResult",
    "RoundingMode",
    # Rounding Divide — Functions
    "coerce_mode",
    "divide",
    "is_valid_remainder",
    # Cumulative Divider
    "CumulativeDivider",
    "divide_sequence",
]
