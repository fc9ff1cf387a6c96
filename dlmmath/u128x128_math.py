"""Multiply-then-divide on 128-bit operands with a 256-bit intermediate."""

from enum import Enum
from typing import Optional

_U128_MAX = (1 << 128) - 1


class Rounding(Enum):
    """Direction to round a quotient."""

    UP = "up"
    DOWN = "down"


def _require_u128(*values: int) -> None:
    for value in values:
        if not 0 <= value <= _U128_MAX:
            raise ValueError(f"{value} is not a valid u128")


def _require_u8(offset: int) -> None:
    if not 0 <= offset <= 0xFF:
        raise ValueError(f"{offset} is not a valid u8")


def mul_div(x: int, y: int, denominator: int, rounding: Rounding) -> Optional[int]:
    """Return ``(x * y) / denominator`` rounded, or ``None`` if it does not fit."""
    _require_u128(x, y, denominator)
    if denominator == 0:
        return None
    quotient, remainder = divmod(x * y, denominator)
    if rounding is Rounding.UP and remainder:
        quotient += 1
    return quotient if quotient <= _U128_MAX else None


def mul_shr(x: int, y: int, offset: int, rounding: Rounding) -> Optional[int]:
    """Return ``(x * y) >> offset`` rounded, or ``None``."""
    _require_u8(offset)
    if offset >= 128:
        return None
    return mul_div(x, y, 1 << offset, rounding)


def shl_div(x: int, y: int, offset: int, rounding: Rounding) -> Optional[int]:
    """Return ``(x << offset) / y`` rounded, or ``None``."""
    _require_u8(offset)
    if offset >= 128:
        return None
    return mul_div(x, 1 << offset, y, rounding)