"""Checked fixed-point helpers that turn missing results into errors."""

from typing import Optional

from .errors import ErrorCode, LBError
from .safe_math import IntType, safe_div, safe_mul
from .u128x128_math import Rounding, mul_div, mul_shr, shl_div
from .u64x64_math import pow_q64


def _unwrap(value: Optional[int]) -> int:
    if value is None:
        raise LBError(ErrorCode.MATH_OVERFLOW)
    return value


def _cast(value: int, kind: IntType) -> int:
    if not kind.contains(value):
        raise LBError(ErrorCode.TYPE_CAST_FAILED)
    return value


def _require_u64(*values: int) -> None:
    for value in values:
        if not IntType.U64.contains(value):
            raise ValueError(f"{value} is not a valid u64")


def safe_pow_cast(base: int, exp: int, kind: IntType) -> int:
    """Raise a Q64.64 ``base`` to ``exp`` and check the result fits ``kind``."""
    return _cast(_unwrap(pow_q64(base, exp)), kind)


def safe_mul_div_cast(
    x: int, y: int, denominator: int, rounding: Rounding, kind: IntType
) -> int:
    """Return ``x * y / denominator`` checked to fit ``kind``."""
    return _cast(_unwrap(mul_div(x, y, denominator, rounding)), kind)


def safe_mul_div_cast_from_u64_to_u64(x: int, y: int, denominator: int) -> int:
    """Return ``x * y / denominator`` for u64 operands, rounded down, as a u64."""
    _require_u64(x, y, denominator)
    product = safe_mul(x, y, IntType.U128)
    return _cast(safe_div(product, denominator, IntType.U128), IntType.U64)


def safe_mul_div_cast_from_u256_to_u64(x: int, y: int, denominator: int) -> int:
    """Return ``x * y / denominator`` with 256-bit ``y`` and ``denominator``, as a u64."""
    _require_u64(x)
    product = safe_mul(x, y, IntType.U256)
    return _cast(safe_div(product, denominator, IntType.U256), IntType.U64)


def safe_mul_shr_cast(
    x: int, y: int, offset: int, rounding: Rounding, kind: IntType
) -> int:
    """Return ``(x * y) >> offset`` checked to fit ``kind``."""
    return _cast(_unwrap(mul_shr(x, y, offset, rounding)), kind)


def safe_shl_div_cast(
    x: int, y: int, offset: int, rounding: Rounding, kind: IntType
) -> int:
    """Return ``(x << offset) / y`` checked to fit ``kind``."""
    return _cast(_unwrap(shl_div(x, y, offset, rounding)), kind)