"""Checked integer arithmetic for fixed-width integer types."""

from enum import Enum

from .errors import ErrorCode, LBError


class IntType(Enum):
    """Fixed-width integer types the checked operations work on."""

    U16 = "u16"
    I32 = "i32"
    U32 = "u32"
    U64 = "u64"
    I64 = "i64"
    U128 = "u128"
    I128 = "i128"
    USIZE = "usize"
    U256 = "u256"

    @property
    def bits(self) -> int:
        return 64 if self is IntType.USIZE else int(self.value[1:])

    @property
    def signed(self) -> bool:
        return self.value.startswith("i")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


def _overflow() -> LBError:
    return LBError(ErrorCode.MATH_OVERFLOW)


def _require(kind: IntType, *values: int) -> None:
    for value in values:
        if not kind.contains(value):
            raise ValueError(f"{value} is not a valid {kind.value}")


def _fit(value: int, kind: IntType) -> int:
    if not kind.contains(value):
        raise _overflow()
    return value


def _trunc_div(lhs: int, rhs: int) -> int:
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient


def _check_offset(offset: int, kind: IntType) -> None:
    if offset < 0:
        raise ValueError(f"shift offset must not be negative: {offset}")
    if offset >= kind.bits:
        raise _overflow()


def safe_add(lhs: int, rhs: int, kind: IntType) -> int:
    """Add, raising on overflow of ``kind``."""
    _require(kind, lhs, rhs)
    return _fit(lhs + rhs, kind)


def safe_sub(lhs: int, rhs: int, kind: IntType) -> int:
    """Subtract, raising on overflow of ``kind``."""
    _require(kind, lhs, rhs)
    return _fit(lhs - rhs, kind)


def safe_mul(lhs: int, rhs: int, kind: IntType) -> int:
    """Multiply, raising on overflow of ``kind``."""
    _require(kind, lhs, rhs)
    return _fit(lhs * rhs, kind)


def safe_div(lhs: int, rhs: int, kind: IntType) -> int:
    """Divide, truncating toward zero; raises on zero divisor or overflow."""
    _require(kind, lhs, rhs)
    if rhs == 0:
        raise _overflow()
    return _fit(_trunc_div(lhs, rhs), kind)


def safe_rem(lhs: int, rhs: int, kind: IntType) -> int:
    """Remainder with the sign of ``lhs``; raises on zero divisor or overflow."""
    _require(kind, lhs, rhs)
    if rhs == 0 or (kind.signed and lhs == kind.min_value and rhs == -1):
        raise _overflow()
    return lhs - rhs * _trunc_div(lhs, rhs)


def safe_shl(value: int, offset: int, kind: IntType) -> int:
    """Shift left.

    Primitive widths drop bits shifted past the top and only fail when the
    offset reaches the width; 256-bit values fail if any set bit is lost.
    """
    _require(kind, value)
    _check_offset(offset, kind)
    shifted = value << offset
    if kind is IntType.U256:
        return _fit(shifted, kind)
    wrapped = shifted & ((1 << kind.bits) - 1)
    if kind.signed and wrapped > kind.max_value:
        wrapped -= 1 << kind.bits
    return wrapped


def safe_shr(value: int, offset: int, kind: IntType) -> int:
    """Shift right.

    Primitive widths only fail when the offset reaches the width; 256-bit
    values also fail if any set bit is shifted out.
    """
    _require(kind, value)
    _check_offset(offset, kind)
    if kind is IntType.U256 and value & ((1 << offset) - 1):
        raise _overflow()
    return value >> offset