"""Q64.64 fixed-point helpers: exponentiation and decimal conversion."""

from typing import Optional

from .constants import BASIS_POINT_MAX

# Precision when converting between decimal and fixed point: 10^12.
PRECISION = 1_000_000_000_000

# Position of the radix point.
SCALE_OFFSET = 64

# 1.0 in Q64.64.
ONE = 1 << SCALE_OFFSET

# Exponents from here on overflow what Q64.64 can hold for a 1 bps step.
_MAX_EXPONENTIAL = 0x80000

# Bits of the exponent the binary exponentiation walks through.
_EXPONENT_BITS = 19

_U128_MAX = (1 << 128) - 1
_U256_MAX = (1 << 256) - 1


def _require_u128(value: int) -> None:
    if not 0 <= value <= _U128_MAX:
        raise ValueError(f"{value} is not a valid u128")


def _mul_shr(lhs: int, rhs: int) -> Optional[int]:
    product = lhs * rhs
    if product > _U128_MAX:
        return None
    return product >> SCALE_OFFSET


def pow_q64(base: int, exp: int) -> Optional[int]:
    """Raise a Q64.64 ``base`` to an integer power.

    Returns the Q64.64 result, or ``None`` when it does not fit.
    """
    _require_u128(base)
    if exp == 0:
        return ONE

    invert = exp < 0
    exp = abs(exp)
    if exp >= _MAX_EXPONENTIAL:
        return None

    squared_base = base
    result = ONE

    # Work with 1 / base so that squaring never leaves 128 bits.
    if squared_base >= result:
        squared_base = _U128_MAX // squared_base
        invert = not invert

    for bit in range(_EXPONENT_BITS):
        if bit:
            squared_base = _mul_shr(squared_base, squared_base)
            if squared_base is None:
                return None
        if exp & (1 << bit):
            result = _mul_shr(result, squared_base)
            if result is None:
                return None

    if result == 0:
        return None
    if invert:
        result = _U128_MAX // result
    return result


def to_decimal(value: int) -> Optional[int]:
    """Convert a Q64.64 value to a decimal scaled by 10^12."""
    _require_u128(value)
    scaled = value * PRECISION
    if scaled > _U256_MAX:
        return None
    result = scaled >> SCALE_OFFSET
    return result if result <= _U128_MAX else None


def from_decimal(value: int) -> Optional[int]:
    """Convert a decimal scaled by 10^12 to Q64.64."""
    _require_u128(value)
    shifted = (value << SCALE_OFFSET) & _U256_MAX
    result = shifted // PRECISION
    return result if result <= _U128_MAX else None


def get_base(bin_step: int) -> Optional[int]:
    """Return ``1 + bin_step / 10000`` in Q64.64."""
    if not 0 <= bin_step <= 0xFFFFFFFF:
        raise ValueError(f"{bin_step} is not a valid u32")
    quotient = (bin_step << SCALE_OFFSET) & _U128_MAX
    result = ONE + quotient // BASIS_POINT_MAX
    return result if result <= _U128_MAX else None