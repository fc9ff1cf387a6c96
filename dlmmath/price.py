"""Bin prices and constant-sum liquidity."""

from .constants import BASIS_POINT_MAX
from .errors import ErrorCode, LBError
from .safe_math import IntType, safe_add, safe_div, safe_mul, safe_shl
from .u64x64_math import ONE, SCALE_OFFSET, pow_q64


def get_price_from_id(active_id: int, bin_step: int) -> int:
    """Return ``(1 + bin_step / 10000) ** active_id`` in Q64.64."""
    if not IntType.I32.contains(active_id):
        raise ValueError(f"{active_id} is not a valid i32")
    if not IntType.U16.contains(bin_step):
        raise ValueError(f"{bin_step} is not a valid u16")
    bps = safe_shl(bin_step, SCALE_OFFSET, IntType.U128)
    bps = safe_div(bps, BASIS_POINT_MAX, IntType.U128)
    base = safe_add(ONE, bps, IntType.U128)
    price = pow_q64(base, active_id)
    if price is None:
        raise LBError(ErrorCode.MATH_OVERFLOW)
    return price


def get_liquidity(x: int, y: int, price: int) -> int:
    """Return ``L = price * x + y`` in Q64.64, with ``price`` in Q64.64."""
    for value in (x, y):
        if not IntType.U64.contains(value):
            raise ValueError(f"{value} is not a valid u64")
    if not IntType.U128.contains(price):
        raise ValueError(f"{price} is not a valid u128")
    px = safe_mul(price, x, IntType.U256)
    shifted_y = safe_shl(y, SCALE_OFFSET, IntType.U128)
    liquidity = safe_add(px, shifted_y, IntType.U256)
    if not IntType.U128.contains(liquidity):
        raise LBError(ErrorCode.TYPE_CAST_FAILED)
    return liquidity