"""Spread deposit amounts over bins in proportion to per-bin weights.

Weights are ``(bin_id, weight)`` pairs with bin ids in ascending order.
"""

from typing import List, Optional, Sequence, Tuple

from .errors import ErrorCode, LBError
from .price import get_price_from_id
from .safe_math import IntType, safe_add, safe_div, safe_mul, safe_shl
from .u64x64_math import SCALE_OFFSET
from .utils_math import (
    safe_mul_div_cast_from_u256_to_u64,
    safe_mul_div_cast_from_u64_to_u64,
)

Weights = Sequence[Tuple[int, int]]

_U256 = IntType.U256
_DOUBLE_OFFSET = SCALE_OFFSET * 2


def _require_u64(*values: int) -> None:
    for value in values:
        if not IntType.U64.contains(value):
            raise ValueError(f"{value} is not a valid u64")


def _require_weights(weights: Weights) -> None:
    for _, weight in weights:
        if not IntType.U16.contains(weight):
            raise ValueError(f"{weight} is not a valid u16 weight")


def _to_u64(value: int) -> int:
    if not IntType.U64.contains(value):
        raise LBError(ErrorCode.TYPE_CAST_FAILED)
    return value


def _weight_per_price(weight: int, bin_id: int, bin_step: int) -> int:
    scaled = safe_shl(weight, _DOUBLE_OFFSET, _U256)
    return safe_div(scaled, get_price_from_id(bin_id, bin_step), _U256)


def to_amount_bid_side(active_id: int, amount: int, weights: Weights) -> List[Tuple[int, int]]:
    """Split ``amount`` of token Y over the bins at or below ``active_id``."""
    _require_u64(amount)
    _require_weights(weights)
    total_weight = 0
    for bin_id, weight in weights:
        if bin_id > active_id:
            break
        total_weight = safe_add(total_weight, weight, IntType.U64)
    if total_weight == 0:
        raise LBError(ErrorCode.INVALID_INPUT)
    return [
        (
            bin_id,
            0
            if bin_id > active_id
            else safe_mul_div_cast_from_u64_to_u64(weight, amount, total_weight),
        )
        for bin_id, weight in weights
    ]


def to_amount_ask_side(
    active_id: int, amount: int, bin_step: int, weights: Weights
) -> List[Tuple[int, int]]:
    """Split ``amount`` of token X over the bins at or above ``active_id``."""
    _require_u64(amount)
    _require_weights(weights)
    weight_per_prices = [
        _weight_per_price(weight, bin_id, bin_step) if bin_id >= active_id else 0
        for bin_id, weight in weights
    ]
    total_weight = 0
    for weight_per_price in weight_per_prices:
        total_weight = safe_add(total_weight, weight_per_price, _U256)
    if total_weight == 0:
        raise LBError(ErrorCode.INVALID_INPUT)
    return [
        (
            bin_id,
            0
            if bin_id < active_id
            else safe_mul_div_cast_from_u256_to_u64(amount, weight_per_price, total_weight),
        )
        for (bin_id, _), weight_per_price in zip(weights, weight_per_prices)
    ]


def _active_bin_index(active_id: int, weights: Weights) -> Optional[int]:
    for index, (bin_id, _) in enumerate(weights):
        if bin_id == active_id:
            return index
        if bin_id > active_id:
            break
    return None


def _active_bin_weights(
    active_weight: int, price: int, amount_x: int, amount_y: int
) -> Tuple[int, int]:
    scaled_weight = safe_shl(active_weight, _DOUBLE_OFFSET, _U256)
    if amount_x == 0 and amount_y == 0:
        # Equal split when the active bin holds nothing yet.
        wx0 = safe_div(scaled_weight, safe_mul(price, 2, _U256), _U256)
        wy0 = safe_div(safe_shl(active_weight, SCALE_OFFSET, _U256), 2, _U256)
        return wx0, wy0

    wx0 = 0
    if amount_x != 0:
        ratio = safe_div(safe_shl(amount_y, SCALE_OFFSET, _U256), amount_x, _U256)
        wx0 = safe_div(scaled_weight, safe_add(price, ratio, _U256), _U256)
    wy0 = 0
    if amount_y != 0:
        ratio = safe_div(safe_mul(price, amount_x, _U256), amount_y, _U256)
        one = safe_shl(1, SCALE_OFFSET, _U256)
        wy0 = safe_div(scaled_weight, safe_add(one, ratio, _U256), _U256)
    return wx0, wy0


def to_amount_both_side(
    active_id: int,
    bin_step: int,
    amount_x: int,
    amount_y: int,
    total_amount_x: int,
    total_amount_y: int,
    weights: Weights,
) -> List[Tuple[int, int, int]]:
    """Split both tokens over the bins, keeping the active bin's X/Y ratio.

    ``amount_x`` and ``amount_y`` are what the active bin already holds.
    Returns ``(bin_id, amount_x, amount_y)`` triples.
    """
    _require_u64(amount_x, amount_y, total_amount_x, total_amount_y)
    _require_weights(weights)

    active_index = _active_bin_index(active_id, weights)
    if active_index is None:
        wx0 = wy0 = 0
    else:
        active_bin_id, active_weight = weights[active_index]
        price = get_price_from_id(active_bin_id, bin_step)
        wx0, wy0 = _active_bin_weights(active_weight, price, amount_x, amount_y)

    total_weight_x = wx0
    total_weight_y = wy0
    weight_per_prices = []
    for bin_id, weight in weights:
        weight_per_price = 0
        if bin_id < active_id:
            scaled = safe_shl(weight, SCALE_OFFSET, _U256)
            total_weight_y = safe_add(total_weight_y, scaled, _U256)
        elif bin_id > active_id:
            weight_per_price = _weight_per_price(weight, bin_id, bin_step)
            total_weight_x = safe_add(total_weight_x, weight_per_price, _U256)
        weight_per_prices.append(weight_per_price)

    ky = safe_div(safe_shl(total_amount_y, _DOUBLE_OFFSET, _U256), total_weight_y, _U256)
    kx = safe_div(safe_shl(total_amount_x, _DOUBLE_OFFSET, _U256), total_weight_x, _U256)
    k = min(kx, ky)

    amounts = []
    for (bin_id, weight), weight_per_price in zip(weights, weight_per_prices):
        if bin_id < active_id:
            amount_y_in_bin = safe_mul(k, weight, _U256) >> SCALE_OFFSET
            amounts.append((bin_id, 0, _to_u64(amount_y_in_bin)))
        elif bin_id > active_id:
            amount_x_in_bin = safe_mul(k, weight_per_price, _U256) >> _DOUBLE_OFFSET
            amounts.append((bin_id, _to_u64(amount_x_in_bin), 0))
        elif active_index is not None:
            amount_x_in_bin = safe_mul(k, wx0, _U256) >> _DOUBLE_OFFSET
            amount_y_in_bin = safe_mul(k, wy0, _U256) >> _DOUBLE_OFFSET
            amounts.append((bin_id, _to_u64(amount_x_in_bin), _to_u64(amount_y_in_bin)))
    return amounts