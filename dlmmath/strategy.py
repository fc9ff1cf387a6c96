"""Deposit strategies that turn a bin range into per-bin weights and amounts."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Tuple

from .errors import ErrorCode, LBError
from .safe_math import IntType, safe_add, safe_div, safe_mul, safe_sub
from .weight_to_amounts import (
    to_amount_ask_side,
    to_amount_bid_side,
    to_amount_both_side,
)

DEFAULT_MIN_WEIGHT = 200
DEFAULT_MAX_WEIGHT = 2000

_PARAMETERS_LEN = 64
_U16_MASK = 0xFFFF
_USIZE_MASK = (1 << 64) - 1

Weights = List[Tuple[int, int]]
WeightFn = Callable[[int, int], Weights]


class StrategyType(Enum):
    """How liquidity is shaped across the chosen bins."""

    SPOT_ONE_SIDE = 0
    CURVE_ONE_SIDE = 1
    BID_ASK_ONE_SIDE = 2
    SPOT_BALANCED = 3
    CURVE_BALANCED = 4
    BID_ASK_BALANCED = 5
    SPOT_IMBALANCED = 6
    CURVE_IMBALANCED = 7
    BID_ASK_IMBALANCED = 8


def _invalid_strategy() -> LBError:
    return LBError(ErrorCode.INVALID_STRATEGY_PARAMETERS)


def _as_u16(value: int) -> int:
    return value & _U16_MASK


def to_weight_spot_balanced(min_bin_id: int, max_bin_id: int) -> Weights:
    """Give every bin in the inclusive range the same weight."""
    return [(bin_id, 1) for bin_id in range(min_bin_id, max_bin_id + 1)]


def to_weight_descending_order(min_bin_id: int, max_bin_id: int) -> Weights:
    """Weight bins so the lowest gets the most and the highest gets one."""
    return [
        (bin_id, _as_u16(max_bin_id - bin_id + 1))
        for bin_id in range(min_bin_id, max_bin_id + 1)
    ]


def to_weight_ascending_order(min_bin_id: int, max_bin_id: int) -> Weights:
    """Weight bins so the lowest gets one and the highest gets the most."""
    return [
        (bin_id, _as_u16(bin_id - min_bin_id + 1))
        for bin_id in range(min_bin_id, max_bin_id + 1)
    ]


def _weight_steps(min_bin_id: int, max_bin_id: int, active_id: int) -> Tuple[int, int]:
    if active_id < min_bin_id or active_id > max_bin_id:
        raise _invalid_strategy()
    diff_weight = safe_sub(DEFAULT_MAX_WEIGHT, DEFAULT_MIN_WEIGHT, IntType.U16)
    below = 0
    if active_id > min_bin_id:
        span = _as_u16(safe_sub(active_id, min_bin_id, IntType.I32))
        below = safe_div(diff_weight, span, IntType.U16)
    above = 0
    if max_bin_id > active_id:
        span = _as_u16(safe_sub(max_bin_id, active_id, IntType.I32))
        above = safe_div(diff_weight, span, IntType.U16)
    return below, above


def _step_for(bin_id: int, active_id: int, below: int, above: int) -> int:
    if bin_id < active_id:
        return safe_mul(_as_u16(active_id - bin_id), below, IntType.U16)
    return safe_mul(_as_u16(bin_id - active_id), above, IntType.U16)


def to_weight_curve(min_bin_id: int, max_bin_id: int, active_id: int) -> Weights:
    """Peak the weight at the active bin and fall off linearly to either side."""
    below, above = _weight_steps(min_bin_id, max_bin_id, active_id)
    return [
        (
            bin_id,
            safe_sub(
                DEFAULT_MAX_WEIGHT,
                _step_for(bin_id, active_id, below, above),
                IntType.U16,
            ),
        )
        for bin_id in range(min_bin_id, max_bin_id + 1)
    ]


def to_weight_bid_ask(min_bin_id: int, max_bin_id: int, active_id: int) -> Weights:
    """Put the least weight at the active bin and rise linearly to either side."""
    below, above = _weight_steps(min_bin_id, max_bin_id, active_id)
    return [
        (
            bin_id,
            safe_add(
                DEFAULT_MIN_WEIGHT,
                _step_for(bin_id, active_id, below, above),
                IntType.U16,
            ),
        )
        for bin_id in range(min_bin_id, max_bin_id + 1)
    ]


@dataclass
class StrategyParameters:
    """Bin range and shape of a strategy deposit."""

    min_bin_id: int = 0
    max_bin_id: int = 0
    strategy_type: StrategyType = StrategyType.SPOT_BALANCED
    parameters: bytes = bytes(_PARAMETERS_LEN)

    def __post_init__(self) -> None:
        if len(self.parameters) != _PARAMETERS_LEN:
            raise ValueError(f"parameters must be {_PARAMETERS_LEN} bytes")

    def validate_both_side(self, active_id: int) -> None:
        """Raise unless ``active_id`` lies within the range."""
        if active_id < self.min_bin_id or active_id > self.max_bin_id:
            raise _invalid_strategy()

    def bin_count(self) -> int:
        """Return ``max_bin_id - min_bin_id`` as an unsigned machine word."""
        return safe_sub(self.max_bin_id, self.min_bin_id, IntType.I32) & _USIZE_MASK


_IMBALANCED_WEIGHTS = {
    StrategyType.SPOT_IMBALANCED: (to_weight_spot_balanced, to_weight_spot_balanced),
    StrategyType.CURVE_IMBALANCED: (to_weight_ascending_order, to_weight_descending_order),
    StrategyType.BID_ASK_IMBALANCED: (to_weight_descending_order, to_weight_ascending_order),
}

_BALANCED_WEIGHTS = {
    StrategyType.SPOT_BALANCED: lambda low, high, _active: to_weight_spot_balanced(low, high),
    StrategyType.CURVE_BALANCED: to_weight_curve,
    StrategyType.BID_ASK_BALANCED: to_weight_bid_ask,
}


@dataclass
class LiquidityParameterByStrategy:
    """A two-sided deposit shaped by a strategy."""

    amount_x: int = 0
    amount_y: int = 0
    active_id: int = 0
    max_active_bin_slippage: int = 0
    strategy_parameters: StrategyParameters = field(default_factory=StrategyParameters)

    def to_amounts_into_bin(
        self,
        active_id: int,
        bin_step: int,
        amount_x_in_active_bin: int,
        amount_y_in_active_bin: int,
    ) -> List[Tuple[int, int, int]]:
        """Return ``(bin_id, amount_x, amount_y)`` for every bin to deposit into."""
        params = self.strategy_parameters
        low, high = params.min_bin_id, params.max_bin_id
        kind = params.strategy_type

        if kind in _IMBALANCED_WEIGHTS:
            bid_weights, ask_weights = _IMBALANCED_WEIGHTS[kind]
            amounts: List[Tuple[int, int, int]] = []
            if low <= active_id:
                bid = to_amount_bid_side(active_id, self.amount_y, bid_weights(low, active_id))
                amounts.extend((bin_id, 0, amount) for bin_id, amount in bid)
            if active_id < high:
                ask = to_amount_ask_side(
                    active_id, self.amount_x, bin_step, ask_weights(active_id + 1, high)
                )
                amounts.extend((bin_id, amount, 0) for bin_id, amount in ask)
            return amounts

        if kind in _BALANCED_WEIGHTS:
            weights = _BALANCED_WEIGHTS[kind](low, high, active_id)
            return to_amount_both_side(
                active_id,
                bin_step,
                amount_x_in_active_bin,
                amount_y_in_active_bin,
                self.amount_x,
                self.amount_y,
                weights,
            )

        raise _invalid_strategy()


@dataclass
class LiquidityParameterByStrategyOneSide:
    """A deposit of a single token shaped by a one-sided strategy."""

    amount: int = 0
    active_id: int = 0
    max_active_bin_slippage: int = 0
    strategy_parameters: StrategyParameters = field(default_factory=StrategyParameters)

    def _weights(self, deposit_for_y: bool) -> Weights:
        params = self.strategy_parameters
        low, high = params.min_bin_id, params.max_bin_id
        kind = params.strategy_type
        if kind is StrategyType.SPOT_ONE_SIDE:
            return to_weight_spot_balanced(low, high)
        if kind is StrategyType.CURVE_ONE_SIDE:
            build = to_weight_ascending_order if deposit_for_y else to_weight_descending_order
            return build(low, high)
        if kind is StrategyType.BID_ASK_ONE_SIDE:
            build = to_weight_descending_order if deposit_for_y else to_weight_ascending_order
            return build(low, high)
        raise _invalid_strategy()

    def to_amounts_into_bin(
        self, active_id: int, bin_step: int, deposit_for_y: bool
    ) -> List[Tuple[int, int]]:
        """Return ``(bin_id, amount)`` for every bin to deposit into."""
        weights = self._weights(deposit_for_y)
        if deposit_for_y:
            return to_amount_bid_side(active_id, self.amount, weights)
        return to_amount_ask_side(active_id, self.amount, bin_step, weights)