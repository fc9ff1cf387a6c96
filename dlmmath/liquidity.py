"""Deposit parameters given as explicit per-bin distributions."""

from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import MAX_BIN_PER_POSITION
from .errors import ErrorCode, LBError
from .safe_math import IntType
from .weight_to_amounts import (
    to_amount_ask_side,
    to_amount_bid_side,
    to_amount_both_side,
)


def _require(kind: IntType, name: str, value: int) -> None:
    if not kind.contains(value):
        raise ValueError(f"{name} must be a {kind.value}, got {value}")


@dataclass
class BinLiquidityDistribution:
    """Share of each token, in basis points, to put into one bin."""

    bin_id: int
    distribution_x: int
    distribution_y: int

    def __post_init__(self) -> None:
        _require(IntType.I32, "bin_id", self.bin_id)
        _require(IntType.U16, "distribution_x", self.distribution_x)
        _require(IntType.U16, "distribution_y", self.distribution_y)


@dataclass
class LiquidityParameter:
    """Deposit amounts with an explicit per-bin distribution."""

    amount_x: int
    amount_y: int
    bin_liquidity_dist: List[BinLiquidityDistribution] = field(default_factory=list)

    def __post_init__(self) -> None:
        _require(IntType.U64, "amount_x", self.amount_x)
        _require(IntType.U64, "amount_y", self.amount_y)


@dataclass
class BinLiquidityDistributionByWeight:
    """Relative weight of liquidity for one bin."""

    bin_id: int = 0
    weight: int = 0

    def __post_init__(self) -> None:
        _require(IntType.I32, "bin_id", self.bin_id)
        _require(IntType.U16, "weight", self.weight)


@dataclass
class LiquidityParameterByWeight:
    """Deposit amounts spread over bins by relative weight."""

    amount_x: int
    amount_y: int
    active_id: int
    max_active_bin_slippage: int
    bin_liquidity_dist: List[BinLiquidityDistributionByWeight] = field(default_factory=list)

    def __post_init__(self) -> None:
        _require(IntType.U64, "amount_x", self.amount_x)
        _require(IntType.U64, "amount_y", self.amount_y)
        _require(IntType.I32, "active_id", self.active_id)
        _require(IntType.I32, "max_active_bin_slippage", self.max_active_bin_slippage)

    def _weights(self) -> List[Tuple[int, int]]:
        return [(item.bin_id, item.weight) for item in self.bin_liquidity_dist]

    def validate(self, active_id: int) -> None:
        """Raise unless the distribution is usable at the pool's ``active_id``."""
        bins = self.bin_liquidity_dist
        if not bins or len(bins) > MAX_BIN_PER_POSITION:
            raise LBError(ErrorCode.INVALID_INPUT)

        if abs(active_id - self.active_id) > self.max_active_bin_slippage:
            raise LBError(ErrorCode.EXCEEDED_BIN_SLIPPAGE_TOLERANCE)

        for previous, current in zip([None, *bins], bins):
            if current.weight == 0:
                raise LBError(ErrorCode.INVALID_INPUT)
            if previous is not None and current.bin_id <= previous.bin_id:
                raise LBError(ErrorCode.INVALID_INPUT)

        if bins[0].bin_id > active_id and self.amount_x == 0:
            raise LBError(ErrorCode.INVALID_INPUT)
        if bins[-1].bin_id < active_id and self.amount_y == 0:
            raise LBError(ErrorCode.INVALID_INPUT)

    def to_amounts_into_bin(
        self,
        active_id: int,
        bin_step: int,
        amount_x_in_active_bin: int,
        amount_y_in_active_bin: int,
    ) -> List[Tuple[int, int, int]]:
        """Return ``(bin_id, amount_x, amount_y)`` per bin; bins must be sorted."""
        weights = self._weights()
        if active_id > weights[-1][0]:
            bid = to_amount_bid_side(active_id, self.amount_y, weights)
            return [(bin_id, 0, amount) for bin_id, amount in bid]
        if active_id < weights[0][0]:
            ask = to_amount_ask_side(active_id, self.amount_x, bin_step, weights)
            return [(bin_id, amount, 0) for bin_id, amount in ask]
        return to_amount_both_side(
            active_id,
            bin_step,
            amount_x_in_active_bin,
            amount_y_in_active_bin,
            self.amount_x,
            self.amount_y,
            weights,
        )


@dataclass
class CompressedBinDepositAmount:
    """A bin and its deposit amount, before multiplying back up."""

    bin_id: int
    amount: int

    def __post_init__(self) -> None:
        _require(IntType.I32, "bin_id", self.bin_id)
        _require(IntType.U32, "amount", self.amount)


@dataclass
class AddLiquiditySingleSidePreciseParameter:
    """Exact single-token amounts per bin, scaled by ``decompress_multiplier``."""

    bins: List[CompressedBinDepositAmount] = field(default_factory=list)
    decompress_multiplier: int = 0

    def __post_init__(self) -> None:
        _require(IntType.U64, "decompress_multiplier", self.decompress_multiplier)