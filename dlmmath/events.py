"""Events the pool emits, with their on-chain wire encoding.

``bytes(event)`` yields an 8-byte discriminator followed by the fields in
declaration order, integers little-endian, public keys as 32 raw bytes.
"""

import hashlib
from dataclasses import dataclass, field, fields
from typing import Any, Tuple

_INTS = {
    "u16": (2, False),
    "i16": (2, True),
    "i32": (4, True),
    "u64": (8, False),
    "u128": (16, False),
}

_PUBKEY_LEN = 32


def _field(wire: str) -> Any:
    return field(metadata={"wire": wire})


def _check_int(name: str, wire: str, value: Any) -> None:
    size, signed = _INTS[wire]
    bits = size * 8
    low, high = (-(1 << (bits - 1)), (1 << (bits - 1)) - 1) if signed else (0, (1 << bits) - 1)
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise ValueError(f"{name} must be a {wire}, got {value!r}")


def _check(name: str, wire: str, value: Any) -> None:
    if wire == "pubkey":
        if not isinstance(value, bytes) or len(value) != _PUBKEY_LEN:
            raise ValueError(f"{name} must be {_PUBKEY_LEN} bytes")
    elif wire == "bool":
        if not isinstance(value, bool):
            raise ValueError(f"{name} must be a bool")
    elif wire == "u64x2":
        if not isinstance(value, tuple) or len(value) != 2:
            raise ValueError(f"{name} must be a pair of u64")
        for item in value:
            _check_int(name, "u64", item)
    else:
        _check_int(name, wire, value)


def _encode(wire: str, value: Any) -> bytes:
    if wire == "pubkey":
        return value
    if wire == "bool":
        return b"\x01" if value else b"\x00"
    if wire == "u64x2":
        return b"".join(_encode("u64", item) for item in value)
    size, signed = _INTS[wire]
    return value.to_bytes(size, "little", signed=signed)


class _Event:
    def __post_init__(self) -> None:
        for item in fields(self):  # type: ignore[arg-type]
            _check(item.name, item.metadata["wire"], getattr(self, item.name))

    def __bytes__(self) -> bytes:
        name = type(self).__name__
        discriminator = hashlib.sha256(f"event:{name}".encode()).digest()[:8]
        body = b"".join(
            _encode(item.metadata["wire"], getattr(self, item.name))
            for item in fields(self)  # type: ignore[arg-type]
        )
        return discriminator + body


@dataclass(frozen=True)
class CompositionFee(_Event):
    """Fee charged for changing the composition of the active bin."""

    from_: bytes = _field("pubkey")
    bin_id: int = _field("i16")
    token_x_fee_amount: int = _field("u64")
    token_y_fee_amount: int = _field("u64")
    protocol_token_x_fee_amount: int = _field("u64")
    protocol_token_y_fee_amount: int = _field("u64")


@dataclass(frozen=True)
class AddLiquidity(_Event):
    """Liquidity deposited into a position."""

    lb_pair: bytes = _field("pubkey")
    from_: bytes = _field("pubkey")
    position: bytes = _field("pubkey")
    amounts: Tuple[int, int] = _field("u64x2")
    active_bin_id: int = _field("i32")


@dataclass(frozen=True)
class RemoveLiquidity(_Event):
    """Liquidity withdrawn from a position."""

    lb_pair: bytes = _field("pubkey")
    from_: bytes = _field("pubkey")
    position: bytes = _field("pubkey")
    amounts: Tuple[int, int] = _field("u64x2")
    active_bin_id: int = _field("i32")


@dataclass(frozen=True)
class Swap(_Event):
    """A completed swap."""

    lb_pair: bytes = _field("pubkey")
    from_: bytes = _field("pubkey")
    start_bin_id: int = _field("i32")
    end_bin_id: int = _field("i32")
    amount_in: int = _field("u64")
    amount_out: int = _field("u64")
    swap_for_y: bool = _field("bool")
    fee: int = _field("u64")
    protocol_fee: int = _field("u64")
    fee_bps: int = _field("u128")
    host_fee: int = _field("u64")


@dataclass(frozen=True)
class ClaimReward(_Event):
    """Farm reward claimed by a position owner."""

    lb_pair: bytes = _field("pubkey")
    position: bytes = _field("pubkey")
    owner: bytes = _field("pubkey")
    reward_index: int = _field("u64")
    total_reward: int = _field("u64")


@dataclass(frozen=True)
class FundReward(_Event):
    """Farm reward funded."""

    lb_pair: bytes = _field("pubkey")
    funder: bytes = _field("pubkey")
    reward_index: int = _field("u64")
    amount: int = _field("u64")


@dataclass(frozen=True)
class InitializeReward(_Event):
    """Farm reward set up."""

    lb_pair: bytes = _field("pubkey")
    reward_mint: bytes = _field("pubkey")
    funder: bytes = _field("pubkey")
    reward_index: int = _field("u64")
    reward_duration: int = _field("u64")


@dataclass(frozen=True)
class UpdateRewardDuration(_Event):
    """Farm reward duration changed."""

    lb_pair: bytes = _field("pubkey")
    reward_index: int = _field("u64")
    old_reward_duration: int = _field("u64")
    new_reward_duration: int = _field("u64")


@dataclass(frozen=True)
class UpdateRewardFunder(_Event):
    """Farm reward funder changed."""

    lb_pair: bytes = _field("pubkey")
    reward_index: int = _field("u64")
    old_funder: bytes = _field("pubkey")
    new_funder: bytes = _field("pubkey")


@dataclass(frozen=True)
class PositionClose(_Event):
    """Position closed."""

    position: bytes = _field("pubkey")
    owner: bytes = _field("pubkey")


@dataclass(frozen=True)
class ClaimFee(_Event):
    """Swap fees claimed by a position owner."""

    lb_pair: bytes = _field("pubkey")
    position: bytes = _field("pubkey")
    owner: bytes = _field("pubkey")
    fee_x: int = _field("u64")
    fee_y: int = _field("u64")


@dataclass(frozen=True)
class LbPairCreate(_Event):
    """Pool created."""

    lb_pair: bytes = _field("pubkey")
    bin_step: int = _field("u16")
    token_x: bytes = _field("pubkey")
    token_y: bytes = _field("pubkey")


@dataclass(frozen=True)
class PositionCreate(_Event):
    """Position created."""

    lb_pair: bytes = _field("pubkey")
    position: bytes = _field("pubkey")
    owner: bytes = _field("pubkey")


@dataclass(frozen=True)
class FeeParameterUpdate(_Event):
    """Fee parameters of a pool changed."""

    lb_pair: bytes = _field("pubkey")
    protocol_share: int = _field("u16")
    base_factor: int = _field("u16")


@dataclass(frozen=True)
class IncreaseObservation(_Event):
    """Oracle observation buffer grown."""

    oracle: bytes = _field("pubkey")
    new_observation_length: int = _field("u64")


@dataclass(frozen=True)
class WithdrawIneligibleReward(_Event):
    """Reward that no position could earn was withdrawn."""

    lb_pair: bytes = _field("pubkey")
    reward_mint: bytes = _field("pubkey")
    amount: int = _field("u64")


@dataclass(frozen=True)
class UpdatePositionOperator(_Event):
    """Position operator changed."""

    position: bytes = _field("pubkey")
    old_operator: bytes = _field("pubkey")
    new_operator: bytes = _field("pubkey")


@dataclass(frozen=True)
class UpdatePositionLockReleaseSlot(_Event):
    """Position lock release slot changed."""

    position: bytes = _field("pubkey")
    current_slot: int = _field("u64")
    new_lock_release_slot: int = _field("u64")
    old_lock_release_slot: int = _field("u64")
    sender: bytes = _field("pubkey")