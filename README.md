# dlmmath

Exact integer math for a discretised liquidity market maker (DLMM). In a DLMM,
liquidity sits in discrete price *bins*. The price of a bin is
`(1 + bin_step / 10000) ** bin_id`, and prices are held as Q64.64 fixed-point
integers.

The package has no runtime dependencies. All arithmetic is done on Python
integers, with checks that give the same results as fixed-width machine
integers:

- An overflow or a failed narrowing cast raises `dlmmath.errors.LBError`.
  `LBError.code` holds the matching `ErrorCode` member.
- An argument outside the range of its declared integer type raises
  `ValueError`.
- The low-level Q64.64 and mul/div helpers do not raise when a result does not
  fit. They return `None` instead.

## Installation

```
pip install .
pip install ".[test]"   # also installs pytest and hypothesis
```

## Modules

- `dlmmath.constants` holds the protocol limits, for example `BASIS_POINT_MAX`,
  `MAX_BIN_PER_ARRAY`, `MAX_BIN_PER_POSITION`, `MIN_BIN_ID`, `MAX_BIN_ID`,
  `MAX_FEE_RATE`, `FEE_PRECISION` and `NUM_REWARDS`.
- `dlmmath.errors` defines `ErrorCode`, an enum of every protocol error. Each
  member has a `number` (6000 and up) and a `message`. It also defines
  `LBError(code)`, the exception that carries one of them.
- `dlmmath.safe_math` provides checked operations on a fixed-width `IntType`
  (`U16`, `I32`, `U32`, `U64`, `I64`, `U128`, `I128`, `USIZE`, `U256`):
  - `safe_add`, `safe_sub`, `safe_mul` and `safe_div` (division truncates
    toward zero).
  - `safe_rem`.
  - `safe_shl` and `safe_shr`. These raise when the shift offset reaches the
    width of the type. On `U256` they also raise when a set bit would be
    lost.
- `dlmmath.u64x64_math` provides the Q64.64 helpers and the constants `ONE`,
  `SCALE_OFFSET` and `PRECISION` (10^12):
  - `pow_q64(base, exp)`
  - `to_decimal(value)` and `from_decimal(value)`, which convert to and from
    decimals scaled by 10^12.
  - `get_base(bin_step)`
- `dlmmath.u128x128_math` provides `mul_div`, `mul_shr` and `shl_div`. Each
  takes a `Rounding` (`UP` or `DOWN`) and uses a 256-bit intermediate.
- `dlmmath.utils_math` has the same operations with their results checked:
  - `safe_pow_cast`, `safe_mul_div_cast`, `safe_mul_shr_cast` and
    `safe_shl_div_cast` cast the result to a target `IntType`.
  - `safe_mul_div_cast_from_u64_to_u64` and
    `safe_mul_div_cast_from_u256_to_u64` return a u64.
  - A missing result raises `MATH_OVERFLOW`. A result that does not fit the
    target raises `TYPE_CAST_FAILED`.
- `dlmmath.price` provides two functions:
  - `get_price_from_id(active_id, bin_step)` returns the Q64.64 price of a
    bin.
  - `get_liquidity(x, y, price)` returns `L = price * x + y` in Q64.64.
- `dlmmath.weight_to_amounts` splits deposit amounts over bins in proportion
  to `(bin_id, weight)` pairs sorted by bin id:
  - `to_amount_bid_side` splits token Y over the bins at or below the active
    bin.
  - `to_amount_ask_side` splits token X over the bins at or above the active
    bin. Each bin is weighted by its price.
  - `to_amount_both_side` splits both tokens and follows the X/Y ratio that
    the active bin already holds.
- `dlmmath.strategy` covers deposits shaped by a strategy:
  - `StrategyType` lists the shapes: spot, curve and bid/ask, each as
    one-sided, balanced or imbalanced.
  - `to_weight_spot_balanced`, `to_weight_ascending_order`,
    `to_weight_descending_order`, `to_weight_curve` and `to_weight_bid_ask`
    build the weights.
  - `StrategyParameters` has `validate_both_side` and `bin_count`.
  - `LiquidityParameterByStrategy` and `LiquidityParameterByStrategyOneSide`
    each have a `to_amounts_into_bin` method.
- `dlmmath.liquidity` holds the deposit records:
  - `BinLiquidityDistribution` and `LiquidityParameter`.
  - `BinLiquidityDistributionByWeight` and `LiquidityParameterByWeight`. The
    latter has `validate(active_id)`, which checks bin count, slippage,
    ordering, non-zero weights and amounts. It also has
    `to_amounts_into_bin`.
  - `CompressedBinDepositAmount` and
    `AddLiquiditySingleSidePreciseParameter`.
  - Integer fields are range-checked when a record is created.
- `dlmmath.events` holds frozen dataclasses for the protocol events, such as
  `Swap`, `AddLiquidity`, `RemoveLiquidity`, `ClaimFee`, `ClaimReward` and
  `LbPairCreate`:
  - Public keys are 32-byte `bytes` values.
  - A field named `from` in the protocol is spelled `from_`.
  - `bytes(event)` gives the wire encoding: an 8-byte discriminator (the
    first 8 bytes of `sha256("event:<Name>")`), then the fields in order.
    Integers are little-endian and public keys are raw bytes.

## Example

```python
from dlmmath.errors import ErrorCode, LBError
from dlmmath.price import get_price_from_id
from dlmmath.strategy import (
    LiquidityParameterByStrategy,
    StrategyParameters,
    StrategyType,
)
from dlmmath.u64x64_math import to_decimal

price = get_price_from_id(100, 10)   # Q64.64 price of bin 100 at 10 bps
print(to_decimal(price))             # the same price scaled by 10**12

params = LiquidityParameterByStrategy(
    amount_x=1_000_000,
    amount_y=1_000_000,
    active_id=0,
    max_active_bin_slippage=5,
    strategy_parameters=StrategyParameters(
        min_bin_id=-3,
        max_bin_id=3,
        strategy_type=StrategyType.SPOT_BALANCED,
    ),
)
for bin_id, amount_x, amount_y in params.to_amounts_into_bin(0, 10, 0, 0):
    print(bin_id, amount_x, amount_y)

try:
    get_price_from_id(10_000_000, 100)
except LBError as err:
    assert err.code is ErrorCode.MATH_OVERFLOW
    print(err)                       # "Math operation overflow"
```

## What this package does not do

This is a math library only. It does not hold or store pool state: it has no
pairs, bin arrays, positions, oracles or reward vaults. It does not carry out
swaps, deposits, withdrawals or fee and reward claims. It does not talk to any
network or chain. The parameter records and event classes describe data, and
the functions above compute amounts from that data. Applying the results is up
to the caller.

## Running the tests

```
pytest
```