import pytest
from hypothesis import given
from hypothesis import strategies as st

from dlmmath.errors import ErrorCode, LBError
from dlmmath.safe_math import IntType
from dlmmath.u128x128_math import Rounding, mul_div
from dlmmath.u64x64_math import ONE, get_base, pow_q64
from dlmmath.utils_math import (
    safe_mul_div_cast,
    safe_mul_div_cast_from_u256_to_u64,
    safe_mul_div_cast_from_u64_to_u64,
    safe_mul_shr_cast,
    safe_pow_cast,
    safe_shl_div_cast,
)

U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1
U256_MAX = (1 << 256) - 1


def test_pow_cast_zero_exponent_is_one():
    assert safe_pow_cast(get_base(25), 0, IntType.U128) == ONE


def test_pow_cast_matches_pow():
    base = get_base(10)
    assert safe_pow_cast(base, 123, IntType.U128) == pow_q64(base, 123)


def test_pow_cast_rejects_narrow_type():
    with pytest.raises(LBError) as info:
        safe_pow_cast(get_base(10), 0, IntType.U64)
    assert info.value.code is ErrorCode.TYPE_CAST_FAILED


def test_pow_cast_overflow():
    with pytest.raises(LBError) as info:
        safe_pow_cast(get_base(1), 600_000, IntType.U128)
    assert info.value.code is ErrorCode.MATH_OVERFLOW


@given(
    st.integers(0, U128_MAX),
    st.integers(0, U128_MAX),
    st.integers(1, U128_MAX),
)
def test_mul_div_cast_matches_mul_div(x, y, denominator):
    y = min(y, denominator)
    down = safe_mul_div_cast(x, y, denominator, Rounding.DOWN, IntType.U128)
    assert down == mul_div(x, y, denominator, Rounding.DOWN)
    up = safe_mul_div_cast(x, y, denominator, Rounding.UP, IntType.U128)
    assert down <= up <= down + 1


def test_mul_div_cast_zero_denominator():
    with pytest.raises(LBError) as info:
        safe_mul_div_cast(1, 1, 0, Rounding.DOWN, IntType.U128)
    assert info.value.code is ErrorCode.MATH_OVERFLOW


def test_mul_div_cast_too_wide_for_u64():
    with pytest.raises(LBError) as info:
        safe_mul_div_cast(U64_MAX, U64_MAX, 1, Rounding.DOWN, IntType.U64)
    assert info.value.code is ErrorCode.TYPE_CAST_FAILED


@given(
    st.integers(0, U64_MAX),
    st.integers(0, U64_MAX),
    st.integers(1, U64_MAX),
)
def test_u64_mul_div_floor(x, y, denominator):
    y = min(y, denominator)
    result = safe_mul_div_cast_from_u64_to_u64(x, y, denominator)
    assert result <= x
    assert result * denominator <= x * y < (result + 1) * denominator


def test_u64_mul_div_zero_denominator():
    with pytest.raises(LBError) as info:
        safe_mul_div_cast_from_u64_to_u64(5, 5, 0)
    assert info.value.code is ErrorCode.MATH_OVERFLOW


def test_u64_mul_div_result_too_large():
    with pytest.raises(LBError) as info:
        safe_mul_div_cast_from_u64_to_u64(U64_MAX, U64_MAX, 1)
    assert info.value.code is ErrorCode.TYPE_CAST_FAILED


def test_u64_mul_div_rejects_out_of_range_input():
    with pytest.raises(ValueError):
        safe_mul_div_cast_from_u64_to_u64(-1, 1, 1)


@given(
    st.integers(0, U64_MAX),
    st.integers(0, U256_MAX >> 64),
    st.integers(1, U256_MAX >> 64),
)
def test_u256_mul_div_floor(x, y, denominator):
    y = min(y, denominator)
    result = safe_mul_div_cast_from_u256_to_u64(x, y, denominator)
    assert result <= x
    assert result * denominator <= x * y < (result + 1) * denominator


def test_u256_mul_div_overflow():
    with pytest.raises(LBError) as info:
        safe_mul_div_cast_from_u256_to_u64(2, U256_MAX, 1)
    assert info.value.code is ErrorCode.MATH_OVERFLOW


def test_u256_mul_div_zero_denominator():
    with pytest.raises(LBError) as info:
        safe_mul_div_cast_from_u256_to_u64(2, 3, 0)
    assert info.value.code is ErrorCode.MATH_OVERFLOW


@given(st.integers(0, U64_MAX))
def test_mul_shr_by_one_is_identity(x):
    assert safe_mul_shr_cast(x, ONE, 64, Rounding.DOWN, IntType.U64) == x


@given(st.integers(0, U64_MAX))
def test_shl_div_by_one_is_identity(x):
    assert safe_shl_div_cast(x, ONE, 64, Rounding.UP, IntType.U64) == x


def test_shift_offset_too_large():
    with pytest.raises(LBError) as info:
        safe_mul_shr_cast(1, 1, 128, Rounding.DOWN, IntType.U128)
    assert info.value.code is ErrorCode.MATH_OVERFLOW
    with pytest.raises(LBError) as info:
        safe_shl_div_cast(1, 1, 200, Rounding.DOWN, IntType.U128)
    assert info.value.code is ErrorCode.MATH_OVERFLOW