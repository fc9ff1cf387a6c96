import pytest
from hypothesis import given
from hypothesis import strategies as st

from dlmmath.errors import ErrorCode, LBError
from dlmmath.weight_to_amounts import (
    to_amount_ask_side,
    to_amount_both_side,
    to_amount_bid_side,
)

U64_MAX = (1 << 64) - 1

weight_lists = st.lists(st.integers(1, 0xFFFF), min_size=1, max_size=20)


@given(weight_lists, st.integers(0, U64_MAX))
def test_bid_side_spends_at_most_amount(raw_weights, amount):
    weights = list(enumerate(raw_weights))
    active_id = len(weights) - 1
    amounts = to_amount_bid_side(active_id, amount, weights)
    total = sum(value for _, value in amounts)
    assert [bin_id for bin_id, _ in amounts] == [bin_id for bin_id, _ in weights]
    assert amount - len(weights) <= total <= amount


def test_bid_side_skips_bins_above_active():
    weights = [(bin_id, 5) for bin_id in range(-3, 4)]
    amounts = to_amount_bid_side(0, 1_000_000, weights)
    assert all(value == 0 for bin_id, value in amounts if bin_id > 0)
    below = {value for bin_id, value in amounts if bin_id <= 0}
    assert len(below) == 1 and below.pop() > 0


def test_bid_side_without_bid_bins_is_invalid():
    with pytest.raises(LBError) as info:
        to_amount_bid_side(0, 100, [(1, 1), (2, 1)])
    assert info.value.code is ErrorCode.INVALID_INPUT


@given(weight_lists, st.integers(0, U64_MAX), st.integers(1, 100))
def test_ask_side_spends_at_most_amount(raw_weights, amount, bin_step):
    weights = list(enumerate(raw_weights))
    amounts = to_amount_ask_side(0, amount, bin_step, weights)
    total = sum(value for _, value in amounts)
    assert amount - len(weights) <= total <= amount


def test_ask_side_equal_weights_give_less_at_higher_price():
    weights = [(bin_id, 1) for bin_id in range(-2, 10)]
    amounts = to_amount_ask_side(0, 10**12, 50, weights)
    assert all(value == 0 for bin_id, value in amounts if bin_id < 0)
    ask = [value for bin_id, value in amounts if bin_id >= 0]
    assert all(lower >= upper for lower, upper in zip(ask, ask[1:]))
    assert ask[0] > ask[-1]


def test_ask_side_without_ask_bins_is_invalid():
    with pytest.raises(LBError) as info:
        to_amount_ask_side(5, 100, 10, [(1, 1), (2, 1)])
    assert info.value.code is ErrorCode.INVALID_INPUT


def test_both_side_with_active_bin():
    weights = [(bin_id, 10) for bin_id in range(-3, 4)]
    amounts = to_amount_both_side(0, 10, 0, 0, 1_000_000, 1_000_000, weights)
    assert [bin_id for bin_id, _, _ in amounts] == [bin_id for bin_id, _ in weights]
    assert all(x == 0 and y > 0 for bin_id, x, y in amounts if bin_id < 0)
    assert all(y == 0 and x > 0 for bin_id, x, y in amounts if bin_id > 0)
    active = [(x, y) for bin_id, x, y in amounts if bin_id == 0]
    assert len(active) == 1 and active[0][0] > 0 and active[0][1] > 0
    assert sum(x for _, x, _ in amounts) <= 1_000_000
    assert sum(y for _, _, y in amounts) <= 1_000_000


def test_both_side_respects_active_bin_composition():
    weights = [(bin_id, 10) for bin_id in range(-3, 4)]
    only_y = to_amount_both_side(0, 10, 0, 500, 10**9, 10**9, weights)
    only_x = to_amount_both_side(0, 10, 500, 0, 10**9, 10**9, weights)
    active_only_y = next((x, y) for bin_id, x, y in only_y if bin_id == 0)
    active_only_x = next((x, y) for bin_id, x, y in only_x if bin_id == 0)
    assert active_only_y[0] == 0 and active_only_y[1] > 0
    assert active_only_x[1] == 0 and active_only_x[0] > 0


def test_both_side_without_active_bin():
    weights = [(-2, 1), (-1, 1), (1, 1), (2, 1)]
    amounts = to_amount_both_side(0, 10, 0, 0, 10**9, 10**9, weights)
    assert [bin_id for bin_id, _, _ in amounts] == [-2, -1, 1, 2]
    assert sum(x for _, x, _ in amounts) <= 10**9
    assert sum(y for _, _, y in amounts) <= 10**9


def test_both_side_without_bid_weight_fails():
    with pytest.raises(LBError) as info:
        to_amount_both_side(0, 10, 0, 0, 100, 100, [(1, 1), (2, 1)])
    assert info.value.code is ErrorCode.MATH_OVERFLOW


def test_rejects_out_of_range_weight():
    with pytest.raises(ValueError):
        to_amount_bid_side(0, 100, [(0, 70_000)])