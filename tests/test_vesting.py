import pytest

from cpamm.constants import MAX_VESTING_TIME_DURATION
from cpamm.errors import PoolError, PoolException
from cpamm.vesting import VestingParameters

U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1


def test_cliff_point_defaults_to_current():
    params = VestingParameters(period_frequency=1, liquidity_per_period=1, number_of_period=1)
    assert params.get_cliff_point(500) == 500


def test_cliff_point_explicit():
    params = VestingParameters(cliff_point=900, cliff_unlock_liquidity=1)
    assert params.get_cliff_point(500) == 900


def test_total_lock_amount_cliff_only():
    params = VestingParameters(cliff_point=10, cliff_unlock_liquidity=777)
    assert params.get_total_lock_amount() == 777


def test_total_lock_amount_single_period():
    params = VestingParameters(liquidity_per_period=7, number_of_period=1, period_frequency=1)
    assert params.get_total_lock_amount() == 7


def test_total_lock_amount_overflow():
    params = VestingParameters(liquidity_per_period=U128_MAX, number_of_period=2)
    with pytest.raises(PoolException) as info:
        params.get_total_lock_amount()
    assert info.value.error is PoolError.MATH_OVERFLOW


def test_total_lock_amount_add_overflow():
    params = VestingParameters(
        cliff_unlock_liquidity=U128_MAX, liquidity_per_period=1, number_of_period=1
    )
    with pytest.raises(PoolException) as info:
        params.get_total_lock_amount()
    assert info.value.error is PoolError.MATH_OVERFLOW


def _expect_invalid(params, current=100, maximum=MAX_VESTING_TIME_DURATION):
    with pytest.raises(PoolException) as info:
        params.validate(current, maximum)
    assert info.value.error is PoolError.INVALID_VESTING_INFO


def test_validate_cliff_in_past():
    _expect_invalid(VestingParameters(cliff_point=50, cliff_unlock_liquidity=1))


def test_validate_immediate_without_periods():
    _expect_invalid(VestingParameters(cliff_unlock_liquidity=1))


def test_validate_periods_need_frequency():
    _expect_invalid(
        VestingParameters(liquidity_per_period=1, number_of_period=3, period_frequency=0)
    )


def test_validate_periods_need_liquidity():
    _expect_invalid(
        VestingParameters(liquidity_per_period=0, number_of_period=3, period_frequency=10)
    )


def test_validate_zero_total():
    _expect_invalid(VestingParameters(cliff_point=200))


def test_validate_duration_boundary():
    current = 100
    maximum = 1000
    at_limit = VestingParameters(cliff_point=current + maximum, cliff_unlock_liquidity=1)
    at_limit.validate(current, maximum)
    assert at_limit.get_cliff_point(current) - current == maximum

    over = VestingParameters(cliff_point=current + maximum + 1, cliff_unlock_liquidity=1)
    _expect_invalid(over, current, maximum)


def test_validate_periods_too_long():
    params = VestingParameters(
        period_frequency=MAX_VESTING_TIME_DURATION, liquidity_per_period=1, number_of_period=2
    )
    _expect_invalid(params)


def test_validate_duration_overflow():
    params = VestingParameters(
        period_frequency=U64_MAX, liquidity_per_period=1, number_of_period=2
    )
    with pytest.raises(PoolException) as info:
        params.validate(0, U64_MAX)
    assert info.value.error is PoolError.MATH_OVERFLOW


def test_valid_schedule_passes_and_totals():
    params = VestingParameters(
        cliff_point=150,
        period_frequency=10,
        cliff_unlock_liquidity=0,
        liquidity_per_period=5,
        number_of_period=1,
    )
    params.validate(100, MAX_VESTING_TIME_DURATION)
    assert params.get_total_lock_amount() == 5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"number_of_period": 1 << 16},
        {"period_frequency": -1},
        {"cliff_unlock_liquidity": 1 << 128},
        {"cliff_point": 1 << 64},
    ],
)
def test_out_of_range_fields_rejected(kwargs):
    with pytest.raises(ValueError):
        VestingParameters(**kwargs)