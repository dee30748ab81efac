import pytest

from cpamm.errors import PoolError, PoolException
from cpamm.split import SplitPositionParameters

FIELDS = [
    "unlocked_liquidity_percentage",
    "permanent_locked_liquidity_percentage",
    "fee_a_percentage",
    "fee_b_percentage",
    "reward_0_percentage",
    "reward_1_percentage",
]


def _expect_invalid(params):
    with pytest.raises(PoolException) as info:
        params.validate()
    assert info.value.error is PoolError.INVALID_SPLIT_POSITION_PARAMETERS


def test_all_zero_is_invalid():
    _expect_invalid(SplitPositionParameters())


@pytest.mark.parametrize("name", FIELDS)
def test_single_share_is_valid(name):
    params = SplitPositionParameters(**{name: 100})
    params.validate()
    assert getattr(params, name) == 100


@pytest.mark.parametrize("name", FIELDS)
def test_share_above_hundred_is_invalid(name):
    _expect_invalid(SplitPositionParameters(**{name: 101}))


def test_over_limit_fails_even_with_other_valid_shares():
    _expect_invalid(
        SplitPositionParameters(unlocked_liquidity_percentage=50, reward_1_percentage=200)
    )


def test_error_message():
    with pytest.raises(PoolException, match="Invalid parameters for split position"):
        SplitPositionParameters().validate()


def test_default_padding():
    assert SplitPositionParameters(fee_a_percentage=1).padding == bytes(16)


def test_bad_padding_length():
    with pytest.raises(ValueError):
        SplitPositionParameters(padding=b"\x00" * 3)


@pytest.mark.parametrize("value", [-1, 256])
def test_out_of_byte_range(value):
    with pytest.raises(ValueError):
        SplitPositionParameters(fee_b_percentage=value)