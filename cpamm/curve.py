"""Concentrated-liquidity curve math over Q64.64 square-root prices."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .errors import PoolError, PoolException

RESOLUTION = 64

U64_MAX = (1 << 64) - 1
U128_MAX = (1 << 128) - 1
U256_MAX = (1 << 256) - 1


class Rounding(Enum):
    UP = "up"
    DOWN = "down"


def _check_uint(value: int, bits: int, name: str) -> int:
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must fit in an unsigned {bits}-bit integer")
    return value


def _u256(value: int) -> int:
    if value > U256_MAX:
        raise PoolException(PoolError.MATH_OVERFLOW)
    return value


def _to_u128(value: int) -> int:
    if value > U128_MAX:
        raise PoolException(PoolError.TYPE_CAST_FAILED)
    return value


def _to_u64(value: int) -> int:
    if value > U64_MAX:
        raise PoolException(PoolError.MATH_OVERFLOW)
    return value


def _price_delta(lower: int, upper: int) -> int:
    _check_uint(lower, 128, "lower sqrt price")
    _check_uint(upper, 128, "upper sqrt price")
    if upper < lower:
        raise ValueError("lower sqrt price exceeds upper sqrt price")
    return upper - lower


def mul_div_u256(
    x: int, y: int, denominator: int, rounding: Rounding
) -> Optional[int]:
    """(x * y) / denominator rounded as asked; None on zero divisor or overflow."""
    if denominator == 0:
        return None
    quotient, remainder = divmod(x * y, denominator)
    if rounding is Rounding.UP and remainder:
        quotient += 1
    if quotient > U256_MAX:
        return None
    return quotient


def get_initialize_amounts(
    sqrt_min_price: int, sqrt_max_price: int, sqrt_price: int, liquidity: int
) -> tuple[int, int]:
    """Token amounts (base, quote) needed to seed a pool, both rounded up."""
    amount_a = get_delta_amount_a_unsigned(
        sqrt_price, sqrt_max_price, liquidity, Rounding.UP
    )
    amount_b = get_delta_amount_b_unsigned(
        sqrt_min_price, sqrt_price, liquidity, Rounding.UP
    )
    return amount_a, amount_b


def get_delta_amount_a_unsigned(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, rounding: Rounding
) -> int:
    """Δa = L * (√P_upper - √P_lower) / (√P_upper * √P_lower), as a u64."""
    result = get_delta_amount_a_unsigned_unchecked(
        lower_sqrt_price, upper_sqrt_price, liquidity, rounding
    )
    return _to_u64(result)


def get_delta_amount_a_unsigned_unchecked(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, rounding: Rounding
) -> int:
    """Δa without the u64 bound check."""
    delta = _price_delta(lower_sqrt_price, upper_sqrt_price)
    _check_uint(liquidity, 128, "liquidity")
    denominator = _u256(lower_sqrt_price * upper_sqrt_price)
    if denominator == 0:
        raise ValueError("sqrt prices must be positive")
    result = mul_div_u256(liquidity, delta, denominator, rounding)
    if result is None:
        raise PoolException(PoolError.MATH_OVERFLOW)
    return result


def get_delta_amount_b_unsigned(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, rounding: Rounding
) -> int:
    """Δb = L * (√P_upper - √P_lower), as a u64."""
    result = get_delta_amount_b_unsigned_unchecked(
        lower_sqrt_price, upper_sqrt_price, liquidity, rounding
    )
    return _to_u64(result)


def get_delta_amount_b_unsigned_unchecked(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, rounding: Rounding
) -> int:
    """Δb without the u64 bound check."""
    delta = _price_delta(lower_sqrt_price, upper_sqrt_price)
    _check_uint(liquidity, 128, "liquidity")
    product = _u256(liquidity * delta)
    shift = RESOLUTION * 2
    if rounding is Rounding.UP:
        return -(-product // (1 << shift))
    return product >> shift


def get_next_sqrt_price_from_input(
    sqrt_price: int, liquidity: int, amount_in: int, a_for_b: bool
) -> int:
    """Next sqrt price after an input of token a (a_for_b) or token b."""
    if sqrt_price <= 0:
        raise ValueError("sqrt price must be positive")
    if liquidity <= 0:
        raise ValueError("liquidity must be positive")
    if a_for_b:
        return get_next_sqrt_price_from_amount_a_rounding_up(
            sqrt_price, liquidity, amount_in
        )
    return get_next_sqrt_price_from_amount_b_rounding_down(
        sqrt_price, liquidity, amount_in
    )


def get_next_sqrt_price_from_amount_a_rounding_up(
    sqrt_price: int, liquidity: int, amount: int
) -> int:
    """√P' = √P * L / (L + Δx * √P), rounded up."""
    _check_uint(sqrt_price, 128, "sqrt price")
    _check_uint(liquidity, 128, "liquidity")
    _check_uint(amount, 64, "amount")
    if amount == 0:
        return sqrt_price
    product = _u256(amount * sqrt_price)
    denominator = _u256(liquidity + product)
    result = mul_div_u256(liquidity, sqrt_price, denominator, Rounding.UP)
    if result is None:
        raise PoolException(PoolError.MATH_OVERFLOW)
    return _to_u128(result)


def get_next_sqrt_price_from_amount_b_rounding_down(
    sqrt_price: int, liquidity: int, amount: int
) -> int:
    """√P' = √P + Δy / L, rounded down."""
    _check_uint(sqrt_price, 128, "sqrt price")
    _check_uint(liquidity, 128, "liquidity")
    _check_uint(amount, 64, "amount")
    if liquidity == 0:
        raise PoolException(PoolError.MATH_OVERFLOW)
    quotient = _u256(amount << (RESOLUTION * 2)) // liquidity
    result = _u256(sqrt_price + quotient)
    return _to_u128(result)