"""Vesting schedule parameters for locking position liquidity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import PoolError, PoolException, require

_U16_MAX = (1 << 16) - 1
_U64_MAX = (1 << 64) - 1
_U128_MAX = (1 << 128) - 1


def _check_range(value: int, maximum: int, name: str) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}")


def _bounded(value: int, maximum: int) -> int:
    if value > maximum:
        raise PoolException(PoolError.MATH_OVERFLOW)
    return value


@dataclass(frozen=True)
class VestingParameters:
    """A cliff release followed by equal periodic releases of liquidity.

    A cliff point of None means vesting starts at the current point.
    """

    cliff_point: Optional[int] = None
    period_frequency: int = 0
    cliff_unlock_liquidity: int = 0
    liquidity_per_period: int = 0
    number_of_period: int = 0

    def __post_init__(self) -> None:
        if self.cliff_point is not None:
            _check_range(self.cliff_point, _U64_MAX, "cliff_point")
        _check_range(self.period_frequency, _U64_MAX, "period_frequency")
        _check_range(self.cliff_unlock_liquidity, _U128_MAX, "cliff_unlock_liquidity")
        _check_range(self.liquidity_per_period, _U128_MAX, "liquidity_per_period")
        _check_range(self.number_of_period, _U16_MAX, "number_of_period")

    def get_cliff_point(self, current_point: int) -> int:
        """The cliff point, or current_point when none is set."""
        return current_point if self.cliff_point is None else self.cliff_point

    def get_total_lock_amount(self) -> int:
        """All liquidity the schedule locks; raises on u128 overflow."""
        periodic = _bounded(self.liquidity_per_period * self.number_of_period, _U128_MAX)
        return _bounded(self.cliff_unlock_liquidity + periodic, _U128_MAX)

    def validate(self, current_point: int, max_vesting_duration: int) -> None:
        """Raise PoolException unless the schedule is well formed and short enough."""
        cliff_point = self.get_cliff_point(current_point)

        require(cliff_point >= current_point, PoolError.INVALID_VESTING_INFO)

        if cliff_point == current_point:
            require(self.number_of_period > 0, PoolError.INVALID_VESTING_INFO)

        if self.number_of_period > 0:
            require(
                self.period_frequency > 0 and self.liquidity_per_period > 0,
                PoolError.INVALID_VESTING_INFO,
            )

        periods_duration = _bounded(
            self.period_frequency * self.number_of_period, _U64_MAX
        )
        vesting_duration = _bounded(cliff_point - current_point + periods_duration, _U64_MAX)

        require(
            vesting_duration <= max_vesting_duration, PoolError.INVALID_VESTING_INFO
        )
        require(self.get_total_lock_amount() > 0, PoolError.INVALID_VESTING_INFO)