"""Parameters for splitting one position's holdings into another."""

from __future__ import annotations

from dataclasses import dataclass, fields

from .errors import PoolError, require

PADDING_LENGTH = 16
_PERCENT_FIELDS = (
    "unlocked_liquidity_percentage",
    "permanent_locked_liquidity_percentage",
    "fee_a_percentage",
    "fee_b_percentage",
    "reward_0_percentage",
    "reward_1_percentage",
)


@dataclass(frozen=True)
class SplitPositionParameters:
    """Percentages of each holding to move to the second position."""

    unlocked_liquidity_percentage: int = 0
    permanent_locked_liquidity_percentage: int = 0
    fee_a_percentage: int = 0
    fee_b_percentage: int = 0
    reward_0_percentage: int = 0
    reward_1_percentage: int = 0
    padding: bytes = bytes(PADDING_LENGTH)

    def __post_init__(self) -> None:
        for field in fields(self):
            if field.name in _PERCENT_FIELDS:
                value = getattr(self, field.name)
                if not 0 <= value <= 0xFF:
                    raise ValueError(f"{field.name} must fit in an unsigned byte")
        padding = bytes(self.padding)
        if len(padding) != PADDING_LENGTH:
            raise ValueError(f"padding must be {PADDING_LENGTH} bytes")
        object.__setattr__(self, "padding", padding)

    def _percentages(self) -> list[int]:
        return [getattr(self, name) for name in _PERCENT_FIELDS]

    def validate(self) -> None:
        """Raise PoolException unless every share is at most 100 and one is non-zero."""
        percentages = self._percentages()
        for value in percentages:
            require(value <= 100, PoolError.INVALID_SPLIT_POSITION_PARAMETERS)
        require(
            any(value > 0 for value in percentages),
            PoolError.INVALID_SPLIT_POSITION_PARAMETERS,
        )