"""Events that the pool program records when its state changes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .pubkey import Pubkey


@dataclass(frozen=True)
class EvtCloseConfig:
    """A config account was closed."""

    config: Pubkey
    admin: Pubkey


@dataclass(frozen=True)
class EvtCreateDynamicConfig:
    """A dynamic config was created."""

    config: Pubkey
    pool_creator_authority: Pubkey
    index: int


@dataclass(frozen=True)
class EvtCreateTokenBadge:
    """A token badge was created for a mint."""

    token_mint: Pubkey


@dataclass(frozen=True)
class EvtCreateClaimFeeOperator:
    """A claim-fee operator was created."""

    operator: Pubkey


@dataclass(frozen=True)
class EvtCloseClaimFeeOperator:
    """A claim-fee operator was closed."""

    claim_fee_operator: Pubkey
    operator: Pubkey


@dataclass(frozen=True)
class EvtClaimPositionFee:
    """Fees were claimed from a position."""

    pool: Pubkey
    position: Pubkey
    owner: Pubkey
    fee_a_claimed: int
    fee_b_claimed: int


@dataclass(frozen=True)
class EvtCreatePosition:
    """A position was created."""

    pool: Pubkey
    owner: Pubkey
    position: Pubkey
    position_nft_mint: Pubkey


@dataclass(frozen=True)
class EvtClosePosition:
    """A position was closed."""

    pool: Pubkey
    owner: Pubkey
    position: Pubkey
    position_nft_mint: Pubkey


@dataclass(frozen=True)
class EvtLockPosition:
    """Liquidity of a position was locked under a vesting schedule."""

    pool: Pubkey
    position: Pubkey
    owner: Pubkey
    vesting: Pubkey
    cliff_point: int
    period_frequency: int
    cliff_unlock_liquidity: int
    liquidity_per_period: int
    number_of_period: int


@dataclass(frozen=True)
class EvtPermanentLockPosition:
    """Liquidity of a position was locked permanently."""

    pool: Pubkey
    position: Pubkey
    lock_liquidity_amount: int
    total_permanent_locked_liquidity: int


@dataclass(frozen=True)
class EvtClaimProtocolFee:
    """Protocol fees were claimed from a pool."""

    pool: Pubkey
    token_a_amount: int
    token_b_amount: int


@dataclass(frozen=True)
class EvtClaimPartnerFee:
    """Partner fees were claimed from a pool."""

    pool: Pubkey
    token_a_amount: int
    token_b_amount: int


@dataclass(frozen=True)
class EvtSetPoolStatus:
    """A pool's status was changed."""

    pool: Pubkey
    status: int


@dataclass(frozen=True)
class EvtInitializeReward:
    """A farm reward was initialized on a pool."""

    pool: Pubkey
    reward_mint: Pubkey
    funder: Pubkey
    creator: Pubkey
    reward_index: int
    reward_duration: int


@dataclass(frozen=True)
class EvtFundReward:
    """A farm reward was funded."""

    pool: Pubkey
    funder: Pubkey
    mint_reward: Pubkey
    reward_index: int
    amount: int
    transfer_fee_excluded_amount_in: int
    reward_duration_end: int
    pre_reward_rate: int
    post_reward_rate: int


@dataclass(frozen=True)
class EvtClaimReward:
    """A position owner claimed a farm reward."""

    pool: Pubkey
    position: Pubkey
    owner: Pubkey
    mint_reward: Pubkey
    reward_index: int
    total_reward: int


@dataclass(frozen=True)
class EvtUpdateRewardDuration:
    """A farm reward's duration was changed."""

    pool: Pubkey
    reward_index: int
    old_reward_duration: int
    new_reward_duration: int


@dataclass(frozen=True)
class EvtUpdateRewardFunder:
    """A farm reward's funder was changed."""

    pool: Pubkey
    reward_index: int
    old_funder: Pubkey
    new_funder: Pubkey


@dataclass(frozen=True)
class EvtWithdrawIneligibleReward:
    """Ineligible reward was withdrawn from a pool."""

    pool: Pubkey
    reward_mint: Pubkey
    amount: int


EVENT_TYPES = (
    EvtCloseConfig,
    EvtCreateDynamicConfig,
    EvtCreateTokenBadge,
    EvtCreateClaimFeeOperator,
    EvtCloseClaimFeeOperator,
    EvtClaimPositionFee,
    EvtCreatePosition,
    EvtClosePosition,
    EvtLockPosition,
    EvtPermanentLockPosition,
    EvtClaimProtocolFee,
    EvtClaimPartnerFee,
    EvtSetPoolStatus,
    EvtInitializeReward,
    EvtFundReward,
    EvtClaimReward,
    EvtUpdateRewardDuration,
    EvtUpdateRewardFunder,
    EvtWithdrawIneligibleReward,
)


def event_name(event: Union[object, type]) -> str:
    """Name of an event instance or event class; TypeError for anything else."""
    cls = event if isinstance(event, type) else type(event)
    if cls not in EVENT_TYPES:
        raise TypeError(f"{cls.__name__} is not a pool event")
    return cls.__name__