"""Error kinds of the pool program and the exception that carries them."""

from __future__ import annotations

from enum import Enum

ERROR_CODE_OFFSET = 6000


class PoolError(Enum):
    """Error kinds; each value is the error's message."""

    MATH_OVERFLOW = "Math operation overflow"
    INVALID_FEE = "Invalid fee setup"
    EXCEEDED_SLIPPAGE = "Exceeded slippage tolerance"
    POOL_DISABLED = "Pool disabled"
    EXCEED_MAX_FEE_BPS = "Exceeded max fee bps"
    INVALID_ADMIN = "Invalid admin"
    AMOUNT_IS_ZERO = "Amount is zero"
    TYPE_CAST_FAILED = "Type cast error"
    UNABLE_TO_MODIFY_ACTIVATION_POINT = "Unable to modify activation point"
    INVALID_AUTHORITY_TO_CREATE_THE_POOL = "Invalid authority to create the pool"
    INVALID_ACTIVATION_TYPE = "Invalid activation type"
    INVALID_ACTIVATION_POINT = "Invalid activation point"
    INVALID_QUOTE_MINT = "Quote token must be SOL,USDC"
    INVALID_FEE_CURVE = "Invalid fee curve"
    INVALID_PRICE_RANGE = "Invalid Price Range"
    PRICE_RANGE_VIOLATION = "Trade is over price range"
    INVALID_PARAMETERS = "Invalid parameters"
    INVALID_COLLECT_FEE_MODE = "Invalid collect fee mode"
    INVALID_INPUT = "Invalid input"
    CANNOT_CREATE_TOKEN_BADGE_ON_SUPPORTED_MINT = (
        "Cannot create token badge on supported mint"
    )
    INVALID_TOKEN_BADGE = "Invalid token badge"
    INVALID_MINIMUM_LIQUIDITY = "Invalid minimum liquidity"
    INVALID_VESTING_INFO = "Invalid vesting information"
    INSUFFICIENT_LIQUIDITY = "Insufficient liquidity"
    INVALID_VESTING_ACCOUNT = "Invalid vesting account"
    INVALID_POOL_STATUS = "Invalid pool status"
    UNSUPPORT_NATIVE_MINT_TOKEN2022 = "Unsupported native mint token2022"
    INVALID_REWARD_INDEX = "Invalid reward index"
    INVALID_REWARD_DURATION = "Invalid reward duration"
    REWARD_INITIALIZED = "Reward already initialized"
    REWARD_UNINITIALIZED = "Reward not initialized"
    INVALID_REWARD_VAULT = "Invalid reward vault"
    MUST_WITHDRAWN_INELIGIBLE_REWARD = "Must withdraw ineligible reward"
    IDENTICAL_REWARD_DURATION = "Reward duration is the same"
    REWARD_CAMPAIGN_IN_PROGRESS = "Reward campaign in progress"
    IDENTICAL_FUNDER = "Identical funder"
    INVALID_FUNDER = "Invalid funder"
    REWARD_NOT_ENDED = "Reward not ended"
    FEE_INVERSE_IS_INCORRECT = "Fee inverse is incorrect"
    POSITION_IS_NOT_EMPTY = "Position is not empty"
    INVALID_POOL_CREATOR_AUTHORITY = "Invalid pool creator authority"
    INVALID_CONFIG_TYPE = "Invalid config type"
    INVALID_POOL_CREATOR = "Invalid pool creator"
    REWARD_VAULT_FROZEN_SKIP_REQUIRED = (
        "Reward vault is frozen, must skip reward to proceed"
    )
    INVALID_SPLIT_POSITION_PARAMETERS = "Invalid parameters for split position"
    UNSUPPORT_POSITION_HAS_VESTING_LOCK = "Unsupported split position has vesting lock"
    SAME_POSITION = "Same position"

    @property
    def message(self) -> str:
        return self.value

    @property
    def code(self) -> int:
        """Numeric error code, counted from the custom-error offset."""
        return _CODES[self]


_CODES = {error: ERROR_CODE_OFFSET + position for position, error in enumerate(PoolError)}


class PoolException(Exception):
    """Raised when a pool operation fails with a PoolError."""

    def __init__(self, error: PoolError) -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def code(self) -> int:
        return self.error.code


def require(condition: bool, error: PoolError) -> None:
    """Raise PoolException(error) unless condition holds."""
    if not condition:
        raise PoolException(error)