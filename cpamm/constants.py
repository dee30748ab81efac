"""Protocol constants: price bounds, fee limits, durations, seeds and keys."""

from __future__ import annotations

from .pubkey import Pubkey, parse_pubkey

MIN_SQRT_PRICE = 4295048016
MAX_SQRT_PRICE = 79226673521066979257578248091

LIQUIDITY_SCALE = 128
REWARD_RATE_SCALE = 64
TOTAL_REWARD_SCALE = 192

ONE_Q64 = 1 << 64

BIN_STEP_BPS_DEFAULT = 1
# bin_step << 64 / BASIS_POINT_MAX
BIN_STEP_BPS_U128_DEFAULT = 1844674407370955

BASIS_POINT_MAX = 10_000
U24_MAX = 0xFFFFFF

NUM_REWARDS = 2
REWARD_INDEX_0 = 0
REWARD_INDEX_1 = 1

MIN_REWARD_DURATION = 24 * 60 * 60
MAX_REWARD_DURATION = 31_536_000

# Activation (one slot is about 400 ms)
SLOT_BUFFER = 9000
TIME_BUFFER = 3600
MAX_ACTIVATION_SLOT_DURATION = SLOT_BUFFER * 24 * 31
MAX_ACTIVATION_TIME_DURATION = TIME_BUFFER * 24 * 31
MAX_VESTING_SLOT_DURATION = SLOT_BUFFER * 24 * 365 * 10
MAX_VESTING_TIME_DURATION = TIME_BUFFER * 24 * 365 * 10
FIVE_MINUTES_SLOT_BUFFER = SLOT_BUFFER // 12
FIVE_MINUTES_TIME_BUFFER = TIME_BUFFER // 12
MAX_FEE_CURVE_TIME_DURATION = 3600 * 24
MAX_FEE_CURVE_SLOT_DURATION = 9000 * 24
MAX_HIGH_TAX_TIME_DURATION = TIME_BUFFER // 6
MAX_HIGH_TAX_SLOT_DURATION = SLOT_BUFFER // 6

# Fees
FEE_DENOMINATOR = 1_000_000_000
MAX_FEE_BPS = 5000
MAX_FEE_NUMERATOR = 500_000_000
MAX_BASIS_POINT = 10_000
MIN_FEE_BPS = 1
MIN_FEE_NUMERATOR = 100_000
PROTOCOL_FEE_PERCENT = 20
HOST_FEE_PERCENT = 20
PARTNER_FEE_PERCENT = 0

assert LIQUIDITY_SCALE + REWARD_RATE_SCALE == TOTAL_REWARD_SCALE
assert MAX_FEE_BPS * FEE_DENOMINATOR // MAX_BASIS_POINT == MAX_FEE_NUMERATOR
assert MIN_FEE_BPS * FEE_DENOMINATOR // MAX_BASIS_POINT == MIN_FEE_NUMERATOR
assert PROTOCOL_FEE_PERCENT <= 50
assert HOST_FEE_PERCENT <= 50
assert PARTNER_FEE_PERCENT <= 50

# Account seeds
CONFIG_PREFIX = b"config"
CUSTOMIZABLE_POOL_PREFIX = b"cpool"
POOL_PREFIX = b"pool"
TOKEN_VAULT_PREFIX = b"token_vault"
POOL_AUTHORITY_PREFIX = b"pool_authority"
POSITION_PREFIX = b"position"
POSITION_NFT_ACCOUNT_PREFIX = b"position_nft_account"
TOKEN_BADGE_PREFIX = b"token_badge"
REWARD_VAULT_PREFIX = b"reward_vault"
CLAIM_FEE_OPERATOR_PREFIX = b"cf_operator"

TREASURY = parse_pubkey("4EWqcx3aNZmMetCnxwLYwyNjan6XLGp3Ca2W316vrSjv")

SOL_MINT = parse_pubkey("So11111111111111111111111111111111111111112")
USDC_MINT = parse_pubkey("EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v")
DEFAULT_QUOTE_MINTS = (SOL_MINT, USDC_MINT)

ADMINS = (
    parse_pubkey("5unTfT2kssBuNvHPY6LbJfJpLqEcdMxGYLWHwShaeTLi"),
    parse_pubkey("DHLXnJdACTY83yKwnUkeoDjqi4QBbsYGa1v8tJL76ViX"),
)


def is_admin(admin: Pubkey) -> bool:
    """True if the key is one of the predefined admins."""
    return admin in ADMINS