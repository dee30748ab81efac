"""Checks made before a config or a pool is created."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_QUOTE_MINTS
from .errors import PoolError, require
from .pubkey import Pubkey


@dataclass(frozen=True)
class DynamicConfigParameters:
    """Parameters of a dynamic config: only who may create pools from it."""

    pool_creator_authority: Pubkey

    def validate(self) -> None:
        """Raise PoolException if the creator authority is the default key."""
        require(
            not self.pool_creator_authority.is_default(),
            PoolError.INVALID_POOL_CREATOR_AUTHORITY,
        )


def is_whitelisted_quote_token(mint: Pubkey) -> bool:
    """True if the mint is one of the supported quote mints."""
    return mint in DEFAULT_QUOTE_MINTS


def validate_quote_token(
    token_mint_a: Pubkey, token_mint_b: Pubkey, has_alpha_vault: bool
) -> None:
    """Check that token a is the base token and, with an alpha vault, b is a quote mint.

    Token a must never be a whitelisted quote token. If token b is not a
    whitelisted quote token the pool may not be linked to an alpha vault.
    """
    require(not is_whitelisted_quote_token(token_mint_a), PoolError.INVALID_QUOTE_MINT)
    if not is_whitelisted_quote_token(token_mint_b):
        require(not has_alpha_vault, PoolError.INVALID_QUOTE_MINT)