"""Canonical ordering of mint keys used in pool address seeds."""

from __future__ import annotations

from .pubkey import Pubkey


def max_key(left: Pubkey, right: Pubkey) -> bytes:
    """Bytes of the greater of two keys."""
    return max(left, right).to_bytes()


def min_key(left: Pubkey, right: Pubkey) -> bytes:
    """Bytes of the lesser of two keys."""
    return min(left, right).to_bytes()