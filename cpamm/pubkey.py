"""32-byte public keys and their base58 text form."""

from __future__ import annotations

from dataclasses import dataclass

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: position for position, char in enumerate(_ALPHABET)}

PUBKEY_LENGTH = 32


def b58encode(data: bytes) -> str:
    """Encode bytes as base58 text using the Bitcoin alphabet."""
    data = bytes(data)
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_ALPHABET[remainder])
    return "1" * leading_zeros + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode base58 text into bytes; raise ValueError on a bad character."""
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    leading_ones = len(text) - len(text.lstrip("1"))
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * leading_ones + body


@dataclass(frozen=True, order=True)
class Pubkey:
    """A 32-byte public key, ordered by its bytes."""

    data: bytes = b"\x00" * PUBKEY_LENGTH

    def __post_init__(self) -> None:
        value = bytes(self.data)
        if len(value) != PUBKEY_LENGTH:
            raise ValueError(
                f"public key must be {PUBKEY_LENGTH} bytes, got {len(value)}"
            )
        object.__setattr__(self, "data", value)

    def to_bytes(self) -> bytes:
        return self.data

    def is_default(self) -> bool:
        return self.data == b"\x00" * PUBKEY_LENGTH

    def __str__(self) -> str:
        return b58encode(self.data)

    def __repr__(self) -> str:
        return f"Pubkey({b58encode(self.data)!r})"


DEFAULT_PUBKEY = Pubkey()


def parse_pubkey(text: str) -> Pubkey:
    """Parse a base58 public key; raise ValueError if it is not 32 bytes."""
    return Pubkey(b58decode(text))