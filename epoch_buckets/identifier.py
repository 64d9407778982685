# ==================================================
# epoch_buckets/identifier.py
# ==================================================
from __future__ import annotations
from dataclasses import dataclass

import base58

from .const import IDENTIFIER_SIZE

_ALPHABET = base58.BITCOIN_ALPHABET.decode("ascii")


class IdentifierError(ValueError):
    """Raised when a string is not base58 for exactly IDENTIFIER_SIZE bytes."""


@dataclass(frozen=True, order=True)
class Identifier:
    """Opaque 32-byte public key; compares and hashes on the raw bytes."""
    raw: bytes

    def __post_init__(self):
        if not isinstance(self.raw, bytes) or len(self.raw) != IDENTIFIER_SIZE:
            raise IdentifierError(
                f"identifier must be {IDENTIFIER_SIZE} bytes, "
                f"got {len(self.raw) if isinstance(self.raw, bytes) else type(self.raw).__name__}")

    # ------------------------------------------------------------------
    @classmethod
    def from_string(cls, s: str) -> "Identifier":
        if not isinstance(s, str):
            raise IdentifierError("wrong type")
        # b58decode strips trailing whitespace itself, so check the alphabet first
        if any(c not in _ALPHABET for c in s):
            raise IdentifierError(f"invalid base58 string {s!r}")
        raw = base58.b58decode(s)
        if len(raw) != IDENTIFIER_SIZE:
            raise IdentifierError(
                f"invalid identifier {s!r}: decoded to {len(raw)} bytes, "
                f"expected {IDENTIFIER_SIZE}")
        return cls(raw)

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return base58.b58encode(self.raw).decode("ascii")


def parse_identifier(s: str) -> Identifier:
    return Identifier.from_string(s)
