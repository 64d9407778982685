# ==================================================
# epoch_buckets/hashers.py
# ==================================================
"""
Seeded streaming hashers.

Every family exposes the same three operations, ``new_with_seed(seed)``,
``write(data)`` and ``finish() -> int`` (unsigned 64-bit), plus ``copy()``
so a per-epoch prototype can be cloned once per identifier.
"""
from __future__ import annotations
import hashlib, struct

import blake3
import mmh3
import siphash24
import xxhash

from .const import DIGEST_FMT, SEED_MAX

KEY_SIZE = 32                                 # blake3 / blake2b key length
SIP_KEY_SIZE = 16                             # k0 || k1, both set to the seed


# -- seed helpers ------------------------------------------------------------
def check_seed(seed: int) -> int:
    if not 0 <= seed <= SEED_MAX:
        raise ValueError(f"seed must fit in 64 bits, got {seed}")
    return seed

def tiled_key(seed: int, size: int = KEY_SIZE) -> bytes:
    """Little-endian seed bytes repeated to fill a ``size``-byte key."""
    seed_bytes = struct.pack("<Q", check_seed(seed))
    return seed_bytes * (size // len(seed_bytes))

def _u64(digest: bytes) -> int:
    return struct.unpack_from(DIGEST_FMT, digest)[0]


# ----------------------------------------------------------------------------
class _StateHasher:
    """Wraps a hashlib-style object (update / digest / copy)."""
    name = None

    def __init__(self, state):
        self._state = state

    def write(self, data: bytes):
        self._state.update(data)

    def finish(self) -> int:
        return _u64(self._state.digest())

    def copy(self):
        return type(self)(self._state.copy())


class Blake3Hasher(_StateHasher):
    name = "blake3"

    @classmethod
    def new_with_seed(cls, seed: int) -> "Blake3Hasher":
        return cls(blake3.blake3(key=tiled_key(seed)))


class Blake2bHasher(_StateHasher):
    name = "blake2b"

    @classmethod
    def new_with_seed(cls, seed: int) -> "Blake2bHasher":
        return cls(hashlib.blake2b(key=tiled_key(seed), digest_size=8))


class Xxh64Hasher(_StateHasher):
    name = "xxh64"

    @classmethod
    def new_with_seed(cls, seed: int) -> "Xxh64Hasher":
        return cls(xxhash.xxh64(seed=check_seed(seed)))

    def finish(self) -> int:
        return self._state.intdigest()


class SipHash24Hasher(_StateHasher):
    name = "siphash24"

    @classmethod
    def new_with_seed(cls, seed: int) -> "SipHash24Hasher":
        return cls(siphash24.siphash24(key=tiled_key(seed, SIP_KEY_SIZE)))


class SipHash13Hasher(_StateHasher):
    name = "siphash13"

    @classmethod
    def new_with_seed(cls, seed: int) -> "SipHash13Hasher":
        return cls(siphash24.siphash13(key=tiled_key(seed, SIP_KEY_SIZE)))


class Murmur3Hasher:
    """x64 128-bit murmur3 truncated to its first 64 bits; the seed is u32."""
    name = "murmur3"

    def __init__(self, seed: int, buf: bytes = b""):
        self._seed = seed
        self._buf = bytearray(buf)

    @classmethod
    def new_with_seed(cls, seed: int) -> "Murmur3Hasher":
        return cls(check_seed(seed) & 0xFFFFFFFF)

    def write(self, data: bytes):
        self._buf += data

    def finish(self) -> int:
        return mmh3.hash64(bytes(self._buf), self._seed, signed=False)[0]

    def copy(self) -> "Murmur3Hasher":
        return type(self)(self._seed, self._buf)


# ----------------------------------------------------------------------------
HASHERS = {h.name: h for h in (Blake3Hasher, SipHash24Hasher, SipHash13Hasher,
                                 Murmur3Hasher, Xxh64Hasher, Blake2bHasher)}

def get_hasher(name: str):
    try:
        return HASHERS[name]
    except KeyError:
        raise KeyError(f"unknown hasher {name!r}; known: {', '.join(sorted(HASHERS))}") from None
