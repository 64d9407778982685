# ==================================================
# epoch_buckets/compression.py
# ==================================================
from pathlib import Path

import zstandard as zstd

ZST_SUFFIX = ".zst"
LEVEL = 3

# -------- dataset files, optionally zstd framed ---------------------------

def is_compressed(path) -> bool:
    return Path(path).suffix == ZST_SUFFIX

def unpack(path, raw:bytes) -> bytes:
    """Return the payload of ``raw`` read from ``path``; zstd.ZstdError on a bad frame."""
    if not is_compressed(path):
        return raw
    return zstd.ZstdDecompressor().decompress(raw)

def pack(path, data:bytes) -> bytes:
    if not is_compressed(path):
        return data
    return zstd.ZstdCompressor(level=LEVEL).compress(data)
