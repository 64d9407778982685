# ==================================================
# epoch_buckets/dataset.py
# ==================================================
from __future__ import annotations
import json, logging, os
from pathlib import Path
from typing import Sequence

import zstandard as zstd

from .compression import pack, unpack
from .identifier import Identifier, IdentifierError

logger = logging.getLogger(__name__)


class DatasetError(ValueError):
    """The address dataset could not be read or decoded."""


# ------------------------------------------------------------------
def parse_addresses(items) -> tuple[Identifier, ...]:
    """Decode an already-parsed JSON value into identifiers, all or nothing."""
    if not isinstance(items, list):
        raise DatasetError(f"expected a JSON array, got {type(items).__name__}")
    out = []
    for i, item in enumerate(items):
        try:
            out.append(Identifier.from_string(item))
        except IdentifierError as exc:
            raise DatasetError(f"address #{i}: {exc}") from exc
    return tuple(out)


def load_addresses(path: str | os.PathLike) -> tuple[Identifier, ...]:
    """Read a JSON array of base58 pubkeys; ``.zst`` files are decompressed first."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DatasetError(f"cannot open {path}: {exc}") from exc

    try:
        raw = unpack(path, raw)
    except zstd.ZstdError as exc:
        raise DatasetError(f"cannot decompress {path}: {exc}") from exc

    try:
        items = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DatasetError(f"malformed JSON in {path}: {exc}") from exc

    addresses = parse_addresses(items)
    logger.info("loaded %d addresses from %s", len(addresses), path)
    return addresses


def dump_addresses(path: str | os.PathLike, addresses: Sequence[Identifier]):
    data = json.dumps([str(a) for a in addresses]).encode("utf-8")
    Path(path).write_bytes(pack(path, data))
