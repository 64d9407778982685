# ==================================================
# epoch_buckets/driver.py
# ==================================================
from __future__ import annotations
import logging, sys, time
from typing import Iterable, Sequence, TextIO

import numpy as np

from .analysis import analyze_buckets
from .assign import address_to_bucket
from .const import BUCKETS, CSV_HEADER, DATASET_PATH, ENABLED_HASHERS, EPOCHS
from .dataset import DatasetError, load_addresses
from .hashers import get_hasher
from .identifier import Identifier

logger = logging.getLogger(__name__)


def fill_buckets(hasher, addresses: Sequence[Identifier], buckets: int = BUCKETS) -> np.ndarray:
    counts = np.zeros(buckets, dtype=np.int64)
    for address in addresses:
        counts[address_to_bucket(buckets, hasher.copy(), address)] += 1
    return counts


def do_test(hasher, epoch: int, addresses: Sequence[Identifier],
            buckets: int = BUCKETS, out: TextIO = sys.stdout) -> float:
    """Bucket every address with ``hasher``, print the epoch row, return the assignment time."""
    start = time.perf_counter()
    counts = fill_buckets(hasher, addresses, buckets)
    elapsed = time.perf_counter() - start
    print(f"{epoch},{analyze_buckets(counts)}", file=out)
    return elapsed


def run(addresses: Sequence[Identifier], epochs: int = EPOCHS, buckets: int = BUCKETS,
        hashers: Iterable[str] = ENABLED_HASHERS, out: TextIO = sys.stdout) -> dict[str, float]:
    """Run every enabled hasher over every epoch; returns total seconds per hasher."""
    families = [(name, get_hasher(name)) for name in hashers]
    logger.info("running %d epochs x %s over %d addresses",
                epochs, ",".join(n for n, _ in families), len(addresses))

    timings: dict[str, float] = {}
    print(CSV_HEADER, file=out)
    for epoch in range(epochs):
        for name, family in families:
            elapsed = do_test(family.new_with_seed(epoch), epoch, addresses, buckets, out)
            timings[name] = timings.get(name, 0.0) + elapsed
        logger.debug("epoch %d done", epoch)

    for name, total in timings.items():
        print(f"{name}: {int(total / epochs * 1_000_000)}", file=out)
    return timings


# ------------------------------------------------------------------
def main(path=DATASET_PATH) -> int:
    logging.basicConfig(level=logging.WARNING, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        addresses = load_addresses(path)
    except DatasetError as exc:
        logger.error("%s", exc)
        return 1
    run(addresses)
    return 0
