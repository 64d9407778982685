# ==================================================
# epoch_buckets/analysis.py
# ==================================================
from __future__ import annotations
from dataclasses import dataclass, astuple

import numpy as np


@dataclass(frozen=True)
class BucketAnalysis:
    """
    Dispersion of one epoch's bucket fill counts.

    ``median`` and ``mode`` describe the multiset of counts, not bucket
    identities. ``std_dev`` keeps its historical name but holds the mean
    absolute deviation from the integer ``mean``, not a standard deviation.
    """
    min: int
    max: int
    spread: int
    mean: int
    median: int
    mode: int
    mode_count: int
    std_dev: float

    def __str__(self) -> str:
        *counts, dev = astuple(self)
        return ",".join([*map(str, counts), format_float(dev)])


def format_float(v: float) -> str:
    """Shortest round-trip positional form without a trailing ".0" (`0`, `2.97`)."""
    return np.format_float_positional(v, trim="-")


def analyze_buckets(buckets) -> BucketAnalysis:
    """
    Summarise bucket counts. Sorts ``buckets`` in place; pass a copy if the
    bucket -> count mapping is still needed.

    When several count values share the top frequency the reported ``mode``
    is whichever comes last after a stable sort by frequency (the largest
    such value here); only ``mode_count`` is guaranteed.
    """
    n = len(buckets)
    if n == 0:
        raise ValueError("no buckets to analyze")
    buckets.sort()
    counts = np.asarray(buckets, dtype=np.int64)

    lo = int(counts[0])
    hi = int(counts[-1])
    mean = int(counts.sum()) // n
    median = int(counts[n // 2])

    values, freq = np.unique(counts, return_counts=True)
    last = np.argsort(freq, kind="stable")[-1]
    mode, mode_count = int(values[last]), int(freq[last])

    std_dev = float(np.abs(counts - mean).sum() / n)

    return BucketAnalysis(min=lo, max=hi, spread=hi - lo, mean=mean, median=median,
                          mode=mode, mode_count=mode_count, std_dev=std_dev)
