"""
Equal-width histogram binning.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

logger = logging.getLogger(__name__)

DEFAULT_BIN_COUNT = 20


@dataclass(frozen=True)
class HistogramBin:
    label: str
    count: int


def _half_width(lo: float, hi: float, bin_count: int) -> float:
    # halves keep the range finite when lo and hi sit near the float limits
    return (hi / 2 - lo / 2) / bin_count


def bin_edges(lo: float, hi: float, bin_count: int) -> List[tuple]:
    half = _half_width(lo, hi, bin_count)
    points = [lo + i * half + i * half for i in range(bin_count)] + [hi]
    return list(zip(points[:-1], points[1:]))


def build_histogram(values: Sequence[float], bin_count: int = DEFAULT_BIN_COUNT) -> List[HistogramBin]:
    """
    Count ``values`` into ``bin_count`` contiguous equal-width bins over
    [min, max].

    Bins are half-open except the last, which also holds the maximum. When
    every value is equal the width is zero: all values go into the first bin
    and every label reads "min - min".

    Raises ValueError on empty input or a bin count below 1; callers filter
    non-numeric values and guard the empty case.
    """
    if bin_count < 1:
        raise ValueError("bin_count must be at least 1")
    data = np.asarray(values, dtype=float)
    if data.size == 0:
        raise ValueError("Cannot build a histogram from no values")

    lo, hi = float(data.min()), float(data.max())
    half = _half_width(lo, hi, bin_count)
    if half > 0:
        idx = np.floor((data / 2 - lo / 2) / half).astype(int)
        idx = np.clip(idx, 0, bin_count - 1)
    else:
        idx = np.zeros(data.size, dtype=int)
    counts = np.bincount(idx, minlength=bin_count)

    logger.debug("Binned %d values into %d bins over [%s, %s]", data.size, bin_count, lo, hi)
    return [
        HistogramBin(label=f"{start:.2f} - {end:.2f}", count=int(n))
        for (start, end), n in zip(bin_edges(lo, hi, bin_count), counts)
    ]
