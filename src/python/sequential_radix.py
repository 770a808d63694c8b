"""
Sequential LSD radix sort over int, float and str sequences.

Each pass is a stable counting sort on one decimal digit place, least
significant first. Integers get one extra comparison sort at the end because
digits are taken from magnitudes, which interleaves negatives with positives.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import MutableSequence, Optional, Tuple

from sort_config import SortConfig
from sort_logging import get_logger
from sort_stats import SortStats
from sortable import IntRadixAdapter, RadixAdapter, radix_adapter_for

logger = get_logger(__name__)

BASE = 10


def count_sort(A: MutableSequence, place: int, adapter: RadixAdapter, stats: SortStats) -> None:
    """Stable counting sort of A by the digit at ``place``."""
    n = len(A)
    digits = [adapter.digit_at(v, place) for v in A]

    # 0–9 digit frequencies; character codes from text need a wider table
    C = [0] * max(BASE, max(digits) + 1)

    # output array
    output = [None] * n

    # 1) Count frequency of each digit
    for d in digits:
        C[d] += 1

    # 2) Convert count to cumulative count
    for i in range(1, len(C)):
        C[i] += C[i - 1]

    # 3) Build the output array (RIGHT → LEFT for stability)
    for i in range(n - 1, -1, -1):
        d = digits[i]
        C[d] -= 1
        output[C[d]] = A[i]
        stats.moves += 1

    # 4) Copy back to A
    A[:] = output
    stats.moves += n


class RadixSort:
    def __init__(self, adapter: Optional[RadixAdapter] = None, config: Optional[SortConfig] = None) -> None:
        """
        ``adapter`` fixes the element type up front; otherwise it is picked per
        call from the first element. An explicit adapter carries its own config,
        so passing a different ``config`` alongside it raises ValueError.
        """
        if adapter is not None and config is not None and config != adapter.config:
            raise ValueError("pass config to the adapter, not to the engine")
        self.adapter = adapter
        self.config = config or (adapter.config if adapter is not None else SortConfig())
        self.stats = SortStats()

    def get_stats(self) -> Tuple[int, int]:
        return self.stats.as_tuple()

    def reset_stats(self) -> None:
        self.stats.reset()

    def sort(self, A: MutableSequence) -> None:
        self.reset_stats()
        if not A:
            return

        adapter = self.adapter or radix_adapter_for(A, self.config)
        adapter.check_all(A)
        stats = self.stats

        max_digits = 0
        for v in A:
            stats.comparisons += 1
            max_digits = max(max_digits, adapter.digit_places(v))

        for place in range(max_digits):
            count_sort(A, place, adapter, stats)

        # Digits ignore sign, so restore sign order for integers
        if isinstance(adapter, IntRadixAdapter):
            A[:] = sorted(A, key=cmp_to_key(stats.counting_cmp()))

        logger.debug(
            "Radix sort stats - n: %d, passes: %d, comparisons: %d, moves: %d",
            len(A), max_digits, stats.comparisons, stats.moves,
        )


def radix_sort(A: MutableSequence, config: Optional[SortConfig] = None) -> MutableSequence:
    RadixSort(config=config).sort(A)
    return A
