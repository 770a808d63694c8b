"""
Instrumented bucket sort over int, float and str sequences.

Usage:
    sorter = BucketSort()
    sorter.sort(data)            # in place, ascending
    comparisons, moves = sorter.get_stats()
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import List, MutableSequence, Optional, Tuple

from sort_config import SortConfig
from sort_logging import get_logger
from sort_stats import SortStats
from sortable import BucketAdapter, bucket_adapter_for

logger = get_logger(__name__)


def is_sorted(A: MutableSequence, stats: SortStats) -> bool:
    """Single scan for non-decreasing order; every pair checked is one comparison."""
    for i in range(1, len(A)):
        stats.comparisons += 1
        if A[i] < A[i - 1]:
            return False
    return True


class BucketSort:
    def __init__(self, adapter: Optional[BucketAdapter] = None, config: Optional[SortConfig] = None) -> None:
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

        adapter = self.adapter or bucket_adapter_for(A, self.config)
        adapter.check_all(A)
        stats = self.stats

        # 0) Already sorted → nothing to move
        if is_sorted(A, stats):
            logger.debug("Array already sorted - comparisons: %d, moves: 0", stats.comparisons)
            return

        # 1) Size the buckets from the largest element
        max_value = max(A)
        bucket_count = adapter.allocated_bucket_count(max_value, len(A))
        buckets: List[list] = [[] for _ in range(bucket_count)]

        # 2) Distribute
        last = bucket_count - 1
        for v in A:
            index = adapter.bucket_index(v, bucket_count, max_value)
            buckets[min(max(index, 0), last)].append(v)

        # 3) Sort each bucket, counting comparisons
        key = cmp_to_key(stats.counting_cmp())
        for bucket in buckets:
            if len(bucket) > 1:
                bucket.sort(key=key)

        # 4) Write back in bucket order; only changed slots count as moves
        i = 0
        for bucket in buckets:
            for v in bucket:
                if A[i] != v:
                    A[i] = v
                    stats.moves += 1
                i += 1

        logger.debug(
            "Bucket sort stats - n: %d, buckets: %d, comparisons: %d, moves: %d",
            len(A), bucket_count, stats.comparisons, stats.moves,
        )


def bucket_sort(A: MutableSequence, config: Optional[SortConfig] = None) -> MutableSequence:
    BucketSort(config=config).sort(A)
    return A
