from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass
class SortStats:
    """Comparison and move counters for one sort call."""

    comparisons: int = 0
    moves: int = 0

    def reset(self) -> None:
        self.comparisons = 0
        self.moves = 0

    def as_tuple(self) -> Tuple[int, int]:
        return self.comparisons, self.moves

    def counting_cmp(self):
        """Three-way comparator for ``functools.cmp_to_key`` that bumps ``comparisons``."""

        def cmp(a, b) -> int:
            self.comparisons += 1
            if a < b:
                return -1
            if b < a:
                return 1
            return 0

        return cmp
