from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SortConfig:
    # Numeric strings are normalised against this ceiling when bucketed
    numeric_string_ceiling: float = 1000.0
    numeric_string_buckets: int = 50
    text_buckets: int = 26
    # Floats are radix sorted as fixed-point with this many fractional digits
    fraction_digits: int = 6
    max_bucket_count: Optional[int] = None

    @property
    def fixed_point_scale(self) -> int:
        return 10 ** self.fraction_digits


def _get_int(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise RuntimeError(f"{name} must be an integer") from e
    if value < minimum:
        raise RuntimeError(f"{name} must be >= {minimum}")
    return value


def load_config() -> SortConfig:
    ceiling_str = os.getenv("POLYSORT_NUMERIC_STRING_CEILING", "1000")
    try:
        ceiling = float(ceiling_str)
    except ValueError as e:
        raise RuntimeError("POLYSORT_NUMERIC_STRING_CEILING must be a number") from e
    if not ceiling > 0 or ceiling == float("inf"):
        raise RuntimeError("POLYSORT_NUMERIC_STRING_CEILING must be a positive finite number")

    cap_str = os.getenv("POLYSORT_MAX_BUCKET_COUNT", "").strip()
    max_bucket_count = _get_int("POLYSORT_MAX_BUCKET_COUNT", 0, 1) if cap_str else None

    return SortConfig(
        numeric_string_ceiling=ceiling,
        numeric_string_buckets=_get_int("POLYSORT_NUMERIC_STRING_BUCKETS", 50, 1),
        text_buckets=_get_int("POLYSORT_TEXT_BUCKETS", 26, 1),
        fraction_digits=_get_int("POLYSORT_FRACTION_DIGITS", 6, 0),
        max_bucket_count=max_bucket_count,
    )
