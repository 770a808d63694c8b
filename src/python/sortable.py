"""
Per-type adapters for the bucket and radix engines.

Each supported element type (int, float, str) gets one adapter per family:

    bucket family: bucket_index(value, bucket_count, max_value), bucket_count_for(max_value)
    radix family:  digit_at(value, place), digit_places(value)

The engines never look at element values except through these adapters and
the natural ``<`` ordering of the values themselves.
"""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Dict, Optional, Sequence, Type

from sort_config import SortConfig

# Decimal literal: "12", "12.", ".5", "-3.25e2". No whitespace, no "inf"/"nan".
_REAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class UnsupportedTypeError(TypeError):
    """Sequence holds a type with no adapter, or mixes element types."""


class NonFiniteValueError(ValueError):
    """NaN or infinity in a numeric sequence."""


def starts_with_digit(text: str) -> bool:
    return bool(text) and "0" <= text[0] <= "9"


def parse_real(text: str) -> Optional[float]:
    """Parse a decimal literal, or return None. Overlong literals come back as inf."""
    if not _REAL_LITERAL.fullmatch(text):
        return None
    return float(text)


def clamp_index(raw: float, bucket_count: int) -> int:
    """Floor ``raw`` into [0, bucket_count). NaN lands in bucket 0."""
    if math.isnan(raw) or raw <= 0:
        return 0
    if raw >= bucket_count - 1:
        return bucket_count - 1
    return int(raw)


class _Adapter(ABC):
    kind: type = object

    def __init__(self, config: Optional[SortConfig] = None) -> None:
        self.config = config or SortConfig()

    def check(self, value) -> None:
        # exact type match: bool is an int subclass but has no adapter
        if type(value) is not self.kind:
            raise UnsupportedTypeError(
                f"{type(self).__name__} expects {self.kind.__name__}, got {type(value).__name__}"
            )

    def check_all(self, data: Sequence) -> None:
        for value in data:
            self.check(value)


def _check_finite(value: float) -> None:
    if not math.isfinite(value):
        raise NonFiniteValueError(f"cannot sort non-finite value {value!r}")


def fixed_point(value: float, scale: int) -> int:
    """Truncated integer of |value| * scale. Falls back to exact arithmetic past float range."""
    product = abs(value) * scale
    if math.isinf(product):
        return int(Fraction(abs(value)) * scale)
    return int(product)


# ------------------ BUCKET FAMILY ------------------ #

class BucketAdapter(_Adapter):
    @abstractmethod
    def bucket_index(self, value, bucket_count: int, max_value) -> int:
        pass

    @abstractmethod
    def bucket_count_for(self, max_value) -> int:
        pass

    def allocated_bucket_count(self, max_value, n: int) -> int:
        """Buckets the engine actually builds for ``n`` elements."""
        return self.bucket_count_for(max_value)


class _NumericBucketAdapter(BucketAdapter):
    """Linear range hash: bucket = floor(value / max * (count - 1))."""

    def _capped(self, count: int) -> int:
        cap = self.config.max_bucket_count
        if cap is not None and count > cap:
            return cap
        return max(1, count)

    def allocated_bucket_count(self, max_value, n: int) -> int:
        # the index is monotone in value, so fewer buckets than sqrt(max) keeps order
        return min(self.bucket_count_for(max_value), max(1, n))

    def bucket_index(self, value, bucket_count: int, max_value) -> int:
        if max_value <= 0:
            return 0
        return clamp_index(value / max_value * (bucket_count - 1), bucket_count)


class IntBucketAdapter(_NumericBucketAdapter):
    kind = int

    def bucket_index(self, value: int, bucket_count: int, max_value: int) -> int:
        if max_value <= 0:
            return 0
        # integer floor division, exact for values past float range
        raw = value * (bucket_count - 1) // max_value
        return min(max(raw, 0), bucket_count - 1)

    def bucket_count_for(self, max_value: int) -> int:
        if max_value <= 0:
            return 1
        # ceil(sqrt(n)) without going through float
        return self._capped(math.isqrt(max_value - 1) + 1)


class FloatBucketAdapter(_NumericBucketAdapter):
    kind = float

    def check(self, value) -> None:
        super().check(value)
        _check_finite(value)

    def bucket_count_for(self, max_value: float) -> int:
        if max_value <= 0:
            return 1
        return self._capped(math.ceil(math.sqrt(max_value)))


class StrBucketAdapter(BucketAdapter):
    """
    Strings starting with a digit that parse as a number are bucketed on a
    fixed 0..numeric_string_ceiling range; everything else is grouped by the
    code of its first character modulo the bucket count.
    """

    kind = str

    def numeric_value(self, text: str) -> Optional[float]:
        if not starts_with_digit(text):
            return None
        return parse_real(text)

    def bucket_count_for(self, max_value: str) -> int:
        if starts_with_digit(max_value):
            return self.config.numeric_string_buckets
        return self.config.text_buckets

    def bucket_index(self, value: str, bucket_count: int, max_value: str) -> int:
        number = self.numeric_value(value)
        if number is not None:
            raw = number / self.config.numeric_string_ceiling * (bucket_count - 1)
            return clamp_index(raw, bucket_count)
        if not value:
            return 0
        return ord(value[0]) % bucket_count


# ------------------ RADIX FAMILY ------------------ #

class RadixAdapter(_Adapter):
    @abstractmethod
    def digit_at(self, value, place: int) -> int:
        pass

    @abstractmethod
    def digit_places(self, value) -> int:
        pass


def _magnitude_digit(magnitude: int, place: int) -> int:
    return (magnitude // 10 ** place) % 10


def _magnitude_places(magnitude: int) -> int:
    # floor(log10(m)) + 1, exact for big values; "0" has one place
    return len(str(magnitude))


class IntRadixAdapter(RadixAdapter):
    kind = int

    def digit_at(self, value: int, place: int) -> int:
        return _magnitude_digit(abs(value), place)

    def digit_places(self, value: int) -> int:
        return _magnitude_places(abs(value))


class FloatRadixAdapter(RadixAdapter):
    """Digits of |value| as a fixed-point integer (truncated, not rounded)."""

    kind = float

    def check(self, value) -> None:
        super().check(value)
        _check_finite(value)

    def scaled(self, value: float) -> int:
        return fixed_point(value, self.config.fixed_point_scale)

    def digit_at(self, value: float, place: int) -> int:
        return _magnitude_digit(self.scaled(value), place)

    def digit_places(self, value: float) -> int:
        return _magnitude_places(self.scaled(value))


class StrRadixAdapter(RadixAdapter):
    """
    Numeric strings use the fixed-point float digits. Other strings use the
    character code counted from the end of the string, so "digits" can be
    far larger than 9.
    """

    kind = str

    def numeric_value(self, text: str) -> Optional[float]:
        number = parse_real(text)
        if number is None or not math.isfinite(number):
            return None
        return number

    def _scaled(self, number: float) -> int:
        return fixed_point(number, self.config.fixed_point_scale)

    def digit_at(self, value: str, place: int) -> int:
        number = self.numeric_value(value)
        if number is not None:
            return _magnitude_digit(self._scaled(number), place)
        if place < len(value):
            return ord(value[-1 - place])
        return 0

    def digit_places(self, value: str) -> int:
        number = self.numeric_value(value)
        if number is not None:
            return _magnitude_places(self._scaled(number))
        return max(1, len(value))


BUCKET_ADAPTERS: Dict[type, Type[BucketAdapter]] = {
    int: IntBucketAdapter,
    float: FloatBucketAdapter,
    str: StrBucketAdapter,
}

RADIX_ADAPTERS: Dict[type, Type[RadixAdapter]] = {
    int: IntRadixAdapter,
    float: FloatRadixAdapter,
    str: StrRadixAdapter,
}


def _lookup(registry: Dict[type, type], data: Sequence, family: str):
    kind = type(data[0])
    try:
        return registry[kind]
    except KeyError:
        raise UnsupportedTypeError(f"no {family} adapter for {kind.__name__}") from None


def bucket_adapter_for(data: Sequence, config: Optional[SortConfig] = None) -> BucketAdapter:
    """Pick the bucket adapter for a non-empty sequence from its first element."""
    return _lookup(BUCKET_ADAPTERS, data, "bucket")(config)


def radix_adapter_for(data: Sequence, config: Optional[SortConfig] = None) -> RadixAdapter:
    """Pick the radix adapter for a non-empty sequence from its first element."""
    return _lookup(RADIX_ADAPTERS, data, "radix")(config)
