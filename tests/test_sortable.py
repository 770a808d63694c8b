import math
from fractions import Fraction

import pytest

from sort_config import SortConfig
from sortable import (
    FloatBucketAdapter,
    FloatRadixAdapter,
    IntBucketAdapter,
    IntRadixAdapter,
    NonFiniteValueError,
    StrBucketAdapter,
    StrRadixAdapter,
    UnsupportedTypeError,
    bucket_adapter_for,
    clamp_index,
    fixed_point,
    parse_real,
    radix_adapter_for,
)


class TestParseReal:
    @pytest.mark.parametrize(
        "text, expected",
        [("12.5", 12.5), (".5", 0.5), ("7", 7.0), ("1e3", 1000.0), ("-3.25", -3.25), ("2.", 2.0)],
    )
    def test_decimal_literals(self, text, expected):
        assert parse_real(text) == expected

    @pytest.mark.parametrize("text", ["abc", "", " 1", "1 ", "inf", "nan", "1_000", "3abc", "1.2.3"])
    def test_rejects_non_literals(self, text):
        assert parse_real(text) is None

    def test_overlong_literal_is_infinite(self):
        assert parse_real("9" * 400) == math.inf


class TestClampIndex:
    def test_in_range_floors(self):
        assert clamp_index(2.7, 5) == 2

    def test_out_of_range(self):
        assert clamp_index(-0.5, 5) == 0
        assert clamp_index(12.0, 5) == 4

    def test_non_finite(self):
        assert clamp_index(math.nan, 5) == 0
        assert clamp_index(math.inf, 5) == 4
        assert clamp_index(-math.inf, 5) == 0


class TestNumericBucketAdapters:
    def test_int_bucket_count_is_ceil_sqrt(self):
        adapter = IntBucketAdapter()
        assert adapter.bucket_count_for(90) == 10
        assert adapter.bucket_count_for(100) == 10
        assert adapter.bucket_count_for(101) == 11
        assert adapter.bucket_count_for(1) == 1

    def test_non_positive_max_gives_one_bucket(self):
        assert IntBucketAdapter().bucket_count_for(0) == 1
        assert IntBucketAdapter().bucket_count_for(-5) == 1
        assert FloatBucketAdapter().bucket_count_for(-2.5) == 1

    def test_int_bucket_index(self):
        adapter = IntBucketAdapter()
        assert adapter.bucket_index(90, 10, 90) == 9
        assert adapter.bucket_index(45, 10, 90) == 4
        assert adapter.bucket_index(0, 10, 90) == 0

    def test_negative_value_clamped_to_first_bucket(self):
        assert IntBucketAdapter().bucket_index(-3, 10, 90) == 0

    def test_zero_max_does_not_divide(self):
        assert IntBucketAdapter().bucket_index(0, 1, 0) == 0
        assert FloatBucketAdapter().bucket_index(-1.5, 1, 0.0) == 0

    def test_float_bucket_policy(self):
        adapter = FloatBucketAdapter()
        assert adapter.bucket_count_for(90.0) == 10
        assert adapter.bucket_count_for(0.25) == 1
        assert adapter.bucket_index(64.5, 10, 90.0) == 6

    def test_max_bucket_count_caps(self):
        adapter = IntBucketAdapter(SortConfig(max_bucket_count=4))
        assert adapter.bucket_count_for(10_000) == 4
        assert adapter.bucket_count_for(9) == 3


class TestStrBucketAdapter:
    def test_bucket_count_depends_on_max(self):
        adapter = StrBucketAdapter()
        assert adapter.bucket_count_for("9") == 50
        assert adapter.bucket_count_for("dog") == 26

    def test_numeric_strings_use_fixed_ceiling(self):
        adapter = StrBucketAdapter()
        assert adapter.bucket_index("170", 50, "9") == 8
        assert adapter.bucket_index("45", 50, "9") == 2
        assert adapter.bucket_index("7", 50, "9") == 0

    def test_numeric_strings_above_ceiling_are_clamped(self):
        assert StrBucketAdapter().bucket_index("5000", 50, "9") == 49

    def test_text_grouped_by_first_character(self):
        adapter = StrBucketAdapter()
        assert adapter.bucket_index("dog", 26, "dog") == ord("d") % 26
        assert adapter.bucket_index("", 26, "dog") == 0

    def test_unparseable_digit_string_falls_back_to_character(self):
        assert StrBucketAdapter().bucket_index("3abc", 26, "x") == ord("3") % 26

    def test_signed_number_is_not_numeric(self):
        assert StrBucketAdapter().bucket_index("-5", 26, "x") == ord("-") % 26

    def test_ceiling_from_config(self):
        adapter = StrBucketAdapter(SortConfig(numeric_string_ceiling=100.0))
        assert adapter.bucket_index("50", 50, "9") == 24


class TestRadixAdapters:
    def test_int_digits_use_magnitude(self):
        adapter = IntRadixAdapter()
        assert [adapter.digit_at(-802, p) for p in range(4)] == [2, 0, 8, 0]

    def test_int_digit_places(self):
        adapter = IntRadixAdapter()
        assert adapter.digit_places(0) == 1
        assert adapter.digit_places(-802) == 3
        assert adapter.digit_places(999) == 3
        assert adapter.digit_places(1000) == 4
        assert adapter.digit_places(10 ** 30) == 31

    def test_float_is_scaled_to_six_decimals(self):
        adapter = FloatRadixAdapter()
        assert adapter.scaled(1.5) == 1_500_000
        assert adapter.digit_places(1.5) == 7
        assert adapter.digit_at(1.5, 5) == 5
        assert adapter.digit_at(1.5, 6) == 1
        assert adapter.digit_places(0.0) == 1
        assert adapter.digit_places(64.5) == 8

    def test_float_scale_from_config(self):
        adapter = FloatRadixAdapter(SortConfig(fraction_digits=2))
        assert adapter.scaled(1.239) == 123

    def test_numeric_string_behaves_like_float(self):
        adapter = StrRadixAdapter()
        assert adapter.digit_places("170") == 9
        assert adapter.digit_at("170", 7) == 7
        assert adapter.digit_at("170", 8) == 1

    def test_text_digits_are_character_codes_from_the_end(self):
        adapter = StrRadixAdapter()
        assert adapter.digit_at("abc", 0) == ord("c")
        assert adapter.digit_at("abc", 2) == ord("a")
        assert adapter.digit_at("abc", 3) == 0
        assert adapter.digit_places("abc") == 3
        assert adapter.digit_places("") == 1


class TestTypeChecks:
    def test_bool_is_not_an_int(self):
        with pytest.raises(UnsupportedTypeError):
            IntBucketAdapter().check(True)

    def test_float_adapter_rejects_int(self):
        with pytest.raises(UnsupportedTypeError):
            FloatRadixAdapter().check(1)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_floats_rejected(self, value):
        with pytest.raises(NonFiniteValueError):
            FloatBucketAdapter().check(value)
        with pytest.raises(NonFiniteValueError):
            FloatRadixAdapter().check(value)

    def test_adapter_lookup_by_first_element(self):
        assert isinstance(bucket_adapter_for([1, 2]), IntBucketAdapter)
        assert isinstance(bucket_adapter_for([1.0]), FloatBucketAdapter)
        assert isinstance(radix_adapter_for(["a"]), StrRadixAdapter)

    def test_adapter_lookup_passes_config(self):
        config = SortConfig(fraction_digits=3)
        assert radix_adapter_for([1.0], config).config is config

    @pytest.mark.parametrize("data", [[b"x"], [True, False], [None], [(1, 2)]])
    def test_no_adapter_for_type(self, data):
        with pytest.raises(UnsupportedTypeError):
            bucket_adapter_for(data)
        with pytest.raises(UnsupportedTypeError):
            radix_adapter_for(data)

    def test_unsupported_type_is_a_type_error(self):
        assert issubclass(UnsupportedTypeError, TypeError)
        assert issubclass(NonFiniteValueError, ValueError)


class TestLargeMagnitudes:
    def test_fixed_point_past_float_range(self):
        assert fixed_point(1e303, 10 ** 6) == int(Fraction(1e303)) * 10 ** 6
        assert fixed_point(-2.5, 100) == 250

    def test_float_digits_past_float_range(self):
        adapter = FloatRadixAdapter()
        assert adapter.digit_places(1e303) == len(str(int(Fraction(1e303)))) + 6
        assert adapter.digit_at(1e303, 0) == 0

    def test_numeric_string_past_float_range(self):
        adapter = StrRadixAdapter()
        assert adapter.digit_places("1e303") == FloatRadixAdapter().digit_places(1e303)

    def test_int_bucket_index_past_float_range(self):
        adapter = IntBucketAdapter()
        assert adapter.bucket_index(-10 ** 400, 1, 1) == 0
        assert adapter.bucket_index(10 ** 400, 11, 10 ** 400) == 10
        assert adapter.bucket_index(10 ** 399, 11, 10 ** 400) == 1

    def test_reported_count_stays_exact(self):
        assert FloatBucketAdapter().bucket_count_for(1e18) == 10 ** 9

    def test_numeric_allocation_limited_by_length(self):
        assert FloatBucketAdapter().allocated_bucket_count(1e18, 2) == 2
        assert IntBucketAdapter().allocated_bucket_count(90, 100) == 10
        assert IntBucketAdapter().allocated_bucket_count(5, 0) == 1

    def test_string_allocation_not_limited(self):
        assert StrBucketAdapter().allocated_bucket_count("9", 3) == 50
