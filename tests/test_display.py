#
# Gameutils - Display Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
import sys
from dataclasses import FrozenInstanceError
from decimal import Decimal
from fractions import Fraction

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from gameutils.display import (BigNumberFormat, DisplayConf, DisplayMode,
                               big_number_tier, fmt_big_number, parse_big_number)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFmtBigNumberBasics:

    @pytest.mark.parametrize('value, expected', [
        pytest.param(0, "0.0", id='zero'),
        pytest.param(0.0, "0.0", id='zero_float'),
        pytest.param(-0.0, "0.0", id='negative_zero'),
        pytest.param(1, "1.0", id='one'),
        pytest.param(-2.5, "-2.5", id='negative_small'),
        pytest.param(999, "999.0", id='below_first_tier'),
        pytest.param(1000, "1.0K", id='first_tier'),
        pytest.param(1234567, "1.2M", id='million'),
        pytest.param(-5000, "-5.0K", id='negative_keeps_sign'),
        pytest.param(3.4e9, "3.4B", id='billion'),
        pytest.param(7.25e12, "7.3T", id='trillion_round_up'),
    ])
    def test_suffix_mode(self, value, expected):
        """Format values with the default suffix mode."""
        assert fmt_big_number(value) == expected

    @pytest.mark.parametrize('value, expected', [
        pytest.param(0, "0.0", id='zero'),
        pytest.param(999, "999.0", id='below_first_tier'),
        pytest.param(1000, "1.0e3", id='first_tier'),
        pytest.param(1234567, "1.2e6", id='million'),
        pytest.param(-5000, "-5.0e3", id='negative'),
    ])
    def test_scientific_mode(self, value, expected):
        """Format values in scientific mode with exponent multiple of 3."""
        assert fmt_big_number(value, mode=DisplayMode.SCIENTIFIC) == expected
        assert fmt_big_number(value, mode="scientific") == expected

    @pytest.mark.parametrize('k, suffix', list(DisplayConf.SUFFIXES.items()))
    def test_each_tier_suffix(self, k, suffix):
        """Exact powers of 1000 render as 1.0 with the table suffix."""
        assert fmt_big_number(1000 ** k) == f"1.0{suffix}"
        assert fmt_big_number(-(1000 ** k)) == f"-1.0{suffix}"

    @pytest.mark.parametrize('k', [10, 11, 25])
    def test_beyond_table_falls_back_to_scientific(self, k):
        """Tiers without a suffix use e-notation even in suffix mode."""
        assert fmt_big_number(1000 ** k) == f"1.0e{3 * k}"
        assert fmt_big_number(1000 ** k, mode="suffix") == f"1.0e{3 * k}"

    def test_modes_agree_below_first_tier(self):
        """Values below 1000 never get a suffix or exponent."""
        for value in (0, 0.5, 12.34, 999.4, -999.4):
            assert fmt_big_number(value, mode="suffix") == fmt_big_number(value, mode="scientific")

    @pytest.mark.parametrize('value, expected', [
        pytest.param(Decimal("1500"), "1.5K", id='decimal'),
        pytest.param(Fraction(3, 2) * 1000, "1.5K", id='fraction'),
        pytest.param(10 ** 15, "1.0q", id='big_int'),
    ])
    def test_numeric_types(self, value, expected):
        """Accept stdlib numeric types besides float."""
        assert fmt_big_number(value) == expected


class TestFmtBigNumberRounding:

    @pytest.mark.parametrize('value, expected', [
        pytest.param(0.25, "0.3", id='half_up'),
        pytest.param(-0.25, "-0.3", id='half_away_from_zero'),
        pytest.param(1.25, "1.3", id='half_up_odd'),
        pytest.param(2250, "2.3K", id='half_up_tier'),
        pytest.param(-2250, "-2.3K", id='half_away_tier'),
        pytest.param(0.05, "0.1", id='binary_above_half'),
        pytest.param(0.35, "0.3", id='binary_below_half'),
        pytest.param(1249, "1.2K", id='below_half'),
    ])
    def test_round_half_away_from_zero(self, value, expected):
        """Round the exact binary value half away from zero."""
        assert fmt_big_number(value) == expected

    @pytest.mark.parametrize('value, expected', [
        pytest.param(999.96, "1000.0", id='no_tier'),
        pytest.param(999_960, "1000.0K", id='first_tier'),
        pytest.param(-999_960, "-1000.0K", id='negative'),
    ])
    def test_rounding_carry_keeps_tier(self, value, expected):
        """Tier is picked before rounding and is not promoted after carry."""
        assert fmt_big_number(value) == expected

    @pytest.mark.parametrize('value, expected', [
        pytest.param(0.5, "0.5", id='half'),
        pytest.param(0.04, "0.0", id='rounds_to_zero'),
        pytest.param(-0.04, "-0.0", id='negative_rounds_to_negative_zero'),
        pytest.param(1e-30, "0.0", id='tiny'),
    ])
    def test_small_magnitudes_fixed_point(self, value, expected):
        """Magnitudes below 1 stay fixed-point without negative exponents."""
        assert fmt_big_number(value) == expected

    def test_no_grouping_separator(self):
        """Mantissa never contains a thousands separator."""
        assert "," not in fmt_big_number(999_999)
        assert "," not in fmt_big_number(999.99)


class TestFmtBigNumberFormat:

    @pytest.mark.parametrize('precision, value, expected', [
        pytest.param(0, 1500, "2K", id='zero_digits'),
        pytest.param(2, 1234567, "1.23M", id='two_digits'),
        pytest.param(3, 999, "999.000", id='three_digits_no_tier'),
    ])
    def test_precision(self, precision, value, expected):
        """Mantissa digits follow BigNumberFormat.precision."""
        assert fmt_big_number(value, fmt=BigNumberFormat(precision=precision)) == expected

    def test_custom_suffixes(self):
        """Custom suffix tables replace the default and fall back beyond their range."""
        fmt = BigNumberFormat(suffixes={1: "k", 2: "m"})
        assert fmt_big_number(1500, fmt=fmt) == "1.5k"
        assert fmt_big_number(2_500_000, fmt=fmt) == "2.5m"
        assert fmt_big_number(2_500_000_000, fmt=fmt) == "2.5e9"

    def test_mode_overrides_fmt(self):
        """Explicit mode wins over the mode stored in fmt."""
        fmt = BigNumberFormat.scientific()
        assert fmt_big_number(1000, fmt=fmt) == "1.0e3"
        assert fmt_big_number(1000, fmt=fmt, mode="suffix") == "1.0K"

    def test_factories(self):
        """suffix() and scientific() produce the matching modes."""
        assert BigNumberFormat.suffix().mode is DisplayMode.SUFFIX
        assert BigNumberFormat.scientific().mode is DisplayMode.SCIENTIFIC

    def test_mode_string_normalized(self):
        """String modes are converted to DisplayMode members."""
        assert BigNumberFormat(mode="scientific").mode is DisplayMode.SCIENTIFIC

    def test_frozen_and_immutable_suffixes(self):
        """Format objects and their suffix tables cannot be mutated."""
        fmt = BigNumberFormat(suffixes={1: "k"})
        assert isinstance(fmt.suffixes, frozendict)
        with pytest.raises(FrozenInstanceError):
            fmt.precision = 3
        with pytest.raises(TypeError):
            fmt.suffixes[2] = "m"

    def test_merge(self):
        """merge() overrides given fields and inherits the rest."""
        base = BigNumberFormat(precision=2, suffixes={1: "k"})
        merged = base.merge(mode="scientific")
        assert merged is not base
        assert merged.mode is DisplayMode.SCIENTIFIC
        assert merged.precision == 2
        assert merged.suffixes == {1: "k"}
        assert base.mode is DisplayMode.SUFFIX

    @pytest.mark.parametrize('kwargs, exc, match', [
        pytest.param(dict(mode="bogus"), ValueError, "mode", id='bad_mode'),
        pytest.param(dict(precision=-1), ValueError, "precision", id='negative_precision'),
        pytest.param(dict(precision=21), ValueError, "precision", id='precision_too_big'),
        pytest.param(dict(precision=1.0), TypeError, "precision", id='float_precision'),
        pytest.param(dict(precision=True), TypeError, "precision", id='bool_precision'),
        pytest.param(dict(suffixes=["K"]), TypeError, "mapping", id='suffixes_not_mapping'),
        pytest.param(dict(suffixes={0: "Z"}), ValueError, "tiers", id='tier_zero'),
        pytest.param(dict(suffixes={"1": "K"}), ValueError, "tiers", id='tier_str'),
        pytest.param(dict(suffixes={1: ""}), ValueError, "suffix", id='empty_suffix'),
        pytest.param(dict(suffixes={1: "e"}), ValueError, "suffix", id='exponent_letter'),
        pytest.param(dict(suffixes={1: "1"}), ValueError, "suffix", id='digit_suffix'),
        pytest.param(dict(suffixes={1: "K", 2: "K"}), ValueError, "unique", id='duplicate_suffix'),
    ])
    def test_invalid_format(self, kwargs, exc, match):
        """Reject invalid configuration in __post_init__."""
        with pytest.raises(exc, match=match):
            BigNumberFormat(**kwargs)

    def test_invalid_fmt_type(self):
        """Reject fmt objects of the wrong type."""
        with pytest.raises(TypeError, match="BigNumberFormat"):
            fmt_big_number(1000, fmt={"mode": "suffix"})

    def test_invalid_mode_argument(self):
        """Reject unknown mode strings."""
        with pytest.raises(ValueError, match="mode"):
            fmt_big_number(1000, mode="engineering")


class TestFmtBigNumberErrors:

    @pytest.mark.parametrize('value', [
        pytest.param(math.nan, id='nan'),
        pytest.param(math.inf, id='pos_inf'),
        pytest.param(-math.inf, id='neg_inf'),
        pytest.param(Decimal("NaN"), id='decimal_nan'),
    ])
    def test_non_finite_raises(self, value):
        """Non-finite input raises ValueError instead of looping."""
        with pytest.raises(ValueError, match="finite"):
            fmt_big_number(value)

    def test_int_beyond_float_range_raises(self):
        """Integers too large for a float raise ValueError."""
        with pytest.raises(ValueError, match="too large"):
            fmt_big_number(10 ** 400)

    @pytest.mark.parametrize('value', [
        pytest.param("1000", id='str'),
        pytest.param(None, id='none'),
        pytest.param(True, id='bool'),
        pytest.param([1000], id='list'),
    ])
    def test_non_numeric_raises(self, value):
        """Non-numeric input raises TypeError."""
        with pytest.raises(TypeError):
            fmt_big_number(value)


class TestBigNumberTier:

    @pytest.mark.parametrize('value, expected', [
        pytest.param(0, 0, id='zero'),
        pytest.param(0.001, 0, id='tiny'),
        pytest.param(999.999, 0, id='just_below_1000'),
        pytest.param(1000, 1, id='exact_1000'),
        pytest.param(-1000, 1, id='negative'),
        pytest.param(1.5e10, 3, id='billions'),
        pytest.param(1000 ** 10, 10, id='beyond_table'),
        pytest.param(1e306, 102, id='max_tier_exact'),
        pytest.param(sys.float_info.max, 102, id='float_max'),
        pytest.param(-sys.float_info.max, 102, id='negative_float_max'),
    ])
    def test_tier(self, value, expected):
        """Pick the largest tier whose divided value is still >= 1 in magnitude."""
        assert big_number_tier(value) == expected

    def test_max_tier_constant(self):
        """MAX_TIER is the last tier with a finite divisor."""
        assert DisplayConf.MAX_TIER == 102
        assert math.isfinite(float(1000 ** DisplayConf.MAX_TIER))
        with pytest.raises(OverflowError):
            float(1000 ** (DisplayConf.MAX_TIER + 1))

    def test_float_max_formats(self):
        """The largest float formats with the last reachable exponent."""
        assert fmt_big_number(sys.float_info.max) == "179.8e306"

    def test_non_finite_raises(self):
        with pytest.raises(ValueError):
            big_number_tier(math.inf)


class TestParseBigNumber:

    @pytest.mark.parametrize('text, expected', [
        pytest.param("999.0", 999.0, id='plain'),
        pytest.param("-2.5", -2.5, id='plain_negative'),
        pytest.param("1.2M", 1_200_000.0, id='suffix'),
        pytest.param(" 3.4K ", 3400.0, id='whitespace'),
        pytest.param("1.0q", 1e15, id='lower_q'),
        pytest.param("1.0Q", 1e18, id='upper_q'),
        pytest.param("-5.0e3", -5000.0, id='exponent_negative'),
        pytest.param("1.0e30", 1e30, id='exponent_beyond_table'),
        pytest.param("2K", 2000.0, id='no_fraction'),
    ])
    def test_parse(self, text, expected):
        """Parse plain, suffix and exponent labels."""
        assert parse_big_number(text) == expected

    def test_custom_suffixes(self):
        assert parse_big_number("2.5m", suffixes={1: "k", 2: "m"}) == 2_500_000.0

    @pytest.mark.parametrize('text', [
        pytest.param("", id='empty'),
        pytest.param("abc", id='letters'),
        pytest.param("1.2X", id='unknown_suffix'),
        pytest.param("1.2k", id='wrong_case'),
        pytest.param("1,000.0K", id='grouping'),
        pytest.param("1.2 M", id='inner_space'),
    ])
    def test_invalid_labels(self, text):
        """Reject malformed labels and unknown suffixes."""
        with pytest.raises(ValueError):
            parse_big_number(text)

    def test_non_str_raises(self):
        with pytest.raises(TypeError, match="str"):
            parse_big_number(1200)

    @pytest.mark.parametrize('text', [
        pytest.param("1e999", id='beyond_float'),
        pytest.param("-1e999", id='beyond_float_negative'),
        pytest.param("1e99999999999", id='beyond_decimal'),
    ])
    def test_out_of_range_raises(self, text):
        """Reject labels whose value is not a finite float."""
        with pytest.raises(ValueError, match="range"):
            parse_big_number(text)

    def test_float_max_label_parses(self):
        assert parse_big_number("179.7e306") == 1.797e308

    @pytest.mark.parametrize('mode', ["suffix", "scientific"])
    @pytest.mark.parametrize('k', range(0, 13))
    @pytest.mark.parametrize('mantissa', [1.0, 1.5, 12.34, 999.4])
    def test_round_trip_keeps_tier(self, mantissa, k, mode):
        """Reformatting a parsed label reproduces the tier of the original value."""
        value = mantissa * float(1000 ** k)
        label = fmt_big_number(value, mode=mode)
        parsed = parse_big_number(label)
        assert big_number_tier(parsed) == big_number_tier(value) == k
        assert fmt_big_number(parsed, mode=mode) == label
