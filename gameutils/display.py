"""
Big number display formatting for game HUDs, counters and score boards
"""

# ## Scope
#
# `fmt_big_number` turns a float into a short label: "999.0", "1.2K", "3.4M", "1.0e30".
# Only upward tiers exist. Magnitudes below 1 are shown as plain fixed-point
# ("0.5", "0.0"), never as negative exponents.
#
# `parse_big_number` reads those labels back. It exists for round-trip checks and
# config files; store the raw number when exact values matter.

# ## Rounding carry
#
# The tier is picked from the raw value, then the mantissa is rounded. Values just
# under the next tier keep their tier: 999_960 → "1000.0K", 999.96 → "1000.0".

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import math
import re
import sys
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import StrEnum, unique
from typing import Mapping, Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import std_float
from .sentinels import UnsetType, UNSET
from .utils import fmt_type, fmt_value

_SUFFIX_RE = re.compile(r"[A-DF-Za-df-z]+")
_LABEL_RE = re.compile(r"(?P<mantissa>[+-]?\d+(?:\.\d+)?)(?:e(?P<exponent>[+-]?\d+)|(?P<suffix>[A-Za-z]+))?")


# @formatter:off

class DisplayConf:
    """
    Default configuration constants for big number formatting.

    Attributes:
        SUFFIXES: Tier → suffix letter. Tier k divides the value by 1000^k.
            Lower and upper case letters are distinct tiers (q/Q, s/S).
            Tiers missing from the table fall back to e-notation.

        TIER_BASE: Divisor between neighbouring tiers.

        TIER_STEP: Decimal exponent step per tier, used in e-notation ("1.0e30").

        PRECISION: Fractional digits of the mantissa.

        MAX_PRECISION: Upper bound accepted for BigNumberFormat.precision.

        MAX_TIER: Highest tier whose divisor 1000^k is a finite float.
            No finite float reaches tier MAX_TIER + 1.
    """

    SUFFIXES = frozendict({
        1: "K",     # thousand          10³
        2: "M",     # million           10⁶
        3: "B",     # billion           10⁹
        4: "T",     # trillion          10¹²
        5: "q",     # quadrillion       10¹⁵
        6: "Q",     # quintillion       10¹⁸
        7: "s",     # sextillion        10²¹
        8: "S",     # septillion        10²⁴
        9: "O",     # octillion         10²⁷
    })

    TIER_BASE = 1000
    TIER_STEP = 3

    PRECISION = 1
    MAX_PRECISION = 20

    MAX_TIER = int(math.log10(sys.float_info.max) // 3)

# @formatter:on

# Classes --------------------------------------------------------------------------------------------------------------

@unique
class DisplayMode(StrEnum):
    """
    Display modes for big numbers above the first tier.

    Attributes:
        SUFFIX: Letter abbreviation from the suffix table, "1.2M".
                Tiers beyond the table still render as "1.2e30".
        SCIENTIFIC: E-notation with exponent multiple of 3, "1.2e6".

    Values below 1000 are rendered identically in both modes.
    """
    SUFFIX = "suffix"
    SCIENTIFIC = "scientific"


@dataclass(frozen=True)
class BigNumberFormat:
    """
    Formatting controls for fmt_big_number().

    Attributes:
        mode: DisplayMode or its string value.
        precision: fractional digits of the mantissa, 0 to DisplayConf.MAX_PRECISION.
        suffixes: tier → suffix mapping; stored as an immutable frozendict.

    Examples:
        >>> fmt = BigNumberFormat(mode="scientific")
        >>> fmt_big_number(1500, fmt=fmt)
        '1.5e3'

        >>> fmt = BigNumberFormat(suffixes={1: "k", 2: "m"})
        >>> fmt_big_number(2_500_000, fmt=fmt)
        '2.5m'
        >>> fmt_big_number(2_500_000_000, fmt=fmt)
        '2.5e9'

    Raises:
        ValueError: If mode, precision or suffix table are invalid.
        TypeError: If fields have unsupported types.
    """
    mode: DisplayMode = DisplayMode.SUFFIX
    precision: int = DisplayConf.PRECISION
    suffixes: Mapping[int, str] = DisplayConf.SUFFIXES

    def __post_init__(self):
        """Validate and normalize fields"""

        try:
            mode = DisplayMode(self.mode)
        except ValueError:
            raise ValueError(f"mode expected one of 'suffix' or 'scientific', "
                             f"but found {fmt_value(self.mode)}") from None
        object.__setattr__(self, 'mode', mode)

        if not isinstance(self.precision, int) or isinstance(self.precision, bool):
            raise TypeError(f"precision must be int, but got {fmt_type(self.precision)}")
        if not 0 <= self.precision <= DisplayConf.MAX_PRECISION:
            raise ValueError(f"precision must be in range 0..{DisplayConf.MAX_PRECISION}, "
                             f"but found {fmt_value(self.precision)}")

        if not isinstance(self.suffixes, abc.Mapping):
            raise TypeError(f"suffixes must be a mapping, but got {fmt_type(self.suffixes)}")
        for tier, suffix in self.suffixes.items():
            if not isinstance(tier, int) or isinstance(tier, bool) or tier < 1:
                raise ValueError(f"suffix tiers must be positive int, but found {fmt_value(tier)}")
            if not isinstance(suffix, str) or not _SUFFIX_RE.fullmatch(suffix):
                raise ValueError(f"suffix must be a non-empty string of letters other than 'e', "
                                 f"but found {fmt_value(suffix)}")
        if len(set(self.suffixes.values())) != len(self.suffixes):
            raise ValueError(f"suffixes must be unique: {fmt_value(dict(self.suffixes))}")
        object.__setattr__(self, 'suffixes', frozendict(self.suffixes))

    @classmethod
    def suffix(cls) -> Self:
        """Default suffix mode: "1.2K", "3.4M"."""
        return cls(mode=DisplayMode.SUFFIX)

    @classmethod
    def scientific(cls) -> Self:
        """E-notation for every tier above 0: "1.2e3", "3.4e6"."""
        return cls(mode=DisplayMode.SCIENTIFIC)

    def merge(self,
              # Attrs override
              mode: DisplayMode | str | UnsetType = UNSET,
              precision: int | UnsetType = UNSET,
              suffixes: Mapping[int, str] | UnsetType = UNSET,
              ) -> "BigNumberFormat":
        """
        Create a new BigNumberFormat instance with merged configuration options.

        Parameters not provided (UNSET) are inherited from the current instance.

        Returns:
            New BigNumberFormat instance with merged configuration.
        """
        mode = self.mode if mode is UNSET else mode
        precision = self.precision if precision is UNSET else precision
        suffixes = self.suffixes if suffixes is UNSET else suffixes
        return BigNumberFormat(mode=mode, precision=precision, suffixes=suffixes)


_DEFAULT_FORMAT = BigNumberFormat()


# Methods --------------------------------------------------------------------------------------------------------------

def big_number_tier(number) -> int:
    """
    Return the largest tier k such that |number| / 1000^k >= 1, or 0.

    The search is capped at DisplayConf.MAX_TIER, the last tier whose divisor
    is a finite float; no finite float can pass the check beyond it.

    Raises:
        TypeError: If number is not numeric.
        ValueError: If number is NaN or infinite.

    Examples:
        >>> big_number_tier(999)
        0
        >>> big_number_tier(-1000)
        1
        >>> big_number_tier(1.5e10)
        3
    """
    value = std_float(number, name="number")
    k = 0
    while k < DisplayConf.MAX_TIER and abs(value / _tier_divisor(k + 1)) >= 1:
        k += 1
    return k


def fmt_big_number(number,
                   *,
                   mode: DisplayMode | str | None = None,
                   fmt: BigNumberFormat | None = None) -> str:
    """
    Format a number as a short human-readable label with a tier suffix or exponent.

    Args:
        number: int, float or any type accepted by std_float(); must be finite.
        mode: display mode override. When None, fmt.mode is used.
        fmt: formatting controls. Defaults to BigNumberFormat() (suffix mode, 1 digit).

    Returns:
        "{mantissa}" for |number| < 1000, otherwise "{mantissa}{suffix}" or
        "{mantissa}e{3k}". Mantissa is rounded half away from zero, uses '.' as
        decimal separator and no grouping.

    Raises:
        TypeError: If number is not numeric or fmt is not a BigNumberFormat.
        ValueError: If number is NaN or infinite, or mode is unknown.

    Examples:
        >>> fmt_big_number(0)
        '0.0'
        >>> fmt_big_number(1234567)
        '1.2M'
        >>> fmt_big_number(-5000)
        '-5.0K'
        >>> fmt_big_number(1000, mode="scientific")
        '1.0e3'
        >>> fmt_big_number(1000 ** 10)
        '1.0e30'
        >>> fmt_big_number(2250)
        '2.3K'
    """
    if fmt is None:
        fmt = _DEFAULT_FORMAT
    elif not isinstance(fmt, BigNumberFormat):
        raise TypeError(f"fmt must be BigNumberFormat, but got {fmt_type(fmt)}")
    if mode is not None:
        fmt = fmt.merge(mode=mode)

    value = std_float(number, name="number")
    if value == 0:
        value = 0.0  # IEEE -0.0 is zero, no sign
    k = big_number_tier(value)
    mantissa = _fmt_mantissa(value / _tier_divisor(k), fmt.precision)
    if k == 0:
        return mantissa

    suffix = fmt.suffixes.get(k) if fmt.mode == DisplayMode.SUFFIX else None
    if suffix is None:
        # Scientific mode, or tier beyond the suffix table
        return f"{mantissa}e{k * DisplayConf.TIER_STEP}"
    return f"{mantissa}{suffix}"


def parse_big_number(text: str, *, suffixes: Mapping[int, str] | None = None) -> float:
    """
    Parse a label produced by fmt_big_number() back to a float.

    Accepts plain numbers ("999.0"), suffixed numbers ("1.2M") and e-notation ("1.2e6").
    Suffix letters are case-sensitive: "q" and "Q" are different tiers.

    Args:
        text: label to parse, surrounding whitespace is ignored.
        suffixes: tier → suffix table, defaults to DisplayConf.SUFFIXES.

    Raises:
        TypeError: If text is not a str.
        ValueError: If text is malformed, the suffix is unknown or the value
            does not fit a finite float.

    Examples:
        >>> parse_big_number("1.2M")
        1200000.0
        >>> parse_big_number("-5.0e3")
        -5000.0
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, but got {fmt_type(text)}")
    suffixes = DisplayConf.SUFFIXES if suffixes is None else suffixes

    match = _LABEL_RE.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"invalid big number label: {fmt_value(text)}")

    mantissa = Decimal(match["mantissa"])
    try:
        if match["exponent"] is not None:
            result = float(mantissa.scaleb(int(match["exponent"])))
        elif match["suffix"] is not None:
            tier = _tier_of_suffix(match["suffix"], suffixes)
            result = float(mantissa * DisplayConf.TIER_BASE ** tier)
        else:
            result = float(mantissa)
    except ArithmeticError as e:
        # decimal.Overflow and friends
        raise ValueError(f"big number label out of range: {fmt_value(text)}") from e

    if not math.isfinite(result):
        raise ValueError(f"big number label out of float range: {fmt_value(text)}")
    return result


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_mantissa(value: float, precision: int) -> str:
    """Fixed-point with round half away from zero on the exact binary value."""
    quantum = Decimal(1).scaleb(-precision)
    return f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP):f}"


def _tier_divisor(k: int) -> float:
    # Exact int power, then a single correctly rounded conversion
    return float(DisplayConf.TIER_BASE ** k)


def _tier_of_suffix(suffix: str, suffixes: Mapping[int, str]) -> int:
    for tier, s in suffixes.items():
        if s == suffix:
            return tier
    raise ValueError(f"unknown suffix {fmt_value(suffix)}, expected one of {fmt_value(list(suffixes.values()))}")
