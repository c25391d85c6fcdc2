"""
Normalized curve shaping for game tuning values.

Every function maps `value / max_value` through a fixed curve and returns a weight in [0, 1].
Typical use is turning a raw stat (distance, hunger, hit points) into a utility score.

    Curve                      Low input   High input   Shape
    normalized_sigmoid         low         high         S-curve, steep around 0.5
    normalized_inverse_sigmoid high        low          mirrored S-curve
    normalized_exponential     low         high         n²
    normalized_inverse_exp...  high        low          1 - n²
    normalized_parabolic       low         high         1 - (n - 1)², fast start
    normalized_quadratic       low         low          n - n², peak 0.25 at n = 0.5
"""

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import clamp, std_float


# Methods --------------------------------------------------------------------------------------------------------------

def normalized_sigmoid(value: float, max_value: float = 1.0) -> float:
    """
    Low becomes low, high becomes high.

    Equals 1 / (1 + (n / (1 - n))⁻³) with n = value / max_value, clamped to [0, 1].

    Examples:
        >>> normalized_sigmoid(0.5)
        0.5
        >>> normalized_sigmoid(25, max_value=100)
        0.03571428571428571
    """
    n = clamp(_normalize(value, max_value), 0.0, 1.0)
    return _sigmoid(n)


def normalized_inverse_sigmoid(value: float, max_value: float = 1.0) -> float:
    """
    Low becomes high, high becomes low.

    Equals 1 / (1 + (n / (1 - n))³) with n = value / max_value, clamped to [0, 1].
    """
    n = clamp(_normalize(value, max_value), 0.0, 1.0)
    return _sigmoid(1.0 - n)


def normalized_exponential(value: float, max_value: float = 1.0) -> float:
    """Low becomes low, high becomes high: n² clamped to [0, 1]."""
    n = _normalize(value, max_value)
    return clamp(n * n, 0.0, 1.0)


def normalized_inverse_exponential(value: float, max_value: float = 1.0) -> float:
    """Low becomes high, high becomes low: 1 - n² clamped to [0, 1]."""
    n = _normalize(value, max_value)
    return clamp(-(n * n) + 1.0, 0.0, 1.0)


def normalized_parabolic(value: float, max_value: float = 1.0) -> float:
    """
    Low is low, high is high.

    High rate of change when low, lower rate of change when high.
    """
    n = _normalize(value, max_value)
    return clamp(-((n - 1.0) * (n - 1.0)) + 1.0, 0.0, 1.0)


def normalized_quadratic(value: float, max_value: float = 1.0) -> float:
    """
    Low is low, high is low.

    Peaks at n = 0.5 with a value of 0.25.
    """
    n = _normalize(value, max_value)
    return clamp(-(n * n) + n, 0.0, 1.0)


# Private Methods ------------------------------------------------------------------------------------------------------

def _normalize(value: float, max_value: float) -> float:
    value = std_float(value, name="value")
    max_value = std_float(max_value, name="max_value")
    if max_value == 0:
        raise ValueError("max_value must be non-zero")
    return value / max_value


def _sigmoid(n: float) -> float:
    """
    Closed form of 1 / (1 + (n / (1 - n))⁻³) for n in [0, 1].

    The denominator n³ + (1 - n)³ never drops below 0.25, so the poles
    at n = 0 and n = 1 need no special casing.
    """
    a = n * n * n
    b = (1.0 - n) * (1.0 - n) * (1.0 - n)
    return clamp(a / (a + b), 0.0, 1.0)
