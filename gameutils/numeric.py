"""
Numeric input normalization and the clamp/lerp primitives used by game logic.

std_float() is the single entry point that turns numbers from Python stdlib and
third-party libraries into a plain float before any arithmetic or formatting.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from typing import Protocol, TypeVar, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


T = TypeVar("T")


# Methods --------------------------------------------------------------------------------------------------------------

def std_float(value, *, name: str = "value", allow_nonfinite: bool = False) -> float:
    """
    Convert a numeric value to a standard Python float.

    Parameters
    ----------
    value : various
        Numeric value to convert. Supports Python int/float, Decimal, Fraction,
        and third-party scalars via __index__, .item() or __float__ protocols.

    name : str, default "value"
        Argument name used in exception messages.

    allow_nonfinite : bool, default False
        If False, NaN and +/-inf are rejected with ValueError. Callers that loop
        or scale on the magnitude must keep the default.

    Returns
    -------
    float

    Raises
    ------
    TypeError
        For bool, None, str and other unsupported types.
    ValueError
        For integers too large for a float, and for non-finite values
        when allow_nonfinite=False.

    Detection Priority
    ------------------
    1. int / float fast path
    2. __index__() → exact integer (NumPy integers)
    3. .item() → Python scalar (array scalars)
    4. __float__() → float (Decimal, Fraction, NumPy floats)

    Examples
    --------
    >>> std_float(42)
    42.0
    >>> from decimal import Decimal
    >>> std_float(Decimal("2.5"))
    2.5
    >>> std_float(float("nan"))
    Traceback (most recent call last):
        ...
    ValueError: value must be finite, got nan
    """
    # bool is a subclass of int, reject it explicitly
    if isinstance(value, bool):
        raise TypeError(f"{name} must be a number, boolean values not supported: {fmt_value(value)}")

    if isinstance(value, (int, float)):
        result = _int_to_float(value, name) if isinstance(value, int) else value

    elif hasattr(value, '__index__'):
        try:
            result = _int_to_float(operator.index(value), name)
        except TypeError as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    elif hasattr(value, 'item') and callable(value.item):
        try:
            item = value.item()
        except (TypeError, ValueError, AttributeError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} via .item(): {e}") from e
        if isinstance(item, (int, float)) and not isinstance(item, bool):
            return std_float(item, name=name, allow_nonfinite=allow_nonfinite)
        raise TypeError(f"{name} .item() returned unsupported type {fmt_type(item)}")

    elif isinstance(value, SupportsFloat):
        try:
            result = float(value)
        except TypeError as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e
        except ValueError as e:
            # Decimal("sNaN") refuses conversion
            raise ValueError(f"{name} must be finite, got {fmt_value(value)}") from e
        except OverflowError as e:
            raise ValueError(f"{name} is too large for a float: {fmt_value(value)}") from e

    else:
        raise TypeError(
            f"{name} must be a number, got {fmt_type(value)}. "
            f"Expected int, float, or types implementing __index__, .item() or __float__ "
            f"(e.g., numpy scalars, Decimal, Fraction)"
        )

    if not allow_nonfinite and not math.isfinite(result):
        raise ValueError(f"{name} must be finite, got {result}")
    return result


def clamp(value: T, low: T, high: T) -> T:
    """
    Clamp value so that it is not less than low and not more than high.

    Works with any ordered type (int, float, Decimal, str, datetime, ...).
    The returned object is one of the three arguments, never a converted copy.

    Raises:
        ValueError: If low > high.

    Examples:
        >>> clamp(5, 0, 3)
        3
        >>> clamp(-0.5, 0.0, 1.0)
        0.0
        >>> clamp("m", "a", "f")
        'f'
    """
    if low > high:
        raise ValueError(f"low must not be greater than high: low={fmt_value(low)}, high={fmt_value(high)}")
    if value < low:
        return low
    if value > high:
        return high
    return value


def lerp(start: float, end: float, t: float) -> float:
    """
    Linear interpolation from start to end by factor t, with t clamped to [0, 1].

    Examples:
        >>> lerp(10, 20, 0.25)
        12.5
        >>> lerp(10, 20, 2.0)
        20.0
    """
    start = std_float(start, name="start")
    end = std_float(end, name="end")
    t = clamp(std_float(t, name="t"), 0.0, 1.0)
    return start + (end - start) * t


# Private Methods ------------------------------------------------------------------------------------------------------

def _int_to_float(value: int, name: str) -> float:
    try:
        return float(value)
    except OverflowError as e:
        raise ValueError(f"{name} is too large for a float: {fmt_value(value, max_repr=40)}") from e
