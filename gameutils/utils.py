"""
Gameutils helpers shared across the package.

Contains the small formatters used in exception messages, kept here to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

PRIMITIVE_TYPES = (
    type(None),
    bool,  # Comes before int (is subclass of int)
    int,
    float,
    complex,
    str,
    bytes,
)


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.
    Builtin types are never module-qualified.

    Examples:
        >>> class_name(10)
        'int'
        >>> class C: ...
        >>> class_name(C, fully_qualified=True)
        'gameutils.utils.C'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    if fully_qualified and cls.__module__ != "builtins":
        return cls.__module__ + "." + cls.__name__
    return cls.__name__


def fmt_type(obj: Any, *, fully_qualified: bool = False) -> str:
    """
    Format type information for exception messages.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(ValueError)
        '<ValueError>'
    """
    return f"<{class_name(obj, fully_qualified=fully_qualified)}>"


def fmt_value(obj: Any, *, max_repr: int = 120, ellipsis: str = "...") -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Primitives are shown by their repr alone, everything else is labelled with its type.
    Long reprs are truncated and broken __repr__ methods do not raise.

    Examples:
        >>> fmt_value(42)
        '42'
        >>> fmt_value("abc")
        "'abc'"
        >>> fmt_value([1, 2, 3])
        '<list: [1, 2, 3]>'
    """
    repr_ = _safe_repr(obj)
    if len(repr_) > max_repr:
        repr_ = repr_[:max(1, max_repr)] + ellipsis

    if type(obj) in PRIMITIVE_TYPES:
        return repr_
    return f"<{type(obj).__name__}: {repr_}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _safe_repr(obj) -> str:
    """
    Defensive repr() call - handle broken __repr__ methods gracefully
    """
    try:
        repr_ = repr(obj)
    except Exception as e:
        # Fallback for broken __repr__: show type and exception info
        repr_ = f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"
    return repr_
