"""
Gameutils Collections
"""

# Standard library -----------------------------------------------------------------------------------------------------
from collections.abc import MutableMapping
from typing import TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type

K = TypeVar("K")
V = TypeVar("V")


# Methods --------------------------------------------------------------------------------------------------------------

def try_add(mapping: MutableMapping[K, V], key: K, value: V) -> bool:
    """
    Insert key -> value only if key is not already present.

    Unlike dict.setdefault(), the return value tells whether the insert happened,
    and an existing entry is never touched.

    Returns:
        True if the pair was inserted, False if key already existed.

    Raises:
        TypeError: If mapping is not a MutableMapping, or key is unhashable.

    Examples:
        >>> scores = {"alice": 10}
        >>> try_add(scores, "alice", 99)
        False
        >>> try_add(scores, "bob", 5)
        True
        >>> scores
        {'alice': 10, 'bob': 5}
    """
    if not isinstance(mapping, MutableMapping):
        raise TypeError(f"mapping must be a MutableMapping, but got {fmt_type(mapping)}")
    if key in mapping:
        return False
    mapping[key] = value
    return True
