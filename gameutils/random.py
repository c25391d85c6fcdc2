"""
Gameutils Random Tools
"""

# Standard library -----------------------------------------------------------------------------------------------------
import collections.abc as abc
import random
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type

# Process-wide generator shared by unseeded calls
_RNG = random.Random()


# Methods --------------------------------------------------------------------------------------------------------------

def shuffle(items: abc.MutableSequence[Any], *, seed: int | None = None) -> None:
    """
    Shuffle a mutable sequence in place (Fisher-Yates).

    Every permutation is equally likely. The sequence keeps its identity,
    so other references to it see the shuffled order.

    Args:
        items: list or other MutableSequence to reorder.
        seed: If provided, use a dedicated deterministic RNG seeded with this value.
              If None, use the process-wide generator of this module.

    Raises:
        TypeError: If items is not a mutable sequence.

    Examples:
        >>> deck = list(range(5))
        >>> shuffle(deck, seed=42)
        >>> sorted(deck)
        [0, 1, 2, 3, 4]
    """
    if not isinstance(items, abc.MutableSequence):
        raise TypeError(f"items must be a mutable sequence, but got {fmt_type(items)}")

    rng = random.Random(seed) if seed is not None else _RNG
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]


def seed_shared(seed: int | None = None) -> None:
    """
    Reseed the process-wide generator used by unseeded shuffle() calls.

    Does not touch the global state of the stdlib random module.
    """
    _RNG.seed(seed)
