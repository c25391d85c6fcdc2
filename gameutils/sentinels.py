"""
Sentinel object for distinguishing an unprovided argument from an explicit None.

Example:
    >>> def merge(mode: DisplayMode | UnsetType = UNSET):
    ...     mode = self.mode if mode is UNSET else mode
"""

from typing import Final

__all__ = [
    'UNSET',
    'UnsetType',
]


# Sentinel Types -------------------------------------------------------------------------------------------------------

class UnsetType:
    """
    Sentinel type for UNSET.

    Singleton, falsy, compared by identity and preserved through pickling.
    """
    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<UNSET>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


# Sentinel Objects -----------------------------------------------------------------------------------------------------

UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing an unprovided optional argument.

Use with identity check: `if arg is UNSET:`
"""
