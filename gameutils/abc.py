"""
Attribute-level helpers for game state objects.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import fields, is_dataclass
from typing import Any, Iterable, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import class_name, fmt_type, fmt_value

T = TypeVar("T")


# Methods --------------------------------------------------------------------------------------------------------------

def assign_attrs(target: T, source: T, attrs: Iterable[str] | None = None) -> T:
    """
    Copy attribute values from source onto target and return target.

    Updates an existing object in place, so every holder of a reference to target
    sees the new state. Only the named attributes are written; values are assigned,
    not deep-copied.

    Args:
        target: object to update.
        source: object to read values from, an instance of type(target).
        attrs: attribute names to copy. If None, copies every dataclass field,
               or every instance attribute found in __dict__ and __slots__.

    Returns:
        The target object.

    Raises:
        ValueError: If target or source is None.
        TypeError: If source is not an instance of type(target), or attrs is a str.
        AttributeError: If a named attribute is missing on source or read-only on target.
            Both are checked for every name before the first write.
        dataclasses.FrozenInstanceError: If target is a frozen dataclass.

    A custom __setattr__ that rejects some names is not detected up front.

    Examples:
        >>> @dataclass
        ... class Unit:
        ...     hp: int
        ...     armor: int
        >>> a, b = Unit(hp=10, armor=1), Unit(hp=99, armor=5)
        >>> assign_attrs(a, b, ["hp"])
        Unit(hp=99, armor=1)
    """
    if target is None:
        raise ValueError("target must not be None")
    if source is None:
        raise ValueError("source must not be None")
    if not isinstance(source, type(target)):
        raise TypeError(f"source must be an instance of {class_name(target)}, but got {fmt_type(source)}")
    if isinstance(attrs, str):
        raise TypeError(f"attrs must be an iterable of names, not a single str: {fmt_value(attrs)}")

    names = list(attrs) if attrs is not None else _instance_attrs(target)
    for name in names:
        if not hasattr(source, name):
            raise AttributeError(f"{class_name(source)} has no attribute {fmt_value(name)}")
        if not _is_writable(target, name):
            raise AttributeError(f"{class_name(target)} attribute {fmt_value(name)} is read-only")

    for name in names:
        setattr(target, name, getattr(source, name))
    return target


# Private Methods ------------------------------------------------------------------------------------------------------

def _is_writable(obj: Any, name: str) -> bool:
    """False for getter-only properties, and for names with no slot on objects without __dict__."""
    for cls in type(obj).__mro__:
        if name in cls.__dict__:
            attr = cls.__dict__[name]
            if isinstance(attr, property):
                return attr.fset is not None
            if hasattr(type(attr), "__set__"):
                # Slot members and other data descriptors
                return True
            break
    return hasattr(obj, "__dict__")


def _instance_attrs(obj: Any) -> list[str]:
    """Names of per-instance state: dataclass fields, else __dict__ and __slots__ entries."""
    if is_dataclass(obj):
        return [f.name for f in fields(obj)]

    names = list(getattr(obj, "__dict__", {}))
    for cls in type(obj).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot not in ("__dict__", "__weakref__") and slot not in names and hasattr(obj, slot):
                names.append(slot)
    return names
