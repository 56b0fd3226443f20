"""
Sentinel objects for format spec fields that are not plain values.

A width or precision field is either a non-negative int, UNSET (nothing given,
the renderer falls back to its default) or DYNAMIC (the `$` marker, value
supplied at render time). Both sentinels use identity checks (using 'is')
rather than equality checks.

Sentinels:
    UNSET: Represents a field that was not provided (distinguishes from None)
    DYNAMIC: Marks a field whose value is deferred to render time

Helper Functions:
    ifnotunset: Return default if value is UNSET, otherwise return value

Example:
    >>> width = spec.width
    >>> if width is DYNAMIC:
    ...     width = overrides.width
    >>> width = ifnotunset(width, default=0)
"""

from typing import Any, Callable, Final

__all__ = [
    'UNSET',
    'DYNAMIC',
    'UnsetType',
    'DynamicType',
    'ifnotunset',
]


# Base Sentinel --------------------------------------------------------------------------------------------------------

class _SentinelBase:
    """
    Base class for all sentinel objects.

    Sentinels are singleton objects optimized for identity checks.
    They provide clean representations and consistent behavior.
    """
    __slots__ = ('_name',)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        """Returns a clean string representation for debugging."""
        return f'<{self._name}>'

    def __eq__(self, other: Any) -> bool:
        """Ensures identity-based comparison."""
        return self is other

    def __hash__(self) -> int:
        """Returns a hash based on object identity."""
        return id(self)

    def __bool__(self) -> bool:
        """Returns False by default (sentinels are typically falsy)."""
        return False

    def __reduce__(self) -> tuple:
        """Ensures proper behavior during pickling."""
        return (self.__class__, (self._name,))


# Sentinel Types -----------------------------------------------------------------------------------------------------

class DynamicType(_SentinelBase):
    """
    Sentinel type for DYNAMIC.

    Marks a width or precision whose value must be supplied at render time.
    Parsed from the `$` marker of a format string.
    """
    _instance: 'DynamicType | None' = None

    def __new__(cls) -> 'DynamicType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, '_name'):
            super().__init__("DYNAMIC")

    def __bool__(self) -> bool:
        """Returns True as DYNAMIC announces a value, just not yet a known one."""
        return True

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


class UnsetType(_SentinelBase):
    """
    Sentinel type for UNSET.

    Used to distinguish between 'not provided' and 'explicitly set to None'.
    """
    _instance: 'UnsetType | None' = None

    def __new__(cls) -> 'UnsetType':
        """Ensures singleton behavior."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        if not hasattr(self, '_name'):
            super().__init__("UNSET")

    def __reduce__(self) -> tuple:
        """Ensure pickling returns the singleton instance."""
        return (self.__class__, ())


# Sentinel Objects -----------------------------------------------------------------------------------------------------

DYNAMIC: Final[DynamicType] = DynamicType()
"""
Sentinel marking a field deferred to render time.

Use with identity check: `if spec.width is DYNAMIC:`
"""

UNSET: Final[UnsetType] = UnsetType()
"""
Sentinel representing an unprovided field or argument.

Use with identity check: `if arg is UNSET:`

This is particularly useful when None is a valid input value.
"""


# Helper Functions -----------------------------------------------------------------------------------------------------

def ifnotunset(value: Any, *, default: Any = None, default_factory: Callable[[], Any] | None = None) -> Any:
    """
    Return value if it's not UNSET, otherwise return default.

    Args:
        value: The value to check. If not UNSET, this value is returned.
        default: The fallback value when value is UNSET.
        default_factory: Callable returning the fallback value. Takes precedence over default.

    Returns:
        The value itself if not UNSET, otherwise the default (or result of default_factory).

    Raises:
        ValueError: If both default and default_factory are provided.

    Example:
        >>> ifnotunset(UNSET, default=0)
        0
        >>> ifnotunset(8, default=0)
        8
        >>> ifnotunset(None, default=0) is None  # None is a value, not UNSET
        True
    """
    if value is not UNSET:
        return value

    if default_factory is not None and default is not None:
        raise ValueError("Cannot specify both default and default_factory")

    if default_factory is not None:
        return default_factory()

    return default
