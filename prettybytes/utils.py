"""
Prettybytes utilities shared across the package.

Type and value labels for exception messages, kept here to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import reprlib
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Returns class name whether given an instance or the class itself.
    For example, both `class_name(10)` and `class_name(int)` return 'int'.

    Builtins are never module-qualified.

    Examples:
        >>> class_name(10)
        'int'
        >>> from decimal import Decimal
        >>> class_name(Decimal, fully_qualified=True)
        'decimal.Decimal'
    """
    cls = obj if isinstance(obj, type) else obj.__class__

    if fully_qualified and cls.__module__ != "builtins":
        return f"{cls.__module__}.{cls.__name__}"
    return cls.__name__


def fmt_type(obj: Any, *, fully_qualified: bool = False) -> str:
    """Format type information for exception messages.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(ValueError)
        '<ValueError>'
    """
    return f"<{class_name(obj, fully_qualified=fully_qualified)}>"


_repr = reprlib.Repr()
_repr.maxstring = 60
_repr.maxother = 60


def fmt_value(obj: Any) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Long reprs are shortened, a broken __repr__ falls back to an instance label.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("KB")
        "<str: 'KB'>"
    """
    value_repr = _repr.repr(obj)
    # Inner '>' would clash with the wrapper brackets
    value_repr = value_repr.replace(">", "\\>")
    return f"<{class_name(obj)}: {value_repr}>"
