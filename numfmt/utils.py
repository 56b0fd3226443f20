"""
Numfmt utilities shared across the package.

Small formatters used to build exception messages. Kept here to avoid
circular imports between the spec, parser and render modules.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any) -> str:
    """
    Format type information for exception messages.

    Args:
        obj: Any Python object or type.

    Returns:
        str: Type label like '<type: int>'.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(str)
        '<type: str>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    type_name = getattr(target_type, "__name__", None) or str(target_type)
    return f"<type: {type_name}>"


def fmt_value(x: Any, *, max_repr: int = 80) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Broken __repr__ methods are handled gracefully, overlong reprs are truncated
    and ">" is escaped so the wrapper brackets stay unambiguous.

    Args:
        x: Any Python object.
        max_repr: Maximum length of the value's repr before truncation.

    Returns:
        str: Label like "<int: 42>" or "<str: '#04x'>".

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("#04x")
        "<str: '#04x'>"
    """
    t = type(x).__name__
    try:
        r = repr(x)
    except Exception as e:
        r = f"<{t} object (repr failed: {type(e).__name__})>"
    r = r.replace(">", "\\>")
    if len(r) > max_repr:
        r = r[:max(max_repr - 3, 0)] + "..."
    return f"<{t}: {r}>"


def fmt_char(ch: str) -> str:
    """
    Format a single character with its code point for exception messages.

    Makes whitespace and multibyte characters visible where a plain repr is ambiguous.

    Examples:
        >>> fmt_char(";")
        "';' (U+003B)"
        >>> fmt_char(" ")
        "' ' (U+0020)"
    """
    if not isinstance(ch, str) or len(ch) != 1:
        return fmt_value(ch)
    return f"{ch!r} (U+{ord(ch):04X})"
