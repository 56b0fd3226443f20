"""
Width-cost accounting for padding decisions.

Every padding decision in the renderer goes through this module. A character
costs as many width units as the bytes it occupies in UTF-8, so ASCII text
costs one unit per character and a 4-byte emoji costs four. It stands in for
a display-width table: swapping the unit means replacing `char_width()` only.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Final

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value

ENCODING: Final[str] = "utf-8"


# Methods --------------------------------------------------------------------------------------------------------------

def char_width(ch: str) -> int:
    """
    Width cost of a single character.

    Examples:
        >>> char_width("1")
        1
        >>> char_width("€")
        3
        >>> char_width("🖤")
        4
    """
    if not isinstance(ch, str):
        raise TypeError(f"character must be str, but got {fmt_type(ch)}")
    if len(ch) != 1:
        raise ValueError(f"exactly one character expected, but got {fmt_value(ch)}")
    return len(ch.encode(ENCODING))


def text_width(text: str) -> int:
    """
    Width cost of a string, the sum of its character costs.

    Examples:
        >>> text_width("-0x1f")
        5
        >>> text_width("🖤1")
        5
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, but got {fmt_type(text)}")
    return sum(char_width(ch) for ch in text)


def fill_run(fill: str, deficit: int) -> str:
    """
    Repeat the fill character as many whole times as fit into deficit width units.

    A multibyte fill may leave part of the deficit unused; the run never exceeds it.

    Args:
        fill: Single fill character.
        deficit: Width units to cover, negative values are treated as zero.

    Returns:
        str: The padding run.

    Examples:
        >>> fill_run("*", 3)
        '***'
        >>> fill_run("🖤", 5)
        '🖤'
        >>> fill_run("🖤", 3)
        ''
    """
    if deficit <= 0:
        return ""
    return fill * (deficit // char_width(fill))
