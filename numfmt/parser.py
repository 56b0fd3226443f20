"""
Single-pass parser turning a format string into a FormatSpec.

Grammar, all groups optional and order-sensitive:

    format_spec := [[fill]align][sign]['#'][['0']width]['.' precision][format][separator[spacing]]
    fill        := any single character (if followed immediately by align)
    align       := '<' | '^' | '>' | 'v'
    sign        := '+' | '-'
    width       := '$' | (decimal digits, first digit not '0')
    precision   := '$' | (decimal digits)
    format      := 'b' | 'o' | 'd' | 'x' | 'X'
    separator   := '_' | ',' | ' '
    spacing     := decimal digits

The parser only captures intent: no rounding, no rendering. A string is accepted
wholesale or rejected with a ParseError subclass naming the offending position.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import DYNAMIC, DynamicType
from .spec import Align, FormatConf, FormatSpec, Format, PadMode, Sign
from .utils import fmt_char, fmt_type, fmt_value


# Exceptions -----------------------------------------------------------------------------------------------------------

class ParseError(ValueError):
    """
    Format string rejected by the parser.

    Attributes:
        reason: What went wrong, without position details.
        text: The rejected format string.
        position: Index of the offending character in text.
    """

    def __init__(self, reason: str, *, text: str, position: int):
        self.reason = reason
        self.text = text
        self.position = position
        super().__init__(f"{reason} at index {position} of format spec {fmt_value(text)}")


class UnknownFormatError(ParseError):
    """A letter in the format-type position is not one of b, o, d, x, X."""


class MalformedNumberError(ParseError):
    """A width, precision or spacing token is empty, zero-led or out of range."""


class UnknownSeparatorError(ParseError):
    """A character in the separator position is not one of '_', ',', ' '."""


class TrailingInputError(ParseError):
    """Characters remain after the grammar was fully matched."""


class FlagConflictError(ParseError):
    """The zero flag followed an explicit fill+align pair."""


# Methods --------------------------------------------------------------------------------------------------------------

def parse_spec(text: str) -> FormatSpec:
    """
    Parse a format string into a validated FormatSpec.

    Args:
        text: Format string, e.g. "0>-3", "#04b", "-^$", "v-10.2", "-v-#012.3d 4".

    Returns:
        FormatSpec: Immutable descriptor; the empty string yields the default spec.

    Raises:
        TypeError: If text is not a str.
        UnknownFormatError: Unknown format-type letter.
        MalformedNumberError: Missing or malformed width, precision or spacing.
        UnknownSeparatorError: Unrecognized separator character.
        TrailingInputError: Unconsumed characters after the grammar.
        FlagConflictError: Zero flag after an explicit fill+align pair.

    Examples:
        >>> parse_spec("0>-3").render(-1)
        '-001'
        >>> parse_spec("-03").render(-1)
        '-01'
        >>> parse_spec(".2").render(3.14159)
        '3.14'
        >>> parse_spec("5q")
        Traceback (most recent call last):
            ...
        numfmt.parser.UnknownFormatError: unknown format type 'q' (U+0071) at index 1 of format spec <str: '5q'>
    """
    if not isinstance(text, str):
        raise TypeError(f"format spec must be str, but got {fmt_type(text)}")
    return _SpecParser(text).parse()


# Private Classes ------------------------------------------------------------------------------------------------------

class _SpecParser:
    """
    Left-to-right scanner with one character of lookahead.

    Each _parse_* step consumes its optional group and records fields;
    parse() assembles them into a FormatSpec.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.fields: dict[str, Any] = {}

    def parse(self) -> FormatSpec:
        self._parse_fill_align()
        self._parse_sign()
        self._parse_alternate()
        zero = self._parse_zero()
        self._parse_width(zero)
        self._parse_precision()
        self._parse_format()
        self._parse_separator()
        if self.pos < len(self.text):
            self._fail(TrailingInputError, f"unexpected trailing input {self.text[self.pos:]!r}")
        return FormatSpec(**self.fields)

    # Cursor ---------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str | None:
        i = self.pos + offset
        return self.text[i] if i < len(self.text) else None

    def _take_digits(self) -> str:
        start = self.pos
        while (ch := self._peek()) is not None and ch in FormatConf.DIGITS:
            self.pos += 1
        return self.text[start:self.pos]

    def _fail(self, error: type[ParseError], reason: str, position: int | None = None):
        raise error(reason, text=self.text, position=self.pos if position is None else position)

    # Grammar steps --------------------------------------------------------

    def _parse_fill_align(self):
        first, second = self._peek(), self._peek(1)
        if first is None:
            return
        if first not in FormatConf.ALIGN_CHARS and second is not None and second in FormatConf.ALIGN_CHARS:
            self.fields.update(fill=first, align=Align(second), pad_mode=PadMode.EXPLICIT)
            self.pos += 2
        elif first in FormatConf.ALIGN_CHARS:
            self.fields["align"] = Align(first)
            self.pos += 1

    def _parse_sign(self):
        ch = self._peek()
        if ch is not None and ch in FormatConf.SIGN_CHARS:
            self.fields["sign"] = Sign(ch)
            self.pos += 1

    def _parse_alternate(self):
        if self._peek() == FormatConf.ALTERNATE_MARK:
            self.fields["alternate"] = True
            self.pos += 1

    def _parse_zero(self) -> bool:
        if self._peek() != FormatConf.ZERO_MARK:
            return False

        if self.fields.get("pad_mode") is PadMode.EXPLICIT:
            self._fail(FlagConflictError,
                       f"zero flag conflicts with explicit fill {fmt_char(self.fields['fill'])}")
        # zero flag implies right alignment, decimal alignment is kept
        align = self.fields.get("align", Align.RIGHT)
        if align is not Align.DECIMAL:
            align = Align.RIGHT

        self.fields.update(fill=FormatConf.ZERO_FILL, align=align, pad_mode=PadMode.ZERO)
        self.pos += 1
        return True

    def _parse_width(self, zero: bool):
        ch = self._peek()
        if ch == FormatConf.ZERO_MARK:
            # only reachable right after the zero flag, as in "005"
            self._fail(MalformedNumberError, "width must not start with '0'")
        width = self._parse_count()
        if width is None:
            if zero:
                self._fail(MalformedNumberError, "zero flag must be followed by a width")
            return
        self.fields["width"] = width

    def _parse_precision(self):
        if self._peek() != FormatConf.PRECISION_MARK:
            return
        self.pos += 1
        precision = self._parse_count()
        if precision is None:
            self._fail(MalformedNumberError, "precision digits or '$' expected after '.'")
        self.fields["precision"] = precision

    def _parse_format(self):
        ch = self._peek()
        if ch is None:
            return
        if ch in FormatConf.FORMAT_CHARS:
            self.fields["format"] = Format(ch)
            self.pos += 1
        elif ch.isalpha():
            self._fail(UnknownFormatError, f"unknown format type {fmt_char(ch)}")

    def _parse_separator(self):
        ch = self._peek()
        if ch is None:
            return
        if ch in FormatConf.SEPARATOR_CHARS:
            self.fields["separator"] = ch
            self.pos += 1
            start = self.pos
            spacing = self._take_digits()
            if spacing:
                if int(spacing) < 1:
                    self._fail(MalformedNumberError, "spacing must be >= 1", position=start)
                self.fields["spacing"] = int(spacing)
        elif not ch.isalnum() and ch not in _GRAMMAR_SIGILS:
            self._fail(UnknownSeparatorError,
                       f"unknown separator {fmt_char(ch)}, one of {FormatConf.SEPARATOR_CHARS!r} expected")

    def _parse_count(self) -> int | DynamicType | None:
        """Digits or the dynamic marker; None if neither is present."""
        if self._peek() == FormatConf.DYNAMIC_MARK:
            self.pos += 1
            return DYNAMIC
        digits = self._take_digits()
        return int(digits) if digits else None


# Grammar characters which are misplaced rather than unknown when met in the separator position
_GRAMMAR_SIGILS = (FormatConf.ALIGN_CHARS + FormatConf.SIGN_CHARS + FormatConf.ALTERNATE_MARK
                   + FormatConf.DYNAMIC_MARK + FormatConf.PRECISION_MARK)
