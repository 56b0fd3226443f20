"""
Fluent builder for FormatSpec, the non-string construction path.

Reaches every FormatSpec field, including those the string grammar cannot express:
an arbitrary group separator, an explicit "no separator", an arbitrary decimal separator.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import fields
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import DYNAMIC, UNSET
from .spec import Align, Format, FormatConf, FormatSpec, PadMode, Sign
from .utils import fmt_type


# Classes --------------------------------------------------------------------------------------------------------------

class FormatSpecBuilder:
    """
    Mutable, chainable collector of FormatSpec fields.

    Each setter returns the builder; build() validates and returns an immutable FormatSpec.

    Examples:
        >>> spec = (FormatSpecBuilder()
        ...         .separator(".")
        ...         .decimal_separator(",")
        ...         .precision(2)
        ...         .build())
        >>> spec.render(1234567.891)
        '1.234.567,89'

        >>> FormatSpecBuilder().fill("🖤").width(6).build().render(1)
        '🖤1'
    """

    def __init__(self):
        self._fields: dict[str, Any] = {}

    @classmethod
    def from_spec(cls, spec: FormatSpec) -> Self:
        """Return a builder preloaded with every field of spec."""
        if not isinstance(spec, FormatSpec):
            raise TypeError(f"spec must be FormatSpec, but got {fmt_type(spec)}")
        builder = cls()
        builder._fields = {f.name: getattr(spec, f.name) for f in fields(spec)}
        return builder

    def build(self) -> FormatSpec:
        """
        Validate the collected fields and return a FormatSpec.

        Raises:
            TypeError, ValueError: If a field or field combination is invalid.
        """
        return FormatSpec(**self._fields)

    # Leading flags --------------------------------------------------------

    def fill(self, ch: str) -> Self:
        """
        Pad unused width with ch.

        Sets an explicit fill: sign and prefix are emitted before the padding and
        do not count toward the width. Replaces the zero flag if it was set.
        Wide characters count by their UTF-8 byte length.
        """
        self._fields.update(fill=ch, pad_mode=PadMode.EXPLICIT)
        return self

    def align(self, align: Align | str) -> Self:
        """Set the alignment within width. See Align."""
        self._fields["align"] = align
        return self

    def zero(self, flag: bool = True) -> Self:
        """
        Engage or clear the zero flag.

        The zero flag means fill '0', right alignment (decimal alignment is kept)
        and sign/prefix counted toward width:

            "-03" renders -1 as "-01", while "0>-3" renders it as "-001".

        Clearing it restores the default space fill only if the zero flag is set;
        an explicit fill is left alone.
        """
        if flag:
            align = self._fields.get("align", Align.RIGHT)
            if align != Align.DECIMAL:
                align = Align.RIGHT
            self._fields.update(fill=FormatConf.ZERO_FILL, align=align, pad_mode=PadMode.ZERO)
        elif self._fields.get("pad_mode") is PadMode.ZERO:
            self._fields.update(fill=FormatConf.DEFAULT_FILL, pad_mode=PadMode.DEFAULT)
        return self

    # Sign and prefix ------------------------------------------------------

    def sign(self, sign: Sign | str) -> Self:
        """Set the sign policy. See Sign."""
        self._fields["sign"] = sign
        return self

    def alternate(self, flag: bool = True) -> Self:
        """
        Emit the base prefix before the digits.

        - binary: `0b`
        - octal: `0o`
        - decimal: `0d`
        - hex: `0x`

        Corresponds to the `#` format specifier.
        """
        self._fields["alternate"] = flag
        return self

    # Width and precision --------------------------------------------------

    def width(self, width: int | None) -> Self:
        """Set a fixed minimum width; None resets to unset (width 0)."""
        self._fields["width"] = UNSET if width is None else width
        return self

    def dynamic_width(self) -> Self:
        """Defer width to render time, like `$` in a format string."""
        self._fields["width"] = DYNAMIC
        return self

    def precision(self, precision: int | None) -> Self:
        """
        Set the count of fractional digits for floats; None resets to unset.

        Ignored for integers. Native digits are rounded or padded with '0',
        never with the fill character.
        """
        self._fields["precision"] = UNSET if precision is None else precision
        return self

    def dynamic_precision(self) -> Self:
        """Defer precision to render time, like `.$` in a format string."""
        self._fields["precision"] = DYNAMIC
        return self

    # Digits ---------------------------------------------------------------

    def format(self, fmt: Format | str) -> Self:
        """Set the base of the integral digits. See Format."""
        self._fields["format"] = fmt
        return self

    def separator(self, ch: str | None) -> Self:
        """
        Set the group separator, any single character.

        None states explicitly that digits are not grouped.
        """
        self._fields["separator"] = ch
        return self

    def no_separator(self) -> Self:
        """Explicitly disable grouping, same as separator(None)."""
        return self.separator(None)

    def spacing(self, spacing: int) -> Self:
        """Set the digits per group, only of interest with a separator. Default 3."""
        self._fields["spacing"] = spacing
        return self

    def decimal_separator(self, ch: str) -> Self:
        """
        Set the decimal separator.

        Combined with separator(".") this gives German style "1.234,5".
        """
        self._fields["decimal_separator"] = ch
        return self
