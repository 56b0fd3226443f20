"""
Format spec data model: enums, defaults and the immutable FormatSpec descriptor.

A FormatSpec is built once, from a format string or from a builder, validated on
construction and then reused to render any number of values.
"""

# ## Leading flags
#
# The fill/align/zero region of a format string resolves to one of three padding modes,
# which the renderer treats as two width-accounting branches:
#
#   PadMode.DEFAULT   no fill given, sign and prefix pad together with the digits
#   PadMode.ZERO      "0" flag, zeros go between sign/prefix and digits, all counted
#   PadMode.EXPLICIT  fill+align pair, sign/prefix are emitted first and not counted
#
# Example:
#   parse_spec("-03").render(-1)  -> "-01"
#   parse_spec("0>-3").render(-1) -> "-001"

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique
from string import digits
from typing import TYPE_CHECKING, Any, Final, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .sentinels import DYNAMIC, UNSET, DynamicType, UnsetType
from .utils import fmt_char, fmt_type, fmt_value

if TYPE_CHECKING:
    from .builder import FormatSpecBuilder
    from .dynamic import DynamicOverrides


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class Align(StrEnum):
    """
    Positioning of the rendered number within the requested width.

    Attributes:
        LEFT: "<" padding after the content.
        CENTER: "^" padding split around the content, the odd repeat goes after.
        RIGHT: ">" padding before the content (default).
        DECIMAL: "v" the decimal separator lands at column index `width`.
                 Integers behave as RIGHT.
    """
    LEFT = "<"
    CENTER = "^"
    RIGHT = ">"
    DECIMAL = "v"


@unique
class Sign(StrEnum):
    """
    Which signs are printed with the number.

    NEGATIVE_ONLY prints "-" for negatives only (default), ALWAYS adds "+" for the rest.
    """
    NEGATIVE_ONLY = "-"
    ALWAYS = "+"


@unique
class Format(StrEnum):
    """
    Base in which the integral digits are rendered.

    Values double as the presentation codes accepted by the builtin format().
    Fractional digits are always decimal.
    """
    BINARY = "b"
    OCTAL = "o"
    DECIMAL = "d"
    HEX_LOWER = "x"
    HEX_UPPER = "X"

    @property
    def prefix(self) -> str:
        """Two-character base prefix emitted by the alternate ('#') form."""
        return FormatConf.PREFIXES[self]


@unique
class PadMode(StrEnum):
    """
    Resolved leading-flags region of a format spec.

    Attributes:
        DEFAULT: Neither an explicit fill nor the zero flag was given.
        EXPLICIT: A fill character was given together with an alignment.
        ZERO: The "0" flag: fill "0", right or decimal alignment, sign and prefix count toward width.
    """
    DEFAULT = "default"
    EXPLICIT = "explicit"
    ZERO = "zero"
# @formatter:on


class FormatConf:
    """
    Default configuration constants for FormatSpec parsing and rendering.

    Attributes:
        DEFAULT_FILL: Fill used when no fill character is given.
        ZERO_FILL: Fill implied by the zero flag.
        DEFAULT_SPACING: Digits per group when a separator is set.
        DEFAULT_DECIMAL_SEPARATOR: Character between integral and fractional digits.
        ALIGN_CHARS, SIGN_CHARS, FORMAT_CHARS, SEPARATOR_CHARS: Grammar alphabets.
        DIGITS: ASCII decimal digits; str.isdigit() accepts superscripts and is not used.
        PREFIXES: Base prefixes of the alternate form, per Format.
    """

    DEFAULT_FILL: Final[str] = " "
    ZERO_FILL: Final[str] = "0"
    DEFAULT_SPACING: Final[int] = 3
    DEFAULT_DECIMAL_SEPARATOR: Final[str] = "."

    # Grammar
    ALIGN_CHARS: Final[str] = "<^>v"
    SIGN_CHARS: Final[str] = "+-"
    FORMAT_CHARS: Final[str] = "bodxX"
    SEPARATOR_CHARS: Final[str] = "_, "
    DIGITS: Final[str] = digits
    ALTERNATE_MARK: Final[str] = "#"
    DYNAMIC_MARK: Final[str] = "$"
    PRECISION_MARK: Final[str] = "."
    ZERO_MARK: Final[str] = "0"

    PREFIXES: Final[dict[str, str]] = {
        "b": "0b",
        "o": "0o",
        "d": "0d",
        "x": "0x",
        "X": "0x",
    }


@dataclass(frozen=True)
class FormatSpec:
    """
    Immutable, validated description of how to render a number.

    Build one with parse_spec() / FormatSpec.parse(), or field by field with
    FormatSpec.builder(). Every field combination that passes validation renders;
    the only render-time failure is a DYNAMIC field without an override.

    Attributes:
        fill: Single character padding unused width. Default space.
        align: Alignment within width. Default Align.RIGHT.
        sign: Sign policy. Default Sign.NEGATIVE_ONLY.
        alternate: Emit the base prefix ("0b", "0o", "0d", "0x") between sign and digits.
        pad_mode: Resolved leading flags, see PadMode.
        width: Minimum width in width-cost units: int >= 0, UNSET (0) or DYNAMIC.
        precision: Fractional digits for floats: int >= 0, UNSET (native digits) or DYNAMIC.
            Ignored for integers.
        format: Base of the integral digits. Default Format.DECIMAL.
        separator: Group separator character; UNSET for the default of no grouping,
            None for an explicit "no grouping" (builder only).
        spacing: Digits per group, >= 1. Default 3.
        decimal_separator: Character between integral and fractional digits. Default ".".

    Examples:
        >>> spec = FormatSpec.parse("#04b")
        >>> spec.render(2)
        '0b10'
        >>> spec.zero_flag, spec.width, spec.format
        (True, 4, <Format.BINARY: 'b'>)

        >>> FormatSpec.parse("-^$").render_with(1, width=5)
        '--1--'
    """

    fill: str = FormatConf.DEFAULT_FILL
    align: Align = Align.RIGHT
    sign: Sign = Sign.NEGATIVE_ONLY
    alternate: bool = False
    pad_mode: PadMode = PadMode.DEFAULT
    width: int | UnsetType | DynamicType = UNSET
    precision: int | UnsetType | DynamicType = UNSET
    format: Format = Format.DECIMAL
    separator: str | None | UnsetType = UNSET
    spacing: int = FormatConf.DEFAULT_SPACING
    decimal_separator: str = FormatConf.DEFAULT_DECIMAL_SEPARATOR

    def __post_init__(self):
        """
        Validate and normalize fields
        """
        # enums accept their members or the grammar characters
        object.__setattr__(self, "align", _as_enum(Align, self.align, "align"))
        object.__setattr__(self, "sign", _as_enum(Sign, self.sign, "sign"))
        object.__setattr__(self, "pad_mode", _as_enum(PadMode, self.pad_mode, "pad_mode"))
        object.__setattr__(self, "format", _as_enum(Format, self.format, "format"))

        if not isinstance(self.alternate, bool):
            raise TypeError(f"alternate must be bool, but got {fmt_type(self.alternate)}")

        _validate_char(self.fill, "fill")
        _validate_char(self.decimal_separator, "decimal_separator")
        if self.separator is not UNSET and self.separator is not None:
            _validate_char(self.separator, "separator")

        _validate_count(self.width, "width")
        _validate_count(self.precision, "precision")

        if isinstance(self.spacing, bool) or not isinstance(self.spacing, int):
            raise TypeError(f"spacing must be int, but got {fmt_type(self.spacing)}")
        if self.spacing < 1:
            raise ValueError(f"spacing must be >= 1, but got {fmt_value(self.spacing)}")

        if self.pad_mode is PadMode.DEFAULT and self.fill != FormatConf.DEFAULT_FILL:
            raise ValueError(f"fill {fmt_char(self.fill)} requires pad_mode 'explicit', "
                             f"but got {fmt_value(self.pad_mode.value)}")

        # zero flag is shorthand for fill '0' with right-hand alignment
        if self.pad_mode is PadMode.ZERO:
            if self.fill != FormatConf.ZERO_FILL:
                raise ValueError(f"zero flag requires fill '0', but got fill {fmt_char(self.fill)}")
            if self.align not in (Align.RIGHT, Align.DECIMAL):
                raise ValueError(f"zero flag requires right or decimal alignment, "
                                 f"but got {fmt_value(self.align.value)}")

    @classmethod
    def parse(cls, text: str) -> Self:
        """
        Parse a format string into a FormatSpec.

        See parse_spec() for the grammar.

        Raises:
            ParseError: If the string does not match the grammar.
        """
        from .parser import parse_spec
        return parse_spec(text)

    @classmethod
    def builder(cls) -> "FormatSpecBuilder":
        """Return a fresh FormatSpecBuilder, the non-string construction path."""
        from .builder import FormatSpecBuilder
        return FormatSpecBuilder()

    def to_builder(self) -> "FormatSpecBuilder":
        """Return a FormatSpecBuilder preloaded with the fields of this spec."""
        from .builder import FormatSpecBuilder
        return FormatSpecBuilder.from_spec(self)

    def merge(self,
              fill: str | UnsetType = UNSET,
              align: Align | str | UnsetType = UNSET,
              sign: Sign | str | UnsetType = UNSET,
              alternate: bool | UnsetType = UNSET,
              pad_mode: PadMode | str | UnsetType = UNSET,
              width: int | DynamicType | UnsetType = UNSET,
              precision: int | DynamicType | UnsetType = UNSET,
              format: Format | str | UnsetType = UNSET,
              separator: str | None | UnsetType = UNSET,
              spacing: int | UnsetType = UNSET,
              decimal_separator: str | UnsetType = UNSET,
              ) -> "FormatSpec":
        """
        Create a new FormatSpec instance with merged fields.

        Parameters not provided (UNSET) are inherited from the current instance,
        so merge() cannot reset width, precision or separator back to UNSET;
        use the builder for that. A fill given without pad_mode switches to
        PadMode.EXPLICIT, as FormatSpecBuilder.fill() does.

        Returns:
            New validated FormatSpec instance.
        """
        if fill is not UNSET and pad_mode is UNSET:
            pad_mode = PadMode.EXPLICIT

        return FormatSpec(
            fill=self.fill if fill is UNSET else fill,
            align=self.align if align is UNSET else align,
            sign=self.sign if sign is UNSET else sign,
            alternate=self.alternate if alternate is UNSET else alternate,
            pad_mode=self.pad_mode if pad_mode is UNSET else pad_mode,
            width=self.width if width is UNSET else width,
            precision=self.precision if precision is UNSET else precision,
            format=self.format if format is UNSET else format,
            separator=self.separator if separator is UNSET else separator,
            spacing=self.spacing if spacing is UNSET else spacing,
            decimal_separator=self.decimal_separator if decimal_separator is UNSET else decimal_separator,
        )

    def render(self, value: Any) -> str:
        """
        Render a number without dynamic overrides.

        Raises:
            MissingDynamicValueError: If width or precision is DYNAMIC.
            TypeError: If value is not an integer or float.
        """
        from .render import render_number
        return render_number(self, value)

    def render_with(self,
                    value: Any,
                    overrides: "DynamicOverrides | None" = None,
                    *,
                    width: int | None = None,
                    precision: int | None = None,
                    spacing: int | None = None,
                    ) -> str:
        """
        Render a number with dynamic overrides.

        Keyword overrides are merged on top of the overrides record, if one is given.

        Examples:
            >>> FormatSpec.parse("|^.$").render_with(0.3, width=5, precision=1)
            '|0.3|'
        """
        from .dynamic import DynamicOverrides
        from .render import render_number

        if overrides is None:
            overrides = DynamicOverrides()
        elif not isinstance(overrides, DynamicOverrides):
            raise TypeError(f"overrides must be DynamicOverrides or None, but got {fmt_type(overrides)}")
        overrides = overrides.merge(
            width=UNSET if width is None else width,
            precision=UNSET if precision is None else precision,
            spacing=UNSET if spacing is None else spacing,
        )
        return render_number(self, value, overrides)

    def to_format_string(self) -> str:
        """
        Canonical format string of this spec; parsing it yields an equal spec.

        Raises:
            ValueError: If a field cannot be expressed in the string grammar: custom decimal
                separator, explicit or custom group separator, spacing without separator,
                a fill that is itself an align char, zero flag or zero width without a width token.

        Examples:
            >>> FormatSpec.parse(">05").to_format_string()
            '05'
            >>> FormatSpec.parse("*^+#12.3x_4").to_format_string()
            '*^+#12.3x_4'
        """
        parts = []

        if self.pad_mode is PadMode.EXPLICIT:
            if self.fill in FormatConf.ALIGN_CHARS:
                raise ValueError(f"fill {fmt_char(self.fill)} is an align char and has no string form")
            parts.append(self.fill + self.align.value)
        elif self.align is not Align.RIGHT:
            parts.append(self.align.value)

        if self.sign is Sign.ALWAYS:
            parts.append(self.sign.value)
        if self.alternate:
            parts.append(FormatConf.ALTERNATE_MARK)

        if self.pad_mode is PadMode.ZERO:
            if self.width is UNSET:
                raise ValueError("zero flag without width has no string form")
            parts.append(FormatConf.ZERO_MARK)

        if self.width is DYNAMIC:
            parts.append(FormatConf.DYNAMIC_MARK)
        elif self.width is not UNSET:
            if self.width == 0:
                raise ValueError("width 0 has no string form, leave width unset instead")
            parts.append(str(self.width))

        if self.precision is DYNAMIC:
            parts.append(FormatConf.PRECISION_MARK + FormatConf.DYNAMIC_MARK)
        elif self.precision is not UNSET:
            parts.append(FormatConf.PRECISION_MARK + str(self.precision))

        if self.format is not Format.DECIMAL:
            parts.append(self.format.value)

        if self.separator is UNSET:
            if self.spacing != FormatConf.DEFAULT_SPACING:
                raise ValueError(f"spacing {self.spacing} without separator has no string form")
        elif self.separator is None or self.separator not in FormatConf.SEPARATOR_CHARS:
            raise ValueError(f"separator {fmt_value(self.separator)} has no string form, "
                             f"one of {FormatConf.SEPARATOR_CHARS!r} expected")
        else:
            parts.append(self.separator)
            if self.spacing != FormatConf.DEFAULT_SPACING:
                parts.append(str(self.spacing))

        if self.decimal_separator != FormatConf.DEFAULT_DECIMAL_SEPARATOR:
            raise ValueError(f"decimal separator {fmt_char(self.decimal_separator)} has no string form")

        return "".join(parts)

    @property
    def grouping(self) -> bool:
        """True if integral digits are grouped with a separator."""
        return isinstance(self.separator, str)

    @property
    def is_dynamic(self) -> bool:
        """True if width or precision must be supplied at render time."""
        return self.width is DYNAMIC or self.precision is DYNAMIC

    @property
    def prefix(self) -> str:
        """Base prefix emitted before the digits, empty unless alternate form is on."""
        return self.format.prefix if self.alternate else ""

    @property
    def zero_flag(self) -> bool:
        """True if the zero flag is engaged."""
        return self.pad_mode is PadMode.ZERO


# Private Methods ------------------------------------------------------------------------------------------------------

def _as_enum(enum_cls: type[StrEnum], value: Any, name: str) -> Any:
    """Return value as a member of enum_cls, accepting members and member values."""
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise TypeError(f"{name} must be {enum_cls.__name__} or str, but got {fmt_type(value)}")
    try:
        return enum_cls(value)
    except ValueError:
        expected = ", ".join(repr(m.value) for m in enum_cls)
        raise ValueError(f"{name} expected one of {expected}, but found {fmt_value(value)}") from None


def _validate_char(value: Any, name: str):
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, but got {fmt_type(value)}")
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, but got {fmt_value(value)}")


def _validate_count(value: Any, name: str):
    """Width and precision: non-negative int, UNSET or DYNAMIC."""
    if value is UNSET or value is DYNAMIC:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, UNSET or DYNAMIC, but got {fmt_type(value)}")
    if value < 0:
        raise ValueError(f"{name} must be int >= 0, but got {fmt_value(value)}")
