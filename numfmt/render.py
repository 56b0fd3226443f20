"""
Renderer: (FormatSpec, value, DynamicOverrides) → string.

Rendering is a pure function of its arguments. A FormatSpec is never mutated and
may be shared between threads; all buffers are local to the call.
"""

# ## Algorithm
#
#   1. resolve DYNAMIC width/precision/spacing against the overrides
#   2. sign: "-" for negatives, "+" for the rest under Sign.ALWAYS
#   3. integral digits in the requested base, fractional digits always decimal
#   4. base prefix between sign and digits when alternate is on
#   5. floats with a fixed precision are rounded or zero-extended
#   6. integral digits are grouped from the least significant end
#   7. sign + prefix + digits [+ decimal separator + fraction]
#   8. width cost of the counted part, see width.text_width()
#   9. fill runs placed by pad mode and alignment

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .dynamic import DynamicOverrides
from .numeric import NumericValue
from .sentinels import UNSET, ifnotunset
from .spec import Align, FormatSpec, PadMode, Sign
from .utils import fmt_type
from .width import fill_run, text_width


# Methods --------------------------------------------------------------------------------------------------------------

def render_number(spec: FormatSpec, value: Any, overrides: DynamicOverrides | None = None) -> str:
    """
    Render a single integer or float according to spec.

    Args:
        spec: Validated FormatSpec.
        value: int, float, or a NumPy-like integer/float scalar.
        overrides: Render-time width, precision and spacing. Required when
            spec holds a DYNAMIC field.

    Returns:
        str: The padded rendering. Its width cost is max(content, width) except where
            a multibyte fill cannot cover the deficit exactly, an explicit fill leaves
            sign and prefix outside the width, or decimal alignment leaves the
            fraction outside of it.

    Raises:
        MissingDynamicValueError: If a DYNAMIC field has no override.
        TypeError: If spec, value or overrides are of the wrong type.

    Examples:
        >>> render_number(parse_spec("#04b"), 2)
        '0b10'
        >>> render_number(parse_spec("-<6.2"), 1.0)
        '1.00--'
        >>> render_number(parse_spec(",").merge(decimal_separator=";"), 1234.5)
        '1,234;5'
        >>> render_number(parse_spec("-^$"), 1, DynamicOverrides(width=5))
        '--1--'
    """
    if not isinstance(spec, FormatSpec):
        raise TypeError(f"spec must be FormatSpec, but got {fmt_type(spec)}")
    if overrides is None:
        overrides = DynamicOverrides()
    elif not isinstance(overrides, DynamicOverrides):
        raise TypeError(f"overrides must be DynamicOverrides or None, but got {fmt_type(overrides)}")

    width = ifnotunset(overrides.resolve("width", spec.width), default=0)
    precision = overrides.resolve("precision", spec.precision)
    spacing = overrides.resolve("spacing", spec.spacing)

    number = NumericValue.from_number(value)
    sign = _sign(spec.sign, number)

    if not number.is_finite:
        return _pad(spec, width, lead=sign, integral=number.special, tail="")

    if number.is_float and precision is not UNSET:
        number = number.rounded(precision)

    integral = number.integral_digits(spec.format)
    if spec.grouping:
        integral = _group(integral, spec.separator, spacing)
    tail = spec.decimal_separator + number.fraction if number.fraction else ""

    return _pad(spec, width, lead=sign + spec.prefix, integral=integral, tail=tail)


# Private Methods ------------------------------------------------------------------------------------------------------

def _sign(sign: Sign, number: NumericValue) -> str:
    if number.negative:
        return "-"
    if sign is Sign.ALWAYS:
        return "+"
    return ""


def _group(digits: str, separator: str, spacing: int) -> str:
    """
    Insert separator every `spacing` digits counted from the least significant end.

    Examples:
        >>> _group("1234567", ",", 3)
        '1,234,567'
        >>> _group("ff00ff", "_", 2)
        'ff_00_ff'
        >>> _group("12", ",", 3)
        '12'
    """
    head = len(digits) % spacing or spacing
    groups = [digits[:head]]
    groups.extend(digits[i:i + spacing] for i in range(head, len(digits), spacing))
    return separator.join(groups)


def _pad(spec: FormatSpec, width: int, *, lead: str, integral: str, tail: str) -> str:
    """
    Pad sign/prefix (lead), integral digits and decimal tail into width.

    PadMode.EXPLICIT keeps lead outside the width and aligns the digits alone;
    DEFAULT and ZERO count lead toward the width, ZERO puts the zeros after it.
    """
    counted_lead = "" if spec.pad_mode is PadMode.EXPLICIT else lead
    body = integral + tail

    if spec.align is Align.DECIMAL:
        deficit = width - text_width(counted_lead + integral)
    else:
        deficit = width - text_width(counted_lead + body)
    run = fill_run(spec.fill, deficit)

    if spec.pad_mode is PadMode.ZERO:
        return lead + run + body
    if spec.pad_mode is PadMode.EXPLICIT:
        return lead + _place(spec.align, run, body)
    return _place(spec.align, run, lead + body)


def _place(align: Align, run: str, content: str) -> str:
    """Put the fill run around content; center sends the odd repeat after it."""
    if align is Align.LEFT:
        return content + run
    if align is Align.CENTER:
        half = len(run) // 2
        return run[:half] + content + run[half:]
    return run + content
