"""
Numeric values as seen by the renderer.

std_number() normalizes Python and duck-typed third-party numbers into int or float;
NumericValue splits them into sign, integral magnitude and native fractional digits.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from dataclasses import dataclass, replace
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_EVEN
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .spec import Format
from .utils import fmt_type


# Methods --------------------------------------------------------------------------------------------------------------

def std_number(value: Any, *, allow_bool: bool = False) -> int | float:
    """
    Convert integer and IEEE floating point types to standard Python int or float.

    Parameters
    ----------
    value : various
        Python int/float, or third-party scalars implementing __index__ (NumPy
        integers), a floating `dtype` (NumPy floats) or `.item()` (array scalars).

    allow_bool : bool, default False
        If True, convert bool and NumPy bool to int (True→1, False→0). Default False helps
        catch bugs since bool is subclass of int in Python.

    Returns
    -------
    int
        For Python int (arbitrary precision, never overflows) and types
        implementing __index__.

    float
        For float values, including inf/-inf and nan.

    Raises
    ------
    TypeError
        For unsupported types: None, str, Decimal, Fraction, complex, and bool
        when allow_bool=False.

    Examples
    --------
    >>> std_number(42)
    42
    >>> std_number(3.5)
    3.5
    >>> std_number(True)
    Traceback (most recent call last):
        ...
    TypeError: boolean values not supported, got True. Set allow_bool=True to convert booleans to int
    """

    # Boolean handling, NumPy booleans included
    if isinstance(value, bool) or _scalar_kind(value) == "b":
        if allow_bool:
            return int(bool(value))
        raise TypeError(f"boolean values not supported, got {value}. "
                        f"Set allow_bool=True to convert booleans to int")

    # Standard Python numeric types - fast path
    if type(value) is int or type(value) is float:
        return value

    # Priority 1: __index__() marks "true integers", NumPy integer types implement this
    if hasattr(value, '__index__'):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # Priority 2: float subclasses (numpy.float64) and floating scalars exposing a dtype,
    # detected without importing numpy
    if isinstance(value, float) or _is_float_scalar(value):
        return float(value)

    # Priority 3: array/tensor scalars with .item() method
    if hasattr(value, 'item') and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, bool):
            return std_number(result, allow_bool=allow_bool)
        if isinstance(result, (int, float)):
            return result

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, or types implementing __index__, a floating dtype "
        f"or .item() (e.g., numpy scalars)"
    )


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class NumericValue:
    """
    Sign, integral magnitude and native fractional digits of a number.

    Attributes:
        negative: True for values below zero; -0.0 is not negative.
        integral: Absolute integral part.
        fraction: Native fractional decimal digits of a float, without trailing zeros;
            "" for integers and integer-valued floats.
        is_float: True if built from a floating point value.
        special: "inf" or "nan" for non-finite floats, None otherwise.

    Examples:
        >>> NumericValue.from_number(-3.25)
        NumericValue(negative=True, integral=3, fraction='25', is_float=True, special=None)
        >>> NumericValue.from_number(1.0).fraction
        ''
        >>> NumericValue.from_number(255).integral_digits(Format.HEX_UPPER)
        'FF'
    """

    negative: bool
    integral: int
    fraction: str = ""
    is_float: bool = False
    special: str | None = None

    @classmethod
    def from_number(cls, value: Any, *, allow_bool: bool = False) -> Self:
        """
        Build a NumericValue from an integer or float.

        Fractional digits are those of the shortest representation that round-trips
        the value in its own binary format; NumPy float scalars keep their own
        shortest text, so float32(0.1) yields "1" rather than the float64 expansion.

        Raises:
            TypeError: If value is not an integer or IEEE float (see std_number).
        """
        number = std_number(value, allow_bool=allow_bool)
        if isinstance(number, int):
            return cls(negative=number < 0, integral=abs(number))

        if math.isnan(number):
            return cls(negative=False, integral=0, is_float=True, special="nan")
        if math.isinf(number):
            return cls(negative=number < 0, integral=0, is_float=True, special="inf")

        integral, fraction = _split_decimal(_shortest_text(value, number))
        return cls(negative=number < 0, integral=integral, fraction=fraction, is_float=True)

    @property
    def is_finite(self) -> bool:
        """True unless the value is inf or nan."""
        return self.special is None

    @property
    def native_precision(self) -> int:
        """Count of native fractional digits."""
        return len(self.fraction)

    def integral_digits(self, fmt: Format) -> str:
        """Integral magnitude rendered in the base of fmt, uppercase letters for HEX_UPPER only."""
        return format(self.integral, Format(fmt).value)

    def rounded(self, precision: int) -> Self:
        """
        Return a copy with exactly `precision` fractional digits.

        Native digits are rounded half-to-even, carrying into the integral part;
        missing digits are padded with '0'. Integers are returned unchanged.

        Examples:
            >>> NumericValue.from_number(3.14159).rounded(2).fraction
            '14'
            >>> NumericValue.from_number(9.999).rounded(2)
            NumericValue(negative=False, integral=10, fraction='00', is_float=True, special=None)
            >>> NumericValue.from_number(1.5).rounded(4).fraction
            '5000'
        """
        if not self.is_float or not self.is_finite:
            return self
        if precision >= len(self.fraction):
            return replace(self, fraction=self.fraction.ljust(precision, "0"))

        exact = Decimal(f"{self.integral}.{self.fraction}")
        context = Context(prec=len(str(self.integral)) + precision + 1, rounding=ROUND_HALF_EVEN)
        quantized = exact.quantize(Decimal(1).scaleb(-precision), context=context)
        integral, _, fraction = format(quantized, "f").partition(".")
        return replace(self, integral=int(integral), fraction=fraction)


# Private Methods ------------------------------------------------------------------------------------------------------

def _scalar_kind(value: Any) -> str | None:
    """dtype.kind of a NumPy-like 0-d scalar, detected without importing numpy."""
    if getattr(value, "ndim", 0) != 0:
        return None
    return getattr(getattr(value, "dtype", None), "kind", None)


def _is_float_scalar(value: Any) -> bool:
    return _scalar_kind(value) == "f"


def _shortest_text(value: Any, number: float) -> str:
    """Shortest round-trip text of value, falling back to the float64 repr."""
    if _is_float_scalar(value):
        text = str(value)
        try:
            Decimal(text)
        except InvalidOperation:
            return float.__repr__(number)
        return text
    return float.__repr__(number)


def _split_decimal(text: str) -> tuple[int, str]:
    """Split decimal text, scientific notation included, into integral magnitude and fractional digits."""
    plain = format(abs(Decimal(text)), "f")
    integral, _, fraction = plain.partition(".")
    return int(integral), fraction.rstrip("0")
