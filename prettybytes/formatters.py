"""
Byte count formatters: scale a raw number of bytes to a human-readable unit.

Decimal formatters use SI units in powers of 1000 (KB, MB, GB), binary formatters
use IEC units in powers of 1024 (KiB, MiB, GiB). All formatters return an immutable
PrettyBytes value, str() of which gives the display text:

    >>> str(pretty_bytes_decimal(1_000_000))
    '1 MB'
    >>> str(pretty_bytes_binary(3_195_498, 2))
    '3.05 MiB'
    >>> str(pretty_bytes_decimal_signed(-2_000_000))
    '-2 MB'

Inputs beyond the largest unit are not re-based, the magnitude simply grows under
YB / YiB: 35 * 10**27 bytes displays as '35000 YB'.

Rounding is applied after the unit is chosen, so a magnitude rounded up to the base
keeps its unit: 999_999 bytes rounded to 2 places displays as '1000 KB', not '1 MB'.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import round_float, std_numeric, std_places
from .units import BinaryUnit, ByteUnit, DecimalUnit, PrettyBytes
from .utils import fmt_type, fmt_value


# Methods --------------------------------------------------------------------------------------------------------------

def pretty_bytes(num: int | float, round_places: int | None = None, *, binary: bool = False) -> PrettyBytes:
    """
    Format a byte count of any sign in decimal (default) or binary units.

    Negative integers go through the signed formatters, floats and non-negative
    integers through the unsigned ones.

    Examples:
        >>> str(pretty_bytes(8_452_020, 2))
        '8.45 MB'
        >>> str(pretty_bytes(1_048_576, binary=True))
        '1 MiB'
        >>> str(pretty_bytes(-1024, binary=True))
        '-1 KiB'
    """
    value = std_numeric(num)

    if isinstance(value, int) and value < 0:
        signed = pretty_bytes_binary_signed if binary else pretty_bytes_decimal_signed
        return signed(value, round_places)

    unsigned = pretty_bytes_binary if binary else pretty_bytes_decimal
    return unsigned(value, round_places)


def pretty_bytes_decimal(num: int | float, round_places: int | None = None) -> PrettyBytes:
    """
    Convert a byte count to SI units (B, KB, MB, ... YB), powers of 1000.

    Integer input must be non-negative, use pretty_bytes_decimal_signed() for negatives.
    Float input may be negative: the fractional part of its absolute value is truncated,
    and the sign is carried over to the magnitude.

    Args:
        num: Number of bytes, int or float, or a NumPy/Decimal/Fraction scalar.
        round_places: Round magnitude to this many decimal places, ties away from zero.
            None keeps the magnitude unrounded.

    Returns:
        PrettyBytes with the largest unit that keeps magnitude >= 1.

    Raises:
        TypeError: If num is not numeric, or round_places is not int | None.
        ValueError: If num is a negative int or a non-finite float, or round_places < 0.

    Examples:
        >>> str(pretty_bytes_decimal(736_532_432))
        '736.532432 MB'
        >>> str(pretty_bytes_decimal(55_700, 0))
        '56 KB'
        >>> str(pretty_bytes_decimal(5.323))
        '5 B'
    """
    return _pretty_bytes(num, round_places, units=DecimalUnit)


def pretty_bytes_binary(num: int | float, round_places: int | None = None) -> PrettyBytes:
    """
    Convert a byte count to IEC units (B, KiB, MiB, ... YiB), powers of 1024.

    Same input rules as pretty_bytes_decimal().

    Examples:
        >>> str(pretty_bytes_binary(1_048_576))
        '1 MiB'
        >>> str(pretty_bytes_binary(5014, 2))
        '4.9 KiB'
    """
    return _pretty_bytes(num, round_places, units=BinaryUnit)


def pretty_bytes_decimal_signed(num: int, round_places: int | None = None) -> PrettyBytes:
    """
    Convert a signed integer byte count to SI units.

    The magnitude of a negative count is negated, zero is non-negative.

    Raises:
        TypeError: If num is not an integer, floats included.

    Examples:
        >>> str(pretty_bytes_decimal_signed(-2_000_000))
        '-2 MB'
    """
    return _pretty_bytes_signed(num, round_places, units=DecimalUnit)


def pretty_bytes_binary_signed(num: int, round_places: int | None = None) -> PrettyBytes:
    """Convert a signed integer byte count to IEC units."""
    return _pretty_bytes_signed(num, round_places, units=BinaryUnit)


# Private Methods ------------------------------------------------------------------------------------------------------

def _pretty_bytes(num, round_places: int | None, units: type[ByteUnit]) -> PrettyBytes:
    """Floor float input, scale to units and round."""
    round_places = std_places(round_places)
    value = std_numeric(num)

    if isinstance(value, int):
        if value < 0:
            raise ValueError(
                f"num must be >= 0 for unsigned formatting, got {value}. "
                f"Use the signed formatter for negative integers"
            )
        count, is_negative = value, False
    else:
        if not math.isfinite(value):
            raise ValueError(f"num must be finite, got {fmt_value(num)}")
        count, is_negative = float(math.floor(abs(value))), value < 0

    result = _scale(count, round_places, units=units)
    return -result if is_negative else result


def _pretty_bytes_signed(num, round_places: int | None, units: type[ByteUnit]) -> PrettyBytes:
    """Format absolute value and negate magnitude for negative num."""
    if isinstance(num, bool) or not hasattr(num, '__index__'):
        raise TypeError(f"num must be an integer for signed formatting, got {fmt_type(num)}")

    value = operator.index(num)
    result = _pretty_bytes(abs(value), round_places, units=units)
    return -result if value < 0 else result


def _scale(count: int | float, round_places: int | None, units: type[ByteUnit]) -> PrettyBytes:
    """
    Scale a non-negative whole byte count to units.

    The exponent is floor(log_base(count)) clamped to the largest unit, found by
    comparing against unit multipliers instead of taking a float log, so exact
    powers of the base never slip a unit. Int counts are compared and divided
    exactly, float counts against the nearest float of each multiplier, so that
    both 10**24 and 1e24 give 1 YB.
    """
    if count == 0:
        return PrettyBytes(0.0, units.at(0))

    as_count = float if isinstance(count, float) else int
    base = units.largest().base
    max_exponent = units.largest().exponent

    exponent = 0
    while exponent < max_exponent and count >= as_count(base ** (exponent + 1)):
        exponent += 1

    unit = units.at(exponent)
    magnitude = count / as_count(unit.multiplier)

    if magnitude >= base and exponent < max_exponent:
        # Quotient rounded up to the base, at float precision the count is 1 of the next unit
        unit = units.at(exponent + 1)
        magnitude = max(count / as_count(unit.multiplier), 1.0)

    if round_places is not None:
        magnitude = round_float(magnitude, round_places)

    return PrettyBytes(magnitude, unit)
