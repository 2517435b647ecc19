"""
Standardize numeric inputs and round magnitudes for byte-count display.

Byte counts reach the formatters from many places: plain Python ints and floats,
NumPy scalars, Decimal or Fraction values read from config or databases. This module
normalizes all of them into standard Python int or float and provides the symmetric
rounding used for displayed magnitudes.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
import warnings
from decimal import Decimal
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value

# Largest power of ten a float can hold, 10.0 ** 309 overflows
MAX_ROUND_PLACES = 308


def std_numeric(value) -> int | float:
    """
    Convert numeric types to standard Python int or float.

    Parameters
    ----------
    value : various
        Numeric value to convert. Supports Python int/float, Decimal, Fraction,
        and third-party types via __index__, .item() or __float__ protocols.

    Returns
    -------
    int
        For Python int (arbitrary precision), types implementing __index__
        (NumPy integers), and integer-valued Decimal/Fraction (Decimal('42.0') → 42).

    float
        For float values including inf and nan, fractional Decimal/Fraction,
        and other types implementing __float__.

    Raises
    ------
    TypeError
        For bool, None, str and any other unsupported type.

    Detection Priority
    ------------------
    1. int, float fast path
    2. __index__() → int (NumPy integers)
    3. .item() → int or float (array scalars)
    4. Integer-valued Decimal/Fraction → int
    5. __float__() → float

    Examples
    --------
    >>> std_numeric(42)
    42
    >>> std_numeric(Decimal('42.0'))
    42
    >>> std_numeric(Fraction(1, 4))
    0.25
    >>> std_numeric("42")
    Traceback (most recent call last):
        ...
    TypeError: unsupported numeric type: <str>. ...
    """

    # bool is an int subclass, a True/False byte count is almost always a bug
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported, got {value}")

    if isinstance(value, (int, float)):
        return value

    # Priority 2: true integers, NumPy integer scalars implement this
    if hasattr(value, '__index__'):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # Priority 3: array and tensor scalars
    if hasattr(value, 'item') and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, bool):
            raise TypeError(f"boolean values not supported (from .item()), got {fmt_value(value)}")
        if isinstance(result, (int, float)):
            return result

    # Priority 4: keep integer-valued Decimal and Fraction exact
    if isinstance(value, (Decimal, Fraction)):
        try:
            as_int = int(value)
            if value == as_int:
                return as_int
        except (ValueError, OverflowError):
            # NaN and Infinity go through __float__
            pass

    # Priority 5: duck typing via __float__
    if hasattr(value, '__float__'):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, or types implementing __index__, __float__ or .item() "
        f"(e.g., numpy scalars, Decimal, Fraction)"
    )


def std_places(places) -> int | None:
    """
    Validate a number of decimal places for rounding.

    Returns places unchanged as int, or None if places is None.

    Raises:
        TypeError: If places is not int or None (bool is rejected).
        ValueError: If places is negative.
    """
    if places is None:
        return None

    if isinstance(places, bool) or not hasattr(places, '__index__'):
        raise TypeError(f"round places must be int | None, got {fmt_type(places)}")

    places = operator.index(places)
    if places < 0:
        raise ValueError(f"round places must be >= 0, got {places}")

    return places


def round_float(value: float, places: int) -> float:
    """
    Round a float to given decimal places, ties away from zero.

    The value is scaled by 10^places, rounded to the nearest integer with
    halves going away from zero, and scaled back. Unlike the builtin round()
    this never rounds half to even: 0.5 → 1.0, 2.5 → 3.0, -2.5 → -3.0.

    Places too large to apply leave the value unchanged: a RuntimeWarning is
    issued when 10^places overflows a float, and values already integral at
    float precision are returned silently.

    Args:
        value: The number to round.
        places: Number of decimal places, 0 rounds to a whole number.

    Returns:
        The rounded float. Non-finite values are returned unchanged.

    Raises:
        TypeError: If places is not int.
        ValueError: If places is negative.

    Examples:
        >>> round_float(8.45202, 2)
        8.45
        >>> round_float(55.7, 0)
        56.0
        >>> round_float(-2.5, 0)
        -3.0
    """
    places = std_places(places)
    if places is None:
        raise TypeError("round places must be int, got None")

    value = float(value)
    if not math.isfinite(value):
        return value

    if places > MAX_ROUND_PLACES:
        warnings.warn(
            f"round places {places} exceed float range (max {MAX_ROUND_PLACES}), value left unrounded",
            RuntimeWarning,
            stacklevel=2
        )
        return value

    factor = 10.0 ** places
    scaled = value * factor
    if not math.isfinite(scaled) or abs(scaled) >= 2 ** 52:
        # No fractional digits left to round at this precision
        return value

    whole = math.trunc(scaled)
    if abs(scaled - whole) >= 0.5:
        whole += 1 if scaled > 0 else -1

    return whole / factor
