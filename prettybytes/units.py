#
# Prettybytes Units of Measurement
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum, unique
from typing import Any, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type, fmt_value


# @formatter:off

class BytesConf:
    """
    Default constants for byte units display.

    Attributes:
        DECIMAL_BASE: Scale between successive SI units (KB, MB, ...).
        BINARY_BASE: Scale between successive IEC units (KiB, MiB, ...).
        SEPARATOR: Separator between magnitude and unit symbol in str-representation.
        DICT_KEYS: Keys of the dict form of PrettyBytes.
    """
    DECIMAL_BASE = 1000
    BINARY_BASE = 1024
    SEPARATOR = " "
    DICT_KEYS = ("magnitude", "unit")

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

class ByteUnit(StrEnum):
    """
    Base of the closed, ordered byte unit sets.

    Members are ordered by increasing scale, so a member's position is its exponent:
    unit == base ** exponent bytes.
    """

    @property
    def base(self) -> int:
        """Scale between successive units, defined by each unit set."""
        raise NotImplementedError

    @property
    def exponent(self) -> int:
        """Index of the unit in its set, B is 0."""
        return list(type(self)).index(self)

    @property
    def multiplier(self) -> int:
        """Number of bytes in one unit, exact int."""
        return self.base ** self.exponent

    @classmethod
    def at(cls, exponent: int) -> Self:
        """
        Unit at the given exponent, clamped to the defined range.

        Negative exponents give B, exponents past the largest unit give the largest unit.
        """
        units = list(cls)
        return units[max(0, min(exponent, len(units) - 1))]

    @classmethod
    def largest(cls) -> Self:
        return list(cls)[-1]


# @formatter:off
@unique
class DecimalUnit(ByteUnit):
    """SI units, powers of 1000."""
    B = "B"
    KB = "KB"
    MB = "MB"
    GB = "GB"
    TB = "TB"
    PB = "PB"
    EB = "EB"
    ZB = "ZB"
    YB = "YB"

    @property
    def base(self) -> int:
        return BytesConf.DECIMAL_BASE


@unique
class BinaryUnit(ByteUnit):
    """IEC units, powers of 1024."""
    B = "B"
    KiB = "KiB"
    MiB = "MiB"
    GiB = "GiB"
    TiB = "TiB"
    PiB = "PiB"
    EiB = "EiB"
    ZiB = "ZiB"
    YiB = "YiB"

    @property
    def base(self) -> int:
        return BytesConf.BINARY_BASE
# @formatter:on


@dataclass(frozen=True)
class PrettyBytes:
    """
    Byte count scaled to a unit, e.g. 3.05 MiB.

    An immutable pair of magnitude and unit, as returned by the pretty_bytes_*()
    formatters. The str-representation is "<magnitude> <unit>" with the magnitude
    in its shortest decimal form: "1 MiB", "3.05 MB", "-2 MB".

    Attributes:
        num: Scaled magnitude, may be negative, zero or fractional. Stored as float.
        unit: DecimalUnit or BinaryUnit symbol.

    Notes:
        Units are StrEnum members, so DecimalUnit.B == BinaryUnit.B and
        PrettyBytes(0, DecimalUnit.B) == PrettyBytes(0, BinaryUnit.B).

    Examples:
        >>> str(PrettyBytes(1, BinaryUnit.MiB))
        '1 MiB'
        >>> PrettyBytes(8.45, DecimalUnit.MB).to_dict()
        {'magnitude': 8.45, 'unit': 'MB'}
    """

    num: float
    unit: DecimalUnit | BinaryUnit

    def __post_init__(self):
        if isinstance(self.num, bool) or not isinstance(self.num, (int, float)):
            raise TypeError(f"magnitude must be int | float, got {fmt_value(self.num)}")

        if not isinstance(self.unit, (DecimalUnit, BinaryUnit)):
            raise TypeError(f"unit must be DecimalUnit | BinaryUnit, got {fmt_value(self.unit)}")

        if not math.isfinite(self.num):
            raise ValueError(f"magnitude must be finite, got {self.num}")

        # Normalizes -0.0 and int to float
        num = float(self.num) if self.num != 0 else 0.0
        object.__setattr__(self, 'num', num)

    def __neg__(self) -> Self:
        return PrettyBytes(-self.num, self.unit)

    def __str__(self):
        return self.as_str

    @property
    def as_str(self) -> str:
        """Magnitude with unit as a string."""
        return f"{_magnitude_str(self.num)}{BytesConf.SEPARATOR}{self.unit}"

    @property
    def base(self) -> int:
        return self.unit.base

    @property
    def is_binary(self) -> bool:
        return isinstance(self.unit, BinaryUnit)

    @property
    def magnitude(self) -> float:
        return self.num

    def to_dict(self) -> dict[str, Any]:
        """Dict form for interop, {'magnitude': float, 'unit': str}."""
        magnitude_key, unit_key = BytesConf.DICT_KEYS
        return {magnitude_key: self.num, unit_key: str(self.unit)}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """
        Create from the dict form produced by to_dict().

        Raises:
            TypeError: If data is not a mapping or magnitude is not a number.
            ValueError: If keys are missing or unexpected, the unit symbol is unknown,
                or the magnitude is not finite.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"data must be a Mapping, got {fmt_type(data)}")

        expected = set(BytesConf.DICT_KEYS)
        if set(data.keys()) != expected:
            raise ValueError(
                f"data keys must be {sorted(expected)}, got {sorted(map(str, data.keys()))}"
            )

        magnitude_key, unit_key = BytesConf.DICT_KEYS
        return cls(data[magnitude_key], unit_from_symbol(data[unit_key]))


# Methods --------------------------------------------------------------------------------------------------------------

def unit_from_symbol(symbol: str) -> DecimalUnit | BinaryUnit:
    """
    Resolve a unit symbol in the decimal or binary unit set.

    Decimal units are checked first, so "B" resolves to DecimalUnit.B.

    Raises:
        TypeError: If symbol is not a str.
        ValueError: If symbol is not a known unit.

    Examples:
        >>> unit_from_symbol("MiB")
        <BinaryUnit.MiB: 'MiB'>
    """
    if not isinstance(symbol, str):
        raise TypeError(f"unit symbol must be str, got {fmt_value(symbol)}")

    for units in (DecimalUnit, BinaryUnit):
        try:
            return units(symbol)
        except ValueError:
            continue

    valid = [str(u) for u in DecimalUnit] + [str(u) for u in BinaryUnit if u is not BinaryUnit.B]
    raise ValueError(f"unknown unit symbol: {fmt_value(symbol)}, expected one of {valid}")


def _magnitude_str(num: float) -> str:
    """
    Shortest round-trip decimal text of a float, no exponent and no trailing '.0'.

    Examples:
        1.0 → '1', 3.05 → '3.05', 1e16 → '10000000000000000'
    """
    return format(Decimal(repr(num)).normalize(), "f")


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Both unit sets share exponents, B through Y.
if len(DecimalUnit) != len(BinaryUnit):
    raise AssertionError(
        "Configuration Error: DecimalUnit and BinaryUnit must define the same number of units."
    )
