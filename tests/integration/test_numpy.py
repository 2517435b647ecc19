#
# Prettybytes - NumPy Integration Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from prettybytes.formatters import (
    pretty_bytes,
    pretty_bytes_binary,
    pretty_bytes_binary_signed,
    pretty_bytes_decimal,
    pretty_bytes_decimal_signed,
)
from prettybytes.numeric import std_numeric
from prettybytes.units import BinaryUnit, DecimalUnit, PrettyBytes

np = pytest.importorskip("numpy")

pytestmark = pytest.mark.integration


class TestStdNumericNumpy:
    """NumPy scalar support in std_numeric."""

    @pytest.mark.parametrize(
        ("scalar", "expected"),
        [
            pytest.param(np.int8(-5), -5, id="int8-neg"),
            pytest.param(np.uint16(65530), 65530, id="uint16-large"),
            pytest.param(np.int64(2 ** 63 - 1), 2 ** 63 - 1, id="int64-max"),
            pytest.param(np.uint64(2 ** 63 + 5), 2 ** 63 + 5, id="uint64-beyond-int64"),
        ],
    )
    def test_np_integers_to_int(self, scalar, expected):
        """Convert NumPy integer scalars to Python int."""
        result = std_numeric(scalar)
        assert type(result) is int
        assert result == expected

    @pytest.mark.parametrize(
        ("scalar", "expected"),
        [
            pytest.param(np.float16(0.5), 0.5, id="float16"),
            pytest.param(np.float32(1.5), 1.5, id="float32"),
            pytest.param(np.float64(2.25), 2.25, id="float64"),
        ],
    )
    def test_np_floats_to_float(self, scalar, expected):
        """Convert NumPy float scalars to float, float64 is a float subclass already."""
        result = std_numeric(scalar)
        assert isinstance(result, float)
        assert result == expected

    def test_np_bool_rejected(self):
        """Reject NumPy bool scalars."""
        with pytest.raises(TypeError):
            std_numeric(np.bool_(True))


class TestFormattersNumpy:
    """Formatters accept NumPy scalars as byte counts."""

    def test_uint64_max(self):
        """The largest unsigned 64-bit count formats in EiB."""
        res = pretty_bytes_binary(np.uint64(2 ** 64 - 1), 2)
        assert res == PrettyBytes(16, BinaryUnit.EiB)

    def test_int64_decimal(self):
        assert str(pretty_bytes_decimal(np.int64(8_452_020), 2)) == "8.45 MB"

    def test_float64(self):
        assert pretty_bytes_decimal(np.float64(5_430.999)) == PrettyBytes(5.43, DecimalUnit.KB)

    def test_signed_int64(self):
        assert pretty_bytes_decimal_signed(np.int64(-2_000_000)) == PrettyBytes(-2, DecimalUnit.MB)
        assert pretty_bytes_binary_signed(np.int32(-1024)) == PrettyBytes(-1, BinaryUnit.KiB)

    def test_signed_rejects_float(self):
        with pytest.raises(TypeError):
            pretty_bytes_decimal_signed(np.float64(-2.0))

    def test_array_sizes(self):
        """Format the byte size of an array."""
        arr = np.zeros((1024, 1024), dtype=np.uint8)
        assert str(pretty_bytes(arr.nbytes, binary=True)) == "1 MiB"
