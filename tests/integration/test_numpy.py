"""
Core test suite for rendering NumPy scalars
"""

import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numfmt.numeric import NumericValue, std_number
from numfmt.parser import parse_spec

# Integration Tests ----------------------------------------------------------------------------------------------------

pytestmark = pytest.mark.integration

# Optional imports -----------------------------------------------------------------------------------------------------

np = pytest.importorskip("numpy")


class TestStdNumberNumpy:
    """std_number() with NumPy scalar types."""

    @pytest.mark.parametrize(
        "value, expected, expected_type",
        [
            pytest.param(np.int8(-5), -5, int, id="int8"),
            pytest.param(np.int64(2 ** 40), 2 ** 40, int, id="int64"),
            pytest.param(np.uint8(255), 255, int, id="uint8"),
            pytest.param(np.float64(2.5), 2.5, float, id="float64"),
            pytest.param(np.float32(0.5), 0.5, float, id="float32"),
        ],
    )
    def test_convert(self, value, expected, expected_type):
        res = std_number(value)
        assert res == expected
        assert type(res) is expected_type

    def test_bool_rejected(self):
        with pytest.raises(TypeError, match=r"(?i)boolean"):
            std_number(np.bool_(True))

    def test_bool_allowed(self):
        res = std_number(np.bool_(True), allow_bool=True)
        assert res == 1
        assert type(res) is int


class TestRenderNumpy:
    """NumPy scalars render like their Python counterparts."""

    @pytest.mark.parametrize(
        "text, value, expected",
        [
            pytest.param("x", np.int64(255), "ff", id="int64_hex"),
            pytest.param("03", np.uint8(7), "007", id="uint8_zero"),
            pytest.param(",", np.int32(-1234567), "-1,234,567", id="int32_grouped"),
            pytest.param("", np.float64(2.5), "2.5", id="float64"),
            pytest.param(".2", np.float64(3.14159), "3.14", id="float64_precision"),
            pytest.param("", np.float32(0.1), "0.1", id="float32_own_digits"),
            pytest.param("", np.float16(0.1), "0.1", id="float16_own_digits"),
            pytest.param("+", np.float64(np.inf), "+inf", id="inf"),
        ],
    )
    def test_render(self, text, value, expected):
        assert parse_spec(text).render(value) == expected

    def test_float32_fraction(self):
        """float32(0.1) keeps its own shortest digits, not 0.10000000149011612."""
        assert NumericValue.from_number(np.float32(0.1)).fraction == "1"
