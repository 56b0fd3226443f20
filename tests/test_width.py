#
# Numfmt - Width Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numfmt.width import char_width, fill_run, text_width


# Tests ----------------------------------------------------------------------------------------------------------------

class TestCharWidth:
    """Width cost is the UTF-8 byte length of the character."""

    @pytest.mark.parametrize("ch, expected", [
        pytest.param("1", 1, id="ascii_digit"),
        pytest.param(" ", 1, id="space"),
        pytest.param("é", 2, id="two_bytes"),
        pytest.param("€", 3, id="three_bytes"),
        pytest.param("🖤", 4, id="four_bytes"),
    ])
    def test_width(self, ch, expected):
        assert char_width(ch) == expected

    def test_non_str(self):
        with pytest.raises(TypeError, match=r"must be str"):
            char_width(1)

    @pytest.mark.parametrize("ch", [
        pytest.param("", id="empty"),
        pytest.param("ab", id="two_chars"),
    ])
    def test_not_single(self, ch):
        with pytest.raises(ValueError, match=r"exactly one character"):
            char_width(ch)


class TestTextWidth:
    @pytest.mark.parametrize("text, expected", [
        pytest.param("", 0, id="empty"),
        pytest.param("-0x1f", 5, id="ascii"),
        pytest.param("🖤1", 5, id="mixed"),
        pytest.param("1€5", 5, id="euro"),
    ])
    def test_width(self, text, expected):
        assert text_width(text) == expected

    def test_non_str(self):
        with pytest.raises(TypeError):
            text_width(b"abc")


class TestFillRun:
    @pytest.mark.parametrize("fill, deficit, expected", [
        pytest.param("*", 3, "***", id="ascii"),
        pytest.param("*", 0, "", id="no_deficit"),
        pytest.param("*", -2, "", id="negative_deficit"),
        pytest.param("🖤", 4, "🖤", id="wide_exact"),
        pytest.param("🖤", 5, "🖤", id="wide_leftover"),
        pytest.param("🖤", 3, "", id="wide_too_large"),
        pytest.param("🖤", 8, "🖤🖤", id="wide_twice"),
    ])
    def test_run(self, fill, deficit, expected):
        """A run never exceeds the deficit."""
        run = fill_run(fill, deficit)
        assert run == expected
        assert text_width(run) <= max(deficit, 0)
