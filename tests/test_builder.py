#
# Numfmt - Builder Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numfmt.builder import FormatSpecBuilder
from numfmt.parser import parse_spec
from numfmt.sentinels import DYNAMIC, UNSET
from numfmt.spec import Align, Format, FormatSpec, PadMode, Sign


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFormatSpecBuilder:

    def test_empty_build_is_default(self):
        assert FormatSpecBuilder().build() == FormatSpec()

    def test_classmethod_entry(self):
        assert isinstance(FormatSpec.builder(), FormatSpecBuilder)

    def test_chaining(self):
        spec = (FormatSpecBuilder()
                .fill("*")
                .align("^")
                .sign(Sign.ALWAYS)
                .alternate()
                .width(12)
                .precision(3)
                .format("x")
                .separator("_")
                .spacing(4)
                .build())
        assert spec == parse_spec("*^+#12.3x_4")

    def test_fill_sets_explicit(self):
        spec = FormatSpecBuilder().fill("-").build()
        assert spec.pad_mode is PadMode.EXPLICIT
        assert spec.align is Align.RIGHT

    @pytest.mark.parametrize("align, expected", [
        pytest.param(None, Align.RIGHT, id="default"),
        pytest.param(">", Align.RIGHT, id="right"),
        pytest.param("v", Align.DECIMAL, id="decimal_kept"),
        pytest.param("<", Align.RIGHT, id="left_replaced"),
        pytest.param("^", Align.RIGHT, id="center_replaced"),
    ])
    def test_zero(self, align, expected):
        builder = FormatSpecBuilder()
        if align is not None:
            builder.align(align)
        spec = builder.zero().width(5).build()
        assert spec.zero_flag
        assert spec.fill == "0"
        assert spec.align is expected

    def test_zero_matches_parser(self):
        assert FormatSpecBuilder().sign("+").zero().width(5).build() == parse_spec("+05")

    def test_zero_then_fill(self):
        """A later fill replaces the zero flag."""
        spec = FormatSpecBuilder().zero().fill("*").width(5).build()
        assert spec.pad_mode is PadMode.EXPLICIT
        assert spec.fill == "*"

    def test_zero_cleared(self):
        spec = FormatSpecBuilder().zero().zero(False).build()
        assert spec.pad_mode is PadMode.DEFAULT
        assert spec.fill == " "

    @pytest.mark.parametrize("ch", ["x", "*", "0"])
    def test_zero_cleared_keeps_explicit_fill(self, ch):
        spec = FormatSpecBuilder().fill(ch).zero(False).width(3).build()
        assert spec.pad_mode is PadMode.EXPLICIT
        assert spec.fill == ch
        assert spec.render(1) == f"{ch}{ch}1"

    def test_zero_cleared_untouched_default(self):
        assert FormatSpecBuilder().zero(False).build() == FormatSpecBuilder().build()

    def test_dynamic(self):
        spec = FormatSpecBuilder().dynamic_width().dynamic_precision().build()
        assert spec.width is DYNAMIC
        assert spec.precision is DYNAMIC
        assert spec == parse_spec("$.$")

    def test_reset_to_unset(self):
        spec = parse_spec("5.2").to_builder().width(None).precision(None).build()
        assert spec.width is UNSET
        assert spec.precision is UNSET

    def test_no_separator(self):
        spec = FormatSpecBuilder().separator(",").no_separator().build()
        assert spec.separator is None
        assert not spec.grouping
        assert spec.render(1234567) == "1234567"

    def test_custom_separators(self, german_spec):
        assert german_spec.separator == "."
        assert german_spec.decimal_separator == ","
        assert german_spec.render(1234.5) == "1.234,50"

    def test_from_spec_round_trip(self):
        spec = parse_spec("+#010b_4")
        assert FormatSpecBuilder.from_spec(spec).build() == spec
        assert spec.to_builder().build() == spec

    def test_to_builder_leaves_spec_untouched(self):
        spec = parse_spec("x")
        changed = spec.to_builder().format(Format.BINARY).build()
        assert changed.format is Format.BINARY
        assert spec.format is Format.HEX_LOWER

    def test_wide_fill(self, heart):
        assert FormatSpecBuilder().fill(heart).width(6).build().render(1) == f"{heart}1"

    def test_from_spec_type_error(self):
        with pytest.raises(TypeError, match=r"spec must be FormatSpec"):
            FormatSpecBuilder.from_spec("5")

    @pytest.mark.parametrize("configure, error", [
        pytest.param(lambda b: b.spacing(0), ValueError, id="spacing_zero"),
        pytest.param(lambda b: b.width(-1), ValueError, id="width_negative"),
        pytest.param(lambda b: b.fill("ab"), ValueError, id="fill_two_chars"),
        pytest.param(lambda b: b.separator(""), ValueError, id="separator_empty"),
        pytest.param(lambda b: b.format("f"), ValueError, id="format_unknown"),
        pytest.param(lambda b: b.alternate(1), TypeError, id="alternate_int"),
        pytest.param(lambda b: b.zero().align("<"), ValueError, id="zero_then_left"),
    ])
    def test_build_validates(self, configure, error):
        builder = FormatSpecBuilder()
        configure(builder)
        with pytest.raises(error):
            builder.build()
