#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from numfmt.builder import FormatSpecBuilder
from numfmt.spec import FormatSpec

HEART = "🖤"  # 4 bytes in UTF-8


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def heart() -> str:
    """Multibyte fill character costing 4 width units."""
    return HEART


@pytest.fixture
def german_spec() -> FormatSpec:
    """Grouping with '.', decimal separator ',' and two fractional digits."""
    return (FormatSpecBuilder()
            .separator(".")
            .decimal_separator(",")
            .precision(2)
            .build())


@pytest.fixture
def unpadded():
    """Render a spec with width forced to zero, the content a padding decision starts from."""

    def _render(spec: FormatSpec, value) -> str:
        return spec.render_with(value, width=0)

    return _render
