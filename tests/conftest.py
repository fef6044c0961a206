"""
Pytest configuration and shared fixtures for File Converter tests.
"""
import sys
from pathlib import Path

import pytest
import reportlab

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import Settings
from converter.contracts import PageGeometry
from converter.layout import ReportLabFont
from tests.fakes import FixedWidthMetrics, make_image_bytes


# ============================================================================
# Fixtures: Layout
# ============================================================================

@pytest.fixture
def metrics():
    """10 units per code point."""
    return FixedWidthMetrics(advance=10.0)


@pytest.fixture
def geometry():
    """
    Small page: 120 units of text width (12 code points at 10 units),
    line height 14, five lines per page (y = 90, 76, 62, 48, 34).
    """
    return PageGeometry(width=140, height=100, margin=10, font_size=10)


@pytest.fixture
def letter_geometry():
    """US Letter with 40pt margins and 12pt text."""
    return PageGeometry.for_page_size("letter", margin=40, font_size=12)


@pytest.fixture
def helvetica():
    """Built-in ReportLab font."""
    return ReportLabFont("Helvetica")


@pytest.fixture
def sample_text():
    """Multi-paragraph text with a blank line and an over-wide token."""
    return (
        "The quick brown fox jumps over the lazy dog. " * 6 + "\n"
        "\n"
        + "Supercalifragilisticexpialidocious" * 4 + " ends here.\n"
        "Ünïcödé text keeps its code points: café, naïve, Ørsted."
    )


# ============================================================================
# Fixtures: Images
# ============================================================================

@pytest.fixture
def png_bytes():
    """300x200 flat-colour PNG."""
    return make_image_bytes()


@pytest.fixture
def noisy_png_bytes():
    """600x400 random-noise PNG; large as JPEG at any quality."""
    return make_image_bytes(size=(600, 400), noise=True)


# ============================================================================
# Fixtures: Configuration
# ============================================================================

@pytest.fixture
def test_settings(tmp_path):
    """Settings isolated from the output directory and system fonts (Helvetica)."""
    return Settings(output_dir=tmp_path / "output", font_candidates=[])


# ============================================================================
# Fixtures: Fonts
# ============================================================================

@pytest.fixture
def vera_ttf():
    """TrueType font shipped with ReportLab."""
    path = Path(reportlab.__file__).parent / "fonts" / "Vera.ttf"
    if not path.exists():
        pytest.skip("ReportLab Vera.ttf not installed")
    return path
