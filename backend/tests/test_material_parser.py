"""Tests for the free-text material analysis parser."""

from __future__ import annotations

import pytest

from barnhaus.models.materials import MaterialAnalysis
from barnhaus.services.material_parser import (
    extract_description,
    extract_quality_multiplier,
    parse_material_analysis,
)

_WELL_FORMED = """Here is my analysis of the house:

1. Roofing Material:
- Specific material type: Architectural asphalt shingles in charcoal. They look recent.
- Quality level: 1.1

2. Siding Material:
- Specific material type: Fiber cement lap siding. Painted white.
- Quality level: 1.0

3. Windows:
- Specific type: Vinyl double-hung with grids. Low-E glass likely.
- Quality level: 0.95

4. Doors:
- Specific type: Solid wood craftsman entry door. Stained finish.
- Quality level: 1.2
"""


class TestWellFormedResponse:
    def test_descriptions(self) -> None:
        analysis = parse_material_analysis(_WELL_FORMED)
        assert analysis.roofing == "Architectural asphalt shingles in charcoal"
        assert analysis.siding == "Fiber cement lap siding"
        assert analysis.windows == "Vinyl double-hung with grids"
        assert analysis.doors == "Solid wood craftsman entry door"

    def test_multipliers(self) -> None:
        impact = parse_material_analysis(_WELL_FORMED).cost_impact
        assert impact.roofing == pytest.approx(1.1)
        assert impact.siding == pytest.approx(1.0)
        assert impact.windows == pytest.approx(0.95)
        assert impact.doors == pytest.approx(1.2)


class TestDefaults:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            None,
            "I can't make out any materials in this photo.",
            "The roofing looks like slate and the siding is brick.",
        ],
    )
    def test_no_numbered_sections_yields_defaults(self, text: str | None) -> None:
        assert parse_material_analysis(text) == MaterialAnalysis()

    def test_unmatched_categories_keep_defaults(self) -> None:
        analysis = parse_material_analysis(
            "1. Roofing: type: Standing seam metal. Quality level: 1.15"
        )
        assert analysis.roofing == "Standing seam metal"
        assert analysis.cost_impact.roofing == pytest.approx(1.15)
        assert analysis.siding == "Standard vinyl siding"
        assert analysis.cost_impact.siding == 1.0
        assert analysis.doors == "Standard fiberglass entry door"

    def test_missing_quality_level_defaults_to_one(self) -> None:
        analysis = parse_material_analysis("1. Doors: type: Steel with glass.")
        assert analysis.doors == "Steel with glass"
        assert analysis.cost_impact.doors == 1.0


class TestClamping:
    def test_high_quality_clamped(self) -> None:
        analysis = parse_material_analysis("1. Roofing Material\nQuality level: 1.5")
        assert analysis.cost_impact.roofing == 1.2

    def test_low_quality_clamped(self) -> None:
        analysis = parse_material_analysis("1. Siding Material\nQuality level: 0.2")
        assert analysis.cost_impact.siding == 0.9

    def test_integer_quality_clamped(self) -> None:
        assert extract_quality_multiplier("Quality level is about 2") == 1.2


class TestSectionMatching:
    def test_first_keyword_wins_within_section(self) -> None:
        """Keywords are checked in a fixed order, so "window" beats "door"."""
        analysis = parse_material_analysis(
            "1. Windows match the door trim. type: Aluminum casement. Quality level: 1.1"
        )
        assert analysis.windows == "Aluminum casement"
        assert analysis.doors == "Standard fiberglass entry door"

    def test_later_section_overwrites_earlier(self) -> None:
        text = (
            "1. Roofing: type: Asphalt shingles. Quality level: 0.9\n"
            "2. Roofing again: type: Clay tile. Quality level: 1.2\n"
        )
        analysis = parse_material_analysis(text)
        assert analysis.roofing == "Clay tile"
        assert analysis.cost_impact.roofing == 1.2

    def test_case_insensitive(self) -> None:
        analysis = parse_material_analysis("1. SIDING\nTYPE: Brick veneer. QUALITY LEVEL: 1.1")
        assert analysis.siding == "Brick veneer"
        assert analysis.cost_impact.siding == pytest.approx(1.1)


class TestExtractDescription:
    def test_type_pattern_preferred(self) -> None:
        assert extract_description("Roofing\n- Material type: Slate tiles. Old.") == "Slate tiles"

    def test_falls_back_to_text_after_last_colon(self) -> None:
        section = "Roofing Material: Premium: Cedar shake roof. Weathered.\nmore"
        assert extract_description(section) == "Cedar shake roof"

    def test_falls_back_to_first_line(self) -> None:
        assert extract_description("\n\nGlass storm door. Brass handle.") == "Glass storm door"

    def test_empty_section(self) -> None:
        assert extract_description("   \n  ") == ""
