"""Tests for the Barnhaus domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from barnhaus.models.enums import Foundation, InteriorFinish, QualityLevel, RoofPitch
from barnhaus.models.inputs import CalculatorInputs
from barnhaus.models.materials import CostImpact, MaterialAnalysis, quality_level
from barnhaus.models.recommendation import Recommendation

# ---------------------------------------------------------------------------
# CalculatorInputs
# ---------------------------------------------------------------------------


class TestCalculatorInputsDefaults:
    def test_defaults(self) -> None:
        inputs = CalculatorInputs()
        assert inputs.bedrooms == 3
        assert inputs.bathrooms == 2
        assert inputs.garage_sqft == 400
        assert inputs.living_sqft == 2000
        assert inputs.patio_sqft == 200
        assert inputs.location == "san-antonio"
        assert inputs.sustainability_score == 5
        assert inputs.foundation == Foundation.SLAB
        assert inputs.roof_pitch == RoofPitch.MEDIUM
        assert inputs.interior_finish == InteriorFinish.MODERN

    def test_is_frozen(self) -> None:
        inputs = CalculatorInputs()
        with pytest.raises(ValidationError):
            inputs.bedrooms = 5  # type: ignore[misc]

    def test_construction_clamps(self) -> None:
        inputs = CalculatorInputs(bedrooms=0, living_sqft=-10, sustainability_score=42)
        assert inputs.bedrooms == 1
        assert inputs.living_sqft == 0
        assert inputs.sustainability_score == 10

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_area_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError, match="finite"):
            CalculatorInputs(living_sqft=value)


class TestWithChange:
    def test_sustainability_above_range_clamps_to_10(self) -> None:
        assert CalculatorInputs().with_change("sustainability_score", 15).sustainability_score == 10

    def test_sustainability_below_range_clamps_to_1(self) -> None:
        assert CalculatorInputs().with_change("sustainability_score", -3).sustainability_score == 1

    def test_negative_bedrooms_clamp_to_1(self) -> None:
        assert CalculatorInputs().with_change("bedrooms", -3).bedrooms == 1

    def test_negative_bathrooms_clamp_to_1(self) -> None:
        assert CalculatorInputs().with_change("bathrooms", "-3").bathrooms == 1

    @pytest.mark.parametrize("field", ["garage_sqft", "living_sqft", "patio_sqft"])
    def test_negative_area_clamps_to_0(self, field: str) -> None:
        assert getattr(CalculatorInputs().with_change(field, -3), field) == 0

    def test_numeric_string_accepted(self) -> None:
        assert CalculatorInputs().with_change("living_sqft", " 2450.5 ").living_sqft == 2450.5

    @pytest.mark.parametrize("value", ["", "   ", "abc", None, "nan", True, [3]])
    def test_invalid_numeric_value_keeps_previous(self, value: object) -> None:
        inputs = CalculatorInputs(bedrooms=4)
        assert inputs.with_change("bedrooms", value) is inputs

    @pytest.mark.parametrize(("value", "expected"), [(2.5, 3), (3.5, 4), (2.49, 2)])
    def test_fractional_room_count_rounds_half_up(self, value: float, expected: int) -> None:
        assert CalculatorInputs().with_change("bedrooms", value).bedrooms == expected

    def test_returns_new_instance(self) -> None:
        inputs = CalculatorInputs()
        changed = inputs.with_change("bedrooms", 5)
        assert changed is not inputs
        assert changed.bedrooms == 5
        assert inputs.bedrooms == 3

    def test_enum_option_accepted(self) -> None:
        changed = CalculatorInputs().with_change("foundation", "basement")
        assert changed.foundation == Foundation.BASEMENT

    def test_unknown_enum_option_ignored(self) -> None:
        inputs = CalculatorInputs()
        assert inputs.with_change("roof_pitch", "vertical") is inputs

    def test_blank_location_ignored(self) -> None:
        inputs = CalculatorInputs()
        assert inputs.with_change("location", "  ") is inputs

    def test_location_is_not_validated_here(self) -> None:
        assert CalculatorInputs().with_change("location", "houston").location == "houston"

    def test_unknown_field_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown input field"):
            CalculatorInputs().with_change("pool_sqft", 300)


# ---------------------------------------------------------------------------
# MaterialAnalysis
# ---------------------------------------------------------------------------


class TestMaterialAnalysis:
    def test_defaults(self) -> None:
        analysis = MaterialAnalysis()
        assert analysis.roofing == "Standard asphalt shingles"
        assert analysis.siding == "Standard vinyl siding"
        assert analysis.windows == "Standard double-pane windows"
        assert analysis.doors == "Standard fiberglass entry door"
        assert analysis.average_multiplier == 1.0

    def test_multipliers_clamped(self) -> None:
        impact = CostImpact(roofing=1.5, siding=0.2, windows=1.1, doors=0.95)
        assert impact.roofing == 1.2
        assert impact.siding == 0.9
        assert impact.windows == 1.1
        assert impact.doors == 0.95

    def test_non_finite_multiplier_rejected(self) -> None:
        with pytest.raises(ValidationError, match="finite"):
            CostImpact(roofing=float("nan"))

    def test_average_multiplier(self) -> None:
        analysis = MaterialAnalysis(
            cost_impact=CostImpact(roofing=1.2, siding=1.2, windows=1.0, doors=1.0),
        )
        assert analysis.average_multiplier == pytest.approx(1.1)

    def test_quality_levels(self) -> None:
        analysis = MaterialAnalysis(
            cost_impact=CostImpact(roofing=0.9, siding=1.0, windows=1.15, doors=1.0),
        )
        assert analysis.quality_levels() == {
            "roofing": "economy",
            "siding": "standard",
            "windows": "luxury",
            "doors": "standard",
        }

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0.9, QualityLevel.ECONOMY), (1.0, QualityLevel.STANDARD), (1.2, QualityLevel.LUXURY)],
    )
    def test_quality_level(self, value: float, expected: QualityLevel) -> None:
        assert quality_level(value) == expected


# ---------------------------------------------------------------------------
# Recommendation
# ---------------------------------------------------------------------------


class TestRecommendation:
    def test_split_on_first_separator(self) -> None:
        rec = Recommendation.from_line(
            "Install impact windows - Required near the coast - saves on insurance."
        )
        assert rec.title == "Install impact windows"
        assert rec.body == "Required near the coast - saves on insurance."

    def test_no_separator_is_all_title(self) -> None:
        rec = Recommendation.from_line("Use a metal roof")
        assert rec.title == "Use a metal roof"
        assert rec.body == ""

    def test_surrounding_quotes_removed(self) -> None:
        rec = Recommendation.from_line('"Add a storm shelter - Tornado alley."')
        assert rec.title == "Add a storm shelter"
        assert rec.body == "Tornado alley."
