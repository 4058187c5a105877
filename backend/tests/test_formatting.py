"""Tests for formatting helpers and PricingResult summary output."""

from __future__ import annotations

from barnhaus.formatting import format_currency, format_multiplier, tier_label
from barnhaus.models.enums import BuilderType, PricingTier
from barnhaus.models.pricing import PricingResult, TierCost


def _build_result() -> PricingResult:
    return PricingResult(
        economy=TierCost(owner=304_169.25, contractor=358_919.715),
        standard=TierCost(owner=400_000.0, contractor=472_000.0),
        luxury=TierCost(owner=612_345.6, contractor=722_567.808),
        location_multiplier=1.15,
        material_multiplier=1.025,
        sustainability_bonus=0.1,
    )


class TestFormatCurrency:
    def test_whole_dollars_with_commas(self) -> None:
        assert format_currency(304_169.25) == "$304,169"

    def test_rounds_to_nearest_dollar(self) -> None:
        assert format_currency(358_919.715) == "$358,920"

    def test_small_amount(self) -> None:
        assert format_currency(950.4) == "$950"

    def test_zero(self) -> None:
        assert format_currency(0) == "$0"

    def test_negative(self) -> None:
        assert format_currency(-1234.0) == "-$1,234"


class TestLabels:
    def test_tier_labels(self) -> None:
        assert tier_label(PricingTier.ECONOMY) == "Economy Package"
        assert tier_label(PricingTier.STANDARD) == "Standard Package"
        assert tier_label(PricingTier.LUXURY) == "Luxury Package"

    def test_multiplier(self) -> None:
        assert format_multiplier(1.15) == "1.15x"
        assert format_multiplier(1) == "1.00x"


class TestPricingResult:
    def test_for_tier_and_builder(self) -> None:
        result = _build_result()
        assert result.for_tier(PricingTier.STANDARD).for_builder(BuilderType.OWNER) == 400_000.0
        assert (
            result.for_tier(PricingTier.STANDARD).for_builder(BuilderType.CONTRACTOR)
            == 472_000.0
        )

    def test_summary_dict(self) -> None:
        summary = _build_result().to_summary_dict()
        assert [t["label"] for t in summary["tiers"]] == [
            "Economy Package",
            "Standard Package",
            "Luxury Package",
        ]
        assert summary["tiers"][0]["owner_formatted"] == "$304,169"
        assert summary["tiers"][1]["contractor_formatted"] == "$472,000"
        assert summary["location_multiplier_formatted"] == "1.15x"
        assert summary["material_multiplier_formatted"] == "1.02x"
