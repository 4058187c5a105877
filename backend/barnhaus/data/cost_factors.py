"""Per-unit cost tables and adjustment factors.

Base prices reflect 2025 San Antonio market rates (the 1.00 baseline city)
and get multiplied by room counts or square footage.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from barnhaus.models.enums import Foundation, InteriorFinish, PricingTier, RoofPitch

CONTRACTOR_MARKUP = 0.18

# Added to the location multiplier per sustainability point (1-10).
SUSTAINABILITY_RATE = 0.02


class TierCostFactors(BaseModel):
    """Per-unit base prices for one pricing tier."""

    model_config = ConfigDict(frozen=True)

    bedroom: float  # per bedroom: framing, electrical, HVAC
    bathroom: float  # per bathroom: plumbing, fixtures, tile
    garage: float  # per garage sq ft
    living: float  # per living sq ft
    patio: float  # per patio sq ft


COST_FACTORS: dict[PricingTier, TierCostFactors] = {
    # Basic fixtures, simple concrete patio
    PricingTier.ECONOMY: TierCostFactors(
        bedroom=8000, bathroom=6000, garage=45, living=85, patio=25,
    ),
    # Mid-grade fixtures, stamped concrete
    PricingTier.STANDARD: TierCostFactors(
        bedroom=12000, bathroom=9000, garage=60, living=110, patio=35,
    ),
    # High-end fixtures, epoxy garage floors, custom stonework
    PricingTier.LUXURY: TierCostFactors(
        bedroom=18000, bathroom=15000, garage=85, living=150, patio=50,
    ),
}

FOUNDATION_FACTORS: dict[Foundation, float] = {
    Foundation.SLAB: 1.0,
    Foundation.CRAWL: 1.08,
    Foundation.BASEMENT: 1.2,
}

ROOF_PITCH_FACTORS: dict[RoofPitch, float] = {
    RoofPitch.LOW: 1.0,
    RoofPitch.MEDIUM: 1.05,
    RoofPitch.HIGH: 1.1,
}

INTERIOR_FINISH_FACTORS: dict[InteriorFinish, float] = {
    InteriorFinish.BASIC: 1.0,
    InteriorFinish.MODERN: 1.15,
    InteriorFinish.PREMIUM: 1.35,
}


class TierFeature(BaseModel):
    """A package feature and the tiers that include it."""

    model_config = ConfigDict(frozen=True)

    name: str
    economy: bool
    standard: bool
    luxury: bool

    def included_in(self, tier: PricingTier) -> bool:
        return bool(getattr(self, tier.value))


TIER_FEATURES: list[TierFeature] = [
    TierFeature(name="Basic Structure", economy=True, standard=True, luxury=True),
    TierFeature(name="Energy Efficient Windows", economy=False, standard=True, luxury=True),
    TierFeature(name="Premium Insulation", economy=False, standard=True, luxury=True),
    TierFeature(name="Smart Home Integration", economy=False, standard=False, luxury=True),
    TierFeature(name="Custom Finishes", economy=False, standard=True, luxury=True),
    TierFeature(name="Premium Appliances", economy=False, standard=False, luxury=True),
]
