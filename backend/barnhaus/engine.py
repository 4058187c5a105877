"""Core pricing engine for the Barnhaus cost estimator.

The PricingEngine prices a house per tier in a single pass:

1. **Base cost**: Room counts and square footage times the tier's
   per-unit rates.
2. **Construction factors**: Multiply by the foundation, roof pitch, and
   interior finish factors.
3. **Material adjustment**: When a photo analysis is available, multiply
   by the mean of its four quality multipliers.
4. **Location and sustainability**: Multiply by the location multiplier
   plus the sustainability bonus (score * 0.02). The bonus is added to the
   location multiplier, not applied as a separate factor.
5. **Builder modes**: Owner cost is the adjusted price; contractor cost
   adds an 18% markup.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from barnhaus.data.cost_factors import (
    CONTRACTOR_MARKUP,
    COST_FACTORS,
    FOUNDATION_FACTORS,
    INTERIOR_FINISH_FACTORS,
    ROOF_PITCH_FACTORS,
    SUSTAINABILITY_RATE,
)
from barnhaus.models.enums import PricingTier
from barnhaus.models.pricing import PricingResult, TierCost

if TYPE_CHECKING:
    from barnhaus.data.cost_factors import TierCostFactors
    from barnhaus.data.repository import LocationRepository
    from barnhaus.models.inputs import CalculatorInputs
    from barnhaus.models.materials import MaterialAnalysis

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"
COST_DATA_VERSION = "2025.1"


def compute_cost(
    inputs: CalculatorInputs,
    tier_factors: TierCostFactors,
    location_multiplier: float,
    material_multiplier: float | None = None,
) -> TierCost:
    """Price one tier from explicit factors.

    ``material_multiplier`` is the mean quality multiplier of a material
    analysis, or None when no photo has been analyzed.
    """
    base = (
        inputs.bedrooms * tier_factors.bedroom
        + inputs.bathrooms * tier_factors.bathroom
        + inputs.garage_sqft * tier_factors.garage
        + inputs.living_sqft * tier_factors.living
        + inputs.patio_sqft * tier_factors.patio
    )

    base *= FOUNDATION_FACTORS[inputs.foundation]
    base *= ROOF_PITCH_FACTORS[inputs.roof_pitch]
    base *= INTERIOR_FINISH_FACTORS[inputs.interior_finish]

    if material_multiplier is not None:
        base *= material_multiplier

    sustainability_bonus = inputs.sustainability_score * SUSTAINABILITY_RATE
    adjusted = base * (location_multiplier + sustainability_bonus)

    return TierCost(
        owner=adjusted,
        contractor=adjusted * (1 + CONTRACTOR_MARKUP),
    )


class PricingEngine:
    """Converts CalculatorInputs into owner and contractor costs per tier.

    Args:
        repository: Location repository used to resolve the location
            multiplier in :meth:`estimate`.
        cost_factors: Per-tier base rates. Defaults to the built-in table.

    Example::

        from barnhaus import create_default_engine, CalculatorInputs

        engine = create_default_engine()
        result = engine.estimate(CalculatorInputs(location="austin"))
    """

    def __init__(
        self,
        repository: LocationRepository,
        cost_factors: dict[PricingTier, TierCostFactors] | None = None,
    ) -> None:
        self._repository = repository
        self._cost_factors = dict(COST_FACTORS if cost_factors is None else cost_factors)

    @property
    def repository(self) -> LocationRepository:
        return self._repository

    def price_tier(
        self,
        inputs: CalculatorInputs,
        tier: PricingTier,
        location_multiplier: float,
        material_analysis: MaterialAnalysis | None = None,
    ) -> TierCost:
        """Price a single tier with an already-resolved location multiplier."""
        material_multiplier = (
            material_analysis.average_multiplier if material_analysis is not None else None
        )
        return compute_cost(
            inputs,
            self._cost_factors[tier],
            location_multiplier,
            material_multiplier,
        )

    def price_all(
        self,
        inputs: CalculatorInputs,
        location_multiplier: float,
        material_analysis: MaterialAnalysis | None = None,
    ) -> PricingResult:
        """Price all three tiers with an already-resolved location multiplier."""
        costs = {
            tier: self.price_tier(inputs, tier, location_multiplier, material_analysis)
            for tier in PricingTier
        }
        return PricingResult(
            economy=costs[PricingTier.ECONOMY],
            standard=costs[PricingTier.STANDARD],
            luxury=costs[PricingTier.LUXURY],
            location_multiplier=location_multiplier,
            material_multiplier=(
                material_analysis.average_multiplier
                if material_analysis is not None
                else 1.0
            ),
            sustainability_bonus=inputs.sustainability_score * SUSTAINABILITY_RATE,
        )

    def estimate(
        self,
        inputs: CalculatorInputs,
        material_analysis: MaterialAnalysis | None = None,
    ) -> PricingResult:
        """Resolve the location multiplier for ``inputs`` and price all tiers.

        Raises:
            LocationNotFoundError: If ``inputs.location`` is not a known city.
        """
        location_multiplier = self._repository.get_location_multiplier(inputs.location)
        logger.debug(
            "Pricing %s at location multiplier %.2f", inputs.location, location_multiplier
        )
        return self.price_all(inputs, location_multiplier, material_analysis)
