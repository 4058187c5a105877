"""Pricing output models for the Barnhaus estimator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from barnhaus.models.enums import BuilderType, PricingTier


class TierCost(BaseModel):
    """Owner-build and contractor-build cost for a single tier."""

    model_config = ConfigDict(frozen=True)

    owner: float
    contractor: float

    def for_builder(self, builder: BuilderType) -> float:
        if builder == BuilderType.OWNER:
            return self.owner
        return self.contractor


class PricingResult(BaseModel):
    """Costs for all three tiers, derived from one set of inputs.

    Purely derived and never persisted. Recomputed whenever the inputs,
    the location multiplier, or the material analysis change.
    """

    model_config = ConfigDict(frozen=True)

    economy: TierCost
    standard: TierCost
    luxury: TierCost
    location_multiplier: float
    material_multiplier: float = 1.0
    sustainability_bonus: float = 0.0

    def for_tier(self, tier: PricingTier) -> TierCost:
        return getattr(self, tier.value)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict for frontend consumption.

        Every tier gets its package label and owner/contractor totals
        formatted as whole US dollars.
        """
        from barnhaus.formatting import format_currency, format_multiplier, tier_label

        return {
            "tiers": [
                {
                    "tier": tier.value,
                    "label": tier_label(tier),
                    "owner_formatted": format_currency(self.for_tier(tier).owner),
                    "contractor_formatted": format_currency(
                        self.for_tier(tier).contractor,
                    ),
                }
                for tier in PricingTier
            ],
            "location_multiplier": self.location_multiplier,
            "location_multiplier_formatted": format_multiplier(
                self.location_multiplier,
            ),
            "material_multiplier_formatted": format_multiplier(
                self.material_multiplier,
            ),
        }
