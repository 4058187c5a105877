"""Domain models for the Barnhaus cost estimator."""

from barnhaus.models.enums import (
    BuilderType,
    Foundation,
    InteriorFinish,
    MaterialCategory,
    PricingTier,
    QualityLevel,
    Region,
    RoofPitch,
)
from barnhaus.models.inputs import CalculatorInputs
from barnhaus.models.materials import CostImpact, MaterialAnalysis
from barnhaus.models.pricing import PricingResult, TierCost
from barnhaus.models.recommendation import Recommendation

__all__ = [
    "BuilderType",
    "CalculatorInputs",
    "CostImpact",
    "Foundation",
    "InteriorFinish",
    "MaterialAnalysis",
    "MaterialCategory",
    "PricingResult",
    "PricingTier",
    "QualityLevel",
    "Recommendation",
    "Region",
    "RoofPitch",
    "TierCost",
]
