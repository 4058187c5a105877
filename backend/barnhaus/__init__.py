"""Barnhaus construction cost estimator.

Usage::

    from barnhaus import create_default_engine, CalculatorInputs

    engine = create_default_engine()
    pricing = engine.estimate(CalculatorInputs(location="austin"))
"""

from barnhaus.engine import PricingEngine, compute_cost
from barnhaus.exceptions import (
    BarnhausError,
    ImageValidationError,
    LocationNotFoundError,
    TransportError,
)
from barnhaus.factory import create_default_engine
from barnhaus.models.enums import (
    BuilderType,
    Foundation,
    InteriorFinish,
    PricingTier,
    Region,
    RoofPitch,
)
from barnhaus.models.inputs import CalculatorInputs
from barnhaus.models.materials import CostImpact, MaterialAnalysis
from barnhaus.models.pricing import PricingResult, TierCost
from barnhaus.services.material_parser import parse_material_analysis
from barnhaus.services.session import EstimatorSession

__all__ = [
    "BarnhausError",
    "BuilderType",
    "CalculatorInputs",
    "CostImpact",
    "EstimatorSession",
    "Foundation",
    "ImageValidationError",
    "InteriorFinish",
    "LocationNotFoundError",
    "MaterialAnalysis",
    "PricingEngine",
    "PricingResult",
    "PricingTier",
    "Region",
    "RoofPitch",
    "TierCost",
    "TransportError",
    "compute_cost",
    "create_default_engine",
    "parse_material_analysis",
]
