"""Static reference data for the Barnhaus estimator."""

from barnhaus.data.cities import CITIES, City
from barnhaus.data.cost_factors import COST_FACTORS, TierCostFactors, TierFeature
from barnhaus.data.regions import REGION_PROFILES, RegionProfile
from barnhaus.data.repository import LocationRepository

__all__ = [
    "CITIES",
    "COST_FACTORS",
    "City",
    "LocationRepository",
    "REGION_PROFILES",
    "RegionProfile",
    "TierCostFactors",
    "TierFeature",
]
