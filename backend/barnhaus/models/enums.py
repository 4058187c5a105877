"""Enums for the Barnhaus domain models.

These enums are the closed option sets of the estimator form: pricing
tiers, builder modes, and the three construction choices that carry a
cost factor.
"""

from enum import StrEnum


class PricingTier(StrEnum):
    """Package level, each with its own per-unit base rates."""

    ECONOMY = "economy"
    STANDARD = "standard"
    LUXURY = "luxury"


class BuilderType(StrEnum):
    """Who builds the house. Contractor builds carry a markup."""

    OWNER = "owner"
    CONTRACTOR = "contractor"


class Foundation(StrEnum):
    SLAB = "slab"
    CRAWL = "crawl"
    BASEMENT = "basement"


class RoofPitch(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class InteriorFinish(StrEnum):
    BASIC = "basic"
    MODERN = "modern"
    PREMIUM = "premium"


class Region(StrEnum):
    """Coarse U.S. regions used for the city table and recommendation prompts."""

    NORTHEAST = "Northeast"
    SOUTHEAST = "Southeast"
    MIDWEST = "Midwest"
    SOUTHWEST = "Southwest"
    WEST_COAST = "West Coast"
    PACIFIC_NORTHWEST = "Pacific Northwest"
    MOUNTAIN = "Mountain"
    SOUTH_CENTRAL = "South Central"


class MaterialCategory(StrEnum):
    """Exterior material groups classified from a house photo."""

    ROOFING = "roofing"
    SIDING = "siding"
    WINDOWS = "windows"
    DOORS = "doors"


class QualityLevel(StrEnum):
    """Display label for a material quality multiplier."""

    ECONOMY = "economy"
    STANDARD = "standard"
    LUXURY = "luxury"
