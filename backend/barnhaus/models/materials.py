"""Material analysis model produced from an exterior house photo."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from barnhaus.models.enums import MaterialCategory, QualityLevel

MIN_QUALITY_MULTIPLIER = 0.9
MAX_QUALITY_MULTIPLIER = 1.2
DEFAULT_QUALITY_MULTIPLIER = 1.0

DEFAULT_DESCRIPTIONS: dict[MaterialCategory, str] = {
    MaterialCategory.ROOFING: "Standard asphalt shingles",
    MaterialCategory.SIDING: "Standard vinyl siding",
    MaterialCategory.WINDOWS: "Standard double-pane windows",
    MaterialCategory.DOORS: "Standard fiberglass entry door",
}


def clamp_quality(value: float) -> float:
    """Clamp a quality multiplier to the supported [0.9, 1.2] band."""
    return max(MIN_QUALITY_MULTIPLIER, min(MAX_QUALITY_MULTIPLIER, value))


def quality_level(multiplier: float) -> QualityLevel:
    """Map a multiplier to its display label (below 1.0 is economy, above is luxury)."""
    if multiplier < DEFAULT_QUALITY_MULTIPLIER:
        return QualityLevel.ECONOMY
    if multiplier > DEFAULT_QUALITY_MULTIPLIER:
        return QualityLevel.LUXURY
    return QualityLevel.STANDARD


class CostImpact(BaseModel):
    """Quality multipliers for the four exterior material groups."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    roofing: float = DEFAULT_QUALITY_MULTIPLIER
    siding: float = DEFAULT_QUALITY_MULTIPLIER
    windows: float = DEFAULT_QUALITY_MULTIPLIER
    doors: float = DEFAULT_QUALITY_MULTIPLIER

    @field_validator("roofing", "siding", "windows", "doors")
    @classmethod
    def clamp_multiplier(cls, v: float) -> float:
        return clamp_quality(v)

    @property
    def average(self) -> float:
        return (self.roofing + self.siding + self.windows + self.doors) / 4


class MaterialAnalysis(BaseModel):
    """Material descriptions and quality multipliers for one uploaded photo.

    Each upload replaces the previous analysis; there is no history.
    The default instance describes a standard-grade house with every
    multiplier at 1.0.
    """

    model_config = ConfigDict(frozen=True)

    roofing: str = DEFAULT_DESCRIPTIONS[MaterialCategory.ROOFING]
    siding: str = DEFAULT_DESCRIPTIONS[MaterialCategory.SIDING]
    windows: str = DEFAULT_DESCRIPTIONS[MaterialCategory.WINDOWS]
    doors: str = DEFAULT_DESCRIPTIONS[MaterialCategory.DOORS]
    cost_impact: CostImpact = Field(default_factory=CostImpact)

    @property
    def average_multiplier(self) -> float:
        """Arithmetic mean of the four clamped quality multipliers."""
        return self.cost_impact.average

    def quality_levels(self) -> dict[str, str]:
        """Display label per material group, keyed by category name."""
        return {
            category.value: quality_level(getattr(self.cost_impact, category.value)).value
            for category in MaterialCategory
        }
