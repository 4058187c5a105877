"""Regional climate and building-practice profiles.

Used to give the recommendation prompt local context for the selected city.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from barnhaus.models.enums import Region


class RegionProfile(BaseModel):
    """Climate, risks, and typical practice for one region."""

    model_config = ConfigDict(frozen=True)

    climate: str
    challenges: str
    opportunities: str
    materials: str
    codes: str


REGION_PROFILES: dict[Region, RegionProfile] = {
    Region.NORTHEAST: RegionProfile(
        climate="Cold winters, mild summers, high precipitation, frequent snow",
        challenges="Snow loads, freeze-thaw cycles, high energy costs, salt exposure",
        opportunities="Energy efficiency upgrades, basement utilization, thermal mass",
        materials="Brick, stone, engineered wood, metal roofing, ice barriers",
        codes="High energy efficiency requirements, strict snow load regulations",
    ),
    Region.SOUTHEAST: RegionProfile(
        climate="Hot humid summers, mild winters, tropical storms, high rainfall",
        challenges="Hurricane resistance, humidity control, pest management, flooding",
        opportunities="Natural ventilation, outdoor living spaces, solar shading",
        materials="Hurricane-rated windows, moisture-resistant siding, metal roofs",
        codes="Hurricane protection requirements, flood zone regulations",
    ),
    Region.MIDWEST: RegionProfile(
        climate="Extreme temperature variations, tornadoes, thunderstorms, seasonal changes",
        challenges="Storm protection, temperature control, foundation stability, wind loads",
        opportunities="Storm shelters, basement spaces, efficient HVAC, thermal barriers",
        materials="Storm-resistant roofing, reinforced foundations, impact windows",
        codes="Tornado shelter requirements, frost depth regulations",
    ),
    Region.SOUTHWEST: RegionProfile(
        climate="Hot arid climate, intense sun exposure, minimal rainfall, dust storms",
        challenges="Heat management, water conservation, sun protection, dust control",
        opportunities="Solar power, xeriscaping, passive cooling, thermal mass",
        materials="Adobe, stucco, reflective roofing, shade structures, desert-adapted",
        codes="Water conservation requirements, solar-ready provisions",
    ),
    Region.WEST_COAST: RegionProfile(
        climate="Varied microclimates, earthquake risk, coastal conditions, fog exposure",
        challenges="Seismic requirements, coastal durability, fire resistance, salt air",
        opportunities="Indoor-outdoor living, sustainable design, natural lighting",
        materials="Seismic-rated materials, fire-resistant products, corrosion-resistant",
        codes="Strict seismic codes, wildfire protection requirements",
    ),
    Region.PACIFIC_NORTHWEST: RegionProfile(
        climate="Frequent rain, mild temperatures, limited sun exposure, high humidity",
        challenges="Moisture management, mold prevention, natural light, moss growth",
        opportunities="Rainwater harvesting, daylighting design, green roofs",
        materials="Weather-resistant siding, quality waterproofing, cedar products",
        codes="Moisture protection requirements, rainwater management",
    ),
    Region.MOUNTAIN: RegionProfile(
        climate="High altitude, extreme temperature swings, heavy snowfall, intense UV",
        challenges="Snow loads, UV exposure, thermal efficiency, altitude effects",
        opportunities="Views, natural materials, passive solar, thermal mass",
        materials="Heavy timber, stone, high-insulation products, snow guards",
        codes="Strict snow load requirements, high-altitude HVAC specifications",
    ),
    Region.SOUTH_CENTRAL: RegionProfile(
        climate="Hot summers, mild winters, severe storms, high humidity",
        challenges="Heat management, storm protection, foundation stability, clay soils",
        opportunities="Energy efficiency, storm shelters, outdoor spaces, shade",
        materials="Storm-resistant roofing, moisture barriers, pier foundations",
        codes="Foundation requirements, energy efficiency standards",
    ),
}
