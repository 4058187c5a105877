"""City table for location-based cost adjustment.

Multipliers are relative to San Antonio, TX (1.00), the market the base
cost tables were built from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from barnhaus.models.enums import Region


class City(BaseModel):
    """A selectable build location and its cost multiplier."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    state: str
    region: Region
    cost_multiplier: float

    @property
    def display_name(self) -> str:
        return f"{self.name}, {self.state}"


CITIES: list[City] = [
    # South Central (baseline region)
    City(id="san-antonio", name="San Antonio", state="TX", region=Region.SOUTH_CENTRAL, cost_multiplier=1.0),
    City(id="houston", name="Houston", state="TX", region=Region.SOUTH_CENTRAL, cost_multiplier=1.15),
    City(id="dallas", name="Dallas", state="TX", region=Region.SOUTH_CENTRAL, cost_multiplier=1.12),
    City(id="austin", name="Austin", state="TX", region=Region.SOUTH_CENTRAL, cost_multiplier=1.18),
    City(id="oklahoma-city", name="Oklahoma City", state="OK", region=Region.SOUTH_CENTRAL, cost_multiplier=0.95),
    City(id="tulsa", name="Tulsa", state="OK", region=Region.SOUTH_CENTRAL, cost_multiplier=0.92),
    City(id="little-rock", name="Little Rock", state="AR", region=Region.SOUTH_CENTRAL, cost_multiplier=0.90),

    # Northeast
    City(id="new-york", name="New York City", state="NY", region=Region.NORTHEAST, cost_multiplier=2.4),
    City(id="boston", name="Boston", state="MA", region=Region.NORTHEAST, cost_multiplier=2.1),
    City(id="philadelphia", name="Philadelphia", state="PA", region=Region.NORTHEAST, cost_multiplier=1.8),
    City(id="pittsburgh", name="Pittsburgh", state="PA", region=Region.NORTHEAST, cost_multiplier=1.4),
    City(id="buffalo", name="Buffalo", state="NY", region=Region.NORTHEAST, cost_multiplier=1.3),
    City(id="providence", name="Providence", state="RI", region=Region.NORTHEAST, cost_multiplier=1.7),
    City(id="hartford", name="Hartford", state="CT", region=Region.NORTHEAST, cost_multiplier=1.6),

    # Southeast
    City(id="miami", name="Miami", state="FL", region=Region.SOUTHEAST, cost_multiplier=1.5),
    City(id="atlanta", name="Atlanta", state="GA", region=Region.SOUTHEAST, cost_multiplier=1.25),
    City(id="nashville", name="Nashville", state="TN", region=Region.SOUTHEAST, cost_multiplier=1.2),
    City(id="raleigh", name="Raleigh", state="NC", region=Region.SOUTHEAST, cost_multiplier=1.15),
    City(id="charlotte", name="Charlotte", state="NC", region=Region.SOUTHEAST, cost_multiplier=1.18),
    City(id="orlando", name="Orlando", state="FL", region=Region.SOUTHEAST, cost_multiplier=1.3),
    City(id="tampa", name="Tampa", state="FL", region=Region.SOUTHEAST, cost_multiplier=1.28),
    City(id="jacksonville", name="Jacksonville", state="FL", region=Region.SOUTHEAST, cost_multiplier=1.2),

    # West Coast
    City(id="los-angeles", name="Los Angeles", state="CA", region=Region.WEST_COAST, cost_multiplier=2.2),
    City(id="san-francisco", name="San Francisco", state="CA", region=Region.WEST_COAST, cost_multiplier=2.5),
    City(id="san-diego", name="San Diego", state="CA", region=Region.WEST_COAST, cost_multiplier=2.0),
    City(id="sacramento", name="Sacramento", state="CA", region=Region.WEST_COAST, cost_multiplier=1.8),
    City(id="san-jose", name="San Jose", state="CA", region=Region.WEST_COAST, cost_multiplier=2.3),

    # Pacific Northwest
    City(id="seattle", name="Seattle", state="WA", region=Region.PACIFIC_NORTHWEST, cost_multiplier=2.0),
    City(id="portland", name="Portland", state="OR", region=Region.PACIFIC_NORTHWEST, cost_multiplier=1.8),
    City(id="spokane", name="Spokane", state="WA", region=Region.PACIFIC_NORTHWEST, cost_multiplier=1.4),
    City(id="eugene", name="Eugene", state="OR", region=Region.PACIFIC_NORTHWEST, cost_multiplier=1.5),
    City(id="boise", name="Boise", state="ID", region=Region.PACIFIC_NORTHWEST, cost_multiplier=1.3),

    # Midwest
    City(id="chicago", name="Chicago", state="IL", region=Region.MIDWEST, cost_multiplier=1.7),
    City(id="minneapolis", name="Minneapolis", state="MN", region=Region.MIDWEST, cost_multiplier=1.5),
    City(id="detroit", name="Detroit", state="MI", region=Region.MIDWEST, cost_multiplier=1.2),
    City(id="cleveland", name="Cleveland", state="OH", region=Region.MIDWEST, cost_multiplier=1.15),
    City(id="indianapolis", name="Indianapolis", state="IN", region=Region.MIDWEST, cost_multiplier=1.1),
    City(id="columbus", name="Columbus", state="OH", region=Region.MIDWEST, cost_multiplier=1.12),
    City(id="milwaukee", name="Milwaukee", state="WI", region=Region.MIDWEST, cost_multiplier=1.25),
    City(id="kansas-city", name="Kansas City", state="MO", region=Region.MIDWEST, cost_multiplier=1.05),

    # Southwest
    City(id="phoenix", name="Phoenix", state="AZ", region=Region.SOUTHWEST, cost_multiplier=1.3),
    City(id="las-vegas", name="Las Vegas", state="NV", region=Region.SOUTHWEST, cost_multiplier=1.35),
    City(id="albuquerque", name="Albuquerque", state="NM", region=Region.SOUTHWEST, cost_multiplier=1.1),
    City(id="tucson", name="Tucson", state="AZ", region=Region.SOUTHWEST, cost_multiplier=1.15),
    City(id="el-paso", name="El Paso", state="TX", region=Region.SOUTHWEST, cost_multiplier=0.95),

    # Mountain
    City(id="denver", name="Denver", state="CO", region=Region.MOUNTAIN, cost_multiplier=1.6),
    City(id="salt-lake-city", name="Salt Lake City", state="UT", region=Region.MOUNTAIN, cost_multiplier=1.4),
    City(id="colorado-springs", name="Colorado Springs", state="CO", region=Region.MOUNTAIN, cost_multiplier=1.45),
    City(id="fort-collins", name="Fort Collins", state="CO", region=Region.MOUNTAIN, cost_multiplier=1.5),
    City(id="bozeman", name="Bozeman", state="MT", region=Region.MOUNTAIN, cost_multiplier=1.55),
    City(id="reno", name="Reno", state="NV", region=Region.MOUNTAIN, cost_multiplier=1.45),
]

CITIES_BY_ID: dict[str, City] = {city.id: city for city in CITIES}
