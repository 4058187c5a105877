"""Location repository for looking up city multipliers and regional profiles."""

from __future__ import annotations

from typing import TYPE_CHECKING

from barnhaus.data.regions import REGION_PROFILES
from barnhaus.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from barnhaus.data.cities import City
    from barnhaus.data.regions import RegionProfile
    from barnhaus.models.enums import Region


class LocationRepository:
    """Repository for looking up location data.

    Wraps the in-memory city table. Lookups are exact on the city id and
    an unknown id raises instead of falling back to a default multiplier.
    """

    def __init__(
        self,
        cities: list[City],
        region_profiles: dict[Region, RegionProfile] | None = None,
    ) -> None:
        self._cities = {city.id: city for city in cities}
        self._region_profiles = dict(
            REGION_PROFILES if region_profiles is None else region_profiles
        )

    def get_city(self, location: str) -> City:
        """Look up a city by id.

        Raises:
            LocationNotFoundError: If the id is not in the table.
        """
        city = self._cities.get(location)
        if city is None:
            raise LocationNotFoundError(location)
        return city

    def get_location_multiplier(self, location: str) -> float:
        """Get the cost multiplier for a city id.

        Raises:
            LocationNotFoundError: If the id is not in the table.
        """
        return self.get_city(location).cost_multiplier

    def get_region_profile(self, region: Region) -> RegionProfile | None:
        """Get the climate and practice profile for a region, if one exists."""
        return self._region_profiles.get(region)

    def list_cities(self, region: Region | None = None) -> list[City]:
        """List cities in table order, optionally restricted to one region."""
        return [
            city
            for city in self._cities.values()
            if region is None or city.region == region
        ]

    def cities_by_region(self) -> dict[Region, list[City]]:
        """Group cities by region, keeping table order within each group."""
        grouped: dict[Region, list[City]] = {}
        for city in self._cities.values():
            grouped.setdefault(city.region, []).append(city)
        return grouped
