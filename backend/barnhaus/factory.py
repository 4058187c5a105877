"""Factory functions for creating pre-configured PricingEngine instances."""

from __future__ import annotations

from barnhaus.data.cities import CITIES
from barnhaus.data.repository import LocationRepository
from barnhaus.engine import PricingEngine


def create_default_repository() -> LocationRepository:
    """Create a LocationRepository over the built-in city table."""
    return LocationRepository(CITIES)


def create_default_engine() -> PricingEngine:
    """Create a PricingEngine wired up with the built-in cost and city tables.

    This is the recommended way to create a PricingEngine for typical usage.

    Example::

        from barnhaus import create_default_engine, CalculatorInputs

        engine = create_default_engine()
        result = engine.estimate(CalculatorInputs())
    """
    return PricingEngine(create_default_repository())
