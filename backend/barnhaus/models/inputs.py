"""Estimator input model and the reducer that applies form changes to it."""

from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from barnhaus.models.enums import Foundation, InteriorFinish, RoofPitch

logger = logging.getLogger(__name__)

MIN_ROOM_COUNT = 1
MIN_AREA_SQFT = 0.0
MIN_SUSTAINABILITY_SCORE = 1
MAX_SUSTAINABILITY_SCORE = 10

_INTEGER_FIELDS = frozenset({"bedrooms", "bathrooms", "sustainability_score"})
_AREA_FIELDS = frozenset({"garage_sqft", "living_sqft", "patio_sqft"})
_ENUM_FIELDS: dict[str, type[Foundation] | type[RoofPitch] | type[InteriorFinish]] = {
    "foundation": Foundation,
    "roof_pitch": RoofPitch,
    "interior_finish": InteriorFinish,
}


class CalculatorInputs(BaseModel):
    """Building parameters collected by the estimator form.

    Instances are immutable. Use :meth:`with_change` to derive the next
    state from a single form edit. Numeric fields are clamped to their
    bounds and unusable values leave the previous state in place.
    Fractional room counts and scores round half up. Non-finite numbers
    fail validation.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    bedrooms: int = 3
    bathrooms: int = 2
    garage_sqft: float = 400.0
    living_sqft: float = 2000.0
    patio_sqft: float = 200.0
    location: str = "san-antonio"
    sustainability_score: int = 5
    foundation: Foundation = Foundation.SLAB
    roof_pitch: RoofPitch = RoofPitch.MEDIUM
    interior_finish: InteriorFinish = InteriorFinish.MODERN

    @field_validator("bedrooms", "bathrooms")
    @classmethod
    def clamp_room_count(cls, v: int) -> int:
        return max(v, MIN_ROOM_COUNT)

    @field_validator("garage_sqft", "living_sqft", "patio_sqft")
    @classmethod
    def clamp_area(cls, v: float) -> float:
        return max(v, MIN_AREA_SQFT)

    @field_validator("sustainability_score")
    @classmethod
    def clamp_sustainability(cls, v: int) -> int:
        return min(max(v, MIN_SUSTAINABILITY_SCORE), MAX_SUSTAINABILITY_SCORE)

    def with_change(self, field: str, value: Any) -> CalculatorInputs:
        """Return the inputs with ``field`` set to ``value``.

        Returns ``self`` unchanged when the value cannot be used: a blank
        or non-numeric value for a numeric field, an option outside the
        enumeration, or an empty location id.

        Raises:
            ValueError: If ``field`` is not an input field.
        """
        if field not in type(self).model_fields:
            msg = f"Unknown input field: '{field}'"
            raise ValueError(msg)

        if field in _INTEGER_FIELDS or field in _AREA_FIELDS:
            number = _coerce_number(value)
            if number is None:
                logger.debug("Ignoring non-numeric value %r for %s", value, field)
                return self
            value = _round_half_up(number) if field in _INTEGER_FIELDS else number
        elif field in _ENUM_FIELDS:
            try:
                value = _ENUM_FIELDS[field](value)
            except ValueError:
                logger.debug("Ignoring unknown option %r for %s", value, field)
                return self
        elif not isinstance(value, str) or not value.strip():
            return self
        else:
            value = value.strip()

        data = self.model_dump()
        data[field] = value
        return CalculatorInputs.model_validate(data)


def _coerce_number(value: Any) -> float | None:
    """Parse a form value as a finite number, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _round_half_up(number: float) -> int:
    return math.floor(number + 0.5)
