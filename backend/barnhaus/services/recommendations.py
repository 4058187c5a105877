"""Regional recommendation service: asks Claude for location-specific advice."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import anthropic

from barnhaus.exceptions import TransportError
from barnhaus.models.recommendation import Recommendation

if TYPE_CHECKING:
    from barnhaus.data.cities import City
    from barnhaus.data.regions import RegionProfile
    from barnhaus.data.repository import LocationRepository
    from barnhaus.models.inputs import CalculatorInputs

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 3

_EXAMPLE_RECOMMENDATION = (
    '"Install a dual-zone HVAC system with humidity control - Essential for '
    "Houston's hot, humid climate. Reduces energy costs by 25-30% through "
    "targeted cooling. Meets local energy code requirements for SEER ratings. "
    "Use local-supplier Carrier systems with coastal-rated components ($8,000 "
    "initial cost, $600/year savings). Includes separate zones for "
    'upstairs/downstairs to combat heat stratification common in Texas homes."'
)


def build_system_prompt(city: City) -> str:
    return (
        f"You are a local construction expert in {city.display_name} with 25+ "
        "years of experience. You have deep knowledge of regional building "
        "practices, climate considerations, and cost-effective solutions. "
        "Focus on providing detailed, actionable recommendations that "
        "specifically address local challenges and opportunities."
    )


def build_prompt(
    inputs: CalculatorInputs,
    city: City,
    profile: RegionProfile | None,
) -> str:
    """Build the user prompt from the building parameters and regional context."""
    living = f"{inputs.living_sqft:g}"
    lines = [
        f"As a senior construction expert in {city.display_name}, provide "
        f"{MAX_RECOMMENDATIONS} detailed, location-specific recommendations for "
        f"a {living} sq ft home with {inputs.bedrooms} bedrooms and "
        f"{inputs.bathrooms} bathrooms. Focus on maximizing value and "
        "addressing regional challenges.",
        "",
        "Location Context:",
        f"- City: {city.display_name}",
        f"- Region: {city.region.value}",
    ]
    if profile is not None:
        lines += [
            f"- Climate: {profile.climate}",
            f"- Challenges: {profile.challenges}",
            f"- Opportunities: {profile.opportunities}",
            f"- Common Materials: {profile.materials}",
            f"- Building Codes: {profile.codes}",
        ]
    lines += [
        "",
        "Project Details:",
        f"- Living Space: {living} sq ft",
        f"- Garage: {inputs.garage_sqft:g} sq ft",
        f"- Patio: {inputs.patio_sqft:g} sq ft",
        f"- Foundation: {inputs.foundation.value}",
        f"- Roof Pitch: {inputs.roof_pitch.value}",
        f"- Interior Finish: {inputs.interior_finish.value}",
        f"- Sustainability Priority: {inputs.sustainability_score}/10",
        "",
        "For each recommendation, provide:",
        "1. Specific Action: What to implement",
        "2. Regional Benefit: Why it's important for this location",
        "3. Cost Impact: Initial cost and long-term savings",
        "4. Local Context: How it aligns with regional practices",
        "5. Implementation Details: Specific materials or methods",
        "6. Code Compliance: Relevant local requirements",
        "",
        "Format each recommendation as a single line:",
        '"[Action] - [Detailed explanation of regional benefits, implementation '
        "approach, and specific cost impacts. Include local building practices, "
        'material choices, and code requirements.]"',
        "",
        "Example:",
        _EXAMPLE_RECOMMENDATION,
    ]
    return "\n".join(lines)


def extract_recommendation_lines(text: str | None) -> list[str]:
    """Keep the first three non-blank lines of a reply, verbatim."""
    if not text:
        return []
    return [line for line in text.split("\n") if line.strip()][:MAX_RECOMMENDATIONS]


def split_recommendation(line: str) -> Recommendation:
    """Split a recommendation line into title and body on ``" - "``."""
    return Recommendation.from_line(line)


class RecommendationService:
    """Requests regional construction advice for a set of inputs."""

    def __init__(
        self,
        api_key: str,
        repository: LocationRepository,
        model: str = "claude-sonnet-4-5-20250929",
        timeout: float = 60.0,
        max_tokens: int = 1500,
    ) -> None:
        self._client = anthropic.Anthropic(
            api_key=api_key,
            timeout=timeout,
        )
        self._repository = repository
        self._model = model
        self._max_tokens = max_tokens

    def recommend(self, inputs: CalculatorInputs) -> list[str]:
        """Return up to three recommendation lines for ``inputs``.

        Raises
        ------
        LocationNotFoundError
            If ``inputs.location`` is not a known city. Raised before any
            network call.
        TransportError
            If the provider call fails.
        """
        city = self._repository.get_city(inputs.location)
        profile = self._repository.get_region_profile(city.region)
        if profile is None:
            logger.warning("No region profile for %s; prompting without it", city.region)

        response_text = self._call_api(
            system=build_system_prompt(city),
            prompt=build_prompt(inputs, city, profile),
        )
        return extract_recommendation_lines(response_text)

    def _call_api(self, system: str, prompt: str) -> str:
        try:
            response = self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                temperature=0.7,
                system=system,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APIError as exc:
            logger.warning("Recommendation request failed: %s", exc)
            msg = f"Recommendation request failed: {exc}"
            raise TransportError(msg) from exc

        text_blocks = [block.text for block in response.content if block.type == "text"]
        return "\n".join(text_blocks)
