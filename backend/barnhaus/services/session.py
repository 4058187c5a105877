"""Estimator session: holds the current inputs and everything derived from them.

The session is the explicit replacement for reactive form state:

1. Every form edit goes through ``CalculatorInputs.with_change`` and the
   pricing is recomputed right after an accepted edit.
2. A location edit resolves its multiplier first. An unknown city raises
   ``LocationNotFoundError`` and leaves inputs and pricing untouched.
3. Slow provider calls (photo analysis, recommendations) take a ticket
   when they start. A result is applied only if its ticket is still the
   latest one issued on that channel, so the last request started always
   wins no matter which finishes first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from barnhaus.exceptions import TransportError
from barnhaus.models.enums import BuilderType, PricingTier
from barnhaus.models.inputs import CalculatorInputs
from barnhaus.models.recommendation import Recommendation

if TYPE_CHECKING:
    from barnhaus.engine import PricingEngine
    from barnhaus.models.materials import MaterialAnalysis
    from barnhaus.models.pricing import PricingResult
    from barnhaus.services.image_analyzer import ImageAnalyzer
    from barnhaus.services.recommendations import RecommendationService

logger = logging.getLogger(__name__)


class RequestChannel(StrEnum):
    """Independent streams of provider requests, each with its own tickets."""

    IMAGE_ANALYSIS = "image_analysis"
    RECOMMENDATIONS = "recommendations"


@dataclass(frozen=True)
class Notification:
    """A non-fatal, user-facing message."""

    title: str
    description: str
    status: str


class EstimatorSession:
    """Current estimator state for one user.

    Args:
        engine: Pricing engine, also used to resolve location multipliers.
        inputs: Starting inputs. Defaults to ``CalculatorInputs()``.

    Raises:
        LocationNotFoundError: If the starting location is unknown.
    """

    def __init__(
        self,
        engine: PricingEngine,
        inputs: CalculatorInputs | None = None,
    ) -> None:
        self._engine = engine
        self._inputs = inputs or CalculatorInputs()
        self._location_multiplier = engine.repository.get_location_multiplier(
            self._inputs.location,
        )
        self._material_analysis: MaterialAnalysis | None = None
        self._recommendations: list[str] = []
        self._notifications: list[Notification] = []
        self._tickets: dict[RequestChannel, int] = dict.fromkeys(RequestChannel, 0)
        self.selected_tier = PricingTier.STANDARD
        self.selected_builder = BuilderType.CONTRACTOR
        self._pricing = self._price()

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def inputs(self) -> CalculatorInputs:
        return self._inputs

    @property
    def location_multiplier(self) -> float:
        return self._location_multiplier

    @property
    def material_analysis(self) -> MaterialAnalysis | None:
        return self._material_analysis

    @property
    def pricing(self) -> PricingResult:
        return self._pricing

    @property
    def recommendations(self) -> list[str]:
        return list(self._recommendations)

    @property
    def notifications(self) -> list[Notification]:
        return list(self._notifications)

    @property
    def selected_cost(self) -> float:
        """Cost for the selected tier and builder mode."""
        return self._pricing.for_tier(self.selected_tier).for_builder(
            self.selected_builder,
        )

    def recommendation_cards(self) -> list[Recommendation]:
        return [Recommendation.from_line(line) for line in self._recommendations]

    # ------------------------------------------------------------------
    # Input mutation
    # ------------------------------------------------------------------

    def update_input(self, field: str, value: Any) -> PricingResult:
        """Apply one form edit and recompute pricing.

        Raises:
            LocationNotFoundError: If ``field`` is ``location`` and the new
                id is unknown. Inputs and pricing are left unchanged.
            ValueError: If ``field`` is not an input field.
        """
        next_inputs = self._inputs.with_change(field, value)
        if next_inputs is self._inputs:
            return self._pricing

        if next_inputs.location != self._inputs.location:
            self._location_multiplier = self._engine.repository.get_location_multiplier(
                next_inputs.location,
            )

        self._inputs = next_inputs
        return self.recompute()

    def recompute(self) -> PricingResult:
        """Recompute pricing from the current inputs, multiplier, and analysis."""
        self._pricing = self._price()
        return self._pricing

    def _price(self) -> PricingResult:
        return self._engine.price_all(
            self._inputs,
            self._location_multiplier,
            self._material_analysis,
        )

    # ------------------------------------------------------------------
    # Request tickets
    # ------------------------------------------------------------------

    def begin_request(self, channel: RequestChannel) -> int:
        """Start a request on ``channel`` and return its ticket."""
        self._tickets[channel] += 1
        return self._tickets[channel]

    def begin_image_analysis(self) -> int:
        return self.begin_request(RequestChannel.IMAGE_ANALYSIS)

    def begin_recommendations(self) -> int:
        return self.begin_request(RequestChannel.RECOMMENDATIONS)

    def is_current(self, channel: RequestChannel, ticket: int) -> bool:
        return ticket == self._tickets[channel]

    def apply_material_analysis(self, ticket: int, analysis: MaterialAnalysis) -> bool:
        """Store a finished photo analysis and reprice, unless it is stale.

        Returns False when a newer analysis has been started since.
        """
        if not self.is_current(RequestChannel.IMAGE_ANALYSIS, ticket):
            logger.info("Discarding stale image analysis (ticket %d)", ticket)
            return False
        self._material_analysis = analysis
        self.recompute()
        return True

    def apply_recommendations(self, ticket: int, lines: list[str]) -> bool:
        """Store finished recommendations, unless they are stale."""
        if not self.is_current(RequestChannel.RECOMMENDATIONS, ticket):
            logger.info("Discarding stale recommendations (ticket %d)", ticket)
            return False
        self._recommendations = list(lines)
        self._notifications.append(
            Notification(
                title="Analysis Complete",
                description="New recommendations available",
                status="success",
            )
        )
        return True

    def fail_recommendations(self, ticket: int, error: Exception) -> bool:
        """Record a failed recommendation request, keeping previous state."""
        if not self.is_current(RequestChannel.RECOMMENDATIONS, ticket):
            return False
        logger.warning("Recommendation request failed: %s", error)
        self._notifications.append(
            Notification(
                title="Analysis Error",
                description="Could not get recommendations",
                status="error",
            )
        )
        return True

    # ------------------------------------------------------------------
    # Synchronous request helpers
    # ------------------------------------------------------------------

    def refresh_recommendations(self, service: RecommendationService) -> list[str]:
        """Fetch recommendations for the current inputs and apply them.

        Provider failures become an error notification; the previous
        recommendations are kept.
        """
        ticket = self.begin_recommendations()
        try:
            lines = service.recommend(self._inputs)
        except TransportError as exc:
            self.fail_recommendations(ticket, exc)
            return self.recommendations
        self.apply_recommendations(ticket, lines)
        return self.recommendations

    def analyze_image(
        self,
        analyzer: ImageAnalyzer,
        image_bytes: bytes,
        filename: str | None = None,
    ) -> MaterialAnalysis | None:
        """Analyze a photo and apply the result.

        Provider failures are logged only; the previous analysis and
        pricing are kept and None is returned.

        Raises:
            ImageValidationError: If the upload is not a JPEG/PNG image.
        """
        ticket = self.begin_image_analysis()
        try:
            analysis = analyzer.analyze(image_bytes, filename=filename)
        except TransportError:
            logger.exception("Error analyzing image")
            return None
        self.apply_material_analysis(ticket, analysis)
        return self._material_analysis
