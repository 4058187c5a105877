"""Dependency injection for FastAPI endpoints."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from barnhaus.services.image_analyzer import ImageAnalyzer
from barnhaus.services.recommendations import RecommendationService

if TYPE_CHECKING:
    from barnhaus.data.repository import LocationRepository

logger = logging.getLogger(__name__)


def _require_api_key() -> str:
    api_key = os.environ.get("ANTHROPIC_API_KEY", "")
    if not api_key:
        msg = (
            "ANTHROPIC_API_KEY environment variable is not set. "
            "Set it to use image analysis and recommendations."
        )
        raise ValueError(msg)
    return api_key


def create_image_analyzer() -> ImageAnalyzer:
    """Create an ImageAnalyzer from the environment.

    Raises ValueError if ANTHROPIC_API_KEY is not set.
    """
    return ImageAnalyzer(api_key=_require_api_key())


def create_recommendation_service(repository: LocationRepository) -> RecommendationService:
    """Create a RecommendationService from the environment.

    Raises ValueError if ANTHROPIC_API_KEY is not set.
    """
    return RecommendationService(api_key=_require_api_key(), repository=repository)
