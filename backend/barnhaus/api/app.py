"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request, UploadFile
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from barnhaus.data.cost_factors import COST_FACTORS, TIER_FEATURES
from barnhaus.engine import COST_DATA_VERSION, ENGINE_VERSION
from barnhaus.exceptions import (
    ImageValidationError,
    LocationNotFoundError,
    TransportError,
)
from barnhaus.formatting import tier_label
from barnhaus.models.enums import PricingTier
from barnhaus.models.inputs import CalculatorInputs  # noqa: TCH001 (FastAPI resolves at runtime)
from barnhaus.models.materials import MaterialAnalysis  # noqa: TCH001
from barnhaus.models.recommendation import Recommendation

if TYPE_CHECKING:
    from barnhaus.engine import PricingEngine
    from barnhaus.services.image_analyzer import ImageAnalyzer
    from barnhaus.services.recommendations import RecommendationService

logger = logging.getLogger(__name__)


class EstimateRequest(BaseModel):
    """Body of POST /api/estimate."""

    inputs: CalculatorInputs
    material_analysis: MaterialAnalysis | None = None


def _json_safe_errors(errors: Sequence[Any]) -> list[Any]:
    """Replace rejected NaN/Infinity inputs so the 422 body stays valid JSON."""
    safe = []
    for error in errors:
        value = error.get("input")
        if isinstance(value, float) and not math.isfinite(value):
            error = {**error, "input": str(value)}
        safe.append(error)
    return safe


def create_app(
    *,
    pricing_engine: PricingEngine | None = None,
    image_analyzer: ImageAnalyzer | None = None,
    recommendation_service: RecommendationService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    pricing_engine
        Optional pre-built engine. If not provided, one is created via
        create_default_engine on first use.
    image_analyzer
        Optional pre-built analyzer for dependency injection (e.g. tests).
        If not provided, one is created from environment variables on first
        request to /api/analyze-image.
    recommendation_service
        Optional pre-built service. If not provided, one is created from
        environment variables on first request to /api/recommendations.
    """
    app = FastAPI(title="Barnhaus", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": jsonable_encoder(_json_safe_errors(exc.errors()))},
        )

    # Store on app state so tests can inject mocks
    app.state.pricing_engine = pricing_engine
    app.state.image_analyzer = image_analyzer
    app.state.recommendation_service = recommendation_service

    def _get_pricing_engine() -> PricingEngine:
        eng: PricingEngine | None = app.state.pricing_engine
        if eng is not None:
            return eng
        from barnhaus.factory import create_default_engine

        eng = create_default_engine()
        app.state.pricing_engine = eng
        return eng

    def _get_image_analyzer() -> ImageAnalyzer:
        analyzer: ImageAnalyzer | None = app.state.image_analyzer
        if analyzer is not None:
            return analyzer
        from barnhaus.api.deps import create_image_analyzer

        try:
            analyzer = create_image_analyzer()
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        app.state.image_analyzer = analyzer
        return analyzer

    def _get_recommendation_service() -> RecommendationService:
        service: RecommendationService | None = app.state.recommendation_service
        if service is not None:
            return service
        from barnhaus.api.deps import create_recommendation_service

        try:
            service = create_recommendation_service(_get_pricing_engine().repository)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        app.state.recommendation_service = service
        return service

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # GET /api/cities
    # ------------------------------------------------------------------

    @app.get("/api/cities")
    def cities() -> dict[str, Any]:
        grouped = _get_pricing_engine().repository.cities_by_region()
        return {
            "regions": [
                {
                    "region": region.value,
                    "cities": [city.model_dump(mode="json") for city in region_cities],
                }
                for region, region_cities in grouped.items()
            ],
        }

    # ------------------------------------------------------------------
    # GET /api/tiers
    # ------------------------------------------------------------------

    @app.get("/api/tiers")
    def tiers() -> dict[str, Any]:
        return {
            "cost_data_version": COST_DATA_VERSION,
            "tiers": [
                {
                    "tier": tier.value,
                    "label": tier_label(tier),
                    "cost_factors": COST_FACTORS[tier].model_dump(),
                }
                for tier in PricingTier
            ],
            "features": [feature.model_dump() for feature in TIER_FEATURES],
        }

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(body: EstimateRequest) -> dict[str, Any]:
        engine = _get_pricing_engine()
        try:
            result = engine.estimate(body.inputs, body.material_analysis)
        except LocationNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {
            "inputs": body.inputs.model_dump(mode="json"),
            "pricing": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # POST /api/analyze-image
    # ------------------------------------------------------------------

    @app.post("/api/analyze-image")
    async def analyze_image(file: UploadFile) -> dict[str, Any]:
        analyzer = _get_image_analyzer()
        content = await file.read()
        try:
            analysis = analyzer.analyze(
                content,
                filename=file.filename,
            )
        except ImageValidationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except TransportError as exc:
            logger.exception("Provider error during image analysis")
            raise HTTPException(status_code=502, detail=str(exc)) from exc

        return {
            "material_analysis": analysis.model_dump(mode="json"),
            "average_multiplier": analysis.average_multiplier,
            "quality_levels": analysis.quality_levels(),
        }

    # ------------------------------------------------------------------
    # POST /api/recommendations
    # ------------------------------------------------------------------

    @app.post("/api/recommendations")
    def recommendations(inputs: CalculatorInputs) -> dict[str, Any]:
        try:
            _get_pricing_engine().repository.get_city(inputs.location)
            lines = _get_recommendation_service().recommend(inputs)
        except LocationNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except TransportError as exc:
            raise HTTPException(
                status_code=502,
                detail="Could not get recommendations",
            ) from exc

        return {
            "recommendations": lines,
            "cards": [Recommendation.from_line(line).model_dump() for line in lines],
        }

    return app
