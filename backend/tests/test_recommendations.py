"""Tests for the recommendation service: all API calls are mocked."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import anthropic
import httpx
import pytest

from barnhaus.data.cities import CITIES, CITIES_BY_ID
from barnhaus.data.regions import REGION_PROFILES
from barnhaus.data.repository import LocationRepository
from barnhaus.exceptions import LocationNotFoundError, TransportError
from barnhaus.models.inputs import CalculatorInputs
from barnhaus.services.recommendations import (
    RecommendationService,
    build_prompt,
    extract_recommendation_lines,
    split_recommendation,
)


def _mock_api_response(text: str) -> MagicMock:
    text_block = MagicMock()
    text_block.type = "text"
    text_block.text = text
    response = MagicMock()
    response.content = [text_block]
    return response


@pytest.fixture()
def service() -> RecommendationService:
    return RecommendationService(
        api_key="test-key-not-real",
        repository=LocationRepository(CITIES),
    )


class TestBuildPrompt:
    def test_includes_regional_context(self) -> None:
        houston = CITIES_BY_ID["houston"]
        prompt = build_prompt(
            CalculatorInputs(location="houston"),
            houston,
            REGION_PROFILES[houston.region],
        )
        assert "Houston, TX" in prompt
        assert "Region: South Central" in prompt
        assert "clay soils" in prompt
        assert "2000 sq ft home with 3 bedrooms and 2 bathrooms" in prompt
        assert "Sustainability Priority: 5/10" in prompt
        assert "Foundation: slab" in prompt

    def test_without_profile(self) -> None:
        boise = CITIES_BY_ID["boise"]
        prompt = build_prompt(CalculatorInputs(location="boise"), boise, None)
        assert "Boise, ID" in prompt
        assert "Climate:" not in prompt


class TestExtractLines:
    def test_keeps_first_three_non_blank_lines(self) -> None:
        text = "\nFirst - a\n\n  \nSecond - b\nThird - c\nFourth - d\n"
        assert extract_recommendation_lines(text) == ["First - a", "Second - b", "Third - c"]

    def test_lines_kept_verbatim(self) -> None:
        assert extract_recommendation_lines("  1. Do it - now  ") == ["  1. Do it - now  "]

    def test_empty_reply(self) -> None:
        assert extract_recommendation_lines("") == []
        assert extract_recommendation_lines(None) == []

    def test_split_recommendation(self) -> None:
        rec = split_recommendation("Add a storm shelter - Tornado risk is high.")
        assert rec.title == "Add a storm shelter"
        assert rec.body == "Tornado risk is high."


class TestRecommend:
    def test_returns_at_most_three_lines(self, service: RecommendationService) -> None:
        reply = "A - 1\n\nB - 2\nC - 3\nD - 4"
        with patch.object(
            service._client.messages, "create", return_value=_mock_api_response(reply)
        ) as create:
            lines = service.recommend(CalculatorInputs(location="denver"))

        assert lines == ["A - 1", "B - 2", "C - 3"]
        kwargs = create.call_args.kwargs
        assert "Denver, CO" in kwargs["system"]
        assert "Region: Mountain" in kwargs["messages"][0]["content"]

    def test_unknown_location_raises_before_call(self, service: RecommendationService) -> None:
        with (
            patch.object(service._client.messages, "create") as create,
            pytest.raises(LocationNotFoundError),
        ):
            service.recommend(CalculatorInputs(location="atlantis"))

        create.assert_not_called()

    def test_provider_failure_raises_transport_error(
        self, service: RecommendationService
    ) -> None:
        error = anthropic.APIConnectionError(
            request=httpx.Request("POST", "https://api.anthropic.com/v1/messages"),
        )
        with (
            patch.object(service._client.messages, "create", side_effect=error),
            pytest.raises(TransportError),
        ):
            service.recommend(CalculatorInputs())
