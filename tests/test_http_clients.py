"""Tests for the OpenAI analysis client."""

import asyncio
import json

import pytest

from lensbase.adapters.openai_analysis_client import OpenAIAnalysisClient
from lensbase.services.analysis import ANALYSIS_SCHEMA, AnalysisRequest


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str) -> None:
        self.responses = _FakeResponses(output_text)


def _request(reasoning_effort: str | None = None) -> AnalysisRequest:
    return AnalysisRequest(
        model="gpt-5.2",
        image_data_url="data:image/jpeg;base64,ZmFrZQ==",
        reasoning_effort=reasoning_effort,
    )


def test_openai_analysis_client_parses_output() -> None:
    payload = {"notes": "n", "tags": [], "category": "Other", "locationName": None}
    fake = _FakeOpenAI(json.dumps(payload))
    client = OpenAIAnalysisClient(client=fake)

    result = asyncio.run(client.analyze(_request(reasoning_effort="low")))

    assert result == payload
    sent = fake.responses.last_payload
    assert sent["model"] == "gpt-5.2"
    assert sent["text"]["format"]["name"] == "photo_analysis"
    assert sent["text"]["format"]["schema"] == ANALYSIS_SCHEMA
    assert sent["reasoning"] == {"effort": "low"}


def test_openai_analysis_client_sends_image_with_detail() -> None:
    fake = _FakeOpenAI(json.dumps({}))
    client = OpenAIAnalysisClient(client=fake, image_detail="low")

    asyncio.run(client.analyze(_request()))

    image_part = fake.responses.last_payload["input"][0]["content"][0]
    assert image_part["type"] == "input_image"
    assert image_part["detail"] == "low"
    assert "reasoning" not in fake.responses.last_payload


def test_openai_analysis_client_rejects_empty_output() -> None:
    client = OpenAIAnalysisClient(client=_FakeOpenAI(""))

    with pytest.raises(RuntimeError):
        asyncio.run(client.analyze(_request()))
