"""Tests for the photo analysis service."""

import asyncio

from lensbase.domain.analysis import AnalysisFallback, AnalysisSuccess
from lensbase.services.analysis import detect_mime_type, to_data_url
from tests.conftest import (
    FailingAnalysisClient,
    FakeAnalysisClient,
    make_analysis_service,
)


def test_analyze_returns_success_with_parsed_fields() -> None:
    client = FakeAnalysisClient()
    service = make_analysis_service(client)

    outcome = asyncio.run(service.analyze(b"image-bytes", "image/png"))

    assert isinstance(outcome, AnalysisSuccess)
    assert outcome.analysis.category == "Travel"
    assert outcome.analysis.location_name == "Peggy's Cove"
    assert client.calls[0].image_data_url.startswith("data:image/png;base64,")


def test_analyze_client_failure_returns_fallback() -> None:
    service = make_analysis_service(FailingAnalysisClient())

    outcome = asyncio.run(service.analyze(b"image-bytes", "image/jpeg"))

    assert isinstance(outcome, AnalysisFallback)
    assert outcome.error == "analysis unavailable"
    assert outcome.analysis.category == "Other"
    assert outcome.analysis.tags == ["Uploaded"]
    assert outcome.analysis.notes == "No description provided."
    assert outcome.analysis.location_name == "Unknown"


def test_analyze_invalid_payload_returns_fallback() -> None:
    service = make_analysis_service(FakeAnalysisClient(payload={"notes": 3}))

    outcome = asyncio.run(service.analyze(b"image-bytes", "image/jpeg"))

    assert isinstance(outcome, AnalysisFallback)


def test_analyze_does_not_enforce_tag_limit() -> None:
    payload = {
        "notes": "Busy market",
        "tags": ["a", "b", "c", "d", "e", "f"],
        "category": "People",
        "locationName": None,
    }
    service = make_analysis_service(FakeAnalysisClient(payload=payload))

    outcome = asyncio.run(service.analyze(b"image-bytes", "image/jpeg"))

    assert isinstance(outcome, AnalysisSuccess)
    assert len(outcome.analysis.tags) == 6
    assert outcome.analysis.location_name is None


def test_to_data_url_uses_png_header() -> None:
    data = b"\x89PNG\r\n\x1a\n" + b"rest"
    url = to_data_url(data)

    assert url.startswith("data:image/png;base64,")


def test_detect_mime_type_webp_and_default() -> None:
    assert detect_mime_type(b"RIFF\x00\x00\x00\x00WEBPVP8 ") == "image/webp"
    assert detect_mime_type(b"unknown") == "image/jpeg"
