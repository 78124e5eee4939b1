"""Photo analysis service using multimodal LLMs."""

import base64
import logging
from dataclasses import dataclass, field
from typing import Protocol

from pydantic import ValidationError

from lensbase.domain.analysis import (
    AnalysisFallback,
    AnalysisOutcome,
    AnalysisSuccess,
    PhotoAnalysis,
    fallback_analysis,
)

logger = logging.getLogger(__name__)

ANALYSIS_CATEGORIES = ("Nature", "Architecture", "Travel", "People", "Abstract", "Other")

ANALYSIS_PROMPT = (
    "Analyze this photo and provide structured metadata. "
    "Extract the following: "
    "1. Notes: a brief description. "
    "2. Tags: up to 5 relevant keywords. "
    f"3. Category: one of ({', '.join(ANALYSIS_CATEGORIES)}). "
    "4. Location: if recognizable, suggest a place name, otherwise null."
)

ANALYSIS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "notes": {"type": "string"},
        "tags": {"type": "array", "items": {"type": "string"}},
        "category": {"type": "string"},
        "locationName": {"anyOf": [{"type": "string"}, {"type": "null"}]},
    },
    "required": ["notes", "tags", "category", "locationName"],
    "additionalProperties": False,
}


@dataclass(frozen=True)
class AnalysisRequest:
    """One photo sent to the analysis model."""

    model: str
    image_data_url: str
    prompt: str = ANALYSIS_PROMPT
    schema: dict[str, object] = field(default_factory=lambda: ANALYSIS_SCHEMA)
    reasoning_effort: str | None = None
    store: bool = False


class AnalysisClient(Protocol):
    """Interface for LLM photo analysis."""

    async def analyze(self, request: AnalysisRequest) -> dict[str, object]:
        """Return the raw JSON object describing the photo."""


@dataclass
class AnalysisService:
    """Service that prompts the analysis client and validates its output.

    Failures never propagate: any client error or malformed payload is
    returned as an ``AnalysisFallback`` carrying placeholder metadata.
    """

    client: AnalysisClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def analyze(self, image_bytes: bytes, mime_type: str) -> AnalysisOutcome:
        """Analyze an image via the configured client."""
        data_url = to_data_url(image_bytes, mime_type)
        try:
            raw = await self.client.analyze(
                AnalysisRequest(
                    model=self.model,
                    image_data_url=data_url,
                    reasoning_effort=self.reasoning_effort,
                    store=self.store,
                )
            )
        except Exception as exc:
            logger.exception("Photo analysis failed")
            return AnalysisFallback(analysis=fallback_analysis(), error=str(exc))
        try:
            analysis = PhotoAnalysis.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Photo analysis returned an invalid payload: %s", exc)
            return AnalysisFallback(analysis=fallback_analysis(), error=str(exc))
        return AnalysisSuccess(analysis=analysis)


def to_data_url(image_bytes: bytes, mime_type: str | None = None) -> str:
    """Convert bytes to a base64 data URL for image input."""
    resolved = mime_type or detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{resolved};base64,{encoded}"


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
