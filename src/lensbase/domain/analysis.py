"""Models for photo analysis results."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

FALLBACK_NOTES = "No description provided."
FALLBACK_TAGS = ("Uploaded",)
FALLBACK_CATEGORY = "Other"
FALLBACK_LOCATION_NAME = "Unknown"


class PhotoAnalysis(BaseModel):
    """Structured metadata inferred from image content."""

    model_config = ConfigDict(populate_by_name=True)

    notes: str
    tags: list[str]
    category: str
    location_name: str | None = Field(default=None, alias="locationName")


def fallback_analysis() -> PhotoAnalysis:
    """Return the placeholder metadata used when analysis is unavailable."""
    return PhotoAnalysis(
        notes=FALLBACK_NOTES,
        tags=list(FALLBACK_TAGS),
        category=FALLBACK_CATEGORY,
        location_name=FALLBACK_LOCATION_NAME,
    )


@dataclass(frozen=True)
class AnalysisSuccess:
    """Analysis returned by the collaborator."""

    analysis: PhotoAnalysis


@dataclass(frozen=True)
class AnalysisFallback:
    """Analysis failed; carries the fallback metadata and the failure reason."""

    analysis: PhotoAnalysis
    error: str


AnalysisOutcome = AnalysisSuccess | AnalysisFallback
