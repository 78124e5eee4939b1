"""Upload pipeline: read an image, analyze it and add it to the store."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Protocol
from uuid import uuid4

from lensbase.domain.analysis import (
    FALLBACK_CATEGORY,
    FALLBACK_LOCATION_NAME,
    FALLBACK_NOTES,
    AnalysisFallback,
    PhotoAnalysis,
)
from lensbase.domain.photos import PhotoLocation, PhotoMetadata, PhotoRecord
from lensbase.services.analysis import AnalysisService, detect_mime_type, to_data_url
from lensbase.services.store import PhotoStore

logger = logging.getLogger(__name__)


class UploadState(StrEnum):
    """Progress of the upload pipeline."""

    IDLE = "IDLE"
    READING = "READING"
    ANALYZING = "ANALYZING"
    DONE = "DONE"
    DONE_FALLBACK = "DONE_FALLBACK"


_FINISHED_STATES = frozenset({UploadState.DONE, UploadState.DONE_FALLBACK})


class UploadInProgressError(RuntimeError):
    """Raised when an upload starts while another one is in flight."""


class PhotoReadError(RuntimeError):
    """Raised when the uploaded file cannot be read."""


class ImageSource(Protocol):
    """A single uploaded image file."""

    filename: str | None
    content_type: str | None

    async def read(self) -> bytes:
        """Return the file contents."""


@dataclass(frozen=True)
class UploadResult:
    """Record created by an upload and the state it finished in."""

    record: PhotoRecord
    state: UploadState


def _new_photo_id() -> str:
    return uuid4().hex


def _today() -> str:
    return datetime.now(tz=UTC).date().isoformat()


@dataclass
class UploadPipeline:
    """Turns one uploaded image into a stored photo record."""

    store: PhotoStore
    analysis_service: AnalysisService
    id_factory: Callable[[], str] = _new_photo_id
    today: Callable[[], str] = _today
    state: UploadState = field(default=UploadState.IDLE)
    _busy: bool = field(default=False, repr=False)

    @property
    def busy(self) -> bool:
        """Return whether an upload is currently in flight."""
        return self._busy

    async def upload(self, source: ImageSource) -> UploadResult:
        """Read, analyze and store a single image."""
        if self._busy:
            raise UploadInProgressError("An upload is already in progress")
        self._busy = True
        try:
            self.state = UploadState.READING
            try:
                image_bytes = await source.read()
            except Exception as exc:
                raise PhotoReadError(f"Failed to read {source.filename!r}") from exc
            mime_type = _resolve_mime_type(source.content_type, image_bytes)
            data_url = to_data_url(image_bytes, mime_type)

            self.state = UploadState.ANALYZING
            outcome = await self.analysis_service.analyze(image_bytes, mime_type)
            record = self._build_record(
                filename=source.filename or "upload",
                data_url=data_url,
                analysis=outcome.analysis,
            )
            self.store.add(record)
            if isinstance(outcome, AnalysisFallback):
                logger.info("Stored %s with fallback metadata", record.id)
                self.state = UploadState.DONE_FALLBACK
            else:
                self.state = UploadState.DONE
            return UploadResult(record=record, state=self.state)
        finally:
            if self.state not in _FINISHED_STATES:
                self.state = UploadState.IDLE
            self._busy = False

    def _build_record(
        self, filename: str, data_url: str, analysis: PhotoAnalysis
    ) -> PhotoRecord:
        today = self.today()
        return PhotoRecord(
            id=self.id_factory(),
            url=data_url,
            filename=filename,
            upload_date=today,
            capture_date=today,
            location=PhotoLocation(
                name=analysis.location_name or FALLBACK_LOCATION_NAME,
                lat=0,
                lng=0,
            ),
            notes=analysis.notes or FALLBACK_NOTES,
            # An empty tag list from a successful analysis is kept as is.
            tags=list(analysis.tags),
            category=analysis.category or FALLBACK_CATEGORY,
            metadata=PhotoMetadata(iso=100, aperture="f/2.8", camera="Unknown"),
        )


def _resolve_mime_type(content_type: str | None, image_bytes: bytes) -> str:
    if content_type and content_type.startswith("image/"):
        return content_type
    return detect_mime_type(image_bytes)
