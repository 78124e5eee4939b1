"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from lensbase.config import Settings
from lensbase.containers import AppContainer
from lensbase.domain.photos import PhotoLocation, PhotoRecord
from lensbase.domain.seed import CURRENT_USER
from lensbase.services.analysis import (
    AnalysisClient,
    AnalysisRequest,
    AnalysisService,
)
from lensbase.services.compare import CompareViewState
from lensbase.services.store import PhotoStore, RecordStorage
from lensbase.services.uploads import UploadPipeline


@dataclass
class InMemoryRecordStorage(RecordStorage):
    """In-memory durable storage for tests."""

    payload: str | None = None
    writes: list[str] = field(default_factory=list)

    def read(self) -> str | None:
        return self.payload

    def write(self, payload: str) -> None:
        self.payload = payload
        self.writes.append(payload)


@dataclass
class BrokenRecordStorage(RecordStorage):
    """Storage whose every read and write fails."""

    error: Exception = field(default_factory=lambda: PermissionError("denied"))

    def read(self) -> str | None:
        raise self.error

    def write(self, payload: str) -> None:
        raise self.error


@dataclass
class FakeAnalysisClient(AnalysisClient):
    """Fake analysis client returning a fixed payload."""

    payload: object = field(
        default_factory=lambda: {
            "notes": "A lighthouse at dusk.",
            "tags": ["Lighthouse", "Coast", "Dusk"],
            "category": "Travel",
            "locationName": "Peggy's Cove",
        }
    )
    calls: list[AnalysisRequest] = field(default_factory=list)

    async def analyze(self, request: AnalysisRequest) -> dict[str, object]:
        self.calls.append(request)
        return self.payload


@dataclass
class FailingAnalysisClient(AnalysisClient):
    """Fake analysis client that always raises."""

    async def analyze(self, request: AnalysisRequest) -> dict[str, object]:
        raise RuntimeError("analysis unavailable")


@dataclass
class FakeImageSource:
    """Uploaded file stand-in."""

    content: bytes = b"\x89PNG\r\n\x1a\n" + b"pixels"
    filename: str | None = "harbor.png"
    content_type: str | None = "image/png"
    error: Exception | None = None

    async def read(self) -> bytes:
        if self.error is not None:
            raise self.error
        return self.content


def make_photo(  # noqa: PLR0913
    photo_id: str,
    *,
    filename: str = "photo.jpg",
    category: str = "Nature",
    tags: list[str] | None = None,
    notes: str = "",
    upload_date: str = "2024-05-10",
    location_name: str | None = "Somewhere",
) -> PhotoRecord:
    return PhotoRecord(
        id=photo_id,
        url=f"https://example.com/{photo_id}.jpg",
        filename=filename,
        upload_date=upload_date,
        capture_date=upload_date,
        location=PhotoLocation(name=location_name),
        notes=notes,
        tags=tags or [],
        category=category,
    )


def make_analysis_service(client: AnalysisClient | None = None) -> AnalysisService:
    return AnalysisService(
        client=client or FakeAnalysisClient(),
        model="gpt-5.2",
        reasoning_effort=None,
        store=False,
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        openai_api_key="openai-key",
        storage_path=str(tmp_path / "photos.json"),
    )


@pytest.fixture
def storage() -> InMemoryRecordStorage:
    return InMemoryRecordStorage()


@pytest.fixture
def store(storage: InMemoryRecordStorage) -> PhotoStore:
    photo_store = PhotoStore(storage)
    photo_store.load()
    return photo_store


@pytest.fixture
def analysis_client() -> FakeAnalysisClient:
    return FakeAnalysisClient()


@pytest.fixture
def container(
    settings: Settings,
    store: PhotoStore,
    analysis_client: FakeAnalysisClient,
) -> AppContainer:
    analysis_service = make_analysis_service(analysis_client)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        current_user=CURRENT_USER,
        store=store,
        analysis_service=analysis_service,
        upload_pipeline=UploadPipeline(
            store=store,
            analysis_service=analysis_service,
            id_factory=lambda: "uploaded-1",
            today=lambda: "2026-10-18",
        ),
        compare_state=CompareViewState(),
        close_resources=close_resources,
    )
