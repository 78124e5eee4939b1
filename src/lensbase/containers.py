"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from lensbase.adapters.file_record_storage import FileRecordStorage
from lensbase.adapters.openai_analysis_client import OpenAIAnalysisClient
from lensbase.adapters.supabase_record_storage import SupabaseRecordStorage
from lensbase.config import Settings, parse_storage_backend
from lensbase.domain.seed import CURRENT_USER
from lensbase.domain.users import User
from lensbase.services.analysis import AnalysisService
from lensbase.services.compare import CompareViewState
from lensbase.services.store import PhotoStore, RecordStorage
from lensbase.services.uploads import UploadPipeline


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    current_user: User
    store: PhotoStore
    analysis_service: AnalysisService
    upload_pipeline: UploadPipeline
    compare_state: CompareViewState
    close_resources: Callable[[], Awaitable[None]]


def build_storage(settings: Settings) -> RecordStorage:
    """Create the durable storage selected by the settings."""
    backend = parse_storage_backend(settings.storage_backend)
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires SUPABASE_URL and key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseRecordStorage(
            client=client, key=settings.storage_key, table=settings.storage_table
        )
    return FileRecordStorage.create(settings.storage_path)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = PhotoStore(build_storage(resolved_settings))
    store.load()
    openai_client = OpenAIAnalysisClient.create(resolved_settings.openai_api_key)
    analysis_service = AnalysisService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    upload_pipeline = UploadPipeline(store=store, analysis_service=analysis_service)

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        current_user=CURRENT_USER,
        store=store,
        analysis_service=analysis_service,
        upload_pipeline=upload_pipeline,
        compare_state=CompareViewState(),
        close_resources=close_resources,
    )
