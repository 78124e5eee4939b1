"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, UploadFile, status
from fastapi.responses import HTMLResponse

from lensbase.api.models import (
    CategoryCountOut,
    CompareOut,
    MonthCountOut,
    OverviewOut,
    PhotoListOut,
    UploadOut,
    ZoomIn,
)
from lensbase.api.ui import UI_HTML
from lensbase.app_logging import configure_logging
from lensbase.containers import AppContainer
from lensbase.domain.photos import PhotoRecord
from lensbase.domain.users import User
from lensbase.services.search import ALL_CATEGORIES, FILTER_CATEGORIES, filter_photos
from lensbase.services.stats import compute_overview
from lensbase.services.uploads import PhotoReadError, UploadInProgressError


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Loaded %d photos", len(app.state.container.store.photos)
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="LensBase", lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        """Minimal UI shell that consumes the API."""
        return HTMLResponse(UI_HTML)

    @app.get("/api/user")
    async def current_user(request: Request) -> User:
        """Return the signed-in user profile."""
        state_container: AppContainer = request.app.state.container
        return state_container.current_user

    @app.get("/api/overview")
    async def overview(request: Request) -> OverviewOut:
        """Return aggregate statistics for the dashboard."""
        state_container: AppContainer = request.app.state.container
        stats = compute_overview(state_container.store.photos)
        return OverviewOut(
            total=stats.total,
            categories=[
                CategoryCountOut(name=c.name, value=c.value) for c in stats.categories
            ],
            uploads=[MonthCountOut(name=m.name, count=m.count) for m in stats.uploads],
            locations=stats.locations,
            tags=stats.tags,
            recent=stats.recent,
        )

    @app.get("/api/categories")
    async def categories() -> dict[str, list[str]]:
        """Return the category filter choices."""
        return {"categories": list(FILTER_CATEGORIES)}

    @app.get("/api/photos")
    async def list_photos(
        request: Request, q: str = "", category: str = ALL_CATEGORIES
    ) -> PhotoListOut:
        """Return photos matching the search text and category."""
        state_container: AppContainer = request.app.state.container
        photos = filter_photos(state_container.store.photos, q, category)
        return PhotoListOut(query=q, category=category, photos=photos)

    @app.get("/api/photos/{photo_id}")
    async def get_photo(photo_id: str, request: Request) -> PhotoRecord:
        """Return a single photo."""
        state_container: AppContainer = request.app.state.container
        photo = state_container.store.get(photo_id)
        if photo is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return photo

    @app.post("/api/photos", status_code=status.HTTP_201_CREATED)
    async def upload_photo(file: UploadFile, request: Request) -> UploadOut:
        """Analyze an uploaded image and add it to the collection."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.upload_pipeline.upload(file)
        except UploadInProgressError as exc:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail=str(exc)
            ) from exc
        except PhotoReadError as exc:
            logger.warning("Upload failed: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return UploadOut(photo=result.record, state=result.state.value)

    @app.put("/api/photos/{photo_id}")
    async def update_photo(
        photo_id: str, photo: PhotoRecord, request: Request
    ) -> dict[str, bool]:
        """Replace a photo record; unknown ids are ignored."""
        if photo.id != photo_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Photo id does not match the path",
            )
        state_container: AppContainer = request.app.state.container
        return {"updated": state_container.store.update(photo)}

    @app.delete("/api/photos/{photo_id}")
    async def delete_photo(photo_id: str, request: Request) -> dict[str, bool]:
        """Delete a photo; unknown ids are ignored."""
        state_container: AppContainer = request.app.state.container
        deleted = state_container.store.delete(photo_id)
        if deleted:
            logger.info("Deleted photo %s", photo_id)
        return {"deleted": deleted}

    @app.get("/api/compare")
    async def compare(request: Request) -> CompareOut:
        """Return the compare view state."""
        return _compare_out(request.app.state.container)

    @app.post("/api/compare/toggle/{photo_id}")
    async def toggle_compare(photo_id: str, request: Request) -> CompareOut:
        """Select or deselect a photo for comparison."""
        state_container: AppContainer = request.app.state.container
        if state_container.store.get(photo_id) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        state_container.compare_state.selector.toggle(photo_id)
        return _compare_out(state_container)

    @app.post("/api/compare/clear")
    async def clear_compare(request: Request) -> CompareOut:
        """Clear the comparison selection."""
        state_container: AppContainer = request.app.state.container
        state_container.compare_state.selector.clear()
        return _compare_out(state_container)

    @app.post("/api/compare/zoom")
    async def zoom_compare(payload: ZoomIn, request: Request) -> CompareOut:
        """Adjust the compare view zoom level."""
        state_container: AppContainer = request.app.state.container
        state_container.compare_state.adjust_zoom(payload.delta)
        return _compare_out(state_container)

    @app.post("/api/compare/metadata")
    async def toggle_compare_metadata(request: Request) -> CompareOut:
        """Show or hide the metadata panel."""
        state_container: AppContainer = request.app.state.container
        state_container.compare_state.toggle_metadata()
        return _compare_out(state_container)

    return app


def _compare_out(container: AppContainer) -> CompareOut:
    state = container.compare_state
    return CompareOut(
        selected_ids=list(state.selector.selected_ids),
        photos=state.selector.selected_photos(container.store.photos),
        zoom=state.zoom,
        show_metadata=state.show_metadata,
    )
