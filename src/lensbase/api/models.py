"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field

from lensbase.domain.photos import PhotoRecord


class CategoryCountOut(BaseModel):
    """Category histogram bucket."""

    name: str
    value: int


class MonthCountOut(BaseModel):
    """Upload-month histogram bucket."""

    name: str
    count: int


class OverviewOut(BaseModel):
    """Overview statistics payload."""

    total: int
    categories: list[CategoryCountOut]
    uploads: list[MonthCountOut]
    locations: int
    tags: int
    recent: list[PhotoRecord]


class PhotoListOut(BaseModel):
    """Filtered photo list payload."""

    query: str
    category: str
    photos: list[PhotoRecord]


class UploadOut(BaseModel):
    """Result of a photo upload."""

    photo: PhotoRecord
    state: str


class CompareOut(BaseModel):
    """Compare view state payload."""

    model_config = ConfigDict(populate_by_name=True)

    selected_ids: list[str] = Field(alias="selectedIds")
    photos: list[PhotoRecord]
    zoom: float
    show_metadata: bool = Field(alias="showMetadata")


class ZoomIn(BaseModel):
    """Zoom adjustment request."""

    delta: float
