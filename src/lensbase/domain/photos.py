"""Domain models for photo records."""

from pydantic import BaseModel, ConfigDict, Field


class PhotoLocation(BaseModel):
    """Best-effort geolocation for a photo."""

    lat: float | None = None
    lng: float | None = None
    name: str | None = None


class PhotoMetadata(BaseModel):
    """Camera settings captured with a photo."""

    model_config = ConfigDict(populate_by_name=True)

    iso: int | None = None
    aperture: str | None = None
    shutter_speed: str | None = Field(default=None, alias="shutterSpeed")
    focal_length: str | None = Field(default=None, alias="focalLength")
    camera: str | None = None


class PhotoRecord(BaseModel):
    """Single photo entry in the record store.

    Dates are kept as the strings they were stored with: ``upload_date`` is an
    ISO ``YYYY-MM-DD`` date, ``capture_date`` is either a date or a
    ``YYYY-MM-DD HH:MM`` timestamp.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    url: str
    filename: str
    upload_date: str = Field(alias="uploadDate")
    capture_date: str = Field(alias="captureDate")
    location: PhotoLocation = Field(default_factory=PhotoLocation)
    notes: str = ""
    tags: list[str] = Field(default_factory=list)
    category: str
    metadata: PhotoMetadata = Field(default_factory=PhotoMetadata)

    @property
    def upload_month(self) -> str:
        """Return the upload date truncated to ``YYYY-MM``."""
        return self.upload_date[:7]
