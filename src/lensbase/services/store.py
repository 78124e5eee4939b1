"""Record store owning the photo collection and its durable mirror."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from pydantic import TypeAdapter, ValidationError

from lensbase.domain.photos import PhotoRecord
from lensbase.domain.seed import seed_photos

logger = logging.getLogger(__name__)

_COLLECTION = TypeAdapter(list[PhotoRecord])


class RecordStorage(Protocol):
    """Durable key/value storage holding the serialized collection."""

    def read(self) -> str | None:
        """Return the stored payload, or None when nothing was stored."""

    def write(self, payload: str) -> None:
        """Overwrite the stored payload."""


def serialize_photos(photos: list[PhotoRecord]) -> str:
    """Serialize records to the stored JSON representation."""
    return _COLLECTION.dump_json(photos, by_alias=True, exclude_none=True).decode(
        "utf-8"
    )


def deserialize_photos(payload: str) -> list[PhotoRecord]:
    """Parse a stored JSON payload into records."""
    return _COLLECTION.validate_json(payload)


@dataclass
class PhotoStore:
    """Ordered, most-recent-first photo collection.

    Every mutation rewrites the whole collection to storage. An empty
    collection is never written, so deleting every photo leaves the last
    stored payload in place.
    """

    storage: RecordStorage
    _photos: list[PhotoRecord] = field(default_factory=list)

    @property
    def photos(self) -> list[PhotoRecord]:
        """Return a snapshot of the collection in display order."""
        return list(self._photos)

    def load(self) -> list[PhotoRecord]:
        """Load the stored collection, seeding demo data when unavailable."""
        try:
            raw = self.storage.read()
        except Exception:
            logger.exception("Failed to read stored photo collection; using seed data")
            self._photos = seed_photos()
            return self.photos
        if raw is None:
            self._photos = seed_photos()
            return self.photos
        try:
            self._photos = deserialize_photos(raw)
        except ValidationError:
            logger.warning("Stored photo collection is unreadable; using seed data")
            self._photos = seed_photos()
        return self.photos

    def get(self, photo_id: str) -> PhotoRecord | None:
        """Return a record by id, if present."""
        for photo in self._photos:
            if photo.id == photo_id:
                return photo
        return None

    def add(self, record: PhotoRecord) -> None:
        """Prepend a record; the caller supplies a fresh id."""
        self._photos.insert(0, record)
        self.persist()

    def delete(self, photo_id: str) -> bool:
        """Remove the record with the given id, if any."""
        remaining = [photo for photo in self._photos if photo.id != photo_id]
        removed = len(remaining) != len(self._photos)
        self._photos = remaining
        self.persist()
        return removed

    def update(self, record: PhotoRecord) -> bool:
        """Replace the record sharing ``record.id``; unmatched ids are ignored."""
        matched = False
        updated: list[PhotoRecord] = []
        for photo in self._photos:
            if photo.id == record.id:
                updated.append(record)
                matched = True
            else:
                updated.append(photo)
        self._photos = updated
        self.persist()
        return matched

    def persist(self) -> None:
        """Write the full collection when it is non-empty."""
        if not self._photos:
            return
        self.storage.write(serialize_photos(self._photos))
