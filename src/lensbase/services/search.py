"""Search and category filtering for the photo database view."""

from collections.abc import Sequence

from lensbase.domain.photos import PhotoRecord

ALL_CATEGORIES = "All"

FILTER_CATEGORIES = (
    ALL_CATEGORIES,
    "Nature",
    "Travel",
    "Architecture",
    "People",
    "Abstract",
    "Other",
)


def matches(photo: PhotoRecord, query: str, category: str) -> bool:
    """Return whether a photo passes both the text and category filters."""
    needle = query.lower()
    matches_text = (
        needle in photo.filename.lower()
        or any(needle in tag.lower() for tag in photo.tags)
        or needle in photo.notes.lower()
    )
    matches_category = category == ALL_CATEGORIES or photo.category == category
    return matches_text and matches_category


def filter_photos(
    photos: Sequence[PhotoRecord], query: str = "", category: str = ALL_CATEGORIES
) -> list[PhotoRecord]:
    """Filter photos, preserving their order."""
    return [photo for photo in photos if matches(photo, query, category)]
