"""Derived statistics over the photo collection."""

from collections import Counter
from collections.abc import Sequence

from lensbase.domain.photos import PhotoRecord
from lensbase.domain.stats import CategoryCount, MonthCount, OverviewStats

RECENT_UPLOADS_LIMIT = 6


def category_histogram(photos: Sequence[PhotoRecord]) -> list[CategoryCount]:
    """Count photos per category in first-seen order."""
    counts = Counter(photo.category for photo in photos)
    return [CategoryCount(name=name, value=value) for name, value in counts.items()]


def upload_month_histogram(photos: Sequence[PhotoRecord]) -> list[MonthCount]:
    """Count photos per upload month, ascending by ``YYYY-MM``."""
    counts = Counter(photo.upload_month for photo in photos)
    return [
        MonthCount(name=month, count=counts[month]) for month in sorted(counts)
    ]


def unique_location_count(photos: Sequence[PhotoRecord]) -> int:
    """Return the number of distinct non-empty location names."""
    return len({photo.location.name for photo in photos if photo.location.name})


def unique_tag_count(photos: Sequence[PhotoRecord]) -> int:
    """Return the number of distinct tags across all photos."""
    return len({tag for photo in photos for tag in photo.tags})


def recent_uploads(
    photos: Sequence[PhotoRecord], limit: int = RECENT_UPLOADS_LIMIT
) -> list[PhotoRecord]:
    """Return the first photos in display order."""
    return list(photos[:limit])


def compute_overview(photos: Sequence[PhotoRecord]) -> OverviewStats:
    """Compute all overview statistics for the collection."""
    return OverviewStats(
        total=len(photos),
        categories=category_histogram(photos),
        uploads=upload_month_histogram(photos),
        locations=unique_location_count(photos),
        tags=unique_tag_count(photos),
        recent=recent_uploads(photos),
    )
