"""Domain models for overview statistics."""

from dataclasses import dataclass, field

from lensbase.domain.photos import PhotoRecord


@dataclass(frozen=True)
class CategoryCount:
    """Number of photos in a category."""

    name: str
    value: int


@dataclass(frozen=True)
class MonthCount:
    """Number of photos uploaded in a ``YYYY-MM`` month."""

    name: str
    count: int


@dataclass(frozen=True)
class OverviewStats:
    """Aggregate statistics shown on the overview."""

    total: int
    categories: list[CategoryCount]
    uploads: list[MonthCount]
    locations: int
    tags: int
    recent: list[PhotoRecord] = field(default_factory=list)
