"""Selection and view state for side-by-side photo comparison."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from lensbase.domain.photos import PhotoRecord

MAX_SELECTED = 3
EVICTION_INDEX = 1
MIN_ZOOM = 1.0
MAX_ZOOM = 5.0


@dataclass
class ComparisonSelector:
    """Bounded, ordered selection of photo ids.

    When the selection is full, a new id replaces the second entry rather
    than the oldest one.
    """

    selected_ids: list[str] = field(default_factory=list)

    def toggle(self, photo_id: str) -> list[str]:
        """Select or deselect a photo and return the new selection."""
        if photo_id in self.selected_ids:
            self.selected_ids = [i for i in self.selected_ids if i != photo_id]
        elif len(self.selected_ids) < MAX_SELECTED:
            self.selected_ids = [*self.selected_ids, photo_id]
        else:
            replaced = list(self.selected_ids)
            replaced[EVICTION_INDEX] = photo_id
            self.selected_ids = replaced
        return list(self.selected_ids)

    def clear(self) -> None:
        """Drop the whole selection."""
        self.selected_ids = []

    def is_selected(self, photo_id: str) -> bool:
        return photo_id in self.selected_ids

    def selected_photos(self, photos: Sequence[PhotoRecord]) -> list[PhotoRecord]:
        """Return selected photos in collection order, skipping missing ids."""
        return [photo for photo in photos if photo.id in self.selected_ids]


@dataclass
class CompareViewState:
    """Selection plus the zoom and metadata toggles of the compare view."""

    selector: ComparisonSelector = field(default_factory=ComparisonSelector)
    zoom: float = MIN_ZOOM
    show_metadata: bool = True

    def adjust_zoom(self, delta: float) -> float:
        """Change the zoom level, clamped to the supported range."""
        self.zoom = min(max(self.zoom + delta, MIN_ZOOM), MAX_ZOOM)
        return self.zoom

    def toggle_metadata(self) -> bool:
        """Flip the metadata panel visibility."""
        self.show_metadata = not self.show_metadata
        return self.show_metadata
