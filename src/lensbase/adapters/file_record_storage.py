"""JSON file storage for the photo collection."""

import os
from dataclasses import dataclass
from pathlib import Path

from lensbase.services.store import RecordStorage


@dataclass
class FileRecordStorage(RecordStorage):
    """Stores the serialized collection in a single file."""

    path: Path

    @classmethod
    def create(cls, path: str) -> "FileRecordStorage":
        """Create a storage backed by the given file path."""
        return cls(path=Path(path))

    def read(self) -> str | None:
        """Return the file contents, or None when the file does not exist."""
        try:
            return self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def write(self, payload: str) -> None:
        """Atomically replace the file contents."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(payload, encoding="utf-8")
        os.replace(tmp_path, self.path)
