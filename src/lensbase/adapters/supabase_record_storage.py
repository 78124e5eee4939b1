"""Supabase-backed key/value storage for the photo collection."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from lensbase.services.store import RecordStorage


@dataclass
class SupabaseRecordStorage(RecordStorage):
    """Stores the serialized collection as one row of a key/value table."""

    client: Client
    key: str
    table: str = "local_storage"

    def read(self) -> str | None:
        """Return the stored payload for the key."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", self.key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return response.data[0].get("value")

    def write(self, payload: str) -> None:
        """Insert or overwrite the payload for the key."""
        self.client.table(self.table).upsert(
            {
                "key": self.key,
                "value": payload,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()
