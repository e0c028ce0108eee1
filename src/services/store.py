"""
Record store contract.

The analytics core never reads from storage itself; a collaborator hands it a
snapshot of records through this interface.
"""
from typing import Protocol, Sequence

from src.models.record import CycleRecord

class RecordStore(Protocol):
    """Source of a user's logged cycle records."""

    def fetch_recent_records(self, user_id: str, limit: int) -> Sequence[CycleRecord]:
        """Return up to ``limit`` of the user's most recent records."""
        ...
