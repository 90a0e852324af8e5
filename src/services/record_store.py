"""In-memory keyed record store.

Each store is an ordered unique-key mapping from a string identifier to a
pydantic record. Reads hand out deep copies so callers never hold a
mutable reference to stored state; writes go back through insert/remove.
There are no secondary indexes: filtered views scan ``values()``.
"""

import logging
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from src.utils.errors import CreationError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordStore(Generic[RecordT]):
    """Ordered key -> record mapping for one entity type."""

    def __init__(self, name: str):
        self.name = name
        self._records: dict[str, RecordT] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def insert(self, key: str, record: RecordT) -> RecordT:
        """Insert or replace the record stored under ``key``."""
        self._records[key] = record.model_copy(deep=True)
        return record

    def insert_new(self, key: str, record: RecordT) -> RecordT:
        """Insert a record under a key that must not exist yet."""
        if key in self._records:
            logger.error(
                "Identifier collision on insert",
                extra={"store": self.name, "key": key}
            )
            raise CreationError(f"Identifier {key} already exists in {self.name}")
        return self.insert(key, record)

    def get(self, key: str) -> Optional[RecordT]:
        """Return a copy of the record, or None when the key is absent."""
        record = self._records.get(key)
        if record is None:
            return None
        return record.model_copy(deep=True)

    def remove(self, key: str) -> Optional[RecordT]:
        """Remove and return the record, or None when the key is absent."""
        return self._records.pop(key, None)

    def values(self) -> list[RecordT]:
        """All records in insertion order."""
        return [record.model_copy(deep=True) for record in self._records.values()]
