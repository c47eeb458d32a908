"""
CareBook Backend — In-Memory Record Stores
============================================

What:  An ordered, lock-guarded collection of records of one resource kind.
Why:   The API keeps its data in process memory for the lifetime of the
       server. Each store is an explicit object created by the application
       factory, so every app instance (and every test) gets fresh data.
How:   A list preserves insertion order; an RLock serializes mutations;
       a per-store counter issues identifiers.

Identifier scheme:
    "<prefix><n>", e.g. pat1, prov2, app3. The counter is monotonic and is
    never rewound by deletions, so an identifier is never handed out twice
    during the life of a store. Seeded records advance the counter past
    their own numbers.

Locking:
    Every public method takes the store's own lock and releases it before
    returning. Callers that need to read another store (the appointment
    reference checks) do so before calling into this one, so no code path
    holds two store locks at once.
"""

import logging
import re
import threading
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordStore(Generic[RecordT]):
    """
    Ordered in-memory collection of pydantic records keyed by `id`.

    Records are immutable from the store's point of view: updates build a
    merged copy and swap it into the same position.
    """

    def __init__(self, name: str, id_prefix: str):
        self.name = name
        self.id_prefix = id_prefix
        self._records: List[RecordT] = []
        self._last_issued = 0
        self._lock = threading.RLock()
        self._id_pattern = re.compile(rf"^{re.escape(id_prefix)}(\d+)$")

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    # ── Reads ─────────────────────────────────────────────────────────────

    def all(self) -> List[RecordT]:
        """Snapshot of every record, insertion order."""
        with self._lock:
            return list(self._records)

    def get(self, record_id: str) -> Optional[RecordT]:
        with self._lock:
            index = self._index_of(record_id)
            return None if index is None else self._records[index]

    def exists(self, record_id: Any) -> bool:
        with self._lock:
            return self._index_of(record_id) is not None

    # ── Writes ────────────────────────────────────────────────────────────

    def add(self, build: Callable[[str], RecordT]) -> RecordT:
        """
        Append a new record.

        `build` receives the freshly issued identifier and returns the record
        to store. Identifier issue and append happen under one lock hold.
        """
        with self._lock:
            record = build(self._issue_id())
            self._records.append(record)
            return record

    def seed(self, records: Iterable[RecordT]) -> None:
        """Load records with pre-assigned identifiers (demo data)."""
        with self._lock:
            for record in records:
                if self._index_of(record.id) is not None:
                    raise ValueError(f"Duplicate {self.name} id {record.id!r}")
                self._records.append(record)
                self._note_issued(record.id)
            logger.debug("Seeded %s store with %d records", self.name, len(self._records))

    def update(self, record_id: str, changes: Dict[str, Any]) -> Optional[RecordT]:
        """
        Shallow-merge `changes` onto a record.

        Returns the merged record, or None if the identifier is unknown.
        `id` is never overwritten.
        """
        changes = {k: v for k, v in changes.items() if k != "id"}
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                return None
            merged = self._records[index].model_copy(update=changes)
            self._records[index] = merged
            return merged

    def remove(self, record_id: str) -> bool:
        """Delete a record. Returns False if the identifier is unknown."""
        with self._lock:
            index = self._index_of(record_id)
            if index is None:
                return False
            del self._records[index]
            return True

    # ── Internals ─────────────────────────────────────────────────────────

    def _index_of(self, record_id: Any) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def _issue_id(self) -> str:
        while True:
            self._last_issued += 1
            candidate = f"{self.id_prefix}{self._last_issued}"
            if self._index_of(candidate) is None:
                return candidate

    def _note_issued(self, record_id: str) -> None:
        match = self._id_pattern.match(record_id)
        if match:
            self._last_issued = max(self._last_issued, int(match.group(1)))
