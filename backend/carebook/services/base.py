"""
CareBook Backend — Resource Service Base Class
================================================

What:  The list/get/create/update/delete workflow shared by every resource.
Why:   Patients and providers differ only in their required fields, their
       identifier prefix and their not-found error; appointments add
       reference checks on top. The common steps live here once.
How:   Subclasses set the class attributes and implement build_record();
       hooks let a subclass validate a payload before the store is touched.

Contract:
    - Every failure is raised as a CareBookError subclass; nothing is
      returned as an error value.
    - All validation happens before the store is mutated, so a failed
      request leaves the store exactly as it was.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Tuple, Type

from carebook.exceptions import InvalidInputError, NotFoundError
from carebook.schemas.common import CamelModel
from carebook.store import RecordStore, RecordT

logger = logging.getLogger(__name__)


class ResourceService(ABC, Generic[RecordT]):
    """
    CRUD operations over one RecordStore.

    Class attributes:
        resource:         Human-readable name used in log lines
        not_found_error:  Raised when the addressed identifier is unknown
        required_fields:  Python field names that must be non-empty on create
    """

    resource: str = "record"
    not_found_error: Type[NotFoundError] = NotFoundError
    required_fields: Tuple[str, ...] = ()

    def __init__(self, store: RecordStore[RecordT]):
        self.store = store

    @abstractmethod
    def build_record(self, record_id: str, data: Dict[str, Any]) -> RecordT:
        """Turn a validated create payload into the record to store."""
        ...

    def list_all(self) -> List[RecordT]:
        return self.store.all()

    def get(self, record_id: str) -> RecordT:
        record = self.store.get(record_id)
        if record is None:
            raise self.not_found_error(record_id)
        return record

    def create(self, payload: CamelModel) -> RecordT:
        """
        Validate required fields, run subclass checks, then append.

        Raises:
            InvalidInputError: A required field is missing or empty
        """
        data = payload.model_dump()
        missing = [name for name in self.required_fields if not data.get(name)]
        if missing:
            raise InvalidInputError(
                missing_fields=[payload.alias_for(name) for name in missing],
            )
        self.validate_create(data)

        record = self.store.add(lambda new_id: self.build_record(new_id, data))
        logger.info("Created %s %s", self.resource, record.id)
        return record

    def update(self, record_id: str, payload: CamelModel) -> RecordT:
        """
        Shallow-merge the fields present in `payload` onto the record.

        An empty payload returns the record unchanged.
        """
        if not self.store.exists(record_id):
            raise self.not_found_error(record_id)

        changes = payload.changes()
        self.validate_update(changes)

        record = self.store.update(record_id, changes)
        if record is None:
            # Deleted between the existence check and the merge
            raise self.not_found_error(record_id)
        logger.info("Updated %s %s (%s)", self.resource, record_id, ", ".join(sorted(changes)) or "no changes")
        return record

    def delete(self, record_id: str) -> None:
        if not self.store.remove(record_id):
            raise self.not_found_error(record_id)
        logger.info("Deleted %s %s", self.resource, record_id)

    # ── Hooks ─────────────────────────────────────────────────────────────

    def validate_create(self, data: Dict[str, Any]) -> None:
        """Extra checks on a create payload that passed the presence check."""

    def validate_update(self, changes: Dict[str, Any]) -> None:
        """Checks on the fields supplied in an update payload."""
