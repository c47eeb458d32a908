"""
CareBook Backend — Appointment Service (Referential Integrity)
================================================================

What:  Books, updates and cancels appointments, checking that every
       patientId and providerId written resolves to an existing record.
Why:   Appointments are the only resource that points at other resources.
       A reference to a missing patient or provider is a fault in the
       caller's payload, so it is rejected with a 400, never stored.
How:   Reads the patient and provider stores (existence checks only)
       before touching the appointment store.

Validation order (create):
    1. patientId, providerId, date and type present  → INVALID_INPUT
    2. patientId resolves                            → PATIENT_NOT_FOUND (400)
    3. providerId resolves                           → PROVIDER_NOT_FOUND (400)
    An unknown patient is reported even when the provider is also unknown.

Update:
    Only references present in the payload are checked. date, type and
    status are written without validation; status is an open string.

Lock ordering:
    Each existence check takes and releases the referenced store's lock
    on its own. The appointment store's lock is taken only afterwards,
    inside RecordStore.add/update, so two store locks are never held
    together.
"""

import logging
from typing import Any, Dict

from carebook.exceptions import (
    AppointmentNotFoundError,
    PatientReferenceNotFoundError,
    ProviderReferenceNotFoundError,
)
from carebook.schemas.appointment import DEFAULT_STATUS, Appointment
from carebook.schemas.patient import Patient
from carebook.schemas.provider import Provider
from carebook.services.base import ResourceService
from carebook.store import RecordStore

logger = logging.getLogger(__name__)


class AppointmentService(ResourceService[Appointment]):
    resource = "appointment"
    not_found_error = AppointmentNotFoundError
    required_fields = ("patient_id", "provider_id", "date", "type")

    def __init__(
        self,
        store: RecordStore[Appointment],
        patients: RecordStore[Patient],
        providers: RecordStore[Provider],
    ):
        super().__init__(store)
        self.patients = patients
        self.providers = providers

    def build_record(self, record_id: str, data: Dict[str, Any]) -> Appointment:
        return Appointment(
            id=record_id,
            patient_id=data["patient_id"],
            provider_id=data["provider_id"],
            date=data["date"],
            type=data["type"],
            status=DEFAULT_STATUS,
        )

    def validate_create(self, data: Dict[str, Any]) -> None:
        self._check_patient(data["patient_id"])
        self._check_provider(data["provider_id"])

    def validate_update(self, changes: Dict[str, Any]) -> None:
        if "patient_id" in changes:
            self._check_patient(changes["patient_id"])
        if "provider_id" in changes:
            self._check_provider(changes["provider_id"])

    def _check_patient(self, patient_id: Any) -> None:
        if not self.patients.exists(patient_id):
            logger.warning("Rejected appointment write: unknown patient %s", patient_id)
            raise PatientReferenceNotFoundError(patient_id)

    def _check_provider(self, provider_id: Any) -> None:
        if not self.providers.exists(provider_id):
            logger.warning("Rejected appointment write: unknown provider %s", provider_id)
            raise ProviderReferenceNotFoundError(provider_id)
