"""
CareBook Backend — Appointment Service Unit Tests
===================================================

What:  Referential-integrity checks between appointments and the patient
       and provider stores.

What we test:
    ✅ Unknown patient rejected on create, even when the provider is unknown too
    ✅ Unknown provider rejected on create
    ✅ Valid create starts as "scheduled"
    ✅ Update re-checks only the references it carries
    ✅ Rejected writes leave the store untouched
"""

import pytest

from carebook.exceptions import (
    AppointmentNotFoundError,
    InvalidInputError,
    PatientReferenceNotFoundError,
    ProviderReferenceNotFoundError,
)
from carebook.schemas.appointment import AppointmentCreate, AppointmentUpdate
from carebook.schemas.patient import PatientCreate


class TestAppointmentCreate:

    def test_valid_create_is_scheduled(self, appointment_service, appointment_payload):
        appointment = appointment_service.create(AppointmentCreate(**appointment_payload))

        assert appointment.id == "app3"
        assert appointment.status == "scheduled"
        assert appointment.patient_id == "pat1"
        assert appointment.provider_id == "prov1"

    def test_missing_fields(self, appointment_service):
        with pytest.raises(InvalidInputError) as exc_info:
            appointment_service.create(AppointmentCreate(patientId="pat1", providerId="prov1"))
        assert exc_info.value.missing_fields == ["date", "type"]

    def test_missing_fields_checked_before_references(self, appointment_service):
        with pytest.raises(InvalidInputError):
            appointment_service.create(AppointmentCreate(patientId="nope"))

    def test_unknown_patient(self, appointment_service, appointment_payload):
        appointment_payload["patientId"] = "nope"
        with pytest.raises(PatientReferenceNotFoundError) as exc_info:
            appointment_service.create(AppointmentCreate(**appointment_payload))

        assert exc_info.value.code == "PATIENT_NOT_FOUND"
        assert exc_info.value.status_code == 400
        assert len(appointment_service.list_all()) == 2

    def test_unknown_patient_reported_before_unknown_provider(
        self, appointment_service, appointment_payload
    ):
        appointment_payload.update(patientId="nope", providerId="also-nope")
        with pytest.raises(PatientReferenceNotFoundError):
            appointment_service.create(AppointmentCreate(**appointment_payload))

    def test_unknown_provider(self, appointment_service, appointment_payload):
        appointment_payload["providerId"] = "prov99"
        with pytest.raises(ProviderReferenceNotFoundError) as exc_info:
            appointment_service.create(AppointmentCreate(**appointment_payload))
        assert exc_info.value.code == "PROVIDER_NOT_FOUND"
        assert exc_info.value.status_code == 400

    def test_references_see_newly_created_patient(self, registry, appointment_payload):
        patient = registry.patients.create(
            PatientCreate(firstName="New", lastName="Person", dateOfBirth="2001-02-03")
        )
        appointment_payload["patientId"] = patient.id

        appointment = registry.appointments.create(AppointmentCreate(**appointment_payload))
        assert appointment.patient_id == patient.id

    def test_references_see_deleted_provider(self, registry, appointment_payload):
        registry.providers.delete("prov1")
        with pytest.raises(ProviderReferenceNotFoundError):
            registry.appointments.create(AppointmentCreate(**appointment_payload))


class TestAppointmentUpdate:

    def test_status_accepts_any_string(self, appointment_service):
        updated = appointment_service.update("app1", AppointmentUpdate(status="waiting-room"))
        assert updated.status == "waiting-room"
        assert updated.type == "Check-up"

    def test_update_with_valid_references(self, appointment_service):
        updated = appointment_service.update(
            "app1", AppointmentUpdate(patientId="pat2", providerId="prov2")
        )
        assert (updated.patient_id, updated.provider_id) == ("pat2", "prov2")

    def test_update_unknown_patient_rejected_and_store_unchanged(self, appointment_service):
        before = appointment_service.get("app1")
        with pytest.raises(PatientReferenceNotFoundError):
            appointment_service.update(
                "app1", AppointmentUpdate(patientId="nope", status="confirmed")
            )
        assert appointment_service.get("app1") == before

    def test_update_unknown_provider_rejected(self, appointment_service):
        with pytest.raises(ProviderReferenceNotFoundError):
            appointment_service.update("app2", AppointmentUpdate(providerId="nope"))

    def test_null_reference_rejected(self, appointment_service):
        with pytest.raises(PatientReferenceNotFoundError) as exc_info:
            appointment_service.update("app2", AppointmentUpdate(patientId=None))
        assert exc_info.value.message == "Patient with ID null not found."

    def test_omitted_references_not_revalidated(self, registry):
        """A dangling reference does not block updates that leave it alone."""
        registry.patients.delete("pat1")
        updated = registry.appointments.update("app1", AppointmentUpdate(status="cancelled"))
        assert updated.status == "cancelled"
        assert updated.patient_id == "pat1"

    def test_missing_appointment_checked_first(self, appointment_service):
        with pytest.raises(AppointmentNotFoundError) as exc_info:
            appointment_service.update("app99", AppointmentUpdate(patientId="nope"))
        assert exc_info.value.code == "APPOINTMENT_NOT_FOUND"
        assert exc_info.value.status_code == 404


class TestAppointmentReadDelete:

    def test_delete_twice(self, appointment_service):
        appointment_service.delete("app2")
        with pytest.raises(AppointmentNotFoundError):
            appointment_service.delete("app2")
        assert [a.id for a in appointment_service.list_all()] == ["app1"]

    def test_get_unknown(self, appointment_service):
        with pytest.raises(AppointmentNotFoundError) as exc_info:
            appointment_service.get("app99")
        assert exc_info.value.to_body() == {
            "message": "Appointment with ID app99 not found.",
            "code": "APPOINTMENT_NOT_FOUND",
        }
