"""
CareBook Backend — Patient & Provider Service Unit Tests
==========================================================

What:  Tests for the CRUD rules shared by patients and providers.
How:   Services over fresh in-memory stores (no HTTP).

What we test:
    ✅ Required fields on create (missing and empty both rejected)
    ✅ Optional contact fields default to None
    ✅ Partial updates preserve absent fields; `{}` is a no-op
    ✅ Not-found errors carry the resource-specific code
"""

import pytest

from carebook.exceptions import InvalidInputError, PatientNotFoundError, ProviderNotFoundError
from carebook.schemas.patient import PatientCreate, PatientUpdate
from carebook.schemas.provider import ProviderCreate, ProviderUpdate


class TestPatientCreate:

    def test_create_assigns_new_id_and_null_contacts(self, patient_service, patient_payload):
        patient = patient_service.create(PatientCreate(**patient_payload))

        assert patient.id == "pat3"
        assert patient.first_name == "Alice"
        assert patient.contact_number is None
        assert patient.email is None
        assert patient_service.list_all()[-1] == patient

    def test_create_empty_contact_stored_as_none(self, patient_service, patient_payload):
        patient = patient_service.create(
            PatientCreate(**patient_payload, contactNumber="", email="")
        )
        assert patient.contact_number is None
        assert patient.email is None

    def test_missing_fields_reported_by_wire_name(self, patient_service):
        with pytest.raises(InvalidInputError) as exc_info:
            patient_service.create(PatientCreate(firstName="X"))

        assert exc_info.value.code == "INVALID_INPUT"
        assert exc_info.value.missing_fields == ["lastName", "dateOfBirth"]
        assert len(patient_service.list_all()) == 2

    def test_empty_string_counts_as_missing(self, patient_service, patient_payload):
        patient_payload["lastName"] = ""
        with pytest.raises(InvalidInputError):
            patient_service.create(PatientCreate(**patient_payload))

    def test_ids_unique_after_delete(self, patient_service, patient_payload):
        created = patient_service.create(PatientCreate(**patient_payload))
        patient_service.delete(created.id)

        again = patient_service.create(PatientCreate(**patient_payload))
        assert again.id != created.id
        assert len({p.id for p in patient_service.list_all()}) == len(patient_service.list_all())


class TestPatientReadUpdateDelete:

    def test_get_unknown_raises(self, patient_service):
        with pytest.raises(PatientNotFoundError) as exc_info:
            patient_service.get("nope")
        assert exc_info.value.code == "PATIENT_NOT_FOUND"
        assert exc_info.value.status_code == 404

    def test_partial_update_preserves_other_fields(self, patient_service):
        before = patient_service.get("pat1")
        after = patient_service.update("pat1", PatientUpdate(email="new@x.com"))

        assert after.email == "new@x.com"
        assert after.model_dump(exclude={"email"}) == before.model_dump(exclude={"email"})

    def test_empty_update_is_noop(self, patient_service):
        before = patient_service.get("pat2")
        after = patient_service.update("pat2", PatientUpdate())
        assert after == before

    def test_update_can_clear_optional_field(self, patient_service):
        after = patient_service.update("pat1", PatientUpdate(contactNumber=None))
        assert after.contact_number is None

    def test_update_does_not_revalidate_required_fields(self, patient_service):
        after = patient_service.update("pat1", PatientUpdate(firstName=""))
        assert after.first_name == ""

    def test_update_unknown_raises(self, patient_service):
        with pytest.raises(PatientNotFoundError):
            patient_service.update("nope", PatientUpdate(email="a@b.c"))

    def test_delete_twice(self, patient_service):
        patient_service.delete("pat1")
        with pytest.raises(PatientNotFoundError):
            patient_service.delete("pat1")

    def test_delete_leaves_appointments_dangling(self, patient_service, appointment_service):
        patient_service.delete("pat1")
        assert appointment_service.get("app1").patient_id == "pat1"


class TestProviderService:

    def test_create_requires_specialty(self, provider_service):
        with pytest.raises(InvalidInputError) as exc_info:
            provider_service.create(ProviderCreate(firstName="Dr. A", lastName="B"))
        assert exc_info.value.missing_fields == ["specialty"]

    def test_create_uses_prov_prefix(self, provider_service, provider_payload):
        provider = provider_service.create(ProviderCreate(**provider_payload))
        assert provider.id == "prov3"
        assert provider.specialty == "Dermatology"
        assert provider.email is None

    def test_update_and_not_found(self, provider_service):
        updated = provider_service.update("prov2", ProviderUpdate(specialty="Neonatology"))
        assert updated.specialty == "Neonatology"
        assert updated.last_name == "Green"

        with pytest.raises(ProviderNotFoundError) as exc_info:
            provider_service.get("prov9")
        assert exc_info.value.code == "PROVIDER_NOT_FOUND"

    def test_delete_then_get(self, provider_service):
        provider_service.delete("prov1")
        with pytest.raises(ProviderNotFoundError):
            provider_service.get("prov1")
