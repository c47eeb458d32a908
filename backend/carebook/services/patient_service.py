"""
CareBook Backend — Patient Service
====================================

What:  Business rules for the Patients resource.
Who:   Called by the /patients route handlers; its store is also read by
       AppointmentService to check patient references.

Rules:
    - Create requires firstName, lastName and dateOfBirth (non-empty).
    - contactNumber and email are stored as null when absent or empty.
    - Deleting a patient does not touch appointments that reference it.
"""

from typing import Any, Dict

from carebook.exceptions import PatientNotFoundError
from carebook.schemas.patient import Patient
from carebook.services.base import ResourceService


class PatientService(ResourceService[Patient]):
    resource = "patient"
    not_found_error = PatientNotFoundError
    required_fields = ("first_name", "last_name", "date_of_birth")

    def build_record(self, record_id: str, data: Dict[str, Any]) -> Patient:
        return Patient(
            id=record_id,
            first_name=data["first_name"],
            last_name=data["last_name"],
            date_of_birth=data["date_of_birth"],
            contact_number=data.get("contact_number") or None,
            email=data.get("email") or None,
        )
