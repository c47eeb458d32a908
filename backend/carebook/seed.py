"""
CareBook Backend — Demonstration Records
==========================================

What:  The records every store starts with when SEED_DEMO_DATA is on.
Why:   Lets the interactive docs be exercised immediately: app1 already
       references pat1 and prov1, so GET /appointments/app1 works on a
       fresh server.

Functions return new model instances on each call so no two stores ever
share a record object.
"""

from typing import List

from carebook.schemas.appointment import Appointment
from carebook.schemas.patient import Patient
from carebook.schemas.provider import Provider


def demo_patients() -> List[Patient]:
    return [
        Patient(
            id="pat1",
            first_name="Frank",
            last_name="White",
            date_of_birth="1985-03-20",
            contact_number="555-555-555",
            email="frank@aol.com",
        ),
        Patient(
            id="pat2",
            first_name="Bob",
            last_name="Johnson",
            date_of_birth="1992-11-05",
            contact_number="555-333-4444",
            email="bob@aol.com",
        ),
    ]


def demo_providers() -> List[Provider]:
    return [
        Provider(
            id="prov1",
            first_name="Dr. Emily",
            last_name="White",
            specialty="General Practice",
            contact_number="555-777-8888",
            email="emily.w@example.com",
        ),
        Provider(
            id="prov2",
            first_name="Dr. Michael",
            last_name="Green",
            specialty="Pediatrics",
            contact_number="555-999-0000",
            email="michael.g@example.com",
        ),
    ]


def demo_appointments() -> List[Appointment]:
    return [
        Appointment(
            id="app1",
            patient_id="pat1",
            provider_id="prov1",
            date="2025-06-15T10:00:00Z",
            type="Check-up",
            status="scheduled",
        ),
        Appointment(
            id="app2",
            patient_id="pat2",
            provider_id="prov2",
            date="2025-06-16T14:30:00Z",
            type="Follow-up",
            status="scheduled",
        ),
    ]
