"""
CareBook Backend — Store Registry & Service Dependencies
==========================================================

What:  Builds the three stores and their services, and exposes them to
       route handlers through FastAPI dependencies.
Why:   Stores are created once per application instance and handed to the
       services explicitly; there is no module-level data. A test that
       calls create_app() gets brand-new, independent stores.
How:   create_app() stores the Registry on `app.state.registry`; the
       get_*_service dependencies read it back from the request.

Example usage in a route:
    @router.get("/patients")
    async def list_patients(service: PatientService = Depends(get_patient_service)):
        return service.list_all()
"""

import logging
from dataclasses import dataclass

from fastapi import Request

from carebook.schemas.appointment import Appointment
from carebook.schemas.patient import Patient
from carebook.schemas.provider import Provider
from carebook.seed import demo_appointments, demo_patients, demo_providers
from carebook.services.appointment_service import AppointmentService
from carebook.services.patient_service import PatientService
from carebook.services.provider_service import ProviderService
from carebook.store import RecordStore

logger = logging.getLogger(__name__)


@dataclass
class Registry:
    patients: PatientService
    providers: ProviderService
    appointments: AppointmentService


def build_registry(seed_demo_data: bool = True) -> Registry:
    """
    Create the stores (leaves first) and wire the services over them.

    The appointment service receives the patient and provider stores
    themselves, so its reference checks always see current data.
    """
    patient_store: RecordStore[Patient] = RecordStore("patient", "pat")
    provider_store: RecordStore[Provider] = RecordStore("provider", "prov")
    appointment_store: RecordStore[Appointment] = RecordStore("appointment", "app")

    if seed_demo_data:
        patient_store.seed(demo_patients())
        provider_store.seed(demo_providers())
        appointment_store.seed(demo_appointments())
        logger.info(
            "Loaded demo data: %d patients, %d providers, %d appointments",
            len(patient_store), len(provider_store), len(appointment_store),
        )

    return Registry(
        patients=PatientService(patient_store),
        providers=ProviderService(provider_store),
        appointments=AppointmentService(appointment_store, patient_store, provider_store),
    )


def get_registry(request: Request) -> Registry:
    return request.app.state.registry


def get_patient_service(request: Request) -> PatientService:
    return get_registry(request).patients


def get_provider_service(request: Request) -> ProviderService:
    return get_registry(request).providers


def get_appointment_service(request: Request) -> AppointmentService:
    return get_registry(request).appointments
