# Services package init
"""
CareBook Backend — Services Layer
===================================

What:  Business logic between the routes (HTTP) and the in-memory stores.

Service Inventory:
    - ResourceService (abstract): list/get/create/update/delete over one store
    - PatientService:     required firstName, lastName, dateOfBirth
    - ProviderService:    required firstName, lastName, specialty
    - AppointmentService: required fields plus patient/provider reference checks

Services are constructed by carebook.registry.build_registry() and reached
from routes through FastAPI dependencies, so tests can build them directly
over fresh stores without any HTTP involved.
"""
