"""
CareBook Backend — Patient Route Handlers
===========================================

What:  CRUD endpoints under /patients.
How:   Each handler parses the request, calls PatientService and returns
       the record; errors raised by the service are turned into
       `{"message", "code"}` bodies by the global handlers in main.py.

Endpoints:
    GET    /patients        → 200 list
    GET    /patients/{id}   → 200 | 404 PATIENT_NOT_FOUND
    POST   /patients        → 201 | 400 INVALID_INPUT
    PUT    /patients/{id}   → 200 | 404 PATIENT_NOT_FOUND
    DELETE /patients/{id}   → 204 | 404 PATIENT_NOT_FOUND
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Path, Response

from carebook.registry import get_patient_service
from carebook.schemas.common import ErrorResponse
from carebook.schemas.patient import Patient, PatientCreate, PatientUpdate
from carebook.services.patient_service import PatientService

router = APIRouter(prefix="/patients", tags=["Patients"])

PatientId = Annotated[str, Path(description="The patient ID.", examples=["pat1"])]
_NOT_FOUND = {404: {"description": "Patient not found.", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[Patient],
    summary="Retrieve a list of all patients",
    description="Returns a comprehensive list of all registered patients in the system.",
    responses={500: {"description": "Internal server error.", "model": ErrorResponse}},
)
async def list_patients(
    service: PatientService = Depends(get_patient_service),
) -> List[Patient]:
    return service.list_all()


@router.get(
    "/{patient_id}",
    response_model=Patient,
    summary="Get a specific patient by ID",
    description="Retrieves the detailed information of a single patient using their ID.",
    responses=_NOT_FOUND,
)
async def get_patient(
    patient_id: PatientId,
    service: PatientService = Depends(get_patient_service),
) -> Patient:
    return service.get(patient_id)


@router.post(
    "",
    response_model=Patient,
    status_code=201,
    summary="Create a new patient",
    description=(
        "Registers a new patient in the system. firstName, lastName and "
        "dateOfBirth are required; contactNumber and email default to null."
    ),
    responses={400: {"description": "Missing required fields.", "model": ErrorResponse}},
)
async def create_patient(
    payload: PatientCreate,
    service: PatientService = Depends(get_patient_service),
) -> Patient:
    return service.create(payload)


@router.put(
    "/{patient_id}",
    response_model=Patient,
    summary="Update an existing patient",
    description=(
        "Updates an existing patient record. Only the fields sent are "
        "overwritten; every other field keeps its current value. A missing "
        "body leaves the record unchanged."
    ),
    responses={
        400: {"description": "Malformed request body.", "model": ErrorResponse},
        **_NOT_FOUND,
    },
)
async def update_patient(
    patient_id: PatientId,
    payload: Optional[PatientUpdate] = None,
    service: PatientService = Depends(get_patient_service),
) -> Patient:
    return service.update(patient_id, payload or PatientUpdate())


@router.delete(
    "/{patient_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a patient",
    description=(
        "Deletes a patient record by ID. Appointments referencing the "
        "patient are left untouched."
    ),
    responses={204: {"description": "Patient successfully deleted."}, **_NOT_FOUND},
)
async def delete_patient(
    patient_id: PatientId,
    service: PatientService = Depends(get_patient_service),
) -> Response:
    service.delete(patient_id)
    return Response(status_code=204)
