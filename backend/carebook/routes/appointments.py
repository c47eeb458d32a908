"""
CareBook Backend — Appointment Route Handlers
===============================================

What:  Endpoints for booking, updating and cancelling appointments.
Who:   Called by scheduling clients; delegates to AppointmentService,
       which checks patient and provider references.

Status codes:
    POST /appointments        201 | 400 INVALID_INPUT, PATIENT_NOT_FOUND, PROVIDER_NOT_FOUND
    PUT  /appointments/{id}   200 | 404 APPOINTMENT_NOT_FOUND
                                  | 400 PATIENT_NOT_FOUND, PROVIDER_NOT_FOUND

    PATIENT_NOT_FOUND is a 400 here (not a 404): the appointment URL is
    fine, the patientId inside the body is not.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Path, Response

from carebook.registry import get_appointment_service
from carebook.schemas.appointment import Appointment, AppointmentCreate, AppointmentUpdate
from carebook.schemas.common import ErrorResponse
from carebook.services.appointment_service import AppointmentService

router = APIRouter(prefix="/appointments", tags=["Appointments"])

AppointmentId = Annotated[
    str, Path(description="The unique identifier of the appointment.", examples=["app1"])
]
_NOT_FOUND = {404: {"description": "Appointment not found.", "model": ErrorResponse}}
_BAD_INPUT = {
    400: {
        "description": "Invalid input, or the patient or provider referenced does not exist.",
        "model": ErrorResponse,
    }
}


@router.get(
    "",
    response_model=List[Appointment],
    summary="Retrieve a list of all appointments",
    description="Returns a comprehensive list of all scheduled appointments within the system.",
    responses={500: {"description": "Internal server error.", "model": ErrorResponse}},
)
async def list_appointments(
    service: AppointmentService = Depends(get_appointment_service),
) -> List[Appointment]:
    return service.list_all()


@router.get(
    "/{appointment_id}",
    response_model=Appointment,
    summary="Get a specific appointment by ID",
    description="Retrieves the details of a single appointment using its unique identifier.",
    responses=_NOT_FOUND,
)
async def get_appointment(
    appointment_id: AppointmentId,
    service: AppointmentService = Depends(get_appointment_service),
) -> Appointment:
    return service.get(appointment_id)


@router.post(
    "",
    response_model=Appointment,
    status_code=201,
    summary="Create a new appointment",
    description=(
        "Books an appointment. patientId and providerId must reference existing "
        "records; the new appointment starts with status \"scheduled\"."
    ),
    responses=_BAD_INPUT,
)
async def create_appointment(
    payload: AppointmentCreate,
    service: AppointmentService = Depends(get_appointment_service),
) -> Appointment:
    return service.create(payload)


@router.put(
    "/{appointment_id}",
    response_model=Appointment,
    summary="Update an existing appointment",
    description=(
        "Overwrites the fields sent. A patientId or providerId in the body is "
        "checked against the current records; status accepts any string."
    ),
    responses={**_BAD_INPUT, **_NOT_FOUND},
)
async def update_appointment(
    appointment_id: AppointmentId,
    payload: Optional[AppointmentUpdate] = None,
    service: AppointmentService = Depends(get_appointment_service),
) -> Appointment:
    return service.update(appointment_id, payload or AppointmentUpdate())


@router.delete(
    "/{appointment_id}",
    status_code=204,
    response_class=Response,
    summary="Delete an appointment",
    responses={204: {"description": "Appointment successfully deleted."}, **_NOT_FOUND},
)
async def delete_appointment(
    appointment_id: AppointmentId,
    service: AppointmentService = Depends(get_appointment_service),
) -> Response:
    service.delete(appointment_id)
    return Response(status_code=204)
