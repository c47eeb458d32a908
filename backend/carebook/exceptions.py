"""
CareBook Backend — Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for every failure the API reports.
Why:   Services raise typed errors; one global handler turns them into the
       `{"message": ..., "code": ...}` body with the right HTTP status.
How:   Each exception class carries a message, a machine-readable code,
       an HTTP status and an optional context dict (logged, never returned).
Who:   Raised by services; caught by the handlers registered in main.py.

Exception Hierarchy:
    CareBookError (base)                      → 500 INTERNAL_ERROR
    ├── InvalidInputError                     → 400 INVALID_INPUT
    ├── NotFoundError                         → 404
    │   ├── PatientNotFoundError              → 404 PATIENT_NOT_FOUND
    │   ├── ProviderNotFoundError             → 404 PROVIDER_NOT_FOUND
    │   └── AppointmentNotFoundError          → 404 APPOINTMENT_NOT_FOUND
    └── ReferenceNotFoundError                → 400
        ├── PatientReferenceNotFoundError     → 400 PATIENT_NOT_FOUND
        └── ProviderReferenceNotFoundError    → 400 PROVIDER_NOT_FOUND

Reference errors share their code with the matching NotFoundError but are
400s: the addressed resource exists, the identifier inside the request body
does not.
"""

from typing import Any, Dict, List, Optional


class CareBookError(Exception):
    """
    Base exception for all CareBook application errors.

    Attributes:
        message:      User-facing error description (safe to return)
        code:         Machine-readable error code returned as `code`
        status_code:  HTTP status the global handler responds with
        context:      Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def to_body(self) -> Dict[str, str]:
        return {"message": self.message, "code": self.code}


class InvalidInputError(CareBookError):
    """
    Raised when a request body is missing required fields or is malformed.

    HTTP:    400 Bad Request, code INVALID_INPUT
    """

    status_code = 400
    code = "INVALID_INPUT"

    def __init__(
        self,
        message: str = "Missing required fields.",
        missing_fields: Optional[List[str]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if missing_fields:
            ctx["missing_fields"] = missing_fields
        super().__init__(message=message, context=ctx)
        self.missing_fields = missing_fields or []


class NotFoundError(CareBookError):
    """
    Raised when the resource addressed by the URL does not exist.

    Subclasses set `resource` (used in the message) and `code`.
    """

    status_code = 404
    code = "NOT_FOUND"
    resource = "Resource"

    def __init__(
        self,
        resource_id: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource_id"] = resource_id
        super().__init__(
            message=f"{self.resource} with ID {resource_id} not found.",
            context=ctx,
        )
        self.resource_id = resource_id


class PatientNotFoundError(NotFoundError):
    code = "PATIENT_NOT_FOUND"
    resource = "Patient"


class ProviderNotFoundError(NotFoundError):
    code = "PROVIDER_NOT_FOUND"
    resource = "Provider"


class AppointmentNotFoundError(NotFoundError):
    code = "APPOINTMENT_NOT_FOUND"
    resource = "Appointment"


class ReferenceNotFoundError(CareBookError):
    """
    Raised when a request body references a record that does not exist.

    What:    An appointment payload names a patientId or providerId that
             is not present in the referenced store.
    HTTP:    400 Bad Request (the fault is in caller-supplied data)
    """

    status_code = 400
    code = "REFERENCE_NOT_FOUND"
    resource = "Resource"

    def __init__(
        self,
        reference_id: Any,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["reference_id"] = reference_id
        # Echo the id the way the client sent it; JSON null, not Python None
        shown = "null" if reference_id is None else reference_id
        super().__init__(
            message=f"{self.resource} with ID {shown} not found.",
            context=ctx,
        )
        self.reference_id = reference_id


class PatientReferenceNotFoundError(ReferenceNotFoundError):
    code = "PATIENT_NOT_FOUND"
    resource = "Patient"


class ProviderReferenceNotFoundError(ReferenceNotFoundError):
    code = "PROVIDER_NOT_FOUND"
    resource = "Provider"
