"""
CareBook Backend — Shared Schema Building Blocks
==================================================

What:  The camelCase base model, the error body and the health response.
Why:   The wire format is camelCase (firstName, patientId) while Python code
       uses snake_case. One base class owns that mapping for every schema.
How:   Pydantic's alias generator turns each field name into its camelCase
       alias; FastAPI validates requests and serializes responses by alias,
       and populate_by_name lets Python code build models by field name.
"""

from typing import Any, Dict, Iterable

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every request and response model exchanged with clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @classmethod
    def alias_for(cls, field_name: str) -> str:
        """Wire name of a field, used in error messages."""
        return cls.model_fields[field_name].alias or field_name

    def changes(self) -> Dict[str, Any]:
        """
        Fields the client actually sent, keyed by Python field name.

        What:  The payload of a shallow-merge update.
        Why:   Fields absent from the request body must be left untouched,
               while fields sent as null must overwrite with null.
        """
        return self.model_dump(exclude_unset=True)


def reject_null(value: Any, fields: Iterable[str], field_name: str) -> Any:
    """
    Refuses an explicit null for a field that records never hold as null.

    Used by update payload validators: omitting the field is fine, sending
    `null` for it is not.
    """
    if value is None and field_name in fields:
        raise ValueError(f"{to_camel(field_name)} may not be null")
    return value


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every failing endpoint.

    Example:
        {"message": "Patient with ID pat9 not found.", "code": "PATIENT_NOT_FOUND"}
    """
    message: str = Field(description="Human-readable error description")
    code: str = Field(description="Machine-readable error code")


class RecordCounts(CamelModel):
    patients: int
    providers: int
    appointments: int


class HealthResponse(CamelModel):
    """
    What:  Health check response for monitoring and container liveness checks.
    Who:   Returned by GET /health.
    """
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    uptime_seconds: float = Field(description="Seconds since service started")
    records: RecordCounts = Field(description="Number of records held by each store")
