"""
CareBook Backend — Appointment Schemas
========================================

What:  The stored Appointment record plus the create and update payloads.

Reference fields:
    patientId and providerId hold identifiers of records in the other two
    stores. They are checked when written (create, or update when sent) and
    never again: deleting the referenced patient leaves the value dangling.

Status:
    An open string. New appointments start as "scheduled"; any string sent
    in an update is stored as-is.
"""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from carebook.schemas.common import CamelModel, reject_null

DEFAULT_STATUS = "scheduled"

# patientId/providerId may be sent as null: the reference check rejects them
_NON_NULLABLE = ("date", "type", "status")


class Appointment(CamelModel):
    """A booked appointment as stored and returned by the API."""

    id: str = Field(description="Unique appointment identifier, assigned on creation")
    patient_id: str = Field(description="ID of the patient attending")
    provider_id: str = Field(description="ID of the provider seeing the patient")
    date: str = Field(description="Appointment date-time (ISO 8601)")
    type: str = Field(description="Appointment type, e.g. Check-up")
    status: str = Field(default=DEFAULT_STATUS, description="Free-form status")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "app1",
                "patientId": "pat1",
                "providerId": "prov1",
                "date": "2025-06-15T10:00:00Z",
                "type": "Check-up",
                "status": "scheduled",
            }
        }
    )


class AppointmentCreate(CamelModel):
    """Body of POST /appointments. All four fields are required."""

    patient_id: Optional[str] = None
    provider_id: Optional[str] = None
    date: Optional[str] = Field(default=None, json_schema_extra={"format": "date-time"})
    type: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "patientId": "pat1",
                "providerId": "prov1",
                "date": "2025-06-15T10:00:00Z",
                "type": "Check-up",
            }
        }
    )


class AppointmentUpdate(CamelModel):
    """Body of PUT /appointments/{id}. References sent are re-checked."""

    patient_id: Optional[str] = None
    provider_id: Optional[str] = None
    date: Optional[str] = Field(default=None, json_schema_extra={"format": "date-time"})
    type: Optional[str] = None
    status: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"date": "2025-06-20T09:00:00Z", "status": "confirmed"}}
    )

    @field_validator(*_NON_NULLABLE)
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, _NON_NULLABLE, info.field_name)
