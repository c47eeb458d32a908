"""
CareBook Backend — Patient Schemas
====================================

What:  The stored Patient record plus the create and update payloads.
Why:   FastAPI uses these to parse request bodies, serialize responses and
       generate the Patients section of the OpenAPI document.

Presence of required fields is checked by PatientService, not here, so a
body missing `lastName` reaches the service and is reported as
INVALID_INPUT with the list of missing fields.
"""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from carebook.schemas.common import CamelModel, reject_null

_NON_NULLABLE = ("first_name", "last_name", "date_of_birth")


class Patient(CamelModel):
    """A registered patient as stored and returned by the API."""

    id: str = Field(description="Unique patient identifier, assigned on creation")
    first_name: str
    last_name: str
    date_of_birth: str = Field(description="Date of birth (YYYY-MM-DD)")
    contact_number: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "pat1",
                "firstName": "Frank",
                "lastName": "White",
                "dateOfBirth": "1985-03-20",
                "contactNumber": "555-555-555",
                "email": "frank@aol.com",
            }
        }
    )


class PatientCreate(CamelModel):
    """Body of POST /patients. firstName, lastName and dateOfBirth are required."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "Alice",
                "lastName": "Smith",
                "dateOfBirth": "1990-01-01",
                "contactNumber": "555-111-2222",
                "email": "alice@example.com",
            }
        }
    )


class PatientUpdate(CamelModel):
    """Body of PUT /patients/{id}. Only the fields sent are overwritten."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"email": "frank.white@example.com"}}
    )

    @field_validator(*_NON_NULLABLE)
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, _NON_NULLABLE, info.field_name)
