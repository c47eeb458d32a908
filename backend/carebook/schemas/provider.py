"""
CareBook Backend — Provider Schemas
=====================================

What:  The stored Provider record plus the create and update payloads.
"""

from typing import Optional

from pydantic import ConfigDict, Field, field_validator

from carebook.schemas.common import CamelModel, reject_null

_NON_NULLABLE = ("first_name", "last_name", "specialty")


class Provider(CamelModel):
    """A healthcare provider as stored and returned by the API."""

    id: str = Field(description="Unique provider identifier, assigned on creation")
    first_name: str
    last_name: str
    specialty: str
    contact_number: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "prov1",
                "firstName": "Dr. Emily",
                "lastName": "White",
                "specialty": "General Practice",
                "contactNumber": "555-777-8888",
                "email": "emily.w@example.com",
            }
        }
    )


class ProviderCreate(CamelModel):
    """Body of POST /providers. firstName, lastName and specialty are required."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    specialty: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "firstName": "Dr. Sarah",
                "lastName": "Doe",
                "specialty": "Dermatology",
                "contactNumber": "555-222-3333",
                "email": "sarah.doe@example.com",
            }
        }
    )


class ProviderUpdate(CamelModel):
    """Body of PUT /providers/{id}."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    specialty: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"specialty": "Family Medicine"}}
    )

    @field_validator(*_NON_NULLABLE)
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, _NON_NULLABLE, info.field_name)
