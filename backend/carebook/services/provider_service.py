"""
CareBook Backend — Provider Service
=====================================

What:  Business rules for the Providers resource. Same shape as patients,
       with `specialty` in place of `dateOfBirth`.
"""

from typing import Any, Dict

from carebook.exceptions import ProviderNotFoundError
from carebook.schemas.provider import Provider
from carebook.services.base import ResourceService


class ProviderService(ResourceService[Provider]):
    resource = "provider"
    not_found_error = ProviderNotFoundError
    required_fields = ("first_name", "last_name", "specialty")

    def build_record(self, record_id: str, data: Dict[str, Any]) -> Provider:
        return Provider(
            id=record_id,
            first_name=data["first_name"],
            last_name=data["last_name"],
            specialty=data["specialty"],
            contact_number=data.get("contact_number") or None,
            email=data.get("email") or None,
        )
