"""
CareBook Backend — Provider Route Handlers
============================================

What:  CRUD endpoints under /providers, mirroring /patients.
Errors: 404 PROVIDER_NOT_FOUND, 400 INVALID_INPUT.
"""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, Path, Response

from carebook.registry import get_provider_service
from carebook.schemas.common import ErrorResponse
from carebook.schemas.provider import Provider, ProviderCreate, ProviderUpdate
from carebook.services.provider_service import ProviderService

router = APIRouter(prefix="/providers", tags=["Providers"])

ProviderId = Annotated[str, Path(description="The provider ID.", examples=["prov1"])]
_NOT_FOUND = {404: {"description": "Provider not found.", "model": ErrorResponse}}


@router.get(
    "",
    response_model=List[Provider],
    summary="Retrieve a list of all healthcare providers",
    description="Returns a list of all healthcare providers registered in the system.",
    responses={500: {"description": "Internal server error.", "model": ErrorResponse}},
)
async def list_providers(
    service: ProviderService = Depends(get_provider_service),
) -> List[Provider]:
    return service.list_all()


@router.get(
    "/{provider_id}",
    response_model=Provider,
    summary="Get a specific provider by ID",
    responses=_NOT_FOUND,
)
async def get_provider(
    provider_id: ProviderId,
    service: ProviderService = Depends(get_provider_service),
) -> Provider:
    return service.get(provider_id)


@router.post(
    "",
    response_model=Provider,
    status_code=201,
    summary="Create a new healthcare provider",
    description="firstName, lastName and specialty are required.",
    responses={400: {"description": "Missing required fields.", "model": ErrorResponse}},
)
async def create_provider(
    payload: ProviderCreate,
    service: ProviderService = Depends(get_provider_service),
) -> Provider:
    return service.create(payload)


@router.put(
    "/{provider_id}",
    response_model=Provider,
    summary="Update an existing provider",
    responses={
        400: {"description": "Malformed request body.", "model": ErrorResponse},
        **_NOT_FOUND,
    },
)
async def update_provider(
    provider_id: ProviderId,
    payload: Optional[ProviderUpdate] = None,
    service: ProviderService = Depends(get_provider_service),
) -> Provider:
    return service.update(provider_id, payload or ProviderUpdate())


@router.delete(
    "/{provider_id}",
    status_code=204,
    response_class=Response,
    summary="Delete a healthcare provider",
    responses={204: {"description": "Provider deleted successfully."}, **_NOT_FOUND},
)
async def delete_provider(
    provider_id: ProviderId,
    service: ProviderService = Depends(get_provider_service),
) -> Response:
    service.delete(provider_id)
    return Response(status_code=204)
