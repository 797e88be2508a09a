"""Organization API endpoints."""

import logging

from fastapi import APIRouter, Depends, status

from qwery.application.schemas.organization import (
    CreateOrganizationInput,
    OrganizationOutput,
    UpdateOrganizationInput,
    UpdateOrganizationRequest,
)
from qwery.configuration.di_container import DIContainer
from qwery.domain.shared_kernel import is_uuid
from qwery.infrastructure.adapters.primary.web.dependencies import get_container

router = APIRouter(prefix="/api/organizations", tags=["organizations"])
logger = logging.getLogger(__name__)


async def _resolve_id(container: DIContainer, id_or_slug: str) -> str:
    if is_uuid(id_or_slug):
        return id_or_slug
    organization = await container.get_organization_by_slug_use_case().execute(id_or_slug)
    return organization.id


@router.get("", response_model=list[OrganizationOutput])
async def list_organizations(
    container: DIContainer = Depends(get_container),
) -> list[OrganizationOutput]:
    return await container.list_organizations_use_case().execute()


@router.post("", response_model=OrganizationOutput, status_code=status.HTTP_201_CREATED)
async def create_organization(
    data: CreateOrganizationInput,
    container: DIContainer = Depends(get_container),
) -> OrganizationOutput:
    logger.info(f"Creating organization '{data.name}'")
    return await container.create_organization_use_case().execute(data)


@router.get("/{id}", response_model=OrganizationOutput)
async def get_organization(
    id: str,
    container: DIContainer = Depends(get_container),
) -> OrganizationOutput:
    if is_uuid(id):
        return await container.get_organization_use_case().execute(id)
    return await container.get_organization_by_slug_use_case().execute(id)


@router.put("/{id}", response_model=OrganizationOutput)
async def update_organization(
    id: str,
    data: UpdateOrganizationRequest,
    container: DIContainer = Depends(get_container),
) -> OrganizationOutput:
    organization_id = await _resolve_id(container, id)
    return await container.update_organization_use_case().execute(
        UpdateOrganizationInput(id=organization_id, **data.model_dump())
    )


@router.delete("/{id}")
async def delete_organization(
    id: str,
    container: DIContainer = Depends(get_container),
) -> dict[str, bool]:
    organization_id = await _resolve_id(container, id)
    await container.delete_organization_use_case().execute(organization_id)
    return {"success": True}
