"""Project API endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, status

from qwery.application.schemas.project import (
    CreateProjectInput,
    ProjectOutput,
    UpdateProjectInput,
    UpdateProjectRequest,
)
from qwery.configuration.di_container import DIContainer
from qwery.domain.shared_kernel import is_uuid
from qwery.infrastructure.adapters.primary.web.dependencies import get_container

router = APIRouter(prefix="/api/projects", tags=["projects"])
logger = logging.getLogger(__name__)


async def _resolve_id(container: DIContainer, id_or_slug: str) -> str:
    if is_uuid(id_or_slug):
        return id_or_slug
    return (await container.get_project_by_slug_use_case().execute(id_or_slug)).id


@router.get("", response_model=list[ProjectOutput])
async def list_projects(
    org_id: str | None = Query(None, description="Filter by organization ID"),
    container: DIContainer = Depends(get_container),
) -> list[ProjectOutput]:
    if org_id:
        return await container.list_projects_by_organization_use_case().execute(org_id)
    return await container.list_projects_use_case().execute()


@router.post("", response_model=ProjectOutput, status_code=status.HTTP_201_CREATED)
async def create_project(
    data: CreateProjectInput,
    container: DIContainer = Depends(get_container),
) -> ProjectOutput:
    logger.info(f"Creating project '{data.name}' in organization {data.org_id}")
    return await container.create_project_use_case().execute(data)


@router.get("/{id}", response_model=ProjectOutput)
async def get_project(id: str, container: DIContainer = Depends(get_container)) -> ProjectOutput:
    if is_uuid(id):
        return await container.get_project_use_case().execute(id)
    return await container.get_project_by_slug_use_case().execute(id)


@router.put("/{id}", response_model=ProjectOutput)
async def update_project(
    id: str,
    data: UpdateProjectRequest,
    container: DIContainer = Depends(get_container),
) -> ProjectOutput:
    project_id = await _resolve_id(container, id)
    return await container.update_project_use_case().execute(
        UpdateProjectInput(id=project_id, **data.model_dump())
    )


@router.delete("/{id}")
async def delete_project(id: str, container: DIContainer = Depends(get_container)) -> dict[str, bool]:
    project_id = await _resolve_id(container, id)
    await container.delete_project_use_case().execute(project_id)
    return {"success": True}
