"""Datasource API endpoints."""

import logging

from fastapi import APIRouter, Depends, Query, status

from qwery.application.schemas.datasource import (
    CreateDatasourceInput,
    DatasourceOutput,
    UpdateDatasourceInput,
    UpdateDatasourceRequest,
)
from qwery.configuration.di_container import DIContainer
from qwery.domain.shared_kernel import is_uuid
from qwery.infrastructure.adapters.primary.web.dependencies import get_container

router = APIRouter(prefix="/api/datasources", tags=["datasources"])
logger = logging.getLogger(__name__)


async def _resolve_id(container: DIContainer, id_or_slug: str) -> str:
    if is_uuid(id_or_slug):
        return id_or_slug
    return (await container.get_datasource_by_slug_use_case().execute(id_or_slug)).id


@router.get("", response_model=list[DatasourceOutput])
async def list_datasources(
    project_id: str | None = Query(None, description="Filter by project ID"),
    container: DIContainer = Depends(get_container),
) -> list[DatasourceOutput]:
    if project_id:
        return await container.list_datasources_by_project_use_case().execute(project_id)
    return await container.list_datasources_use_case().execute()


@router.post("", response_model=DatasourceOutput, status_code=status.HTTP_201_CREATED)
async def create_datasource(
    data: CreateDatasourceInput,
    container: DIContainer = Depends(get_container),
) -> DatasourceOutput:
    logger.info(f"Creating datasource '{data.name}' ({data.datasource_provider})")
    return await container.create_datasource_use_case().execute(data)


@router.get("/{id}", response_model=DatasourceOutput)
async def get_datasource(
    id: str, container: DIContainer = Depends(get_container)
) -> DatasourceOutput:
    if is_uuid(id):
        return await container.get_datasource_use_case().execute(id)
    return await container.get_datasource_by_slug_use_case().execute(id)


@router.put("/{id}")
async def update_datasource(
    id: str,
    data: UpdateDatasourceRequest,
    container: DIContainer = Depends(get_container),
) -> dict[str, bool]:
    datasource_id = await _resolve_id(container, id)
    await container.update_datasource_use_case().execute(
        UpdateDatasourceInput(id=datasource_id, **data.model_dump())
    )
    return {"success": True}


@router.delete("/{id}")
async def delete_datasource(
    id: str, container: DIContainer = Depends(get_container)
) -> dict[str, bool]:
    datasource_id = await _resolve_id(container, id)
    await container.delete_datasource_use_case().execute(datasource_id)
    return {"success": True}
