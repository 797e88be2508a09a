"""Notebook API endpoints."""

from fastapi import APIRouter, Depends, Query, status

from qwery.application.schemas.notebook import (
    CreateNotebookInput,
    NotebookOutput,
    UpdateNotebookInput,
    UpdateNotebookRequest,
)
from qwery.configuration.di_container import DIContainer
from qwery.domain.shared_kernel import is_uuid
from qwery.infrastructure.adapters.primary.web.dependencies import get_container

router = APIRouter(prefix="/api/notebooks", tags=["notebooks"])


async def _resolve_id(container: DIContainer, id_or_slug: str) -> str:
    if is_uuid(id_or_slug):
        return id_or_slug
    return (await container.get_notebook_by_slug_use_case().execute(id_or_slug)).id


@router.get("", response_model=list[NotebookOutput])
async def list_notebooks(
    project_id: str = Query(..., description="Project the notebooks belong to"),
    container: DIContainer = Depends(get_container),
) -> list[NotebookOutput]:
    return await container.list_notebooks_by_project_use_case().execute(project_id)


@router.post("", response_model=NotebookOutput, status_code=status.HTTP_201_CREATED)
async def create_notebook(
    data: CreateNotebookInput, container: DIContainer = Depends(get_container)
) -> NotebookOutput:
    return await container.create_notebook_use_case().execute(data)


@router.get("/{id}", response_model=NotebookOutput)
async def get_notebook(id: str, container: DIContainer = Depends(get_container)) -> NotebookOutput:
    if is_uuid(id):
        return await container.get_notebook_use_case().execute(id)
    return await container.get_notebook_by_slug_use_case().execute(id)


@router.put("/{id}", response_model=NotebookOutput)
async def update_notebook(
    id: str,
    data: UpdateNotebookRequest,
    container: DIContainer = Depends(get_container),
) -> NotebookOutput:
    notebook_id = await _resolve_id(container, id)
    return await container.update_notebook_use_case().execute(
        UpdateNotebookInput(id=notebook_id, **data.model_dump())
    )


@router.delete("/{id}")
async def delete_notebook(id: str, container: DIContainer = Depends(get_container)) -> dict[str, bool]:
    notebook_id = await _resolve_id(container, id)
    await container.delete_notebook_use_case().execute(notebook_id)
    return {"success": True}
