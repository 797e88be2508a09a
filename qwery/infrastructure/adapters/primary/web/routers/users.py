"""User API endpoints."""

from fastapi import APIRouter, Depends, status

from qwery.application.schemas.user import (
    CreateUserInput,
    UpdateUserInput,
    UpdateUserRequest,
    UserOutput,
)
from qwery.configuration.di_container import DIContainer
from qwery.infrastructure.adapters.primary.web.dependencies import get_container

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserOutput])
async def list_users(container: DIContainer = Depends(get_container)) -> list[UserOutput]:
    return await container.list_users_use_case().execute()


@router.post("", response_model=UserOutput, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: CreateUserInput, container: DIContainer = Depends(get_container)
) -> UserOutput:
    return await container.create_user_use_case().execute(data)


@router.get("/{id}", response_model=UserOutput)
async def get_user(id: str, container: DIContainer = Depends(get_container)) -> UserOutput:
    return await container.get_user_use_case().execute(id)


@router.put("/{id}", response_model=UserOutput)
async def update_user(
    id: str,
    data: UpdateUserRequest,
    container: DIContainer = Depends(get_container),
) -> UserOutput:
    return await container.update_user_use_case().execute(
        UpdateUserInput(id=id, **data.model_dump())
    )


@router.delete("/{id}")
async def delete_user(id: str, container: DIContainer = Depends(get_container)) -> dict[str, bool]:
    await container.delete_user_use_case().execute(id)
    return {"success": True}
