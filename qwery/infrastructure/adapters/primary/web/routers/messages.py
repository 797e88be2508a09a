"""Message API endpoints."""

from fastapi import APIRouter, Depends

from qwery.application.schemas.message import (
    MessageOutput,
    UpdateMessageInput,
    UpdateMessageRequest,
)
from qwery.configuration.di_container import DIContainer
from qwery.infrastructure.adapters.primary.web.dependencies import get_container

router = APIRouter(prefix="/api/messages", tags=["messages"])


@router.get("/{id}", response_model=MessageOutput)
async def get_message(id: str, container: DIContainer = Depends(get_container)) -> MessageOutput:
    return await container.get_message_use_case().execute(id)


@router.put("/{id}", response_model=MessageOutput)
async def update_message(
    id: str,
    data: UpdateMessageRequest,
    container: DIContainer = Depends(get_container),
) -> MessageOutput:
    return await container.update_message_use_case().execute(
        UpdateMessageInput(id=id, **data.model_dump())
    )


@router.delete("/{id}")
async def delete_message(id: str, container: DIContainer = Depends(get_container)) -> dict[str, bool]:
    await container.delete_message_use_case().execute(id)
    return {"success": True}
