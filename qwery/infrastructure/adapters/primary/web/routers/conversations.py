"""Conversation API endpoints, including the messages of a conversation."""

import logging

from fastapi import APIRouter, Depends, Query, status

from qwery.application.schemas.conversation import (
    ConversationOutput,
    CreateConversationInput,
    UpdateConversationInput,
    UpdateConversationRequest,
)
from qwery.application.schemas.message import (
    CreateMessageInput,
    CreateMessageRequest,
    ListMessagesInput,
    MessageOutput,
)
from qwery.configuration.di_container import DIContainer
from qwery.domain.shared_kernel import is_uuid
from qwery.infrastructure.adapters.primary.web.dependencies import get_container

router = APIRouter(prefix="/api/conversations", tags=["conversations"])
logger = logging.getLogger(__name__)


async def _resolve_id(container: DIContainer, id_or_slug: str) -> str:
    if is_uuid(id_or_slug):
        return id_or_slug
    return (await container.get_conversation_by_slug_use_case().execute(id_or_slug)).id


@router.get("", response_model=list[ConversationOutput])
async def list_conversations(
    project_id: str | None = Query(None, description="Filter by project ID"),
    container: DIContainer = Depends(get_container),
) -> list[ConversationOutput]:
    if project_id:
        return await container.list_conversations_by_project_use_case().execute(project_id)
    return await container.list_conversations_use_case().execute()


@router.post("", response_model=ConversationOutput, status_code=status.HTTP_201_CREATED)
async def create_conversation(
    data: CreateConversationInput,
    container: DIContainer = Depends(get_container),
) -> ConversationOutput:
    logger.info(f"Creating conversation in project {data.project_id}")
    return await container.create_conversation_use_case().execute(data)


@router.get("/{id}", response_model=ConversationOutput)
async def get_conversation(
    id: str, container: DIContainer = Depends(get_container)
) -> ConversationOutput:
    if is_uuid(id):
        return await container.get_conversation_use_case().execute(id)
    return await container.get_conversation_by_slug_use_case().execute(id)


@router.put("/{id}", response_model=ConversationOutput)
async def update_conversation(
    id: str,
    data: UpdateConversationRequest,
    container: DIContainer = Depends(get_container),
) -> ConversationOutput:
    conversation_id = await _resolve_id(container, id)
    return await container.update_conversation_use_case().execute(
        UpdateConversationInput(id=conversation_id, **data.model_dump())
    )


@router.delete("/{id}")
async def delete_conversation(
    id: str, container: DIContainer = Depends(get_container)
) -> dict[str, bool]:
    conversation_id = await _resolve_id(container, id)
    await container.delete_conversation_use_case().execute(conversation_id)
    return {"success": True}


@router.get("/{slug}/messages", response_model=list[MessageOutput])
async def list_conversation_messages(
    slug: str, container: DIContainer = Depends(get_container)
) -> list[MessageOutput]:
    query = (
        ListMessagesInput(conversation_id=slug)
        if is_uuid(slug)
        else ListMessagesInput(conversation_slug=slug)
    )
    return await container.list_messages_by_conversation_use_case().execute(query)


@router.post(
    "/{slug}/messages", response_model=MessageOutput, status_code=status.HTTP_201_CREATED
)
async def create_conversation_message(
    slug: str,
    data: CreateMessageRequest,
    container: DIContainer = Depends(get_container),
) -> MessageOutput:
    target = {"conversation_id": slug} if is_uuid(slug) else {"conversation_slug": slug}
    return await container.create_message_use_case().execute(
        CreateMessageInput(**data.model_dump(), **target)
    )
