"""
Chat endpoint.

Streams the agent reply as Server-Sent Events::

    data: {"type": "text-delta", "delta": "..."}
    ...
    data: [DONE]
"""

import asyncio
import json
import logging
from collections.abc import AsyncIterator
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from qwery.application.schemas.conversation import UpdateConversationInput
from qwery.application.schemas.message import ListMessagesInput, UIMessageInput
from qwery.application.services.agent import ConversationTitleService
from qwery.configuration.di_container import DIContainer
from qwery.domain.exceptions.code import Code
from qwery.domain.model.agent.conversation import DEFAULT_CONVERSATION_TITLE
from qwery.domain.model.agent.message import MessageRole
from qwery.domain.shared_kernel import DomainException
from qwery.infrastructure.adapters.primary.web.dependencies import (
    get_agent_registry,
    get_container,
    get_session_factory,
)
from qwery.infrastructure.agent.agent_registry import AgentRegistry
from qwery.infrastructure.agent.factory_agent import FactoryAgent
from qwery.infrastructure.agent.ui_messages import UIMessage, ui_message_text

router = APIRouter(prefix="/api/chat", tags=["chat"])
logger = logging.getLogger(__name__)

# Strong references to fire-and-forget tasks until they finish
_background_tasks: set[asyncio.Task[None]] = set()


class ChatRequest(BaseModel):
    messages: list[UIMessageInput] = Field(default_factory=list)


def _sse(payload: dict[str, Any] | str) -> str:
    data = payload if isinstance(payload, str) else json.dumps(payload)
    return f"data: {data}\n\n"


async def chat_event_stream(agent: FactoryAgent, messages: list[UIMessage]) -> AsyncIterator[str]:
    try:
        async for chunk in agent.respond(messages):
            yield _sse({"type": "text-delta", "delta": chunk})
    except Exception as e:
        logger.error(f"[Chat:{agent.conversation_slug}] stream failed: {e}")
        yield _sse({"type": "error", "error": str(e)})
    yield _sse("[DONE]")


async def generate_conversation_title(
    title_service: ConversationTitleService,
    session_factory: async_sessionmaker[AsyncSession],
    conversation_id: str,
    user_text: str,
    updated_by: str,
) -> None:
    title = await title_service.generate(user_text)
    if not title or title == DEFAULT_CONVERSATION_TITLE:
        return
    try:
        async with session_factory() as session:
            await DIContainer(db=session).update_conversation_use_case().execute(
                UpdateConversationInput(id=conversation_id, title=title, updated_by=updated_by)
            )
        logger.info(f"Conversation {conversation_id} titled '{title}'")
    except Exception as e:
        logger.error(f"Failed to update title of conversation {conversation_id}: {e}")


def _schedule(coro: Any) -> None:
    task = asyncio.create_task(coro)
    _background_tasks.add(task)
    task.add_done_callback(_background_tasks.discard)


@router.post("/{slug}")
async def chat(
    slug: str,
    body: ChatRequest,
    container: DIContainer = Depends(get_container),
    registry: AgentRegistry = Depends(get_agent_registry),
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> StreamingResponse:
    if not body.messages:
        raise DomainException.new(Code.BAD_REQUEST_ERROR, override_message="messages must not be empty")

    messages = [m.to_ui_message() for m in body.messages]
    conversation = await container.get_conversation_by_slug_use_case().execute(slug)

    if conversation.title == DEFAULT_CONVERSATION_TITLE:
        stored = await container.list_messages_by_conversation_use_case().execute(
            ListMessagesInput(conversation_slug=slug)
        )
        first_user = next((m for m in messages if m["role"] == "user"), None)
        user_text = ui_message_text(first_user) if first_user else ""
        if user_text and not any(m.role == MessageRole.USER for m in stored):
            _schedule(
                generate_conversation_title(
                    container.conversation_title_service(),
                    session_factory,
                    conversation.id,
                    user_text,
                    conversation.created_by,
                )
            )

    agent = await registry.get_or_create(slug)
    return StreamingResponse(
        chat_event_stream(agent, messages),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
