"""
Persistence of UI chat messages.

A UI message is the structure the chat client exchanges:
``{"id", "role", "metadata", "parts": [{"type": "text", "text": ...}, ...]}``.
It is stored whole in ``Message.content`` so it can be restored verbatim.
"""

import json
import logging
from typing import Any

from qwery.application.schemas.message import CreateMessageInput
from qwery.application.use_cases.message.conversation_lookup import resolve_conversation
from qwery.application.use_cases.message.create_message import CreateMessageUseCase
from qwery.domain.model.agent.message import Message, MessageRole
from qwery.domain.ports.repositories.conversation_repository import ConversationRepository
from qwery.domain.ports.repositories.message_repository import MessageRepository

logger = logging.getLogger(__name__)

UIMessage = dict[str, Any]

_DUPLICATE_MARKERS = ("already exists", "UNIQUE constraint")


def ui_message_to_content(ui_message: UIMessage) -> dict[str, Any]:
    return {
        "id": ui_message.get("id"),
        "role": ui_message.get("role"),
        "metadata": ui_message.get("metadata"),
        "parts": ui_message.get("parts") or [],
    }


def map_ui_role(role: str | None) -> MessageRole:
    try:
        return MessageRole(role)
    except ValueError:
        return MessageRole.ASSISTANT


class MessagePersistenceService:
    def __init__(
        self,
        message_repository: MessageRepository,
        conversation_repository: ConversationRepository,
        conversation_slug: str,
    ) -> None:
        self._message_repo = message_repository
        self._conversation_repo = conversation_repository
        self._conversation_slug = conversation_slug

    async def persist_messages(
        self, messages: list[UIMessage], created_by: str = "agent"
    ) -> dict[str, list[Exception]]:
        """
        Store UI messages, skipping those already persisted in this conversation.

        UI message ids are client-chosen; an id already used by another
        conversation is stored under a fresh id, with the client id kept in
        the content.

        Returns:
            ``{"errors": [...]}``; empty when every message was stored or skipped
        """
        errors: list[Exception] = []
        try:
            conversation = await resolve_conversation(
                self._conversation_repo, conversation_slug=self._conversation_slug
            )
        except Exception as e:
            logger.warning(f"Cannot persist messages for {self._conversation_slug}: {e}")
            return {"errors": [e]}

        use_case = CreateMessageUseCase(self._message_repo, self._conversation_repo)
        known_ids = await self._known_message_ids(conversation.id)

        for ui_message in messages:
            message_id = ui_message.get("id")
            if message_id and message_id in known_ids:
                continue
            try:
                entity_id = message_id or None
                if entity_id and await self._message_repo.find_by_id(entity_id):
                    logger.info(
                        f"Message id {entity_id} belongs to another conversation; "
                        f"storing it under a new id in {conversation.id}"
                    )
                    entity_id = None
                await use_case.execute(
                    CreateMessageInput(
                        content=ui_message_to_content(ui_message),
                        role=map_ui_role(ui_message.get("role")),
                        created_by=created_by,
                        id=entity_id,
                        conversation_id=conversation.id,
                    )
                )
            except Exception as e:
                if any(marker in str(e) for marker in _DUPLICATE_MARKERS) and (
                    await self._stored_in(conversation.id, message_id)
                ):
                    continue
                logger.warning(f"Failed to persist message {message_id}: {e}")
                errors.append(e)
                continue
            if message_id:
                known_ids.add(message_id)

        return {"errors": errors}

    async def _known_message_ids(self, conversation_id: str) -> set[str]:
        ids: set[str] = set()
        for message in await self._message_repo.find_by_conversation_id(conversation_id):
            ids.add(message.id)
            if isinstance(message.content, dict) and message.content.get("id"):
                ids.add(str(message.content["id"]))
        return ids

    async def _stored_in(self, conversation_id: str, message_id: str | None) -> bool:
        # A concurrent writer may have stored the same message first
        if not message_id:
            return False
        return message_id in await self._known_message_ids(conversation_id)

    @staticmethod
    def convert_to_ui_messages(messages: list[Message]) -> list[UIMessage]:
        ui_messages = []
        for message in messages:
            content = message.content
            if (
                isinstance(content, dict)
                and isinstance(content.get("parts"), list)
                and "role" in content
            ):
                ui_messages.append(
                    {
                        "id": message.id,
                        "role": content["role"],
                        "metadata": content.get("metadata"),
                        "parts": content["parts"],
                    }
                )
                continue

            if isinstance(content, dict) and "text" in content:
                text = str(content["text"])
            elif isinstance(content, str):
                text = content
            else:
                text = json.dumps(content, default=str)
            ui_messages.append(
                {
                    "id": message.id,
                    "role": MessageRole(message.role).value,
                    "parts": [{"type": "text", "text": text}],
                }
            )
        return ui_messages
