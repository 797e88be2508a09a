import logging

from qwery.application.schemas.message import CreateMessageInput, MessageOutput
from qwery.application.use_cases.message.conversation_lookup import resolve_conversation
from qwery.domain.model.agent.message import Message
from qwery.domain.ports.repositories.conversation_repository import ConversationRepository
from qwery.domain.ports.repositories.message_repository import MessageRepository

logger = logging.getLogger(__name__)


class CreateMessageUseCase:
    def __init__(
        self,
        message_repository: MessageRepository,
        conversation_repository: ConversationRepository,
    ) -> None:
        self._message_repo = message_repository
        self._conversation_repo = conversation_repository

    async def execute(self, command: CreateMessageInput) -> MessageOutput:
        conversation = await resolve_conversation(
            self._conversation_repo,
            conversation_id=command.conversation_id,
            conversation_slug=command.conversation_slug,
        )
        message = Message.create(
            conversation_id=conversation.id,
            content=command.content,
            role=command.role,
            created_by=command.created_by,
            metadata=command.metadata,
            message_id=command.id,
        )
        message = await self._message_repo.create(message)
        logger.debug(f"Stored {message.role.value} message {message.id} in {conversation.id}")
        return MessageOutput.from_domain(message)
