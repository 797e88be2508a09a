"""Create conversation use case.

A conversation without an explicit title starts as "New Conversation"; the
chat endpoint replaces it with a generated title on the first user message.
"""

import logging

from qwery.application.schemas.conversation import ConversationOutput, CreateConversationInput
from qwery.domain.model.agent.conversation import Conversation
from qwery.domain.ports.repositories.conversation_repository import ConversationRepository

logger = logging.getLogger(__name__)


class CreateConversationUseCase:
    def __init__(self, conversation_repository: ConversationRepository) -> None:
        self._conversation_repo = conversation_repository

    async def execute(self, command: CreateConversationInput) -> ConversationOutput:
        conversation = Conversation.create(
            project_id=command.project_id,
            task_id=command.task_id,
            created_by=command.created_by,
            title=command.title,
            seed_message=command.seed_message,
            datasources=command.datasources,
            is_public=command.is_public,
            remixed_from=command.remixed_from,
        )
        conversation = await self._conversation_repo.create(conversation)
        logger.info(
            f"Created conversation {conversation.id} for project {conversation.project_id}"
        )
        return ConversationOutput.from_domain(conversation)
