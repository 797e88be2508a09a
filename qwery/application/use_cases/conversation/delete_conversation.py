import logging

from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.conversation_repository import ConversationRepository

logger = logging.getLogger(__name__)


class DeleteConversationUseCase:
    def __init__(self, conversation_repository: ConversationRepository) -> None:
        self._conversation_repo = conversation_repository

    async def execute(self, conversation_id: str) -> bool:
        if await self._conversation_repo.find_by_id(conversation_id) is None:
            raise not_found(Code.CONVERSATION_NOT_FOUND_ERROR, "Conversation", conversation_id)
        deleted = await self._conversation_repo.delete(conversation_id)
        logger.info(f"Deleted conversation {conversation_id}")
        return deleted
