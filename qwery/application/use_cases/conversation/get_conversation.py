from qwery.application.schemas.conversation import ConversationOutput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.conversation_repository import ConversationRepository


class GetConversationUseCase:
    def __init__(self, conversation_repository: ConversationRepository) -> None:
        self._conversation_repo = conversation_repository

    async def execute(self, conversation_id: str) -> ConversationOutput:
        conversation = await self._conversation_repo.find_by_id(conversation_id)
        if conversation is None:
            raise not_found(Code.CONVERSATION_NOT_FOUND_ERROR, "Conversation", conversation_id)
        return ConversationOutput.from_domain(conversation)


class GetConversationBySlugUseCase:
    def __init__(self, conversation_repository: ConversationRepository) -> None:
        self._conversation_repo = conversation_repository

    async def execute(self, slug: str) -> ConversationOutput:
        conversation = await self._conversation_repo.find_by_slug(slug)
        if conversation is None:
            raise not_found(Code.CONVERSATION_NOT_FOUND_ERROR, "Conversation", slug, key="slug")
        return ConversationOutput.from_domain(conversation)
