from qwery.application.schemas.conversation import ConversationOutput, UpdateConversationInput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.conversation_repository import ConversationRepository


class UpdateConversationUseCase:
    def __init__(self, conversation_repository: ConversationRepository) -> None:
        self._conversation_repo = conversation_repository

    async def execute(self, command: UpdateConversationInput) -> ConversationOutput:
        conversation = await self._conversation_repo.find_by_id(command.id)
        if conversation is None:
            raise not_found(Code.CONVERSATION_NOT_FOUND_ERROR, "Conversation", command.id)
        conversation.update(
            title=command.title,
            datasources=command.datasources,
            is_public=command.is_public,
            updated_by=command.updated_by,
        )
        return ConversationOutput.from_domain(await self._conversation_repo.update(conversation))
