from qwery.application.schemas.message import ListMessagesInput, MessageOutput
from qwery.application.use_cases.message.conversation_lookup import resolve_conversation
from qwery.domain.ports.repositories.conversation_repository import ConversationRepository
from qwery.domain.ports.repositories.message_repository import MessageRepository


class ListMessagesByConversationUseCase:
    """Messages of a conversation, oldest first."""

    def __init__(
        self,
        message_repository: MessageRepository,
        conversation_repository: ConversationRepository,
    ) -> None:
        self._message_repo = message_repository
        self._conversation_repo = conversation_repository

    async def execute(self, query: ListMessagesInput) -> list[MessageOutput]:
        conversation = await resolve_conversation(
            self._conversation_repo,
            conversation_id=query.conversation_id,
            conversation_slug=query.conversation_slug,
        )
        messages = await self._message_repo.find_by_conversation_id(conversation.id)
        return [MessageOutput.from_domain(m) for m in messages]
