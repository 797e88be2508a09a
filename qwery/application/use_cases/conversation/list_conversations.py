from qwery.application.schemas.conversation import ConversationOutput
from qwery.domain.ports.repositories.base import FindOptions
from qwery.domain.ports.repositories.conversation_repository import ConversationRepository


class ListConversationsUseCase:
    def __init__(self, conversation_repository: ConversationRepository) -> None:
        self._conversation_repo = conversation_repository

    async def execute(self, options: FindOptions | None = None) -> list[ConversationOutput]:
        conversations = await self._conversation_repo.find_all(options)
        return [ConversationOutput.from_domain(c) for c in conversations]


class ListConversationsByProjectUseCase:
    def __init__(self, conversation_repository: ConversationRepository) -> None:
        self._conversation_repo = conversation_repository

    async def execute(self, project_id: str) -> list[ConversationOutput]:
        if not project_id:
            raise ValueError("project_id is required")
        conversations = await self._conversation_repo.find_by_project_id(project_id)
        return [ConversationOutput.from_domain(c) for c in conversations]
