from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.message_repository import MessageRepository


class DeleteMessageUseCase:
    def __init__(self, message_repository: MessageRepository) -> None:
        self._message_repo = message_repository

    async def execute(self, message_id: str) -> bool:
        if await self._message_repo.find_by_id(message_id) is None:
            raise not_found(Code.MESSAGE_NOT_FOUND_ERROR, "Message", message_id)
        return await self._message_repo.delete(message_id)
