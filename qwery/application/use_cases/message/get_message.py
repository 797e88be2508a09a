from qwery.application.schemas.message import MessageOutput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.message_repository import MessageRepository


class GetMessageUseCase:
    def __init__(self, message_repository: MessageRepository) -> None:
        self._message_repo = message_repository

    async def execute(self, message_id: str) -> MessageOutput:
        message = await self._message_repo.find_by_id(message_id)
        if message is None:
            raise not_found(Code.MESSAGE_NOT_FOUND_ERROR, "Message", message_id)
        return MessageOutput.from_domain(message)
