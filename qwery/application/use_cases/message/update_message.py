from qwery.application.schemas.message import MessageOutput, UpdateMessageInput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.message_repository import MessageRepository


class UpdateMessageUseCase:
    def __init__(self, message_repository: MessageRepository) -> None:
        self._message_repo = message_repository

    async def execute(self, command: UpdateMessageInput) -> MessageOutput:
        message = await self._message_repo.find_by_id(command.id)
        if message is None:
            raise not_found(Code.MESSAGE_NOT_FOUND_ERROR, "Message", command.id)
        message.update(
            content=command.content,
            metadata=command.metadata,
            updated_by=command.updated_by,
        )
        return MessageOutput.from_domain(await self._message_repo.update(message))
