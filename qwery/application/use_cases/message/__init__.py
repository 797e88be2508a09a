from qwery.application.use_cases.message.create_message import CreateMessageUseCase
from qwery.application.use_cases.message.delete_message import DeleteMessageUseCase
from qwery.application.use_cases.message.get_message import GetMessageUseCase
from qwery.application.use_cases.message.list_messages import ListMessagesByConversationUseCase
from qwery.application.use_cases.message.update_message import UpdateMessageUseCase

__all__ = [
    "CreateMessageUseCase",
    "DeleteMessageUseCase",
    "GetMessageUseCase",
    "ListMessagesByConversationUseCase",
    "UpdateMessageUseCase",
]
