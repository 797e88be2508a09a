from qwery.application.use_cases.conversation.create_conversation import (
    CreateConversationUseCase,
)
from qwery.application.use_cases.conversation.delete_conversation import (
    DeleteConversationUseCase,
)
from qwery.application.use_cases.conversation.get_conversation import (
    GetConversationBySlugUseCase,
    GetConversationUseCase,
)
from qwery.application.use_cases.conversation.list_conversations import (
    ListConversationsByProjectUseCase,
    ListConversationsUseCase,
)
from qwery.application.use_cases.conversation.update_conversation import (
    UpdateConversationUseCase,
)

__all__ = [
    "CreateConversationUseCase",
    "DeleteConversationUseCase",
    "GetConversationBySlugUseCase",
    "GetConversationUseCase",
    "ListConversationsByProjectUseCase",
    "ListConversationsUseCase",
    "UpdateConversationUseCase",
]
