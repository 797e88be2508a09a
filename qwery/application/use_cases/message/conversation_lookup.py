from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.model.agent.conversation import Conversation
from qwery.domain.ports.repositories.conversation_repository import ConversationRepository


async def resolve_conversation(
    conversation_repo: ConversationRepository,
    conversation_id: str | None = None,
    conversation_slug: str | None = None,
) -> Conversation:
    """Find a conversation by id, falling back to its slug."""
    if conversation_id:
        conversation = await conversation_repo.find_by_id(conversation_id)
        if conversation is None:
            raise not_found(Code.CONVERSATION_NOT_FOUND_ERROR, "Conversation", conversation_id)
        return conversation
    conversation = await conversation_repo.find_by_slug(conversation_slug or "")
    if conversation is None:
        raise not_found(
            Code.CONVERSATION_NOT_FOUND_ERROR, "Conversation", conversation_slug or "", key="slug"
        )
    return conversation
