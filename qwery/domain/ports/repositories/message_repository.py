from abc import abstractmethod

from qwery.domain.model.agent.message import Message
from qwery.domain.ports.repositories.base import RepositoryPort


class MessageRepository(RepositoryPort[Message]):
    """Repository interface for Message entity"""

    @abstractmethod
    async def find_by_conversation_id(self, conversation_id: str) -> list[Message]:
        """List messages of a conversation in creation order"""
