from abc import abstractmethod

from qwery.domain.model.agent.conversation import Conversation
from qwery.domain.ports.repositories.base import SluggedRepositoryPort


class ConversationRepository(SluggedRepositoryPort[Conversation]):
    """Repository interface for Conversation entity"""

    @abstractmethod
    async def find_by_project_id(self, project_id: str) -> list[Conversation]:
        """List conversations of a project, newest first"""

    @abstractmethod
    async def find_by_task_id(self, task_id: str) -> list[Conversation]:
        """List conversations spawned for a task"""
