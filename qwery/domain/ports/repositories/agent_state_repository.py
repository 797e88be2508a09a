from abc import ABC, abstractmethod

from qwery.domain.model.agent.state_snapshot import AgentStateSnapshot


class AgentStateRepository(ABC):
    """Stores the latest agent state snapshot of each conversation."""

    @abstractmethod
    async def save(self, snapshot: AgentStateSnapshot) -> None:
        """Insert or replace the snapshot of ``snapshot.conversation_id``."""

    @abstractmethod
    async def find_by_conversation_id(self, conversation_id: str) -> AgentStateSnapshot | None:
        """Load the snapshot of a conversation"""

    @abstractmethod
    async def delete(self, conversation_id: str) -> bool:
        """Drop the snapshot of a conversation"""
