import logging

from qwery.domain.model.agent.state_snapshot import AgentStateSnapshot
from qwery.domain.ports.repositories.agent_state_repository import AgentStateRepository

logger = logging.getLogger(__name__)


class StatePersistenceService:
    """
    Best-effort storage of the conversational agent's state.

    Failures are logged and swallowed: losing a snapshot only means the
    agent starts from ``idle`` next time.
    """

    def __init__(self, agent_state_repository: AgentStateRepository) -> None:
        self._repo = agent_state_repository

    async def persist_state(self, conversation_id: str, snapshot: AgentStateSnapshot) -> None:
        try:
            snapshot.conversation_id = conversation_id
            await self._repo.save(snapshot)
        except Exception as e:
            logger.error(f"Failed to persist agent state for {conversation_id}: {e}")

    async def load_persisted_state(self, conversation_id: str) -> AgentStateSnapshot | None:
        try:
            return await self._repo.find_by_conversation_id(conversation_id)
        except Exception as e:
            logger.error(f"Failed to load agent state for {conversation_id}: {e}")
            return None
