from qwery.domain.model.agent.agent_session import AgentSession
from qwery.domain.ports.repositories.base import RepositoryPort


class AgentSessionRepository(RepositoryPort[AgentSession]):
    """Repository interface for AgentSession entity"""
