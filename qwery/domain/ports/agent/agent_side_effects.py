from abc import ABC, abstractmethod

from qwery.domain.model.agent.agent_session import AgentSession
from qwery.domain.model.agent.state_machine import CommandId, PhaseId


class AgentSideEffectsPort(ABC):
    """Hooks invoked after an agent session changes phase."""

    @abstractmethod
    async def on_transition(
        self,
        session: AgentSession,
        from_phase: PhaseId,
        to_phase: PhaseId,
        command: CommandId,
    ) -> None:
        """Called after every successful transition."""

    @abstractmethod
    async def on_terminal_state(self, session: AgentSession, phase: PhaseId) -> None:
        """Called once the session reaches a terminal phase."""
