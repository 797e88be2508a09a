from dataclasses import dataclass, field
from typing import Any

from qwery.domain.model.agent.state_machine import PhaseId
from qwery.domain.shared_kernel import Entity


@dataclass(kw_only=True, eq=False)
class AgentSession(Entity):
    """
    Persisted position of an agent inside a state machine.

    ``agent_id`` names the agent ("agent.coder"), ``fsm_id`` the machine
    definition ("fsm.coder.v1") and ``phase`` the current phase in it.
    """

    agent_id: str
    fsm_id: str
    phase: PhaseId
    task_id: str
    retry_count: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def session_id(self) -> str:
        return self.id
