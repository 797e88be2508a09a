import logging

from qwery.domain.model.agent.agent_session import AgentSession
from qwery.domain.model.agent.state_machine import CommandId, PhaseId
from qwery.domain.ports.agent.agent_side_effects import AgentSideEffectsPort

logger = logging.getLogger(__name__)


class LoggingAgentSideEffects(AgentSideEffectsPort):
    """Side effects adapter that records agent session transitions in the log."""

    async def on_transition(
        self,
        session: AgentSession,
        from_phase: PhaseId,
        to_phase: PhaseId,
        command: CommandId,
    ) -> None:
        logger.info(
            f"[AgentSession:{session.session_id}] {from_phase} --{command}--> {to_phase} "
            f"(agent={session.agent_id}, task={session.task_id})"
        )

    async def on_terminal_state(self, session: AgentSession, phase: PhaseId) -> None:
        logger.info(f"[AgentSession:{session.session_id}] reached terminal phase {phase}")
