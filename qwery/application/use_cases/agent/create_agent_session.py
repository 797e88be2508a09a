import logging

from qwery.application.schemas.agent import AgentSessionOutput, CreateAgentSessionInput
from qwery.domain.exceptions.code import Code
from qwery.domain.model.agent.agent_session import AgentSession
from qwery.domain.ports.repositories.agent_session_repository import AgentSessionRepository
from qwery.domain.ports.repositories.state_machine_repository import StateMachineRepository
from qwery.domain.shared_kernel import DomainException

logger = logging.getLogger(__name__)


class CreateAgentSessionUseCase:
    """Start a session at the initial phase of its state machine."""

    def __init__(
        self,
        agent_session_repository: AgentSessionRepository,
        state_machine_repository: StateMachineRepository,
    ) -> None:
        self._session_repo = agent_session_repository
        self._fsm_repo = state_machine_repository

    async def execute(self, command: CreateAgentSessionInput) -> AgentSessionOutput:
        fsm = await self._fsm_repo.find_by_id(command.fsm_id)
        if fsm is None:
            raise DomainException.new(
                Code.STATE_MACHINE_NOT_FOUND_ERROR,
                override_message=f"State machine with id '{command.fsm_id}' not found",
                data={"fsm_id": command.fsm_id},
            )
        session = AgentSession(
            id=command.session_id or AgentSession.generate_id(),
            agent_id=command.agent_id,
            fsm_id=fsm.id,
            phase=fsm.initial_phase,
            task_id=command.task_id,
            metadata=dict(command.metadata),
        )
        session = await self._session_repo.create(session)
        logger.info(f"Created agent session {session.id} ({session.agent_id}) at {session.phase}")
        return AgentSessionOutput.from_domain(session)
