"""
Apply a command to an agent session.

The session's state machine definition decides the next phase. After the
new phase is persisted the side-effects port is notified, and notified once
more if the phase is terminal.
"""

import logging

from qwery.application.schemas.agent import (
    AgentSessionOutput,
    ApplyAgentCommandInput,
    ApplyAgentCommandOutput,
)
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.agent.agent_side_effects import AgentSideEffectsPort
from qwery.domain.ports.repositories.agent_session_repository import AgentSessionRepository
from qwery.domain.ports.repositories.state_machine_repository import StateMachineRepository
from qwery.domain.shared_kernel import DomainException

logger = logging.getLogger(__name__)


class ApplyAgentCommandUseCase:
    def __init__(
        self,
        agent_session_repository: AgentSessionRepository,
        state_machine_repository: StateMachineRepository,
        side_effects: AgentSideEffectsPort,
    ) -> None:
        self._session_repo = agent_session_repository
        self._fsm_repo = state_machine_repository
        self._side_effects = side_effects

    async def execute(self, command: ApplyAgentCommandInput) -> ApplyAgentCommandOutput:
        session = await self._session_repo.find_by_id(command.session_id)
        if session is None:
            raise DomainException.new(
                Code.AGENT_SESSION_NOT_FOUND_ERROR,
                override_message=f"Agent session with id '{command.session_id}' not found",
                data={"session_id": command.session_id},
            )

        fsm = await self._fsm_repo.find_by_id(session.fsm_id)
        if fsm is None:
            raise DomainException.new(
                Code.STATE_MACHINE_NOT_FOUND_ERROR,
                override_message=f"State machine with id '{session.fsm_id}' not found",
                data={"fsm_id": session.fsm_id},
            )

        transition = fsm.find_transition(session.phase, command.command)
        if transition is None:
            raise DomainException.new(
                Code.INVALID_STATE_TRANSITION_ERROR,
                override_message=(
                    f"No transition found from phase '{session.phase}' "
                    f"with command '{command.command}'"
                ),
                data={"phase": session.phase, "command": command.command},
            )

        from_phase = session.phase
        session.phase = transition.to_phase
        session = await self._session_repo.update(session)
        logger.info(
            f"Agent session {session.id}: {from_phase} --{command.command}--> {session.phase}"
        )

        await self._side_effects.on_transition(
            session, from_phase, transition.to_phase, command.command
        )
        is_terminal = fsm.is_terminal(transition.to_phase)
        if is_terminal:
            await self._side_effects.on_terminal_state(session, transition.to_phase)

        return ApplyAgentCommandOutput(
            session=AgentSessionOutput.from_domain(session),
            is_terminal=is_terminal,
        )
