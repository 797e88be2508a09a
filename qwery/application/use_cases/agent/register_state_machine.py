import logging

from qwery.application.schemas.agent import StateMachineSchema
from qwery.domain.ports.repositories.state_machine_repository import StateMachineRepository

logger = logging.getLogger(__name__)


class RegisterStateMachineUseCase:
    """Insert a state machine definition, replacing any with the same id."""

    def __init__(self, state_machine_repository: StateMachineRepository) -> None:
        self._fsm_repo = state_machine_repository

    async def execute(self, definition: StateMachineSchema) -> StateMachineSchema:
        fsm = definition.to_domain()
        if await self._fsm_repo.find_by_id(fsm.id) is None:
            fsm = await self._fsm_repo.create(fsm)
            logger.info(f"Registered state machine {fsm.id}")
        else:
            fsm = await self._fsm_repo.update(fsm)
            logger.info(f"Replaced state machine {fsm.id}")
        return StateMachineSchema.from_domain(fsm)
