"""SQLAlchemy implementation of StateMachineRepository.

Terminal phases are persisted as a sorted JSON list, transitions as a list
of ``{"from", "command", "to"}`` objects.
"""

import logging

from qwery.domain.model.agent.state_machine import StateMachineDefinition, TransitionDefinition
from qwery.domain.ports.repositories.state_machine_repository import StateMachineRepository
from qwery.infrastructure.adapters.secondary.common.base_repository import BaseRepository
from qwery.infrastructure.adapters.secondary.persistence.models import (
    StateMachine as DBStateMachine,
)

logger = logging.getLogger(__name__)


class SqlStateMachineRepository(
    BaseRepository[StateMachineDefinition, DBStateMachine], StateMachineRepository
):
    _model_class = DBStateMachine
    _entity_name = "StateMachine"
    _default_order_column = "id"

    def _to_domain(self, db_fsm: DBStateMachine | None) -> StateMachineDefinition | None:
        if db_fsm is None:
            return None
        return StateMachineDefinition(
            id=db_fsm.id,
            name=db_fsm.name,
            initial_phase=db_fsm.initial_phase,
            terminal_phases=set(db_fsm.terminal_phases or []),
            transitions=[
                TransitionDefinition(
                    from_phase=t["from"], command=t["command"], to_phase=t["to"]
                )
                for t in db_fsm.transitions or []
            ],
        )

    def _to_db(self, domain_entity: StateMachineDefinition) -> DBStateMachine:
        return DBStateMachine(
            id=domain_entity.id,
            name=domain_entity.name,
            initial_phase=domain_entity.initial_phase,
            terminal_phases=sorted(domain_entity.terminal_phases),
            transitions=[
                {"from": t.from_phase, "command": t.command, "to": t.to_phase}
                for t in domain_entity.transitions
            ],
        )
