from qwery.domain.model.agent.state_machine import StateMachineDefinition
from qwery.domain.ports.repositories.base import RepositoryPort


class StateMachineRepository(RepositoryPort[StateMachineDefinition]):
    """Repository interface for state machine definitions"""
