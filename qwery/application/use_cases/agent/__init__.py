from qwery.application.use_cases.agent.apply_agent_command import ApplyAgentCommandUseCase
from qwery.application.use_cases.agent.create_agent_session import CreateAgentSessionUseCase
from qwery.application.use_cases.agent.get_agent_session import GetAgentSessionUseCase
from qwery.application.use_cases.agent.register_state_machine import (
    RegisterStateMachineUseCase,
)

__all__ = [
    "ApplyAgentCommandUseCase",
    "CreateAgentSessionUseCase",
    "GetAgentSessionUseCase",
    "RegisterStateMachineUseCase",
]
