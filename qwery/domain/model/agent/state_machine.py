from dataclasses import dataclass, field
from typing import Any

from qwery.domain.shared_kernel import Entity

PhaseId = str
CommandId = str
StateData = dict[str, Any]


@dataclass(frozen=True)
class TransitionDefinition:
    """``(from_phase, command) -> to_phase``."""

    from_phase: PhaseId
    command: CommandId
    to_phase: PhaseId


@dataclass(kw_only=True, eq=False)
class StateMachineDefinition(Entity):
    """Declarative phase graph that agent sessions move through."""

    name: str
    initial_phase: PhaseId
    terminal_phases: set[PhaseId] = field(default_factory=set)
    transitions: list[TransitionDefinition] = field(default_factory=list)

    def find_transition(self, phase: PhaseId, command: CommandId) -> TransitionDefinition | None:
        for transition in self.transitions:
            if transition.from_phase == phase and transition.command == command:
                return transition
        return None

    def is_terminal(self, phase: PhaseId) -> bool:
        return phase in self.terminal_phases


@dataclass(frozen=True)
class AgentResult:
    """Outcome of one tool call made by an agent."""

    tool_call_id: str
    tool_name: str
    result: Any
    error: str | None = None
