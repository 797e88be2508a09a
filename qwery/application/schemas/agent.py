"""Agent session and state machine data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from qwery.application.schemas.common import not_empty
from qwery.domain.model.agent.agent_session import AgentSession
from qwery.domain.model.agent.state_machine import StateMachineDefinition, TransitionDefinition


class AgentSessionOutput(BaseModel):
    session_id: str
    agent_id: str
    fsm_id: str
    phase: str
    task_id: str
    retry_count: int
    metadata: dict[str, Any]

    @classmethod
    def from_domain(cls, session: AgentSession) -> "AgentSessionOutput":
        return cls(
            session_id=session.id,
            agent_id=session.agent_id,
            fsm_id=session.fsm_id,
            phase=session.phase,
            task_id=session.task_id,
            retry_count=session.retry_count,
            metadata=dict(session.metadata),
        )


class ApplyAgentCommandRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    command: str

    @field_validator("command")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        return not_empty(v)


class ApplyAgentCommandInput(ApplyAgentCommandRequest):
    session_id: str

    @field_validator("session_id")
    @classmethod
    def session_id_not_empty(cls, v: str) -> str:
        return not_empty(v)


class ApplyAgentCommandOutput(BaseModel):
    session: AgentSessionOutput
    is_terminal: bool


class CreateAgentSessionInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    agent_id: str
    fsm_id: str
    task_id: str
    session_id: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("agent_id", "fsm_id", "task_id")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        return not_empty(v)


class TransitionSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_phase: str = Field(alias="from")
    command: str
    to_phase: str = Field(alias="to")


class StateMachineSchema(BaseModel):
    """Declarative definition; doubles as registration input and output."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    initial_phase: str
    terminal_phases: list[str] = Field(default_factory=list)
    transitions: list[TransitionSchema] = Field(default_factory=list)

    @field_validator("id", "name", "initial_phase")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        return not_empty(v)

    @model_validator(mode="after")
    def transitions_are_unique(self) -> "StateMachineSchema":
        seen: set[tuple[str, str]] = set()
        for t in self.transitions:
            key = (t.from_phase, t.command)
            if key in seen:
                raise ValueError(f"duplicate transition from '{t.from_phase}' on '{t.command}'")
            seen.add(key)
        return self

    def to_domain(self) -> StateMachineDefinition:
        return StateMachineDefinition(
            id=self.id,
            name=self.name,
            initial_phase=self.initial_phase,
            terminal_phases=set(self.terminal_phases),
            transitions=[
                TransitionDefinition(
                    from_phase=t.from_phase, command=t.command, to_phase=t.to_phase
                )
                for t in self.transitions
            ],
        )

    @classmethod
    def from_domain(cls, fsm: StateMachineDefinition) -> "StateMachineSchema":
        return cls(
            id=fsm.id,
            name=fsm.name,
            initial_phase=fsm.initial_phase,
            terminal_phases=sorted(fsm.terminal_phases),
            transitions=[
                TransitionSchema(from_phase=t.from_phase, command=t.command, to_phase=t.to_phase)
                for t in fsm.transitions
            ],
        )
