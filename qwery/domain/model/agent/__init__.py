from qwery.domain.model.agent.agent_session import AgentSession
from qwery.domain.model.agent.conversation import DEFAULT_CONVERSATION_TITLE, Conversation
from qwery.domain.model.agent.message import Message, MessageRole
from qwery.domain.model.agent.state_machine import (
    AgentResult,
    CommandId,
    PhaseId,
    StateData,
    StateMachineDefinition,
    TransitionDefinition,
)
from qwery.domain.model.agent.state_snapshot import AgentStateSnapshot
from qwery.domain.model.agent.tool import Tool, ToolHandler

__all__ = [
    "AgentResult",
    "AgentSession",
    "AgentStateSnapshot",
    "CommandId",
    "Conversation",
    "DEFAULT_CONVERSATION_TITLE",
    "Message",
    "MessageRole",
    "PhaseId",
    "StateData",
    "StateMachineDefinition",
    "Tool",
    "ToolHandler",
    "TransitionDefinition",
]
