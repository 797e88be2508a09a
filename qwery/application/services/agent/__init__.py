from qwery.application.services.agent.agent_factory import AgentFactory
from qwery.application.services.agent.agent_runner import (
    AgentConstructor,
    AgentRunner,
    AgentRunResult,
)
from qwery.application.services.agent.conversation_title_service import (
    ConversationTitleService,
)
from qwery.application.services.agent.message_persistence_service import (
    MessagePersistenceService,
)
from qwery.application.services.agent.state_persistence_service import (
    StatePersistenceService,
)

__all__ = [
    "AgentConstructor",
    "AgentFactory",
    "AgentRunResult",
    "AgentRunner",
    "ConversationTitleService",
    "MessagePersistenceService",
    "StatePersistenceService",
]
