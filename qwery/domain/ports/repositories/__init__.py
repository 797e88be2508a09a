from qwery.domain.ports.repositories.agent_session_repository import AgentSessionRepository
from qwery.domain.ports.repositories.agent_state_repository import AgentStateRepository
from qwery.domain.ports.repositories.base import FindOptions, RepositoryPort, SluggedRepositoryPort
from qwery.domain.ports.repositories.conversation_repository import ConversationRepository
from qwery.domain.ports.repositories.datasource_repository import DatasourceRepository
from qwery.domain.ports.repositories.message_repository import MessageRepository
from qwery.domain.ports.repositories.notebook_repository import NotebookRepository
from qwery.domain.ports.repositories.organization_repository import OrganizationRepository
from qwery.domain.ports.repositories.project_repository import ProjectRepository
from qwery.domain.ports.repositories.state_machine_repository import StateMachineRepository
from qwery.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "AgentSessionRepository",
    "AgentStateRepository",
    "ConversationRepository",
    "DatasourceRepository",
    "FindOptions",
    "MessageRepository",
    "NotebookRepository",
    "OrganizationRepository",
    "ProjectRepository",
    "RepositoryPort",
    "SluggedRepositoryPort",
    "StateMachineRepository",
    "UserRepository",
]
