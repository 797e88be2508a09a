"""Dependency Injection Container.

Builds repositories and use-cases around one ``AsyncSession``. Routers
create a container per request through ``get_container``.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from qwery.application.services.agent import ConversationTitleService
from qwery.application.use_cases.agent import (
    ApplyAgentCommandUseCase,
    CreateAgentSessionUseCase,
    GetAgentSessionUseCase,
    RegisterStateMachineUseCase,
)
from qwery.application.use_cases.conversation import (
    CreateConversationUseCase,
    DeleteConversationUseCase,
    GetConversationBySlugUseCase,
    GetConversationUseCase,
    ListConversationsByProjectUseCase,
    ListConversationsUseCase,
    UpdateConversationUseCase,
)
from qwery.application.use_cases.datasource import (
    CreateDatasourceUseCase,
    DeleteDatasourceUseCase,
    GetDatasourceBySlugUseCase,
    GetDatasourceUseCase,
    ListDatasourcesByProjectUseCase,
    ListDatasourcesUseCase,
    UpdateDatasourceUseCase,
)
from qwery.application.use_cases.message import (
    CreateMessageUseCase,
    DeleteMessageUseCase,
    GetMessageUseCase,
    ListMessagesByConversationUseCase,
    UpdateMessageUseCase,
)
from qwery.application.use_cases.notebook import (
    CreateNotebookUseCase,
    DeleteNotebookUseCase,
    GetNotebookBySlugUseCase,
    GetNotebookUseCase,
    ListNotebooksByProjectUseCase,
    UpdateNotebookUseCase,
)
from qwery.application.use_cases.organization import (
    CreateOrganizationUseCase,
    DeleteOrganizationUseCase,
    GetOrganizationBySlugUseCase,
    GetOrganizationUseCase,
    ListOrganizationsUseCase,
    UpdateOrganizationUseCase,
)
from qwery.application.use_cases.project import (
    CreateProjectUseCase,
    DeleteProjectUseCase,
    GetProjectBySlugUseCase,
    GetProjectUseCase,
    ListProjectsByOrganizationUseCase,
    ListProjectsUseCase,
    UpdateProjectUseCase,
)
from qwery.application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from qwery.configuration.config import Settings, get_settings
from qwery.domain.llm_providers.llm_types import LLMClient
from qwery.domain.ports.agent.agent_side_effects import AgentSideEffectsPort
from qwery.domain.ports.repositories.agent_session_repository import AgentSessionRepository
from qwery.domain.ports.repositories.conversation_repository import ConversationRepository
from qwery.domain.ports.repositories.datasource_repository import DatasourceRepository
from qwery.domain.ports.repositories.message_repository import MessageRepository
from qwery.domain.ports.repositories.notebook_repository import NotebookRepository
from qwery.domain.ports.repositories.organization_repository import OrganizationRepository
from qwery.domain.ports.repositories.project_repository import ProjectRepository
from qwery.domain.ports.repositories.state_machine_repository import StateMachineRepository
from qwery.domain.ports.repositories.user_repository import UserRepository
from qwery.infrastructure.adapters.secondary.persistence import (
    SqlAgentSessionRepository,
    SqlConversationRepository,
    SqlDatasourceRepository,
    SqlMessageRepository,
    SqlNotebookRepository,
    SqlOrganizationRepository,
    SqlProjectRepository,
    SqlStateMachineRepository,
    SqlUserRepository,
)
from qwery.infrastructure.agent.side_effects import LoggingAgentSideEffects


class DIContainer:
    def __init__(
        self,
        db: AsyncSession,
        llm: LLMClient | None = None,
        side_effects: AgentSideEffectsPort | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._db = db
        self._llm = llm
        self._side_effects = side_effects or LoggingAgentSideEffects()
        self._settings = settings or get_settings()

    # === Repositories ===

    def organization_repository(self) -> OrganizationRepository:
        return SqlOrganizationRepository(self._db)

    def project_repository(self) -> ProjectRepository:
        return SqlProjectRepository(self._db)

    def user_repository(self) -> UserRepository:
        return SqlUserRepository(self._db)

    def datasource_repository(self) -> DatasourceRepository:
        return SqlDatasourceRepository(self._db)

    def notebook_repository(self) -> NotebookRepository:
        return SqlNotebookRepository(self._db)

    def conversation_repository(self) -> ConversationRepository:
        return SqlConversationRepository(self._db)

    def message_repository(self) -> MessageRepository:
        return SqlMessageRepository(self._db)

    def agent_session_repository(self) -> AgentSessionRepository:
        return SqlAgentSessionRepository(self._db)

    def state_machine_repository(self) -> StateMachineRepository:
        return SqlStateMachineRepository(self._db)

    # === Organizations ===

    def create_organization_use_case(self) -> CreateOrganizationUseCase:
        return CreateOrganizationUseCase(self.organization_repository())

    def get_organization_use_case(self) -> GetOrganizationUseCase:
        return GetOrganizationUseCase(self.organization_repository())

    def get_organization_by_slug_use_case(self) -> GetOrganizationBySlugUseCase:
        return GetOrganizationBySlugUseCase(self.organization_repository())

    def list_organizations_use_case(self) -> ListOrganizationsUseCase:
        return ListOrganizationsUseCase(self.organization_repository())

    def update_organization_use_case(self) -> UpdateOrganizationUseCase:
        return UpdateOrganizationUseCase(self.organization_repository())

    def delete_organization_use_case(self) -> DeleteOrganizationUseCase:
        return DeleteOrganizationUseCase(self.organization_repository())

    # === Projects ===

    def create_project_use_case(self) -> CreateProjectUseCase:
        return CreateProjectUseCase(self.project_repository())

    def get_project_use_case(self) -> GetProjectUseCase:
        return GetProjectUseCase(self.project_repository())

    def get_project_by_slug_use_case(self) -> GetProjectBySlugUseCase:
        return GetProjectBySlugUseCase(self.project_repository())

    def list_projects_use_case(self) -> ListProjectsUseCase:
        return ListProjectsUseCase(self.project_repository())

    def list_projects_by_organization_use_case(self) -> ListProjectsByOrganizationUseCase:
        return ListProjectsByOrganizationUseCase(self.project_repository())

    def update_project_use_case(self) -> UpdateProjectUseCase:
        return UpdateProjectUseCase(self.project_repository())

    def delete_project_use_case(self) -> DeleteProjectUseCase:
        return DeleteProjectUseCase(self.project_repository())

    # === Users ===

    def create_user_use_case(self) -> CreateUserUseCase:
        return CreateUserUseCase(self.user_repository())

    def get_user_use_case(self) -> GetUserUseCase:
        return GetUserUseCase(self.user_repository())

    def list_users_use_case(self) -> ListUsersUseCase:
        return ListUsersUseCase(self.user_repository())

    def update_user_use_case(self) -> UpdateUserUseCase:
        return UpdateUserUseCase(self.user_repository())

    def delete_user_use_case(self) -> DeleteUserUseCase:
        return DeleteUserUseCase(self.user_repository())

    # === Datasources ===

    def create_datasource_use_case(self) -> CreateDatasourceUseCase:
        return CreateDatasourceUseCase(self.datasource_repository())

    def get_datasource_use_case(self) -> GetDatasourceUseCase:
        return GetDatasourceUseCase(self.datasource_repository())

    def get_datasource_by_slug_use_case(self) -> GetDatasourceBySlugUseCase:
        return GetDatasourceBySlugUseCase(self.datasource_repository())

    def list_datasources_use_case(self) -> ListDatasourcesUseCase:
        return ListDatasourcesUseCase(self.datasource_repository())

    def list_datasources_by_project_use_case(self) -> ListDatasourcesByProjectUseCase:
        return ListDatasourcesByProjectUseCase(self.datasource_repository())

    def update_datasource_use_case(self) -> UpdateDatasourceUseCase:
        return UpdateDatasourceUseCase(self.datasource_repository())

    def delete_datasource_use_case(self) -> DeleteDatasourceUseCase:
        return DeleteDatasourceUseCase(self.datasource_repository())

    # === Notebooks ===

    def create_notebook_use_case(self) -> CreateNotebookUseCase:
        return CreateNotebookUseCase(self.notebook_repository())

    def get_notebook_use_case(self) -> GetNotebookUseCase:
        return GetNotebookUseCase(self.notebook_repository())

    def get_notebook_by_slug_use_case(self) -> GetNotebookBySlugUseCase:
        return GetNotebookBySlugUseCase(self.notebook_repository())

    def list_notebooks_by_project_use_case(self) -> ListNotebooksByProjectUseCase:
        return ListNotebooksByProjectUseCase(self.notebook_repository())

    def update_notebook_use_case(self) -> UpdateNotebookUseCase:
        return UpdateNotebookUseCase(self.notebook_repository())

    def delete_notebook_use_case(self) -> DeleteNotebookUseCase:
        return DeleteNotebookUseCase(self.notebook_repository())

    # === Conversations and messages ===

    def create_conversation_use_case(self) -> CreateConversationUseCase:
        return CreateConversationUseCase(self.conversation_repository())

    def get_conversation_use_case(self) -> GetConversationUseCase:
        return GetConversationUseCase(self.conversation_repository())

    def get_conversation_by_slug_use_case(self) -> GetConversationBySlugUseCase:
        return GetConversationBySlugUseCase(self.conversation_repository())

    def list_conversations_use_case(self) -> ListConversationsUseCase:
        return ListConversationsUseCase(self.conversation_repository())

    def list_conversations_by_project_use_case(self) -> ListConversationsByProjectUseCase:
        return ListConversationsByProjectUseCase(self.conversation_repository())

    def update_conversation_use_case(self) -> UpdateConversationUseCase:
        return UpdateConversationUseCase(self.conversation_repository())

    def delete_conversation_use_case(self) -> DeleteConversationUseCase:
        return DeleteConversationUseCase(self.conversation_repository())

    def create_message_use_case(self) -> CreateMessageUseCase:
        return CreateMessageUseCase(self.message_repository(), self.conversation_repository())

    def get_message_use_case(self) -> GetMessageUseCase:
        return GetMessageUseCase(self.message_repository())

    def list_messages_by_conversation_use_case(self) -> ListMessagesByConversationUseCase:
        return ListMessagesByConversationUseCase(
            self.message_repository(), self.conversation_repository()
        )

    def update_message_use_case(self) -> UpdateMessageUseCase:
        return UpdateMessageUseCase(self.message_repository())

    def delete_message_use_case(self) -> DeleteMessageUseCase:
        return DeleteMessageUseCase(self.message_repository())

    # === Agent ===

    def create_agent_session_use_case(self) -> CreateAgentSessionUseCase:
        return CreateAgentSessionUseCase(
            self.agent_session_repository(), self.state_machine_repository()
        )

    def get_agent_session_use_case(self) -> GetAgentSessionUseCase:
        return GetAgentSessionUseCase(self.agent_session_repository())

    def apply_agent_command_use_case(self) -> ApplyAgentCommandUseCase:
        return ApplyAgentCommandUseCase(
            self.agent_session_repository(),
            self.state_machine_repository(),
            self._side_effects,
        )

    def register_state_machine_use_case(self) -> RegisterStateMachineUseCase:
        return RegisterStateMachineUseCase(self.state_machine_repository())

    def conversation_title_service(self) -> ConversationTitleService:
        if self._llm is None:
            raise RuntimeError("An LLM client is required for title generation")
        return ConversationTitleService(
            self._llm, timeout=self._settings.title_generation_timeout
        )
