from qwery.infrastructure.adapters.secondary.persistence.sql_agent_session_repository import (
    SqlAgentSessionRepository,
)
from qwery.infrastructure.adapters.secondary.persistence.sql_agent_state_repository import (
    SqlAgentStateRepository,
)
from qwery.infrastructure.adapters.secondary.persistence.sql_conversation_repository import (
    SqlConversationRepository,
)
from qwery.infrastructure.adapters.secondary.persistence.sql_datasource_repository import (
    SqlDatasourceRepository,
)
from qwery.infrastructure.adapters.secondary.persistence.sql_message_repository import (
    SqlMessageRepository,
)
from qwery.infrastructure.adapters.secondary.persistence.sql_notebook_repository import (
    SqlNotebookRepository,
)
from qwery.infrastructure.adapters.secondary.persistence.sql_organization_repository import (
    SqlOrganizationRepository,
)
from qwery.infrastructure.adapters.secondary.persistence.sql_project_repository import (
    SqlProjectRepository,
)
from qwery.infrastructure.adapters.secondary.persistence.sql_state_machine_repository import (
    SqlStateMachineRepository,
)
from qwery.infrastructure.adapters.secondary.persistence.sql_user_repository import (
    SqlUserRepository,
)

__all__ = [
    "SqlAgentSessionRepository",
    "SqlAgentStateRepository",
    "SqlConversationRepository",
    "SqlDatasourceRepository",
    "SqlMessageRepository",
    "SqlNotebookRepository",
    "SqlOrganizationRepository",
    "SqlProjectRepository",
    "SqlStateMachineRepository",
    "SqlUserRepository",
]
