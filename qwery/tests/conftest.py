"""Pytest configuration and shared fixtures for testing."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from qwery.domain.llm_providers.llm_types import ChatResponse, LLMClient
from qwery.domain.model.agent.conversation import Conversation
from qwery.domain.model.organization import Organization
from qwery.domain.model.project import Project
from qwery.infrastructure.adapters.primary.web.dependencies import (
    get_agent_registry,
    get_llm_client,
    get_session_factory,
)
from qwery.infrastructure.adapters.primary.web.main import create_app
from qwery.infrastructure.adapters.secondary.persistence import (
    SqlAgentSessionRepository,
    SqlAgentStateRepository,
    SqlConversationRepository,
    SqlDatasourceRepository,
    SqlMessageRepository,
    SqlNotebookRepository,
    SqlOrganizationRepository,
    SqlProjectRepository,
    SqlStateMachineRepository,
    SqlUserRepository,
)
from qwery.infrastructure.adapters.secondary.persistence.database import (
    enable_sqlite_foreign_keys,
    get_db,
)
from qwery.infrastructure.adapters.secondary.persistence.models import Base

TEST_USER = "test-user"

# --- Database Fixtures ---


@pytest.fixture
async def test_engine():
    """In-memory database shared by every session of a test."""
    engine = enable_sqlite_foreign_keys(
        create_async_engine(
            "sqlite+aiosqlite:///:memory:",
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


# --- Repository Fixtures ---


@pytest.fixture
def organization_repo(test_db) -> SqlOrganizationRepository:
    return SqlOrganizationRepository(test_db)


@pytest.fixture
def project_repo(test_db) -> SqlProjectRepository:
    return SqlProjectRepository(test_db)


@pytest.fixture
def user_repo(test_db) -> SqlUserRepository:
    return SqlUserRepository(test_db)


@pytest.fixture
def datasource_repo(test_db) -> SqlDatasourceRepository:
    return SqlDatasourceRepository(test_db)


@pytest.fixture
def notebook_repo(test_db) -> SqlNotebookRepository:
    return SqlNotebookRepository(test_db)


@pytest.fixture
def conversation_repo(test_db) -> SqlConversationRepository:
    return SqlConversationRepository(test_db)


@pytest.fixture
def message_repo(test_db) -> SqlMessageRepository:
    return SqlMessageRepository(test_db)


@pytest.fixture
def agent_session_repo(test_db) -> SqlAgentSessionRepository:
    return SqlAgentSessionRepository(test_db)


@pytest.fixture
def state_machine_repo(test_db) -> SqlStateMachineRepository:
    return SqlStateMachineRepository(test_db)


@pytest.fixture
def agent_state_repo(test_db) -> SqlAgentStateRepository:
    return SqlAgentStateRepository(test_db)


# --- Seed Data ---


@pytest.fixture
async def test_organization(organization_repo) -> Organization:
    return await organization_repo.create(Organization.create(name="Acme", created_by=TEST_USER))


@pytest.fixture
async def test_project(project_repo, test_organization) -> Project:
    return await project_repo.create(
        Project.create(org_id=test_organization.id, name="Analytics", created_by=TEST_USER)
    )


@pytest.fixture
async def test_conversation(conversation_repo, test_project) -> Conversation:
    return await conversation_repo.create(
        Conversation.create(project_id=test_project.id, task_id="task-1", created_by=TEST_USER)
    )


# --- LLM Fixtures ---


@pytest.fixture
def mock_llm() -> MagicMock:
    """LLM port double; tests script ``generate``, ``ainvoke`` and ``generate_stream``."""
    llm = MagicMock(spec=LLMClient)
    llm.generate = AsyncMock(return_value={"content": "", "tool_calls": []})
    llm.ainvoke = AsyncMock(return_value=ChatResponse(content=""))
    return llm


# --- API Fixtures ---


@pytest.fixture
def agent_registry() -> MagicMock:
    registry = MagicMock()
    registry.get_or_create = AsyncMock()
    return registry


@pytest.fixture
def app(session_factory, mock_llm, agent_registry):
    application = create_app()

    async def override_get_db():
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_llm_client] = lambda: mock_llm
    application.dependency_overrides[get_session_factory] = lambda: session_factory
    application.dependency_overrides[get_agent_registry] = lambda: agent_registry
    return application


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
