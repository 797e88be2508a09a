from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from qwery.configuration.di_container import DIContainer
from qwery.domain.llm_providers.llm_types import LLMClient
from qwery.infrastructure.adapters.secondary.persistence.database import (
    async_session_factory,
    get_db,
)
from qwery.infrastructure.agent.agent_registry import AgentRegistry


def get_llm_client(request: Request) -> LLMClient:
    """Get the shared LLM client from app state."""
    return request.app.state.llm_client


def get_agent_registry(request: Request) -> AgentRegistry:
    """Get the conversational agent registry from app state."""
    return request.app.state.agent_registry


async def get_container(
    db: AsyncSession = Depends(get_db),
    llm: LLMClient = Depends(get_llm_client),
) -> DIContainer:
    return DIContainer(db=db, llm=llm)


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory for work that outlives the request (background tasks)."""
    return async_session_factory
