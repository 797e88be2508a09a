import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qwery.configuration.config import get_settings
from qwery.infrastructure.adapters.primary.web.middleware import configure_exception_handlers
from qwery.infrastructure.adapters.primary.web.routers import (
    agent,
    chat,
    conversations,
    datasources,
    messages,
    notebooks,
    organizations,
    projects,
    users,
)
from qwery.infrastructure.adapters.secondary.persistence.database import (
    async_session_factory,
    dispose_database,
    initialize_database,
)
from qwery.infrastructure.agent.agent_registry import AgentRegistry
from qwery.infrastructure.agent.agent_store import AgentStore
from qwery.infrastructure.agent.factory_agent import FactoryAgent
from qwery.infrastructure.agent.tools import SheetFetcher
from qwery.infrastructure.llm import create_litellm_client

logger = logging.getLogger(__name__)
settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

# LiteLLM installs its own handlers; keep its records out of the root logger
_litellm_loggers = ["LiteLLM", "LiteLLM Router", "LiteLLM Proxy"]
for _logger_name in _litellm_loggers:
    _litellm_logger = logging.getLogger(_logger_name)
    _litellm_logger.propagate = False


def _allowed_origins() -> list[str]:
    origins = settings.api_allowed_origins
    if isinstance(origins, str):
        return [o.strip() for o in origins.split(",") if o.strip()]
    return list(origins)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting Qwery server...")
    await initialize_database()

    if not settings.workspace:
        logger.warning("WORKSPACE is not set; data tools will fail until it is configured")

    await app.state.agent_registry.start()

    yield

    # Shutdown
    logger.info("Shutting down...")
    await app.state.agent_registry.stop()
    await dispose_database()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Qwery API",
        description="Data platform backend: workspace CRUD and conversational data agents.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.llm_client = create_litellm_client()
    store = AgentStore(async_session_factory)

    async def build_agent(slug: str) -> FactoryAgent:
        return await FactoryAgent.create(
            slug,
            store,
            app.state.llm_client,
            workspace=settings.workspace,
            max_steps=settings.agent_max_steps,
            fetcher=SheetFetcher(timeout=settings.sheet_fetch_timeout),
        )

    app.state.agent_registry = AgentRegistry(
        build_agent,
        inactivity_timeout=settings.agent_inactivity_timeout,
        cleanup_interval=settings.agent_cleanup_interval,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    configure_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "version": "0.1.0"}

    app.include_router(organizations.router)
    app.include_router(projects.router)
    app.include_router(users.router)
    app.include_router(datasources.router)
    app.include_router(notebooks.router)
    app.include_router(conversations.router)
    app.include_router(messages.router)
    app.include_router(chat.router)
    app.include_router(agent.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "qwery.infrastructure.adapters.primary.web.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )
