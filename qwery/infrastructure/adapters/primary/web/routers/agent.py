"""Agent session and state machine endpoints."""

import logging

from fastapi import APIRouter, Depends, status

from qwery.application.schemas.agent import (
    AgentSessionOutput,
    ApplyAgentCommandInput,
    ApplyAgentCommandOutput,
    ApplyAgentCommandRequest,
    CreateAgentSessionInput,
    StateMachineSchema,
)
from qwery.configuration.di_container import DIContainer
from qwery.infrastructure.adapters.primary.web.dependencies import get_container

router = APIRouter(prefix="/api/agent", tags=["agent"])
logger = logging.getLogger(__name__)


@router.post("/sessions", response_model=AgentSessionOutput, status_code=status.HTTP_201_CREATED)
async def create_agent_session(
    data: CreateAgentSessionInput,
    container: DIContainer = Depends(get_container),
) -> AgentSessionOutput:
    return await container.create_agent_session_use_case().execute(data)


@router.get("/sessions/{id}", response_model=AgentSessionOutput)
async def get_agent_session(
    id: str, container: DIContainer = Depends(get_container)
) -> AgentSessionOutput:
    return await container.get_agent_session_use_case().execute(id)


@router.post("/sessions/{id}/commands", response_model=ApplyAgentCommandOutput)
async def apply_agent_command(
    id: str,
    data: ApplyAgentCommandRequest,
    container: DIContainer = Depends(get_container),
) -> ApplyAgentCommandOutput:
    logger.info(f"Applying command {data.command} to agent session {id}")
    return await container.apply_agent_command_use_case().execute(
        ApplyAgentCommandInput(session_id=id, command=data.command)
    )


@router.post(
    "/state-machines", response_model=StateMachineSchema, status_code=status.HTTP_201_CREATED
)
async def register_state_machine(
    data: StateMachineSchema,
    container: DIContainer = Depends(get_container),
) -> StateMachineSchema:
    return await container.register_state_machine_use_case().execute(data)
