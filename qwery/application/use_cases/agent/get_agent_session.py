from qwery.application.schemas.agent import AgentSessionOutput
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.agent_session_repository import AgentSessionRepository
from qwery.domain.shared_kernel import DomainException


class GetAgentSessionUseCase:
    def __init__(self, agent_session_repository: AgentSessionRepository) -> None:
        self._session_repo = agent_session_repository

    async def execute(self, session_id: str) -> AgentSessionOutput:
        session = await self._session_repo.find_by_id(session_id)
        if session is None:
            raise DomainException.new(
                Code.AGENT_SESSION_NOT_FOUND_ERROR,
                override_message=f"Agent session with id '{session_id}' not found",
                data={"session_id": session_id},
            )
        return AgentSessionOutput.from_domain(session)
