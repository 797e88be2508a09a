import logging

from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.project_repository import ProjectRepository

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._project_repo = project_repository

    async def execute(self, project_id: str) -> bool:
        if await self._project_repo.find_by_id(project_id) is None:
            raise not_found(Code.PROJECT_NOT_FOUND_ERROR, "Project", project_id)
        deleted = await self._project_repo.delete(project_id)
        logger.info(f"Deleted project {project_id}")
        return deleted
