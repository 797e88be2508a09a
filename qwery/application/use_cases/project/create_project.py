"""
Use case for creating a project inside an organization.
"""

import logging

from qwery.application.schemas.project import CreateProjectInput, ProjectOutput
from qwery.domain.model.project import Project
from qwery.domain.ports.repositories.project_repository import ProjectRepository

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._project_repo = project_repository

    async def execute(self, command: CreateProjectInput) -> ProjectOutput:
        project = Project.create(
            org_id=command.org_id,
            name=command.name,
            created_by=command.created_by,
            description=command.description,
        )
        project = await self._project_repo.create(project)
        logger.info(f"Created project {project.id} in organization {project.org_id}")
        return ProjectOutput.from_domain(project)
