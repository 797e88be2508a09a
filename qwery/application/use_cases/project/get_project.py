from qwery.application.schemas.project import ProjectOutput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.project_repository import ProjectRepository


class GetProjectUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._project_repo = project_repository

    async def execute(self, project_id: str) -> ProjectOutput:
        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            raise not_found(Code.PROJECT_NOT_FOUND_ERROR, "Project", project_id)
        return ProjectOutput.from_domain(project)


class GetProjectBySlugUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._project_repo = project_repository

    async def execute(self, slug: str) -> ProjectOutput:
        project = await self._project_repo.find_by_slug(slug)
        if project is None:
            raise not_found(Code.PROJECT_NOT_FOUND_ERROR, "Project", slug, key="slug")
        return ProjectOutput.from_domain(project)
