from qwery.application.schemas.project import ProjectOutput
from qwery.domain.ports.repositories.base import FindOptions
from qwery.domain.ports.repositories.project_repository import ProjectRepository


class ListProjectsUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._project_repo = project_repository

    async def execute(self, options: FindOptions | None = None) -> list[ProjectOutput]:
        return [ProjectOutput.from_domain(p) for p in await self._project_repo.find_all(options)]


class ListProjectsByOrganizationUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._project_repo = project_repository

    async def execute(self, org_id: str) -> list[ProjectOutput]:
        if not org_id:
            raise ValueError("org_id is required")
        projects = await self._project_repo.find_by_org_id(org_id)
        return [ProjectOutput.from_domain(p) for p in projects]
