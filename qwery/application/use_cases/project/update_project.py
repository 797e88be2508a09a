from qwery.application.schemas.project import ProjectOutput, UpdateProjectInput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.project_repository import ProjectRepository


class UpdateProjectUseCase:
    def __init__(self, project_repository: ProjectRepository) -> None:
        self._project_repo = project_repository

    async def execute(self, command: UpdateProjectInput) -> ProjectOutput:
        project = await self._project_repo.find_by_id(command.id)
        if project is None:
            raise not_found(Code.PROJECT_NOT_FOUND_ERROR, "Project", command.id)
        project.update(
            name=command.name,
            description=command.description,
            status=command.status,
            updated_by=command.updated_by,
        )
        return ProjectOutput.from_domain(await self._project_repo.update(project))
