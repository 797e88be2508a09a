from qwery.application.schemas.notebook import NotebookOutput
from qwery.domain.ports.repositories.notebook_repository import NotebookRepository


class ListNotebooksByProjectUseCase:
    def __init__(self, notebook_repository: NotebookRepository) -> None:
        self._notebook_repo = notebook_repository

    async def execute(self, project_id: str) -> list[NotebookOutput]:
        if not project_id:
            raise ValueError("project_id is required")
        notebooks = await self._notebook_repo.find_by_project_id(project_id)
        return [NotebookOutput.from_domain(n) for n in notebooks]
