import logging

from qwery.application.schemas.notebook import CreateNotebookInput, NotebookOutput
from qwery.domain.model.notebook import Notebook
from qwery.domain.ports.repositories.notebook_repository import NotebookRepository

logger = logging.getLogger(__name__)


class CreateNotebookUseCase:
    def __init__(self, notebook_repository: NotebookRepository) -> None:
        self._notebook_repo = notebook_repository

    async def execute(self, command: CreateNotebookInput) -> NotebookOutput:
        notebook = Notebook.create(
            project_id=command.project_id,
            title=command.title,
            created_by=command.created_by,
            description=command.description,
            datasources=command.datasources,
            cells=[cell.to_domain() for cell in command.cells],
        )
        notebook = await self._notebook_repo.create(notebook)
        logger.info(f"Created notebook {notebook.id} in project {notebook.project_id}")
        return NotebookOutput.from_domain(notebook)
