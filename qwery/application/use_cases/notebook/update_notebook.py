from qwery.application.schemas.notebook import NotebookOutput, UpdateNotebookInput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.notebook_repository import NotebookRepository


class UpdateNotebookUseCase:
    def __init__(self, notebook_repository: NotebookRepository) -> None:
        self._notebook_repo = notebook_repository

    async def execute(self, command: UpdateNotebookInput) -> NotebookOutput:
        """Apply the changes; every update bumps ``version`` by one."""
        notebook = await self._notebook_repo.find_by_id(command.id)
        if notebook is None:
            raise not_found(Code.NOTEBOOK_NOT_FOUND_ERROR, "Notebook", command.id)
        notebook.update(
            title=command.title,
            description=command.description,
            datasources=command.datasources,
            cells=None if command.cells is None else [c.to_domain() for c in command.cells],
            updated_by=command.updated_by,
        )
        return NotebookOutput.from_domain(await self._notebook_repo.update(notebook))
