from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.notebook_repository import NotebookRepository


class DeleteNotebookUseCase:
    def __init__(self, notebook_repository: NotebookRepository) -> None:
        self._notebook_repo = notebook_repository

    async def execute(self, notebook_id: str) -> bool:
        if await self._notebook_repo.find_by_id(notebook_id) is None:
            raise not_found(Code.NOTEBOOK_NOT_FOUND_ERROR, "Notebook", notebook_id)
        return await self._notebook_repo.delete(notebook_id)
