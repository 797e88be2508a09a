from qwery.application.schemas.notebook import NotebookOutput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.notebook_repository import NotebookRepository


class GetNotebookUseCase:
    def __init__(self, notebook_repository: NotebookRepository) -> None:
        self._notebook_repo = notebook_repository

    async def execute(self, notebook_id: str) -> NotebookOutput:
        notebook = await self._notebook_repo.find_by_id(notebook_id)
        if notebook is None:
            raise not_found(Code.NOTEBOOK_NOT_FOUND_ERROR, "Notebook", notebook_id)
        return NotebookOutput.from_domain(notebook)


class GetNotebookBySlugUseCase:
    def __init__(self, notebook_repository: NotebookRepository) -> None:
        self._notebook_repo = notebook_repository

    async def execute(self, slug: str) -> NotebookOutput:
        notebook = await self._notebook_repo.find_by_slug(slug)
        if notebook is None:
            raise not_found(Code.NOTEBOOK_NOT_FOUND_ERROR, "Notebook", slug, key="slug")
        return NotebookOutput.from_domain(notebook)
