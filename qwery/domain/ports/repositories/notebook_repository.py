from abc import abstractmethod

from qwery.domain.model.notebook import Notebook
from qwery.domain.ports.repositories.base import SluggedRepositoryPort


class NotebookRepository(SluggedRepositoryPort[Notebook]):
    """Repository interface for Notebook entity"""

    @abstractmethod
    async def find_by_project_id(self, project_id: str) -> list[Notebook]:
        """List all notebooks of a project"""
