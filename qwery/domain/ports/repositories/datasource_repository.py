from abc import abstractmethod

from qwery.domain.model.datasource import Datasource
from qwery.domain.ports.repositories.base import SluggedRepositoryPort


class DatasourceRepository(SluggedRepositoryPort[Datasource]):
    """Repository interface for Datasource entity"""

    @abstractmethod
    async def find_by_project_id(self, project_id: str) -> list[Datasource]:
        """List all datasources attached to a project"""
