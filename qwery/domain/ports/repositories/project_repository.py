from abc import abstractmethod

from qwery.domain.model.project import Project
from qwery.domain.ports.repositories.base import SluggedRepositoryPort


class ProjectRepository(SluggedRepositoryPort[Project]):
    """Repository interface for Project entity"""

    @abstractmethod
    async def find_by_org_id(self, org_id: str) -> list[Project]:
        """List all projects of an organization"""
