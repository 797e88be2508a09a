"""SQLAlchemy implementation of ProjectRepository."""

import logging

from qwery.domain.model.project import Project
from qwery.domain.ports.repositories.base import FindOptions
from qwery.domain.ports.repositories.project_repository import ProjectRepository
from qwery.infrastructure.adapters.secondary.common.base_repository import SluggedBaseRepository
from qwery.infrastructure.adapters.secondary.persistence.models import Project as DBProject

logger = logging.getLogger(__name__)


class SqlProjectRepository(SluggedBaseRepository[Project, DBProject], ProjectRepository):
    _model_class = DBProject
    _entity_name = "Project"

    async def find_by_org_id(self, org_id: str) -> list[Project]:
        """List all projects of an organization."""
        return await self.find_many(FindOptions(order="asc"), org_id=org_id)

    def _to_domain(self, db_project: DBProject | None) -> Project | None:
        if db_project is None:
            return None
        return Project(
            id=db_project.id,
            org_id=db_project.org_id,
            name=db_project.name,
            slug=db_project.slug,
            description=db_project.description,
            status=db_project.status,
            created_at=db_project.created_at,
            updated_at=db_project.updated_at,
            created_by=db_project.created_by,
            updated_by=db_project.updated_by,
        )

    def _to_db(self, domain_entity: Project) -> DBProject:
        return DBProject(
            id=domain_entity.id,
            org_id=domain_entity.org_id,
            name=domain_entity.name,
            slug=domain_entity.slug,
            description=domain_entity.description,
            status=domain_entity.status,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
            created_by=domain_entity.created_by,
            updated_by=domain_entity.updated_by,
        )
