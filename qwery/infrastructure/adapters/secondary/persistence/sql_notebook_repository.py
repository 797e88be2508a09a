"""SQLAlchemy implementation of NotebookRepository.

Cells are stored as a JSON list of plain dicts (see ``Cell.to_dict``).
"""

import logging

from qwery.domain.model.notebook import Cell, Notebook
from qwery.domain.ports.repositories.base import FindOptions
from qwery.domain.ports.repositories.notebook_repository import NotebookRepository
from qwery.infrastructure.adapters.secondary.common.base_repository import SluggedBaseRepository
from qwery.infrastructure.adapters.secondary.persistence.models import Notebook as DBNotebook

logger = logging.getLogger(__name__)


class SqlNotebookRepository(SluggedBaseRepository[Notebook, DBNotebook], NotebookRepository):
    _model_class = DBNotebook
    _entity_name = "Notebook"

    async def find_by_project_id(self, project_id: str) -> list[Notebook]:
        return await self.find_many(FindOptions(order="asc"), project_id=project_id)

    def _to_domain(self, db_notebook: DBNotebook | None) -> Notebook | None:
        if db_notebook is None:
            return None
        return Notebook(
            id=db_notebook.id,
            project_id=db_notebook.project_id,
            title=db_notebook.title,
            description=db_notebook.description,
            slug=db_notebook.slug,
            version=db_notebook.version,
            datasources=list(db_notebook.datasources or []),
            cells=[Cell.from_dict(c) for c in db_notebook.cells or []],
            created_at=db_notebook.created_at,
            updated_at=db_notebook.updated_at,
            created_by=db_notebook.created_by,
            updated_by=db_notebook.updated_by,
        )

    def _to_db(self, domain_entity: Notebook) -> DBNotebook:
        return DBNotebook(
            id=domain_entity.id,
            project_id=domain_entity.project_id,
            title=domain_entity.title,
            description=domain_entity.description,
            slug=domain_entity.slug,
            version=domain_entity.version,
            datasources=list(domain_entity.datasources),
            cells=[cell.to_dict() for cell in domain_entity.cells],
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
            created_by=domain_entity.created_by,
            updated_by=domain_entity.updated_by,
        )
