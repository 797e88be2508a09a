"""SQLAlchemy implementation of DatasourceRepository."""

import logging

from qwery.domain.model.datasource import Datasource, DatasourceKind
from qwery.domain.ports.repositories.base import FindOptions
from qwery.domain.ports.repositories.datasource_repository import DatasourceRepository
from qwery.infrastructure.adapters.secondary.common.base_repository import SluggedBaseRepository
from qwery.infrastructure.adapters.secondary.persistence.models import (
    Datasource as DBDatasource,
)

logger = logging.getLogger(__name__)


class SqlDatasourceRepository(
    SluggedBaseRepository[Datasource, DBDatasource], DatasourceRepository
):
    _model_class = DBDatasource
    _entity_name = "Datasource"

    async def find_by_project_id(self, project_id: str) -> list[Datasource]:
        return await self.find_many(FindOptions(order="asc"), project_id=project_id)

    def _to_domain(self, db_ds: DBDatasource | None) -> Datasource | None:
        if db_ds is None:
            return None
        return Datasource(
            id=db_ds.id,
            project_id=db_ds.project_id,
            name=db_ds.name,
            description=db_ds.description or "",
            slug=db_ds.slug,
            datasource_provider=db_ds.datasource_provider,
            datasource_driver=db_ds.datasource_driver,
            datasource_kind=DatasourceKind(db_ds.datasource_kind),
            config=dict(db_ds.config or {}),
            created_at=db_ds.created_at,
            updated_at=db_ds.updated_at,
            created_by=db_ds.created_by,
            updated_by=db_ds.updated_by,
        )

    def _to_db(self, domain_entity: Datasource) -> DBDatasource:
        return DBDatasource(
            id=domain_entity.id,
            project_id=domain_entity.project_id,
            name=domain_entity.name,
            description=domain_entity.description,
            slug=domain_entity.slug,
            datasource_provider=domain_entity.datasource_provider,
            datasource_driver=domain_entity.datasource_driver,
            datasource_kind=DatasourceKind(domain_entity.datasource_kind).value,
            config=dict(domain_entity.config),
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
            created_by=domain_entity.created_by,
            updated_by=domain_entity.updated_by,
        )
