"""SQLAlchemy implementation of OrganizationRepository."""

import logging

from qwery.domain.model.organization import Organization
from qwery.domain.ports.repositories.organization_repository import OrganizationRepository
from qwery.infrastructure.adapters.secondary.common.base_repository import SluggedBaseRepository
from qwery.infrastructure.adapters.secondary.persistence.models import (
    Organization as DBOrganization,
)

logger = logging.getLogger(__name__)


class SqlOrganizationRepository(
    SluggedBaseRepository[Organization, DBOrganization], OrganizationRepository
):
    _model_class = DBOrganization
    _entity_name = "Organization"

    def _to_domain(self, db_org: DBOrganization | None) -> Organization | None:
        if db_org is None:
            return None
        return Organization(
            id=db_org.id,
            name=db_org.name,
            slug=db_org.slug,
            is_owner=db_org.is_owner,
            created_at=db_org.created_at,
            updated_at=db_org.updated_at,
            created_by=db_org.created_by,
            updated_by=db_org.updated_by,
        )

    def _to_db(self, domain_entity: Organization) -> DBOrganization:
        return DBOrganization(
            id=domain_entity.id,
            name=domain_entity.name,
            slug=domain_entity.slug,
            is_owner=domain_entity.is_owner,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
            created_by=domain_entity.created_by,
            updated_by=domain_entity.updated_by,
        )

    def _update_fields(self, db_model: DBOrganization, domain_entity: Organization) -> None:
        db_model.name = domain_entity.name
        db_model.is_owner = domain_entity.is_owner
        db_model.updated_at = domain_entity.updated_at
        db_model.updated_by = domain_entity.updated_by
