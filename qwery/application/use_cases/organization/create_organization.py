import logging

from qwery.application.schemas.organization import CreateOrganizationInput, OrganizationOutput
from qwery.domain.model.organization import Organization
from qwery.domain.ports.repositories.organization_repository import OrganizationRepository

logger = logging.getLogger(__name__)


class CreateOrganizationUseCase:
    def __init__(self, organization_repository: OrganizationRepository) -> None:
        self._organization_repo = organization_repository

    async def execute(self, command: CreateOrganizationInput) -> OrganizationOutput:
        organization = Organization.create(
            name=command.name,
            created_by=command.created_by,
            is_owner=command.is_owner,
        )
        organization = await self._organization_repo.create(organization)
        logger.info(f"Created organization {organization.id} ({organization.name})")
        return OrganizationOutput.from_domain(organization)
