import logging

from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.organization_repository import OrganizationRepository

logger = logging.getLogger(__name__)


class DeleteOrganizationUseCase:
    def __init__(self, organization_repository: OrganizationRepository) -> None:
        self._organization_repo = organization_repository

    async def execute(self, organization_id: str) -> bool:
        organization = await self._organization_repo.find_by_id(organization_id)
        if organization is None:
            raise not_found(Code.ORGANIZATION_NOT_FOUND_ERROR, "Organization", organization_id)
        deleted = await self._organization_repo.delete(organization_id)
        logger.info(f"Deleted organization {organization_id}")
        return deleted
