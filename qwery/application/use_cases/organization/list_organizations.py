from qwery.application.schemas.organization import OrganizationOutput
from qwery.domain.ports.repositories.base import FindOptions
from qwery.domain.ports.repositories.organization_repository import OrganizationRepository


class ListOrganizationsUseCase:
    def __init__(self, organization_repository: OrganizationRepository) -> None:
        self._organization_repo = organization_repository

    async def execute(self, options: FindOptions | None = None) -> list[OrganizationOutput]:
        organizations = await self._organization_repo.find_all(options)
        return [OrganizationOutput.from_domain(o) for o in organizations]
