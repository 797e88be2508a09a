from qwery.application.schemas.organization import OrganizationOutput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.organization_repository import OrganizationRepository


class GetOrganizationUseCase:
    def __init__(self, organization_repository: OrganizationRepository) -> None:
        self._organization_repo = organization_repository

    async def execute(self, organization_id: str) -> OrganizationOutput:
        organization = await self._organization_repo.find_by_id(organization_id)
        if organization is None:
            raise not_found(Code.ORGANIZATION_NOT_FOUND_ERROR, "Organization", organization_id)
        return OrganizationOutput.from_domain(organization)


class GetOrganizationBySlugUseCase:
    def __init__(self, organization_repository: OrganizationRepository) -> None:
        self._organization_repo = organization_repository

    async def execute(self, slug: str) -> OrganizationOutput:
        organization = await self._organization_repo.find_by_slug(slug)
        if organization is None:
            raise not_found(Code.ORGANIZATION_NOT_FOUND_ERROR, "Organization", slug, key="slug")
        return OrganizationOutput.from_domain(organization)
