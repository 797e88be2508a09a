from qwery.application.schemas.organization import OrganizationOutput, UpdateOrganizationInput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.organization_repository import OrganizationRepository


class UpdateOrganizationUseCase:
    def __init__(self, organization_repository: OrganizationRepository) -> None:
        self._organization_repo = organization_repository

    async def execute(self, command: UpdateOrganizationInput) -> OrganizationOutput:
        organization = await self._organization_repo.find_by_id(command.id)
        if organization is None:
            raise not_found(Code.ORGANIZATION_NOT_FOUND_ERROR, "Organization", command.id)
        organization.update(
            name=command.name,
            is_owner=command.is_owner,
            updated_by=command.updated_by,
        )
        organization = await self._organization_repo.update(organization)
        return OrganizationOutput.from_domain(organization)
