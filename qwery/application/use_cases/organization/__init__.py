from qwery.application.use_cases.organization.create_organization import (
    CreateOrganizationUseCase,
)
from qwery.application.use_cases.organization.delete_organization import (
    DeleteOrganizationUseCase,
)
from qwery.application.use_cases.organization.get_organization import (
    GetOrganizationBySlugUseCase,
    GetOrganizationUseCase,
)
from qwery.application.use_cases.organization.list_organizations import (
    ListOrganizationsUseCase,
)
from qwery.application.use_cases.organization.update_organization import (
    UpdateOrganizationUseCase,
)

__all__ = [
    "CreateOrganizationUseCase",
    "DeleteOrganizationUseCase",
    "GetOrganizationBySlugUseCase",
    "GetOrganizationUseCase",
    "ListOrganizationsUseCase",
    "UpdateOrganizationUseCase",
]
