from qwery.domain.model.organization import Organization
from qwery.domain.ports.repositories.base import SluggedRepositoryPort


class OrganizationRepository(SluggedRepositoryPort[Organization]):
    """Repository interface for Organization entity"""
