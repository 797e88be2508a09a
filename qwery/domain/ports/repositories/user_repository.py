from abc import abstractmethod

from qwery.domain.model.user import User
from qwery.domain.ports.repositories.base import RepositoryPort


class UserRepository(RepositoryPort[User]):
    """Repository interface for User entity"""

    @abstractmethod
    async def find_by_username(self, username: str) -> User | None:
        """Find a user by username"""
