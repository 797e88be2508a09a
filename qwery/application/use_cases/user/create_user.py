import logging

from qwery.application.schemas.user import CreateUserInput, UserOutput
from qwery.domain.model.user import Roles, User
from qwery.domain.ports.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    async def execute(self, command: CreateUserInput) -> UserOutput:
        """Create a user; the role defaults to ``Roles.USER``."""
        user = User.create(username=command.username, role=command.role or Roles.USER)
        user = await self._user_repo.create(user)
        logger.info(f"Created user {user.id} ({user.username})")
        return UserOutput.from_domain(user)
