from qwery.application.schemas.user import UserOutput
from qwery.domain.ports.repositories.base import FindOptions
from qwery.domain.ports.repositories.user_repository import UserRepository


class ListUsersUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    async def execute(self, options: FindOptions | None = None) -> list[UserOutput]:
        return [UserOutput.from_domain(u) for u in await self._user_repo.find_all(options)]
