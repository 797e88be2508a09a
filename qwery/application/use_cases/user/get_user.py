from qwery.application.schemas.user import UserOutput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.user_repository import UserRepository


class GetUserUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    async def execute(self, user_id: str) -> UserOutput:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise not_found(Code.USER_NOT_FOUND_ERROR, "User", user_id)
        return UserOutput.from_domain(user)
