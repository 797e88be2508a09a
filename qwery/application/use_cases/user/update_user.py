from qwery.application.schemas.user import UpdateUserInput, UserOutput
from qwery.application.use_cases.common import not_found
from qwery.domain.exceptions.code import Code
from qwery.domain.ports.repositories.user_repository import UserRepository


class UpdateUserUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repo = user_repository

    async def execute(self, command: UpdateUserInput) -> UserOutput:
        user = await self._user_repo.find_by_id(command.id)
        if user is None:
            raise not_found(Code.USER_NOT_FOUND_ERROR, "User", command.id)
        user.update(username=command.username, role=command.role)
        return UserOutput.from_domain(await self._user_repo.update(user))
