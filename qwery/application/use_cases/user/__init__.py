from qwery.application.use_cases.user.create_user import CreateUserUseCase
from qwery.application.use_cases.user.delete_user import DeleteUserUseCase
from qwery.application.use_cases.user.get_user import GetUserUseCase
from qwery.application.use_cases.user.list_users import ListUsersUseCase
from qwery.application.use_cases.user.update_user import UpdateUserUseCase

__all__ = [
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
]
