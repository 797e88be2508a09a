"""User data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from qwery.application.schemas.common import not_empty
from qwery.domain.model.user import Roles, User


class UserOutput(BaseModel):
    id: str
    username: str
    role: Roles
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserOutput":
        return cls(
            id=user.id,
            username=user.username,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class CreateUserInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    role: Roles | None = None

    @field_validator("username")
    @classmethod
    def must_not_be_empty(cls, v: str) -> str:
        return not_empty(v)


class UpdateUserRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str | None = None
    role: Roles | None = None

    @field_validator("username")
    @classmethod
    def must_not_be_empty(cls, v: str | None) -> str | None:
        return not_empty(v)


class UpdateUserInput(UpdateUserRequest):
    id: str
