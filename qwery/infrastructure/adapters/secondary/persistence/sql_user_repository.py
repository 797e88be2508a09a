"""SQLAlchemy implementation of UserRepository."""

import logging

from qwery.domain.model.user import Roles, User
from qwery.domain.ports.repositories.user_repository import UserRepository
from qwery.infrastructure.adapters.secondary.common.base_repository import BaseRepository
from qwery.infrastructure.adapters.secondary.persistence.models import User as DBUser

logger = logging.getLogger(__name__)


class SqlUserRepository(BaseRepository[User, DBUser], UserRepository):
    _model_class = DBUser
    _entity_name = "User"

    async def find_by_username(self, username: str) -> User | None:
        return await self.find_one(username=username)

    def _to_domain(self, db_user: DBUser | None) -> User | None:
        if db_user is None:
            return None
        return User(
            id=db_user.id,
            username=db_user.username,
            role=Roles(db_user.role),
            created_at=db_user.created_at,
            updated_at=db_user.updated_at,
        )

    def _to_db(self, domain_entity: User) -> DBUser:
        return DBUser(
            id=domain_entity.id,
            username=domain_entity.username,
            role=Roles(domain_entity.role).value,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
