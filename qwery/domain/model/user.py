from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from qwery.domain.shared_kernel import Entity, utcnow


class Roles(str, Enum):
    ADMIN = "admin"
    USER = "user"


@dataclass(kw_only=True, eq=False)
class User(Entity):
    username: str
    role: Roles = Roles.USER
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

    @classmethod
    def create(cls, username: str, role: Roles | None = None) -> "User":
        now = utcnow()
        return cls(
            id=cls.generate_id(),
            username=username,
            role=role or Roles.USER,
            created_at=now,
            updated_at=now,
        )

    def update(self, username: str | None = None, role: Roles | None = None) -> "User":
        if username is not None:
            self.username = username
        if role is not None:
            self.role = role
        self.updated_at = utcnow()
        return self
