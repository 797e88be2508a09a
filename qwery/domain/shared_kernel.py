import uuid
from abc import ABC
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from qwery.domain.exceptions.code import CodeDescription

SLUG_LENGTH = 8


def utcnow() -> datetime:
    return datetime.now(UTC)


def shorten_id(entity_id: str) -> str:
    """Derive the public slug of an entity from its UUID."""
    return entity_id[:SLUG_LENGTH]


def generate_identity() -> tuple[str, str]:
    """Return a fresh ``(id, slug)`` pair."""
    entity_id = str(uuid.uuid4())
    return entity_id, shorten_id(entity_id)


def is_uuid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except (ValueError, AttributeError, TypeError):
        return False
    return True


@dataclass(kw_only=True)
class Entity(ABC):
    """
    Base class for Domain Entities.
    Entities have a unique identity that persists throughout their lifecycle.
    Equality is based on identity, not attributes.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def generate_id(cls) -> str:
        return str(uuid.uuid4())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(kw_only=True, eq=False)
class AuditedEntity(Entity):
    """Entity carrying creation/update timestamps and the acting user."""

    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    created_by: str = ""
    updated_by: str = ""

    def touch(self, updated_by: str | None = None) -> None:
        self.updated_at = utcnow()
        if updated_by:
            self.updated_by = updated_by


class DomainException(Exception):
    """
    Base exception for all domain errors.

    Carries a numeric ``code`` from the code catalog, a human readable
    message and optional structured ``data`` that is echoed to clients.
    """

    def __init__(
        self,
        code: int,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    @classmethod
    def new(
        cls,
        code: CodeDescription,
        override_message: str | None = None,
        data: dict[str, Any] | None = None,
    ) -> "DomainException":
        return cls(
            code=code.code,
            message=override_message or code.message,
            data=data,
        )

    def __repr__(self) -> str:
        return f"DomainException(code={self.code}, message={self.message!r})"
