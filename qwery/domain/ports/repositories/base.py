"""Base repository port shared by every aggregate.

Usage:
    class ProjectRepository(RepositoryPort[Project]):
        async def find_by_org_id(self, org_id: str) -> list[Project]: ...
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

from qwery.domain.shared_kernel import shorten_id

T = TypeVar("T")


@dataclass(frozen=True)
class FindOptions:
    """Pagination and ordering for ``find_all`` style queries."""

    limit: int | None = None
    offset: int | None = None
    order: Literal["asc", "desc"] | None = None


class RepositoryPort(ABC, Generic[T]):
    @abstractmethod
    async def find_all(self, options: FindOptions | None = None) -> list[T]:
        """List entities."""

    @abstractmethod
    async def find_by_id(self, entity_id: str) -> T | None:
        """Find entity by ID."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Insert a new entity. Raises DuplicateEntityError if it exists."""

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Persist changes. Raises EntityNotFoundError if it does not exist."""

    @abstractmethod
    async def delete(self, entity_id: str) -> bool:
        """Delete by ID. Returns True if a row was removed."""

    def shorten_id(self, entity_id: str) -> str:
        return shorten_id(entity_id)


class SluggedRepositoryPort(RepositoryPort[T], Generic[T]):
    """Port for aggregates that are also addressable by their short slug."""

    @abstractmethod
    async def find_by_slug(self, slug: str) -> T | None:
        """Find entity by slug."""
