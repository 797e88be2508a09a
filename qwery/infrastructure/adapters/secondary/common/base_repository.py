"""
Base repository providing common CRUD operations for all repositories.

All concrete repositories inherit from BaseRepository and implement:
- _model_class: The SQLAlchemy model class
- _to_domain(): Convert database model to domain entity
- _to_db(): Convert domain entity to database model
- _update_fields(): Copy mutable fields from the domain entity (optional)

Writes are committed immediately; SQLAlchemy errors are mapped to the
repository exceptions of ``qwery.domain.exceptions``.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from functools import wraps
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from qwery.domain.exceptions import (
    ConnectionError as DomainConnectionError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidReferenceError,
    RepositoryError,
)
from qwery.domain.ports.repositories.base import FindOptions
from qwery.domain.shared_kernel import shorten_id

logger = logging.getLogger(__name__)

T = TypeVar("T")  # Domain entity type
M = TypeVar("M")  # Database model type


def handle_db_errors(default_entity_type: str = "Entity") -> Callable[..., Any]:
    """
    Decorator to roll back and convert SQLAlchemy errors to domain exceptions.

    Args:
        default_entity_type: Entity name used when the repository has none
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(func)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            entity_type = getattr(self, "entity_name", None) or default_entity_type
            try:
                return await func(self, *args, **kwargs)
            except IntegrityError as e:
                await self._session.rollback()
                error_str = str(e.orig) if e.orig else str(e)
                if "unique" in error_str.lower() or "duplicate" in error_str.lower():
                    field_name = "id"
                    # SQLite format: UNIQUE constraint failed: table.column
                    if "failed:" in error_str:
                        field_name = error_str.rsplit(".", 1)[-1].strip()
                    raise DuplicateEntityError(
                        entity_type=entity_type,
                        field_name=field_name,
                        field_value="<unknown>",
                        message=f"{entity_type} already exists ({error_str})",
                    ) from e
                if "foreign key" in error_str.lower():
                    raise InvalidReferenceError(entity_type, original_error=e) from e
                raise RepositoryError(
                    f"Integrity error while operating on {entity_type}",
                    original_error=e,
                ) from e
            except DBAPIError as e:
                await self._session.rollback()
                error_str = str(e).lower()
                if "connection" in error_str or "timeout" in error_str:
                    raise DomainConnectionError(
                        database="sql",
                        message=f"Database connection error while operating on {entity_type}",
                        original_error=e,
                    ) from e
                raise RepositoryError(
                    f"Database error while operating on {entity_type}",
                    original_error=e,
                ) from e

        return wrapper

    return decorator


class BaseRepository(ABC, Generic[T, M]):
    """
    Base repository class providing common database operations.

    Attributes:
        _model_class: SQLAlchemy model class (must be set by subclasses)
        _entity_name: Human-readable entity name for error messages
        _default_order_column: Column name used by ``find_all`` ordering
    """

    _model_class: type[M] = None
    _entity_name: str | None = None
    _default_order_column: str = "created_at"

    def __init__(self, session: AsyncSession) -> None:
        if session is None:
            raise ValueError("Session cannot be None")
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    @property
    def entity_name(self) -> str:
        if self._entity_name:
            return self._entity_name
        if self._model_class:
            return self._model_class.__name__
        return "Entity"

    # === Abstract methods (must be implemented by subclasses) ===

    @abstractmethod
    def _to_domain(self, db_model: M | None) -> T | None:
        """Convert database model to domain entity."""

    @abstractmethod
    def _to_db(self, domain_entity: T) -> M:
        """Convert domain entity to a new database model."""

    def _update_fields(self, db_model: M, domain_entity: T) -> None:
        """
        Copy fields from the domain entity onto an existing row.

        Default implementation builds a fresh model and copies every mapped
        column except the primary key.
        """
        fresh = self._to_db(domain_entity)
        for column in self._model_class.__table__.columns:
            if column.primary_key:
                continue
            attr = column.key
            mapped_name = self._attribute_for_column(attr)
            setattr(db_model, mapped_name, getattr(fresh, mapped_name))

    def _attribute_for_column(self, column_key: str) -> str:
        for prop in self._model_class.__mapper__.column_attrs:
            if any(col.key == column_key for col in prop.columns):
                return prop.key
        return column_key

    def _apply_filters(self, query: Select[Any], **filters: Any) -> Select[Any]:
        for key, value in filters.items():
            if value is not None and hasattr(self._model_class, key):
                query = query.where(getattr(self._model_class, key) == value)
        return query

    def _apply_options(self, query: Select[Any], options: FindOptions | None) -> Select[Any]:
        order_column = getattr(self._model_class, self._default_order_column, None)
        if order_column is not None:
            if options is not None and options.order == "desc":
                query = query.order_by(order_column.desc())
            else:
                query = query.order_by(order_column.asc())
        if options is not None:
            if options.offset:
                query = query.offset(options.offset)
            if options.limit:
                query = query.limit(options.limit)
        return query

    # === Queries ===

    async def find_by_id(self, entity_id: str) -> T | None:
        if not entity_id:
            raise ValueError("ID cannot be empty")
        return self._to_domain(await self._find_db_model_by_id(entity_id))

    async def find_one(self, **filters: Any) -> T | None:
        query = self._apply_filters(select(self._model_class), **filters).limit(1)
        result = await self._session.execute(query)
        return self._to_domain(result.scalar_one_or_none())

    async def find_many(self, options: FindOptions | None = None, **filters: Any) -> list[T]:
        query = self._apply_filters(select(self._model_class), **filters)
        query = self._apply_options(query, options)
        result = await self._session.execute(query)
        return [self._to_domain(m) for m in result.scalars().all()]

    async def find_all(self, options: FindOptions | None = None) -> list[T]:
        return await self.find_many(options)

    async def exists(self, entity_id: str) -> bool:
        if not entity_id:
            return False
        query = (
            select(func.count())
            .select_from(self._model_class)
            .where(self._model_class.id == entity_id)
        )
        result = await self._session.execute(query)
        count = result.scalar()
        return count is not None and count > 0

    async def _find_db_model_by_id(self, entity_id: str) -> M | None:
        query = select(self._model_class).where(self._model_class.id == entity_id)
        result = await self._session.execute(query)
        return result.scalar_one_or_none()

    # === Commands ===

    async def create(self, domain_entity: T) -> T:
        if domain_entity is None:
            raise ValueError("Entity cannot be None")
        entity_id = getattr(domain_entity, "id", None)
        if entity_id and await self.exists(entity_id):
            raise DuplicateEntityError(
                entity_type=self.entity_name,
                field_name="id",
                field_value=entity_id,
            )
        return await self._insert(domain_entity)

    @handle_db_errors("Entity")
    async def _insert(self, domain_entity: T) -> T:
        db_model = self._to_db(domain_entity)
        self._session.add(db_model)
        await self._session.commit()
        logger.debug(f"Created {self.entity_name} {getattr(domain_entity, 'id', '')}")
        return self._to_domain(db_model)

    async def update(self, domain_entity: T) -> T:
        if domain_entity is None:
            raise ValueError("Entity cannot be None")
        entity_id = getattr(domain_entity, "id", None)
        db_model = await self._find_db_model_by_id(entity_id) if entity_id else None
        if db_model is None:
            raise EntityNotFoundError(self.entity_name, str(entity_id))
        return await self._apply_update(db_model, domain_entity)

    @handle_db_errors("Entity")
    async def _apply_update(self, db_model: M, domain_entity: T) -> T:
        self._update_fields(db_model, domain_entity)
        await self._session.commit()
        return self._to_domain(db_model)

    async def delete(self, entity_id: str) -> bool:
        if not entity_id:
            return False
        return await self._delete_row(entity_id)

    @handle_db_errors("Entity")
    async def _delete_row(self, entity_id: str) -> bool:
        result = await self._session.execute(
            delete(self._model_class).where(self._model_class.id == entity_id)
        )
        await self._session.commit()
        deleted = (result.rowcount or 0) > 0
        if deleted:
            logger.debug(f"Deleted {self.entity_name} {entity_id}")
        return deleted


class SluggedBaseRepository(BaseRepository[T, M]):
    """BaseRepository for aggregates addressable by a short slug."""

    async def find_by_slug(self, slug: str) -> T | None:
        if not slug:
            raise ValueError("Slug cannot be empty")
        return await self.find_one(slug=slug)

    async def create(self, domain_entity: T) -> T:
        # The slug is always derived from the id, whatever the caller set.
        domain_entity.slug = shorten_id(domain_entity.id)
        if await self.find_one(slug=domain_entity.slug) is not None:
            raise DuplicateEntityError(
                entity_type=self.entity_name,
                field_name="slug",
                field_value=domain_entity.slug,
            )
        return await super().create(domain_entity)
