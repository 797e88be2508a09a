"""
Repository-related domain exceptions.

These keep SQLAlchemy out of the application layer: repositories translate
driver errors into this hierarchy and use-cases translate the hierarchy into
coded ``DomainException`` instances where the caller needs one.

Exception Hierarchy:
    RepositoryError (base)
    |-- EntityNotFoundError    - Entity not found by ID/slug
    |-- DuplicateEntityError   - Unique constraint violation
    |-- InvalidReferenceError  - Foreign key points at a missing row
    `-- ConnectionError        - Database connection issues
"""

from typing import Any


class RepositoryError(Exception):
    """
    Base exception for all repository-related errors.

    Attributes:
        message: Human-readable error description
        original_error: The underlying exception (if any)
        details: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.details = details or {}

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message} (caused by: {self.original_error})"
        return self.message


class EntityNotFoundError(RepositoryError):
    """Raised when an entity cannot be found by its identifier."""

    def __init__(
        self,
        entity_type: str,
        entity_id: str,
        message: str | None = None,
    ) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with id '{entity_id}' not found"
        super().__init__(msg, details={"entity_type": entity_type, "entity_id": entity_id})


class DuplicateEntityError(RepositoryError):
    """
    Raised when a create violates a unique constraint.

    The message always contains "already exists" so that idempotent callers
    can recognise the condition without importing this class.
    """

    def __init__(
        self,
        entity_type: str,
        field_name: str,
        field_value: Any,
        message: str | None = None,
    ) -> None:
        self.entity_type = entity_type
        self.field_name = field_name
        self.field_value = field_value
        msg = message or f"{entity_type} with {field_name}='{field_value}' already exists"
        super().__init__(
            msg,
            details={
                "entity_type": entity_type,
                "field_name": field_name,
                "field_value": str(field_value),
            },
        )


class InvalidReferenceError(RepositoryError):
    """Raised when a write references a parent row that does not exist."""

    def __init__(
        self,
        entity_type: str,
        message: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        self.entity_type = entity_type
        msg = message or f"{entity_type} references an entity that does not exist"
        super().__init__(msg, original_error=original_error, details={"entity_type": entity_type})


class ConnectionError(RepositoryError):
    """Raised when the database cannot be reached."""

    def __init__(
        self,
        database: str,
        message: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        self.database = database
        msg = message or f"Failed to connect to {database}"
        super().__init__(msg, original_error=original_error, details={"database": database})
