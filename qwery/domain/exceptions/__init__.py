"""
Domain exceptions for Qwery.

Coded errors live in ``qwery.domain.shared_kernel.DomainException``; this
package holds the code catalog and the persistence-level hierarchy.
"""

from qwery.domain.exceptions.code import Code, CodeDescription, http_status_for
from qwery.domain.exceptions.repository_exceptions import (
    ConnectionError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidReferenceError,
    RepositoryError,
)

__all__ = [
    "Code",
    "CodeDescription",
    "http_status_for",
    "RepositoryError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "InvalidReferenceError",
    "ConnectionError",
]
