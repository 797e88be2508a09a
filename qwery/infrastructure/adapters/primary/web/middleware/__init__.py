"""Web middleware: centralized exception handling."""

from qwery.infrastructure.adapters.primary.web.middleware.exception_handlers import (
    configure_exception_handlers,
)

__all__ = [
    "configure_exception_handlers",
]
