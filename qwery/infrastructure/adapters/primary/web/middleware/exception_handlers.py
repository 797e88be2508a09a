"""
Centralized exception handlers for FastAPI application.

Domain exceptions carry a numeric code that decides the HTTP status
(see ``http_status_for``); every error body has an ``error`` message.

Usage:
    from qwery.infrastructure.adapters.primary.web.middleware import configure_exception_handlers

    app = FastAPI()
    configure_exception_handlers(app)
"""

import logging
import traceback
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from qwery.domain.exceptions.code import Code, http_status_for
from qwery.domain.exceptions.repository_exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidReferenceError,
    RepositoryError,
)
from qwery.domain.llm_providers.llm_types import RateLimitError as LLMRateLimitError
from qwery.domain.shared_kernel import DomainException

logger = logging.getLogger(__name__)


class ErrorResponse:
    """Standard error response format."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: int | None = None,
        data: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.code = code
        self.data = data

    def to_dict(self) -> dict[str, Any]:
        response: dict[str, Any] = {"error": self.message}
        if self.code is not None:
            response["code"] = self.code
            response["data"] = self.data
        return response

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=jsonable_encoder(self.to_dict()))


async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Handle coded domain exceptions with the status mapped from their code."""
    status_code = http_status_for(exc.code)
    log = logger.error if status_code >= 500 else logger.warning
    log(f"Domain exception {exc.code}: {exc.message} - path={request.url.path}")
    return ErrorResponse(
        status_code=status_code, message=exc.message, code=exc.code, data=exc.data
    ).to_response()


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    """Handle entity not found errors - 404."""
    logger.warning(
        f"Entity not found: {exc.entity_type}[{exc.entity_id}] - path={request.url.path}"
    )
    return ErrorResponse(status_code=404, message=exc.message).to_response()


async def duplicate_entity_handler(request: Request, exc: DuplicateEntityError) -> JSONResponse:
    """Handle duplicate entity errors - 409 Conflict."""
    logger.warning(f"Duplicate entity: {exc.message} - path={request.url.path}")
    return ErrorResponse(status_code=409, message=exc.message).to_response()


async def invalid_reference_handler(request: Request, exc: InvalidReferenceError) -> JSONResponse:
    """Handle writes pointing at a missing parent - 404."""
    logger.warning(f"Invalid reference: {exc.message} - path={request.url.path}")
    return ErrorResponse(status_code=404, message=exc.message).to_response()


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """Handle generic repository errors - 500."""
    logger.error(f"Repository error: {exc} - path={request.url.path}", exc_info=True)
    return ErrorResponse(status_code=500, message=str(exc)).to_response()


async def llm_rate_limit_handler(request: Request, exc: LLMRateLimitError) -> JSONResponse:
    """Handle LLM rate limits - 429."""
    logger.warning(f"LLM rate limit: {exc} - path={request.url.path}")
    return ErrorResponse(status_code=429, message=str(exc) or "Rate limit exceeded").to_response()


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors - 400 with the field errors."""
    errors = jsonable_encoder(exc.errors())
    logger.warning(f"Validation error: {errors} - path={request.url.path}")
    return ErrorResponse(
        status_code=400,
        message=Code.BAD_REQUEST_ERROR.message,
        code=Code.BAD_REQUEST_ERROR.code,
        data={"errors": errors},
    ).to_response()


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions - 500 Internal Server Error."""
    logger.error(
        f"Unhandled exception: {exc} - path={request.url.path}\n{traceback.format_exc()}"
    )
    return ErrorResponse(status_code=500, message=str(exc)).to_response()


def configure_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(DomainException, domain_exception_handler)

    # Repository exceptions (specific before generic)
    app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)
    app.add_exception_handler(DuplicateEntityError, duplicate_entity_handler)
    app.add_exception_handler(InvalidReferenceError, invalid_reference_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)

    app.add_exception_handler(LLMRateLimitError, llm_rate_limit_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
