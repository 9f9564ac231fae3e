"""Maps domain exceptions to HTTP responses — one table for every entity route.

All error bodies share the shape ``{"error": str, "details"?: [str]}``;
the authentication gate answers ``{"message": str}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from crudhub.config import get_settings
from crudhub.domain.exceptions import (
    DependentsExistError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidIdentifierError,
    MissingReferenceError,
    SchemaValidationError,
    StoreUnavailableError,
)

logger = logging.getLogger(__name__)


def error_response(
    status_code: int, error: str, details: list[str] | None = None
) -> JSONResponse:
    body: dict = {"error": error}
    if details:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


async def _invalid_identifier(request: Request, exc: InvalidIdentifierError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def _schema_validation(request: Request, exc: SchemaValidationError) -> JSONResponse:
    logger.info("Rejected %s payload: %d field error(s)", exc.entity_type, len(exc.errors))
    return error_response(
        status.HTTP_400_BAD_REQUEST, str(exc), [str(error) for error in exc.errors]
    )


async def _missing_reference(request: Request, exc: MissingReferenceError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Referenced document not found", [str(exc)])


async def _not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, str(exc))


async def _duplicate(request: Request, exc: DuplicateEntityError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def _dependents_exist(request: Request, exc: DependentsExistError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc), [exc.details])


async def _store_unavailable(request: Request, exc: StoreUnavailableError) -> JSONResponse:
    logger.error("Store unavailable for %s %s: %s", request.method, request.url.path, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def _request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "is invalid")
        details.append(f"{location}: {message}" if location else message)
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body", details)


_HTTP_METHODS = frozenset({"get", "put", "post", "delete", "patch", "options", "head"})


def _available_routes(app: FastAPI) -> list[str]:
    """Documented routes as "METHOD /path", read from the OpenAPI schema so nested routers are included."""
    paths = app.openapi().get("paths", {})
    return sorted(
        f"{method.upper()} {path}"
        for path, operations in paths.items()
        for method in operations
        if method in _HTTP_METHODS
    )


async def _http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=exc.headers,
        )
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        routes = _available_routes(request.app)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": "Route not found", "availableRoutes": routes},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=exc.headers,
    )


async def _unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    details = [str(exc)] if get_settings().is_development else None
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", details)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidIdentifierError, _invalid_identifier)
    app.add_exception_handler(SchemaValidationError, _schema_validation)
    app.add_exception_handler(MissingReferenceError, _missing_reference)
    app.add_exception_handler(EntityNotFoundError, _not_found)
    app.add_exception_handler(DuplicateEntityError, _duplicate)
    app.add_exception_handler(DependentsExistError, _dependents_exist)
    app.add_exception_handler(StoreUnavailableError, _store_unavailable)
    app.add_exception_handler(RequestValidationError, _request_validation)
    app.add_exception_handler(StarletteHTTPException, _http_exception)
    app.add_exception_handler(Exception, _unexpected)
