"""Exception handlers translating domain errors to JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from macro_tracker.domain.errors import (
    InvalidInputError,
    NotFoundError,
    PersistenceError,
)

_logger = logging.getLogger(__name__)


def request_context(request: Request) -> dict[str, object]:
    """Return request fields worth attaching to log records."""
    return {
        "method": request.method,
        "path": request.url.path,
        "user_id": request.headers.get("x-user-id"),
    }


def register_exception_handlers(app: FastAPI) -> None:
    """Install the API's error taxonomy on an app."""

    @app.exception_handler(InvalidInputError)
    async def invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": exc.message, "field": exc.field},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {"field": _field_name(error.get("loc", ())), "message": error.get("msg")}
            for error in exc.errors()
        ]
        first = errors[0] if errors else {"field": None, "message": "Invalid request"}
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": f"{first['field']}: {first['message']}",
                "field": first["field"],
                "errors": errors,
            },
        )

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"error": str(exc)}
        )

    @app.exception_handler(PersistenceError)
    async def persistence_failed(
        request: Request, exc: PersistenceError
    ) -> JSONResponse:
        _logger.error("Persistence failure: %s", exc, extra=request_context(request))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )

    @app.exception_handler(Exception)
    async def unhandled(request: Request, exc: Exception) -> JSONResponse:
        _logger.error(
            "Unhandled error", exc_info=exc, extra=request_context(request)
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def _field_name(loc: tuple[object, ...] | list[object]) -> str | None:
    """Return the innermost field of a validation error location."""
    parts = [str(part) for part in loc if part not in {"body", "query", "header"}]
    return parts[-1] if parts else None
