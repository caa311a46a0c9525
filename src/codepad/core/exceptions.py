"""Domain errors and the handlers that render them with request_id."""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.codepad.core.logging import get_logger

logger = get_logger(__name__)


class CodepadError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CodepadError):
    """A required field is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class NotFoundError(CodepadError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ReferentialIntegrityError(NotFoundError):
    """An insert referenced a project that does not exist."""

    default_message = "Referenced project does not exist"


class DuplicatePathError(CodepadError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "A file with this path already exists in the project"


class StoreError(CodepadError):
    """Connection or query failure. The message never carries driver detail."""

    default_message = "Database error"


class StoreTimeoutError(StoreError):
    status_code = status.HTTP_504_GATEWAY_TIMEOUT
    default_message = "Database operation timed out"


class TransactionAborted(StoreError):
    """A multi-statement write failed and was rolled back."""

    default_message = "Transaction failed and was rolled back"


class ArchiveExportError(StoreError):
    default_message = "Failed to generate ZIP"


def _error_response(status_code: int, message: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "request_id": correlation_id.get(),
        },
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(CodepadError)
    async def codepad_error_handler(request: Request, exc: CodepadError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "Request failed",
                error_type=type(exc).__name__,
                path=request.url.path,
                cause=repr(exc.__cause__) if exc.__cause__ else None,
            )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, _describe_validation_errors(exc))

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return _error_response(exc.status_code, exc.detail)

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        logger.exception(
            "Unclassified database error",
            exc_info=exc,
            path=request.url.path,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, StoreError.default_message)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            path=request.url.path,
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
