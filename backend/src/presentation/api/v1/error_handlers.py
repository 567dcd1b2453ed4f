"""Map domain errors to HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.exceptions import (
    AlreadyAppliedError,
    CapacityExceededError,
    DomainError,
    NotFoundError,
    SafetyLimitExceededError,
    StorageError,
    ValidationError,
)
from infrastructure.config import get_logger

logger = get_logger(__name__)

# most specific first
STATUS_CODES: list[tuple[type[DomainError], int]] = [
    (ValidationError, 422),
    (NotFoundError, 404),
    (AlreadyAppliedError, 409),
    (SafetyLimitExceededError, 409),
    (CapacityExceededError, 409),
    (StorageError, 503),
]


def status_code_for(exc: DomainError) -> int:
    """HTTP status for a domain error."""
    for error_type, status_code in STATUS_CODES:
        if isinstance(exc, error_type):
            return status_code
    return 400


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error as the standard error body."""
    status_code = status_code_for(exc)
    if isinstance(exc, StorageError):
        logger.error(
            f"Storage failure on {request.method} {request.url.path}: {exc.__cause__!r}",
            exc_info=exc,
        )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render malformed request bodies in the same shape as domain errors."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        field = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"{field}: {errors[0].get('msg')}" if field else errors[0].get("msg", message)
    return JSONResponse(
        status_code=422,
        content={"success": False, "error": ValidationError.code, "message": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on an app."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
