"""
Translation of domain errors into HTTP responses.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from harbor.core.observability import get_correlation_id, get_logger
from harbor.domain.shared.exceptions import DomainError, ErrorType

logger = get_logger(__name__)

STATUS_BY_ERROR_TYPE: dict[ErrorType, int] = {
    ErrorType.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorType.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorType.CAPACITY_EXCEEDED: status.HTTP_409_CONFLICT,
    ErrorType.CAPACITY_VIOLATION: status.HTTP_409_CONFLICT,
    ErrorType.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorType.REPOSITORY: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(error: DomainError) -> int:
    return STATUS_BY_ERROR_TYPE.get(
        error.error_type, status.HTTP_500_INTERNAL_SERVER_ERROR
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(
            "request_failed",
            path=request.url.path,
            error_type=exc.error_type.value,
            error=exc.message,
        )
    return JSONResponse(status_code=status_code, content={"error": exc.to_dict()})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    fields = [".".join(str(loc) for loc in error["loc"]) for error in exc.errors()]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "type": ErrorType.VALIDATION.value,
                "message": "Request validation failed",
                "details": {"fields": ", ".join(fields)},
            }
        },
    )


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unexpected_error",
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=True,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "type": "internal",
                "message": "Internal server error",
                "details": {"correlation_id": get_correlation_id()},
            }
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
