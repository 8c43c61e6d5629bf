"""
Centralized exception handling for the application
"""
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger("work_ledger.errors")


class BaseAppException(Exception):
    """Base exception for application-specific errors"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(BaseAppException):
    """Raised when input validation fails"""
    pass


class NotFoundError(BaseAppException):
    """Raised when a requested resource is not found"""
    pass


class AuthenticationError(BaseAppException):
    """Raised when the API token is missing or wrong"""
    pass


class ConflictError(BaseAppException):
    """Raised when a unique resource already exists"""
    pass


class DatabaseError(BaseAppException):
    """Raised when database operations fail"""
    pass


# HTTP Exception Mappings
def map_exception_to_http_exception(exc: BaseAppException) -> HTTPException:
    """Map application exceptions to HTTP exceptions"""

    if isinstance(exc, ValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": exc.message, "details": exc.details}
        )

    elif isinstance(exc, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": exc.message, "details": exc.details}
        )

    elif isinstance(exc, AuthenticationError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"message": exc.message, "details": exc.details},
            headers={"WWW-Authenticate": "Bearer"}
        )

    elif isinstance(exc, ConflictError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={"message": exc.message, "details": exc.details}
        )

    elif isinstance(exc, DatabaseError):
        logger.error(f"Database error: {exc.message}", extra={"details": exc.details})
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "A database error occurred", "details": {}}
        )

    else:
        logger.error(f"Unhandled application error: {exc.message}", extra={"details": exc.details})
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "An unexpected error occurred", "details": {}}
        )


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    http_exc = map_exception_to_http_exception(exc)
    logger.warning(f"Application exception: {exc.message}", extra={
        "exception_type": type(exc).__name__,
        "details": exc.details,
        "path": request.url.path,
        "method": request.method
    })
    return JSONResponse(
        status_code=http_exc.status_code,
        content={"detail": http_exc.detail},
        headers=http_exc.headers
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the application exception handler on a FastAPI instance"""
    app.add_exception_handler(BaseAppException, app_exception_handler)


# Common exception raising functions for convenience
def raise_not_found(resource: str, identifier: str = None) -> None:
    """Raise a not found error for a specific resource"""
    message = f"{resource} not found"
    if identifier:
        message += f" with id: {identifier}"
    raise NotFoundError(message, {"resource": resource, "identifier": identifier})


def raise_validation_error(field: str, message: str, value: Any = None) -> None:
    """Raise a validation error for a specific field"""
    raise ValidationError(
        f"Validation failed for {field}: {message}",
        {"field": field, "message": message, "value": value}
    )
