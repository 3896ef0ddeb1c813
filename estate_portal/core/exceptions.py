"""Error taxonomy for the portal and the handlers that render it as JSON.

Services raise these; the FastAPI handlers registered in ``create_app`` turn
them into ``{"detail": ..., "code": ...}`` responses. Nothing is retried.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class PortalError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"
    message: str = "Something went wrong!"

    def __init__(self, message: Optional[str] = None, **extra: Any):
        self.message = message or self.message
        self.extra = extra
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "code": self.code, **self.extra}


class ValidationError(PortalError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"
    message = "Validation failed"


class DuplicateEmail(PortalError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "duplicate_email"
    message = "Lawyer already registered"


class ClientExists(PortalError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "client_exists"
    message = "Client already exists"


class InvalidCredentials(PortalError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "invalid_credentials"
    message = "Invalid credentials"


class Unauthorized(PortalError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthorized"
    message = "Access token required"


class Forbidden(PortalError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"
    message = "Access denied"


class InvalidToken(Forbidden):
    code = "invalid_token"
    message = "Invalid token"


class TokenExpired(Forbidden):
    code = "token_expired"
    message = "Token expired"


class NotFound(PortalError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    message = "Not found"


class NotificationFailed(PortalError):
    """Email delivery failed after the triggering write was committed."""
    code = "notification_failed"
    message = "Failed to send invitation email"


class InternalError(PortalError):
    pass


async def portal_error_handler(request: Request, exc: PortalError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg", "Invalid value"),
        }
        for err in exc.errors()
    ]
    error = ValidationError(errors=errors)
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    error = InternalError("Database error")
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PortalError, portal_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
