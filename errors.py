import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

INVALID_ID = "Invalid ID"
INVALID_JSON = "Invalid JSON"


class DatabaseError(Exception):
    """A statement failed; carries the driver's message unchanged."""

    def __init__(self, message: str, operation: str):
        super().__init__(message)
        self.message = message
        self.operation = operation

    @classmethod
    def from_sqlalchemy(cls, exc: SQLAlchemyError, operation: str) -> "DatabaseError":
        orig = getattr(exc, "orig", None)
        return cls(str(orig) if orig is not None else str(exc), operation)


class InvalidRequest(Exception):
    """Client input that cannot be turned into a statement (bad id or body)."""

    def __init__(self, message: str, detail=None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class DatabaseUnavailable(Exception):
    """The startup connectivity check failed."""


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(DatabaseError)
    async def database_error_handler(request: Request, exc: DatabaseError):
        logger.error(f"[API] {request.method} {request.url.path} failed during {exc.operation}: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": exc.message},
        )

    @app.exception_handler(InvalidRequest)
    async def invalid_request_handler(request: Request, exc: InvalidRequest):
        logger.warning(f"[API] {request.method} {request.url.path} rejected: {exc.message} {exc.detail or ''}".rstrip())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": exc.message},
        )
