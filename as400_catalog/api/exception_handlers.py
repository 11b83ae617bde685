"""Centralized exception handlers for FastAPI application."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from as400_catalog.api.schemas.common import APIResponse
from as400_catalog.core.exceptions import (
    CatalogException,
    DatabaseException,
    DatabaseHealthCheckError,
    HostNotConfiguredError,
    InvalidCommandError,
    RemoteCommandError,
    RemoteConnectionError,
    RemoteException,
    RemoteTimeoutError,
    ServiceProgramNotFoundException,
)


def _fail(status_code: int, code: str, message: str, details: str | None = None) -> JSONResponse:
    response = APIResponse.fail(code=code, message=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json"),
    )


async def database_exception_handler(
    request: Request, exc: DatabaseException
) -> JSONResponse:
    """Handle catalog database exceptions."""
    logger.error(f"Catalog database error: {exc.message}")

    if isinstance(exc, DatabaseHealthCheckError):
        return _fail(503, "DATABASE_HEALTH_CHECK_ERROR", exc.message)
    return _fail(500, "DATABASE_ERROR", exc.message)


async def remote_exception_handler(
    request: Request, exc: RemoteException
) -> JSONResponse:
    """Handle AS400 command exceptions."""
    logger.error(f"Remote error: {exc.message}")

    if isinstance(exc, InvalidCommandError):
        return _fail(400, "INVALID_COMMAND", exc.message)
    if isinstance(exc, HostNotConfiguredError):
        return _fail(503, "HOST_NOT_CONFIGURED", exc.message)
    if isinstance(exc, RemoteTimeoutError):
        return _fail(504, "REMOTE_TIMEOUT", exc.message)
    if isinstance(exc, RemoteConnectionError):
        return _fail(502, "REMOTE_CONNECTION_ERROR", exc.message)
    if isinstance(exc, RemoteCommandError):
        return _fail(502, "REMOTE_COMMAND_FAILED", exc.message)
    return _fail(500, "REMOTE_ERROR", exc.message)


async def catalog_exception_handler(
    request: Request, exc: CatalogException
) -> JSONResponse:
    """Handle catalog exceptions."""
    logger.error(f"Catalog error: {exc.message}")

    if isinstance(exc, ServiceProgramNotFoundException):
        return _fail(404, "SERVICE_PROGRAM_NOT_FOUND", exc.message)
    return _fail(500, "CATALOG_ERROR", exc.message)


async def sqlalchemy_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Handle SQLAlchemy errors."""
    logger.error(f"SQLAlchemy error: {str(exc)}")
    return _fail(500, "DATABASE_ERROR", "A database error occurred")


async def generic_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Handle unhandled exceptions."""
    logger.exception(f"Unhandled exception: {str(exc)}")
    return _fail(500, "INTERNAL_SERVER_ERROR", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(DatabaseException, database_exception_handler)
    app.add_exception_handler(RemoteException, remote_exception_handler)
    app.add_exception_handler(CatalogException, catalog_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
