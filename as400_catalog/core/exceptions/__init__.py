"""Core exceptions for the application."""

from as400_catalog.core.exceptions.catalog import (
    CatalogException,
    ServiceProgramNotFoundException,
)
from as400_catalog.core.exceptions.database import (
    DatabaseException,
    DatabaseHealthCheckError,
)
from as400_catalog.core.exceptions.remote import (
    HostNotConfiguredError,
    InvalidCommandError,
    RemoteCommandError,
    RemoteConnectionError,
    RemoteException,
    RemoteTimeoutError,
)

__all__ = [
    # Catalog
    "CatalogException",
    "ServiceProgramNotFoundException",
    # Database
    "DatabaseException",
    "DatabaseHealthCheckError",
    # Remote
    "RemoteException",
    "HostNotConfiguredError",
    "InvalidCommandError",
    "RemoteCommandError",
    "RemoteConnectionError",
    "RemoteTimeoutError",
]
