"""Catalog database exceptions."""


class DatabaseException(Exception):
    """Base exception for catalog database errors."""

    def __init__(self, message: str = "Catalog database error"):
        self.message = message
        super().__init__(self.message)


class DatabaseHealthCheckError(DatabaseException):
    """Raised when the catalog database does not answer a trivial query."""

    def __init__(self, reason: str | None = None):
        message = "Catalog database is not reachable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.reason = reason
