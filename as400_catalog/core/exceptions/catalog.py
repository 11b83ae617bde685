"""Catalog-specific exceptions."""


class CatalogException(Exception):
    """Base exception for catalog errors."""

    def __init__(self, message: str = "A catalog error occurred"):
        self.message = message
        super().__init__(self.message)


class ServiceProgramNotFoundException(CatalogException):
    """Raised when a service program is not in the catalog."""

    def __init__(self, library: str | None = None, srvpgm_name: str | None = None):
        if library and srvpgm_name:
            message = f"Service program not in catalog: {library}/{srvpgm_name}. Run a sync first"
        else:
            message = "Service program not in catalog"
        super().__init__(message)
        self.library = library
        self.srvpgm_name = srvpgm_name
