"""API routes module."""

from as400_catalog.api.routes.catalog import router as catalog_router
from as400_catalog.api.routes.health import router as health_router
from as400_catalog.api.routes.host import router as host_router

__all__ = ["catalog_router", "health_router", "host_router"]
