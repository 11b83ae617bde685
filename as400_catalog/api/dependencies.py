"""FastAPI dependencies for dependency injection."""

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from as400_catalog.core.remote import RemoteExecutor, SshConfig, SshExecutor
from as400_catalog.db.base import async_session_factory
from as400_catalog.services.catalog import CatalogService
from as400_catalog.services.host import HostService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session for request with auto-commit/rollback."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def get_executor() -> RemoteExecutor:
    """SSH executor built from settings; fails if the host isn't configured."""
    return SshExecutor(SshConfig.from_settings())


def get_host_service(executor: RemoteExecutor = Depends(get_executor)) -> HostService:
    """Dependency for host service."""
    return HostService(executor)


def get_catalog_service(db: AsyncSession = Depends(get_db)) -> CatalogService:
    """Dependency for catalog operations that stay local."""
    return CatalogService(db)


def get_connected_catalog_service(
    db: AsyncSession = Depends(get_db),
    host: HostService = Depends(get_host_service),
) -> CatalogService:
    """Dependency for catalog operations that read from the AS400."""
    return CatalogService(db, host)
