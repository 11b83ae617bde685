from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from as400_catalog.config.settings import settings


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create the async engine for ``database_url``.

    Pool sizing only applies to server databases; SQLite uses the
    driver's default pool.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        return create_async_engine(url, echo=echo)
    return create_async_engine(
        url,
        echo=echo,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,  # Verify connections before using
    )


def ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a SQLite database file."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


engine = build_engine(settings.DATABASE_URL)

async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Create catalog tables that don't exist yet."""
    # Import models so they register on Base.metadata
    from as400_catalog.db import models  # noqa: F401

    bind = bind or engine
    ensure_sqlite_directory(bind.url.render_as_string(hide_password=False))
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
