"""Shared fixtures: an in-memory catalog and a scripted AS400."""

import asyncio
import os

# Must be set before the application modules build their engine
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENV"] = "test"
for _name in ("AS400_HOST", "AS400_USER", "AS400_PASSWORD", "AS400_KEY_PATH"):
    os.environ.pop(_name, None)

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker

from as400_catalog.config.logging_config import configure_logging
from as400_catalog.db.base import init_db
from tests.helpers import FakeExecutor, memory_engine

configure_logging(level="WARNING", log_to_file=False)


def run_with_session(body):
    """Run ``await body(session)`` against a fresh catalog in one event loop."""

    async def _main():
        engine = memory_engine()
        await init_db(bind=engine)
        factory = async_sessionmaker(engine, expire_on_commit=False)
        try:
            async with factory() as session:
                return await body(session)
        finally:
            await engine.dispose()

    return asyncio.run(_main())


@pytest.fixture
def run_in_session():
    return run_with_session


@pytest.fixture
def fake_executor():
    return FakeExecutor()
