from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from as400_catalog.api.exception_handlers import register_exception_handlers
from as400_catalog.api.routes import catalog_router, health_router, host_router
from as400_catalog.config.logging_config import configure_logging
from as400_catalog.config.settings import settings
from as400_catalog.db.base import engine, init_db


configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    logger.info(f"Starting {settings.APP_NAME}...")

    try:
        await init_db()
        logger.info("Catalog database: OK")
    except Exception as e:
        logger.error(f"Catalog database: FAILED - {str(e)}")

    if not (settings.AS400_HOST and settings.AS400_USER):
        logger.warning("AS400_HOST/AS400_USER not set; host routes will fail until configured")

    yield
    logger.info(f"Shutting down {settings.APP_NAME}...")
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="AS400 queries and a local catalog of service program procedures.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(health_router)
app.include_router(host_router, prefix="/api/v1")
app.include_router(catalog_router, prefix="/api/v1")
