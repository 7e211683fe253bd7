"""Main FastAPI application"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import directory, prayer_list
from api.schemas import HealthResponse
from app.config import get_settings
from app.middleware import TimingMiddleware
from core.cache import TTLCache
from core.logging_config import setup_logging
from services.directory import DirectoryService
from services.upstream import UpstreamClient

settings = get_settings()

setup_logging()
logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{VERSION}")
    logger.info(f"Environment: {settings.app_env}")
    logger.info(f"Debug mode: {settings.debug}")

    if not settings.apps_script_exec_url:
        logger.warning("APPS_SCRIPT_EXEC_URL is not set; directory endpoints will fail")
    if not settings.prayer_documents_dir:
        logger.warning("PRAYER_DOCUMENTS_DIR is not set; prayer list endpoint will fail")

    upstream = UpstreamClient(
        settings.apps_script_exec_url,
        timeout=settings.upstream_timeout_seconds,
    )
    app.state.directory = DirectoryService(
        upstream,
        missionaries_ttl_seconds=settings.missionaries_cache_ttl_seconds,
        images_ttl_seconds=settings.images_cache_ttl_seconds,
    )
    app.state.prayer_list_cache = TTLCache(settings.prayer_list_cache_ttl_seconds)

    yield

    await upstream.aclose()
    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title=settings.app_name,
    description="Missionary prayer letter map API",
    version=VERSION,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(TimingMiddleware)

app.include_router(prayer_list.router)
app.include_router(directory.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint"""
    return {
        "name": settings.app_name,
        "version": VERSION,
        "status": "running",
        "environment": settings.app_env,
    }


@app.get("/health", tags=["Health"], response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    settings = get_settings()
    upstream_configured = bool(settings.apps_script_exec_url)
    prayer_documents_configured = bool(settings.prayer_documents_dir)

    return HealthResponse(
        status="healthy" if upstream_configured and prayer_documents_configured else "degraded",
        upstream_configured=upstream_configured,
        prayer_documents_configured=prayer_documents_configured,
        version=VERSION,
    )


@app.get("/api", tags=["API"])
async def api_info():
    """API information"""
    return {
        "name": settings.app_name,
        "version": VERSION,
        "endpoints": {
            "health": "/health",
            "docs": "/docs" if settings.debug else "disabled",
            "prayer_list": "/api/prayer-list",
            "missionaries": "/api/missionaries",
            "images": "/api/images",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
