import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from novasearch.core.config import get_settings
from novasearch.infrastructure.logging import setup_logging
from novasearch.infrastructure.storage.redis import get_redis
from novasearch.interfaces.endpoints.routes import router as api_router
from novasearch.interfaces.errors.exception_handlers import register_exception_handlers
from novasearch.interfaces.service_dependencies import get_memory_caches

settings = get_settings()

setup_logging()
logger = logging.getLogger()

logger.info("NovaSearch starting...")

openapi_tags = [
    {
        "name": "Search",
        "description": "Aggregated **search**, intent detection, suggestions and reverse geocoding.",
    },
    {
        "name": "Status",
        "description": "Service health and cache backend.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the cache backend on startup and release it on shutdown"""
    logger.info(f"Initialising NovaSearch, cache backend: {settings.cache_backend}")

    redis_client = None
    if settings.cache_backend == "redis":
        logger.info("Initialising redis client")
        redis_client = get_redis()
        await redis_client.init()

    memory_caches = get_memory_caches()
    for cache in memory_caches:
        cache.start_sweeper(settings.memory_cache_sweep_seconds)

    try:
        yield
    finally:
        logger.info("NovaSearch shutting down")
        for cache in memory_caches:
            await cache.stop_sweeper()
        if redis_client is not None:
            await redis_client.shutdown()
        logger.info("NovaSearch stopped")


app = FastAPI(
    title="NovaSearch",
    description="Search aggregation API: fans a query out to web, vertical and site-scoped sources, "
    "then ranks, filters, summarizes and paginates the merged results.",
    lifespan=lifespan,
    openapi_tags=openapi_tags,
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api")

logger.info("FastAPI application created.")
