"""Main application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Response
from prometheus_fastapi_instrumentator import Instrumentator

from clearance_scout.api.deps import Services
from clearance_scout.api.routes import scans, stores
from clearance_scout.cache.observation_cache import ObservationCache
from clearance_scout.config import settings
from clearance_scout.data.stores import store_records
from clearance_scout.db.session import AsyncSessionLocal, init_models
from clearance_scout.db.storage import ScanStorage
from clearance_scout.geo.resolver import ZipResolver
from clearance_scout.logging_config import setup_logging
from clearance_scout.providers.registry import ProviderRegistry
from clearance_scout.scan.jobs import JobRunner
from clearance_scout.scan.orchestrator import ScanOrchestrator
from clearance_scout.worker.backfill import backfill_store_coordinates
from clearance_scout.worker.retention import DataRetentionService
from clearance_scout.worker.scheduler import setup_scheduler

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Clearance Scout...")

    await init_models()

    storage = ScanStorage(AsyncSessionLocal)
    records = store_records()
    added = await storage.seed_store_locations(records)
    logger.info(f"Seeded {added} store locations ({len(records)} known)")

    resolver = ZipResolver.from_settings(settings.zip_dataset_path, records)
    logger.info(f"ZIP resolver ready: {resolver.stats()}")
    await backfill_store_coordinates(storage, resolver)

    cache = ObservationCache(AsyncSessionLocal)
    job_runner = JobRunner()
    orchestrator = ScanOrchestrator(
        storage=storage,
        resolver=resolver,
        registry=ProviderRegistry(cache),
        job_runner=job_runner,
    )
    app.state.services = Services(
        storage=storage,
        resolver=resolver,
        cache=cache,
        orchestrator=orchestrator,
    )

    scheduler = setup_scheduler(cache, DataRetentionService(AsyncSessionLocal))
    scheduler.start()
    logger.info("Scheduler started")

    yield

    # Shutdown
    logger.info("Shutting down...")
    scheduler.shutdown()
    await job_runner.shutdown()
    logger.info("Shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Clearance Scout",
    description="Find clearance deals at retail stores near you",
    version="0.1.0",
    lifespan=lifespan,
)

# Add Prometheus instrumentation
instrumentator = Instrumentator(
    should_group_status_codes=True,
    should_ignore_untemplated=True,
    should_respect_env_var=True,
    should_instrument_requests_inprogress=True,
    excluded_handlers=["/metrics", "/health", "/favicon.ico"],
    inprogress_name="http_requests_inprogress",
    inprogress_labels=True,
)
instrumentator.instrument(app).expose(app, include_in_schema=True, tags=["monitoring"])

# Include API routes
app.include_router(scans.router)
app.include_router(stores.router)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/favicon.ico")
async def favicon():
    """Return empty favicon response to avoid 404 noise."""
    return Response(status_code=204)


if __name__ == "__main__":
    uvicorn.run(
        "clearance_scout.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
