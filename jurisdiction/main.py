import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from jurisdiction.api.jurisdictions import router as jurisdictions_router
from jurisdiction.config import settings
from jurisdiction.tables import get_tables

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting jurisdiction lookup service")
    tables = get_tables()
    logger.info("Lookup table validation passed (%d jurisdictions)", len(tables.countries))

    yield

    logger.info("Jurisdiction lookup service stopped")


def create_app() -> FastAPI:
    app = FastAPI(
        title="Jurisdiction Lookup",
        description="ISO 3166 country codes and UN M49 region classification",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(jurisdictions_router)

    # Region extension is optional
    if settings.ENABLE_REGIONS:
        from jurisdiction.api.regions import router as regions_router
        app.include_router(regions_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
