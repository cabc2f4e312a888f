"""ADSDASH — FastAPI Application Entry Point.

Ads dashboard: one gateway endpoint over the hosted ads table and one
server-rendered page that filters and paginates its records.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.api.ads_routes import router as ads_router
from app.api.dashboard_routes import router as dashboard_router
from app.core.logging import get_logger

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle."""
    logger.info("🚀 ADSDASH starting up...")
    if settings.use_rest_backend:
        logger.info("🌐 Ads backend: hosted REST interface")
    else:
        from app.database import init_db, test_connection

        if test_connection():
            try:
                init_db()
            except Exception as e:
                logger.error(f"❌ Table creation failed: {e}")
        else:
            logger.error("❌ Database NOT connected — gateway will return errors")
    yield
    logger.info("ADSDASH shut down")


app = FastAPI(
    title="ADSDASH",
    description="Ads dashboard — relays the latest ad records from the hosted backend and renders them as a filterable table.",
    version=settings.version,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(ads_router)
app.include_router(dashboard_router)


@app.get("/health", tags=["System"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "adsdash",
        "version": settings.version,
    }
