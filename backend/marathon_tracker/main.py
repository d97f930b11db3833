"""
Marathon Tracker API

FastAPI application for live marathon runner lookups.
"""

from contextlib import asynccontextmanager
import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marathon_tracker.config import settings
from marathon_tracker.api.v1.router import api_router
from marathon_tracker.features.course import get_course
from marathon_tracker.features.runners import get_runner_service


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


# === Lifespan ===
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup
    logger.info("Starting Marathon Tracker API...")
    course = get_course()
    logger.info(f"Course: {course.name} ({course.finish_km} km, {len(course.checkpoints)} checkpoints)")

    # Result source is chosen once here
    service = get_runner_service()
    logger.info(f"Result source: {service.source.name}")

    yield

    # Shutdown
    logger.info("Shutting down...")


# === App Creation ===
app = FastAPI(
    title="Marathon Tracker API",
    description="Live marathon runner position, pace and finish estimate",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)


# === Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# === Routes ===
app.include_router(api_router, prefix="/api/v1")


# === Health Check ===
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "0.1.0"}
