"""
Image Normalize Flow - Main FastAPI Application
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.exceptions import register_exception_handlers
from api.routers import image, system
from config import get_settings
from core.constants import SystemConstants
from schemas import ResampleSpec
from services.image_service import ImageService

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format=SystemConstants.LOG_FORMAT,
)
logger = logging.getLogger(__name__)

# Suppress watchfiles debug messages
logging.getLogger("watchfiles").setLevel(logging.WARNING)
logging.getLogger("PIL").setLevel(logging.INFO)


def create_image_service() -> ImageService:
    """Build the image service from configuration."""
    return ImageService(
        window_size=settings.image.tail_window_size,
        edge_policy=settings.image.default_edge_policy,
        interpolation=settings.image.default_interpolation,
        max_upload_mb=settings.image.max_upload_mb,
        default_spec=ResampleSpec(
            desired_width=settings.image.default_canvas_width,
            desired_height=settings.image.default_canvas_height,
        ),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    logger.info("Starting Image Normalize Flow server...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")

    app.state.image_service = create_image_service()
    app.state.config = settings.to_dict()
    app.state.debug = settings.system.debug

    logger.info("Image service initialized successfully")

    yield

    logger.info("Server shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Image Normalize Flow",
    description="Container sniffing, PNG normalization and aspect-fit resampling",
    version="1.0.0",
    lifespan=lifespan,
)

if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(image.router, prefix="/api/image", tags=["Image"])
app.include_router(system.router, prefix="/api/system", tags=["System"])


# Root endpoint
@app.get("/")
async def root():
    return {
        "name": "Image Normalize Flow",
        "status": "running",
        "version": "1.0.0",
        "endpoints": {
            "image": "/api/image",
            "system": "/api/system",
            "docs": "/docs",
        },
    }


# Health check endpoint
@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "image_service": getattr(app.state, "image_service", None) is not None,
        },
    }


# Error handler
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": f"Internal server error: {str(exc)}"})


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.system.debug,
        log_level=settings.system.log_level.lower(),
    )
