"""
Shared FastAPI dependencies for Image Normalize Flow.
"""

import logging
from typing import Any, Dict

from fastapi import HTTPException, Request

from services.image_service import ImageService

logger = logging.getLogger(__name__)


def get_image_service(request: Request) -> ImageService:
    """
    Get ImageService instance from app state.

    Raises:
        HTTPException: If the service is not initialized
    """
    try:
        return request.app.state.image_service
    except AttributeError as e:
        logger.error(f"Image service not initialized in app state: {e}")
        raise HTTPException(
            status_code=500, detail="Internal server error: Image service not initialized"
        )


def get_config(request: Request) -> Dict[str, Any]:
    """Get resolved configuration dict from app state."""
    return getattr(request.app.state, "config", {})
