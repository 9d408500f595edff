"""
Exception handling for the API layer.

Maps domain exceptions to HTTP responses and provides the safe_endpoint
decorator used by all routers.
"""

import functools
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from PIL import Image

from core.exceptions import ImageParseError, InvalidStreamError

logger = logging.getLogger(__name__)


def safe_endpoint(func):
    """
    Wrap an async endpoint with standard error mapping.

    - HTTPException: re-raised unchanged
    - InvalidStreamError / ValueError: 400
    - ImageParseError and codec decode failures (OSError, including
      UnidentifiedImageError, and DecompressionBombError): 422
    - anything else: 500
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except HTTPException:
            raise
        except (ImageParseError, OSError, Image.DecompressionBombError) as e:
            logger.warning(f"{func.__name__}: undecodable image: {e}")
            raise HTTPException(status_code=422, detail=str(e))
        except ValueError as e:
            logger.warning(f"{func.__name__}: invalid request: {e}")
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            logger.exception(f"{func.__name__} failed: {e}")
            raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")

    return wrapper


async def invalid_stream_handler(request: Request, exc: InvalidStreamError) -> JSONResponse:
    logger.warning(f"Invalid stream on {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def image_parse_handler(request: Request, exc: ImageParseError) -> JSONResponse:
    logger.warning(f"Parse failure on {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers for domain exceptions raised outside safe_endpoint."""
    app.add_exception_handler(InvalidStreamError, invalid_stream_handler)
    app.add_exception_handler(ImageParseError, image_parse_handler)
