"""
Image API Router - Classification, normalization and resampling
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_image_service
from api.exceptions import safe_endpoint
from core.image.converters import ImageConverters
from schemas import (
    ClassifyResponse,
    ImagePayload,
    NormalizeResponse,
    ResampleRequest,
    ResampleResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/classify")
@safe_endpoint
async def classify_image(
    request: ImagePayload, image_service=Depends(get_image_service)
) -> ClassifyResponse:
    """
    Classify the container of an image by its trailing footer.

    Only TGA 2.0 files carry a detectable footer; everything else is
    reported as natively decodable, and payloads shorter than the footer
    as unknown.
    """
    result = image_service.classify(request.image_base64)
    return ClassifyResponse(**result)


@router.post("/normalize")
@safe_endpoint
async def normalize_image(
    request: ImagePayload, image_service=Depends(get_image_service)
) -> NormalizeResponse:
    """Decode an image (transcoding legacy containers) and return it as PNG."""
    result = image_service.normalize(request.image_base64)

    return NormalizeResponse(
        format=result["format"],
        width=result["width"],
        height=result["height"],
        image_base64=ImageConverters.to_base64(result["png"]),
        processing_time_ms=result["processing_time_ms"],
    )


@router.post("/resample")
@safe_endpoint
async def resample_image(
    request: ResampleRequest, image_service=Depends(get_image_service)
) -> ResampleResponse:
    """
    Letterbox an image into a desired_width x desired_height PNG canvas.

    The source aspect ratio is preserved; the uncovered margin is produced
    by the edge policy (mirrored source content by default).
    """
    result = image_service.resample(
        request.image_base64,
        request.to_spec(image_service.default_spec),
        edge_policy=request.edge_policy,
    )

    return ResampleResponse(
        width=result["width"],
        height=result["height"],
        dest_rect=result["dest_rect"],
        image_base64=ImageConverters.to_base64(result["png"]),
        processing_time_ms=result["processing_time_ms"],
    )
