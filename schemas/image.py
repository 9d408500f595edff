"""
Image processing API models.

This module contains models for image operations:
- Container classification
- Normalization (decode + transcode to PNG)
- Aspect-fit resampling
"""

from typing import Optional

from pydantic import BaseModel, Field

from core.constants import ImageConstants
from core.enums import ContainerFormat, EdgePolicy

from .common import Rect, ResampleSpec


class ImagePayload(BaseModel):
    """Base64 encoded image bytes, in any supported container"""

    image_base64: str = Field(..., min_length=1, description="Base64 encoded image bytes")


class ClassifyResponse(BaseModel):
    """Response from container classification"""

    format: ContainerFormat
    size_bytes: int


class NormalizeResponse(BaseModel):
    """Response from normalization to PNG"""

    format: ContainerFormat
    width: int
    height: int
    image_base64: str
    processing_time_ms: int


class ResampleRequest(ImagePayload):
    """Request to letterbox an image into a fixed canvas"""

    desired_width: Optional[int] = Field(
        default=None,
        ge=ImageConstants.MIN_CANVAS_DIMENSION,
        le=ImageConstants.MAX_CANVAS_DIMENSION,
        description="Output canvas width (defaults to configured width)",
    )
    desired_height: Optional[int] = Field(
        default=None,
        ge=ImageConstants.MIN_CANVAS_DIMENSION,
        le=ImageConstants.MAX_CANVAS_DIMENSION,
        description="Output canvas height (defaults to configured height)",
    )
    edge_policy: Optional[EdgePolicy] = Field(
        default=None, description="Border policy (defaults to configured policy)"
    )

    def to_spec(self, default: ResampleSpec) -> ResampleSpec:
        """Build the canvas spec, filling missing sides from the default."""
        return ResampleSpec(
            desired_width=self.desired_width or default.desired_width,
            desired_height=self.desired_height or default.desired_height,
        )


class ResampleResponse(BaseModel):
    """Response from aspect-fit resampling"""

    width: int
    height: int
    dest_rect: Rect
    image_base64: str
    processing_time_ms: int
