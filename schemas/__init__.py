"""
Schemas Package

This package contains all Pydantic schemas for data validation and serialization,
shared across the API, service and core layers.
"""

# Re-export enums from centralized location for convenience
from core.enums import ContainerFormat, EdgePolicy, InterpolationMode

# Common models (core data structures)
from .common import Rect, ResampleSpec

# Image processing models
from .image import (
    ClassifyResponse,
    ImagePayload,
    NormalizeResponse,
    ResampleRequest,
    ResampleResponse,
)

# System models
from .system import SystemStatus

__all__ = [
    # Common models
    "Rect",
    "ResampleSpec",
    # Image models
    "ImagePayload",
    "ClassifyResponse",
    "NormalizeResponse",
    "ResampleRequest",
    "ResampleResponse",
    # System models
    "SystemStatus",
    # Enums (re-exported from core.enums)
    "ContainerFormat",
    "EdgePolicy",
    "InterpolationMode",
]
