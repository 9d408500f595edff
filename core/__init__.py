"""
Core modules for Image Normalize Flow
"""

from .enums import ContainerFormat, EdgePolicy, InterpolationMode
from .exceptions import ImageParseError, ImageStreamError, InvalidStreamError

__all__ = [
    "ContainerFormat",
    "EdgePolicy",
    "InterpolationMode",
    "ImageStreamError",
    "InvalidStreamError",
    "ImageParseError",
]
