"""
Centralized enums for Image Normalize Flow.
"""

from enum import Enum


class ContainerFormat(str, Enum):
    """Container classification produced by footer sniffing."""

    UNKNOWN = "unknown"
    LEGACY_FOOTER_TAGGED = "legacy_footer_tagged"
    NATIVELY_DECODABLE = "natively_decodable"

    @property
    def needs_transcode(self) -> bool:
        """Only footer-tagged streams go through the transcoder."""
        return self is ContainerFormat.LEGACY_FOOTER_TAGGED


class InterpolationMode(str, Enum):
    """Interpolation used when scaling the source into the destination rect."""

    BICUBIC = "bicubic"
    AREA = "area"


class EdgePolicy(str, Enum):
    """How canvas pixels outside the destination rect are produced."""

    REFLECT = "reflect"  # Mirror tiling of the scaled source
    REPLICATE = "replicate"
    CONSTANT = "constant"  # Transparent fill
