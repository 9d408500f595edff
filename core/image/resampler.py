"""
Aspect-ratio-preserving resampling into a fixed-size canvas.

The source is scaled into a single destination rectangle:
- relatively wider sources use the full canvas width, anchored at the top
- relatively taller sources use the full canvas height, centered horizontally

Canvas pixels outside the destination rectangle are produced by the edge
policy. The default (REFLECT) mirror-tiles the scaled source, so the margin
shows mirrored content rather than a solid fill.
"""

import io
import logging
from dataclasses import dataclass
from typing import Optional

import cv2
import numpy as np
from PIL import Image

from core.constants import ErrorMessages, ImageConstants
from core.enums import EdgePolicy, InterpolationMode
from core.image.converters import ImageConverters
from schemas.common import Rect, ResampleSpec

logger = logging.getLogger(__name__)

INTERPOLATION_FLAGS = {
    InterpolationMode.BICUBIC: cv2.INTER_CUBIC,
    InterpolationMode.AREA: cv2.INTER_AREA,
}

BORDER_TYPES = {
    EdgePolicy.REFLECT: cv2.BORDER_REFLECT,
    EdgePolicy.REPLICATE: cv2.BORDER_REPLICATE,
    EdgePolicy.CONSTANT: cv2.BORDER_CONSTANT,
}

TRANSPARENT = (0, 0, 0, 0)


@dataclass(frozen=True)
class CompositionPlan:
    """Where and how the source is drawn into the canvas."""

    dest_rect: Rect
    interpolation: InterpolationMode = InterpolationMode.BICUBIC
    edge_policy: EdgePolicy = EdgePolicy.REFLECT


def _extent(value: float) -> int:
    return max(ImageConstants.MIN_DEST_EXTENT, round(value))


class AspectFitResampler:
    """Letterboxes images into a fixed canvas while preserving aspect ratio."""

    def __init__(
        self,
        interpolation: InterpolationMode = InterpolationMode.BICUBIC,
        edge_policy: EdgePolicy = EdgePolicy.REFLECT,
    ):
        """
        Initialize resampler.

        Args:
            interpolation: Interpolation used for scaling
            edge_policy: Default policy for the canvas margin
        """
        self.interpolation = interpolation
        self.edge_policy = edge_policy

    @staticmethod
    def fit_rect(src_width: int, src_height: int, spec: ResampleSpec) -> Rect:
        """
        Compute the destination rectangle for a source extent.

        Args:
            src_width: Source width in pixels
            src_height: Source height in pixels
            spec: Output canvas spec

        Returns:
            Destination rectangle inside the canvas
        """
        if src_width <= 0 or src_height <= 0:
            raise ValueError(
                ErrorMessages.INVALID_SOURCE_SIZE.format(width=src_width, height=src_height)
            )

        width, height = spec.desired_width, spec.desired_height
        dest_aspect = spec.aspect
        src_aspect = src_width / src_height
        relative_aspect = src_aspect / dest_aspect

        if relative_aspect >= ImageConstants.FULL_ASPECT:
            return Rect(x=0, y=0, width=width, height=_extent(height / relative_aspect))

        dest_width = _extent(width * relative_aspect)
        x = round(width * (1 - relative_aspect) / 2)
        return Rect(x=min(x, width - dest_width), y=0, width=dest_width, height=height)

    def plan(
        self,
        src_width: int,
        src_height: int,
        spec: ResampleSpec,
        edge_policy: Optional[EdgePolicy] = None,
    ) -> CompositionPlan:
        """Build the composition plan for one resample call."""
        return CompositionPlan(
            dest_rect=self.fit_rect(src_width, src_height, spec),
            interpolation=self.interpolation,
            edge_policy=edge_policy or self.edge_policy,
        )

    def compose(
        self,
        image: Image.Image,
        spec: ResampleSpec,
        edge_policy: Optional[EdgePolicy] = None,
        plan: Optional[CompositionPlan] = None,
    ) -> np.ndarray:
        """
        Draw the full source into the planned rect of a fixed-size canvas.

        Args:
            image: Decoded source image
            spec: Output canvas spec
            edge_policy: Optional override of the default edge policy
            plan: Plan already built for this image, built here when omitted

        Returns:
            RGBA NumPy array of shape (desired_height, desired_width, 4)
        """
        if plan is None:
            plan = self.plan(image.width, image.height, spec, edge_policy)
        rect = plan.dest_rect

        source = ImageConverters.pil_to_rgba(image)
        scaled = cv2.resize(
            source, (rect.width, rect.height), interpolation=INTERPOLATION_FLAGS[plan.interpolation]
        )

        canvas = cv2.copyMakeBorder(
            scaled,
            rect.y,
            spec.desired_height - rect.y2,
            rect.x,
            spec.desired_width - rect.x2,
            BORDER_TYPES[plan.edge_policy],
            value=TRANSPARENT,
        )

        logger.debug(
            f"Composed {image.width}x{image.height} into {rect.to_dict()} "
            f"on {spec.desired_width}x{spec.desired_height} canvas ({plan.edge_policy.value})"
        )
        return canvas

    def resample(
        self,
        image: Image.Image,
        spec: ResampleSpec,
        edge_policy: Optional[EdgePolicy] = None,
        plan: Optional[CompositionPlan] = None,
    ) -> io.BytesIO:
        """
        Letterbox an image into a desired_width x desired_height PNG.

        Returns:
            RGBA PNG stream positioned at 0
        """
        return ImageConverters.encode_png(self.compose(image, spec, edge_policy, plan))
