"""
Common data structures shared across layers.

- Rect: axis-aligned integer rectangle (source region or destination placement)
- ResampleSpec: output canvas size and aspect target
"""

from typing import Dict

from pydantic import BaseModel, Field

from core.constants import ImageConstants


class Rect(BaseModel):
    """
    Axis-aligned integer rectangle.

    Used both as the full source extent and as the destination placement
    inside the output canvas.
    """

    x: int = Field(..., ge=0, description="X coordinate")
    y: int = Field(..., ge=0, description="Y coordinate")
    width: int = Field(..., gt=0, description="Width")
    height: int = Field(..., gt=0, description="Height")

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for service layer compatibility."""
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    @classmethod
    def full(cls, width: int, height: int) -> "Rect":
        """Rect covering a whole width x height extent."""
        return cls(x=0, y=0, width=width, height=height)

    @property
    def x2(self) -> int:
        """Get right edge coordinate."""
        return self.x + self.width

    @property
    def y2(self) -> int:
        """Get bottom edge coordinate."""
        return self.y + self.height

    def fits_within(self, width: int, height: int) -> bool:
        """Check if rect lies inside a width x height canvas."""
        return self.x2 <= width and self.y2 <= height


class ResampleSpec(BaseModel):
    """Output canvas size; also defines the target aspect ratio."""

    desired_width: int = Field(
        default=ImageConstants.DEFAULT_CANVAS_WIDTH,
        ge=ImageConstants.MIN_CANVAS_DIMENSION,
        le=ImageConstants.MAX_CANVAS_DIMENSION,
        description="Output canvas width in pixels",
    )
    desired_height: int = Field(
        default=ImageConstants.DEFAULT_CANVAS_HEIGHT,
        ge=ImageConstants.MIN_CANVAS_DIMENSION,
        le=ImageConstants.MAX_CANVAS_DIMENSION,
        description="Output canvas height in pixels",
    )

    @property
    def aspect(self) -> float:
        """Target aspect ratio (width / height)."""
        return self.desired_width / self.desired_height
