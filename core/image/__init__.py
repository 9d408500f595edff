"""
Image handling - modular architecture.

This package provides focused image utilities:
- converters: Format conversions (PIL, NumPy RGBA, PNG bytes, base64)
- sniffer: Container classification by trailing footer signature
- transcoder: Legacy (TGA 2.0) to PNG transcoding
- loader: Decode facade that routes through the transcoder when needed
- resampler: Aspect-fit letterboxing into a fixed-size canvas
"""

from core.image.converters import ImageConverters
from core.image.loader import ImageLoader
from core.image.resampler import AspectFitResampler, CompositionPlan
from core.image.sniffer import ContainerSniffer
from core.image.transcoder import FormatTranscoder

__all__ = [
    "ImageConverters",
    "ContainerSniffer",
    "FormatTranscoder",
    "ImageLoader",
    "AspectFitResampler",
    "CompositionPlan",
]
