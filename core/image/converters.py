"""
Image format conversion utilities.

Handles conversions between different image representations:
- PIL Images (decoded codec output)
- NumPy arrays (RGBA, used for pixel composition with OpenCV)
- PNG byte streams
- Base64 encoded strings
"""

import base64
import binascii
import io
import logging
from typing import Union

import numpy as np
from PIL import Image

from core.constants import ErrorMessages, ImageConstants

logger = logging.getLogger(__name__)


class ImageConverters:
    """Utilities for converting between image formats."""

    @staticmethod
    def pil_to_rgba(image: Image.Image) -> np.ndarray:
        """
        Convert PIL Image to a 4-channel RGBA NumPy array.

        Args:
            image: PIL Image in any mode

        Returns:
            NumPy array of shape (height, width, 4), dtype uint8
        """
        if image.mode != ImageConstants.OUTPUT_MODE:
            image = image.convert(ImageConstants.OUTPUT_MODE)

        return np.asarray(image, dtype=np.uint8).copy()

    @staticmethod
    def rgba_to_pil(array: np.ndarray) -> Image.Image:
        """
        Convert RGBA NumPy array to PIL Image.

        Args:
            array: NumPy array of shape (height, width, 4)

        Returns:
            PIL Image in RGBA mode
        """
        return Image.fromarray(np.ascontiguousarray(array, dtype=np.uint8))

    @staticmethod
    def encode_png(image: Union[np.ndarray, Image.Image]) -> io.BytesIO:
        """
        Encode image as PNG.

        No text, time or EXIF chunks are written, so identical pixels always
        produce identical bytes.

        Args:
            image: PIL Image or RGBA NumPy array

        Returns:
            BytesIO holding the PNG, positioned at 0
        """
        if isinstance(image, np.ndarray):
            image = ImageConverters.rgba_to_pil(image)

        buffer = io.BytesIO()
        image.save(buffer, format=ImageConstants.OUTPUT_FORMAT)
        buffer.seek(0)
        return buffer

    @staticmethod
    def to_base64(image: Union[bytes, io.BytesIO]) -> str:
        """
        Convert encoded image bytes to base64 string.

        Args:
            image: Raw bytes or a BytesIO buffer

        Returns:
            Base64 encoded string
        """
        if isinstance(image, io.BytesIO):
            image = image.getvalue()

        return base64.b64encode(image).decode("utf-8")

    @staticmethod
    def from_base64(base64_string: str) -> bytes:
        """
        Decode base64 string to raw image bytes.

        Accepts data URLs ("data:image/png;base64,...").

        Raises:
            ValueError: If the payload is not valid base64
        """
        if base64_string.startswith("data:") and "," in base64_string:
            base64_string = base64_string.split(",", 1)[1]

        try:
            return base64.b64decode(base64_string, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.error(f"Failed to decode base64 image: {e}")
            raise ValueError(ErrorMessages.INVALID_BASE64.format(error=e)) from e
