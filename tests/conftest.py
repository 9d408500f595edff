"""
Pytest configuration and fixtures for Image Normalize Flow tests
"""

import cv2
import numpy as np
import pytest
from PIL import Image

from services.image_service import ImageService
from tests.helpers import TGA_FOOTER, encode


@pytest.fixture
def test_image():
    """Create a 320x160 RGB test image with distinct content"""
    image = np.zeros((160, 320, 3), dtype=np.uint8)
    cv2.rectangle(image, (20, 20), (140, 140), (255, 255, 255), -1)
    cv2.circle(image, (240, 80), 50, (0, 128, 255), -1)
    return Image.fromarray(image)


@pytest.fixture
def png_bytes(test_image):
    """Test image encoded as PNG"""
    return encode(test_image, "PNG")


@pytest.fixture
def jpeg_bytes(test_image):
    """Test image encoded as JPEG"""
    return encode(test_image, "JPEG", quality=90)


@pytest.fixture
def tga_bytes(test_image):
    """Test image encoded as TGA (Pillow writes the 2.0 footer)"""
    data = encode(test_image, "TGA")
    assert data.endswith(TGA_FOOTER)
    return data


@pytest.fixture
def broken_tga_bytes():
    """Footer-tagged payload whose header no codec can parse"""
    return b"\xff" * 100 + TGA_FOOTER


@pytest.fixture
def truncated_png_bytes(png_bytes):
    """PNG whose header parses but whose pixel data stops halfway"""
    return png_bytes[: len(png_bytes) // 2]


@pytest.fixture
def truncated_tga_bytes(tga_bytes):
    """Footer-tagged TGA whose pixel data is cut short"""
    return tga_bytes[:200] + tga_bytes[-26:]


@pytest.fixture
def image_service():
    """Create ImageService instance for testing"""
    return ImageService(max_upload_mb=5)
