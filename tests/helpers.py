"""
Shared test helpers
"""

import io

from PIL import Image

from core.constants import StreamConstants

# TGA 2.0 footer: extension offset, developer offset, signature, ".", NUL
TGA_FOOTER = b"\x00" * 8 + StreamConstants.FOOTER_SIGNATURE.encode("ascii") + b".\x00"


def encode(image: Image.Image, format: str, **kwargs) -> bytes:
    """Encode a PIL image to bytes in the given format."""
    buffer = io.BytesIO()
    image.save(buffer, format=format, **kwargs)
    return buffer.getvalue()


class ForwardOnlyStream(io.RawIOBase):
    """Readable stream that refuses to seek (pipe or socket stand-in)."""

    def __init__(self, data: bytes):
        self._inner = io.BytesIO(data)

    def readable(self):
        return True

    def seekable(self):
        return False

    def readinto(self, b):
        chunk = self._inner.read(len(b))
        b[: len(chunk)] = chunk
        return len(chunk)
