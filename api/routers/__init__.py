"""
API Routers
"""

from . import image, system

__all__ = ["image", "system"]
