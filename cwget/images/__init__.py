"""Image conversion utilities."""

from .normalizer import PILLOW_FORMATS, normalize_image

__all__ = ["PILLOW_FORMATS", "normalize_image"]
