from __future__ import annotations

from .image import read_image, write_image

__all__ = ["read_image", "write_image"]
