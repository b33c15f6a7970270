from __future__ import annotations

from .image_format import require_bgr_u8_hwc

__all__ = ["require_bgr_u8_hwc"]
