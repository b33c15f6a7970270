from __future__ import annotations

from typing import Any

import numpy as np


def _require_ndarray(image: Any) -> np.ndarray:
    if not isinstance(image, np.ndarray):
        raise TypeError(f"Expected np.ndarray, got {type(image)}")
    return image


def require_bgr_u8_hwc(image: Any) -> np.ndarray:
    """Validate an in-memory image as ``BGR/u8/HWC`` with three channels.

    This function is intentionally strict: grayscale, float or CHW input is
    rejected rather than guessed. The array is returned unchanged.
    """

    arr = _require_ndarray(image)
    if arr.dtype != np.uint8:
        raise ValueError(f"Expected dtype=uint8, got {arr.dtype}")
    if arr.ndim != 3 or arr.shape[2] != 3:
        raise ValueError(f"Expected shape (H,W,3), got {arr.shape}")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ValueError(f"Expected a non-empty image, got shape {arr.shape}")
    return arr
