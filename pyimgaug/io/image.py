from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np


def read_image(path: str | Path) -> np.ndarray:
    """Read a color image from disk via OpenCV as ``BGR/u8/HWC``."""

    path_str = str(path)
    img = cv2.imread(path_str, cv2.IMREAD_COLOR)
    if img is None:
        raise FileNotFoundError(f"Unable to read image: {path_str}")
    return img


def write_image(path: str | Path, image: np.ndarray) -> Path:
    """Write a ``BGR/u8/HWC`` image; the format follows the file extension."""

    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if not cv2.imwrite(str(out_path), image):
        raise ValueError(f"Unable to write image: {out_path}")
    return out_path
