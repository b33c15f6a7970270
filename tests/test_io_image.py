from __future__ import annotations

import numpy as np

from pyimgaug.io.image import read_image, write_image


def test_write_then_read_keeps_bgr_order(tmp_path) -> None:
    bgr = np.zeros((2, 2, 3), dtype=np.uint8)
    bgr[0, 0] = np.asarray([10, 20, 30], dtype=np.uint8)  # B,G,R

    path = write_image(tmp_path / "nested" / "x.png", bgr)
    assert path.exists()

    loaded = read_image(path)
    assert loaded.shape == (2, 2, 3)
    assert loaded[0, 0].tolist() == [10, 20, 30]


def test_read_image_missing_path_raises(tmp_path) -> None:
    missing = tmp_path / "missing.png"
    try:
        read_image(missing)
    except FileNotFoundError:
        return
    raise AssertionError("Expected FileNotFoundError")
