"""
Quick Start Example for pyimgaug.

Builds the default augmenter from textual options and writes a few
augmented samples of one image.
"""

import sys
from pathlib import Path

import numpy as np

from pyimgaug.augmenters import create_augmenter
from pyimgaug.io.image import read_image, write_image


def main():
    """Run quick start example."""
    src = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("data/sample.jpg")
    if not src.exists():
        print(f"Image not found: {src}")
        print("Usage: python examples/augment_quickstart.py <image> [out_dir]")
        return
    out_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else Path("augmented")

    augmenter = create_augmenter("aug_default")
    augmenter.init(
        {
            "data_shape": "(3,224,224)",
            "rand_crop": "1",
            "max_rotate_angle": "15",
            "max_shear_ratio": "0.1",
            "max_aspect_ratio": "0.2",
            "min_random_scale": "1.0",
            "max_random_scale": "1.3",
            "min_img_size": "224",
            "random_h": "10",
            "random_s": "20",
            "random_l": "20",
            "inter_method": "9",
            "fill_value": "127",
        }
    )

    image = read_image(src)
    rng = np.random.default_rng(0)
    for i in range(8):
        out = write_image(out_dir / f"{src.stem}_{i}.png", augmenter.process(image, rng))
        print(f"Wrote {out}")


if __name__ == "__main__":
    main()
