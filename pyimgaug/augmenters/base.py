from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyimgaug.augmenters.params import KwargsLike


class ImageAugmenter:
    """
    Base class for image augmenters.

    An augmenter is configured once through :meth:`init` and then applied to
    one image per :meth:`process` call. All randomness comes from the
    generator passed to ``process``, so a fixed seed reproduces the output.
    """

    def init(self, kwargs: KwargsLike) -> list[tuple[str, Any]]:
        """Configure the augmenter and return the key/value pairs it did not consume."""
        raise NotImplementedError

    def process(self, image: NDArray[np.uint8], rng: np.random.Generator) -> NDArray[np.uint8]:
        """Return an augmented copy of ``image``."""
        raise NotImplementedError

    def __call__(self, image: NDArray[np.uint8], rng: np.random.Generator) -> NDArray[np.uint8]:
        return self.process(image, rng)
