from __future__ import annotations

import random

import numpy as np


def seed_everything(seed: int) -> None:
    """Seed the global ``random`` and ``numpy`` generators.

    Augmenters draw only from the generator they are given; this helper
    covers surrounding code that still uses the global state.
    """

    s = int(seed)
    random.seed(s)
    np.random.seed(s)


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Return a ``np.random.Generator`` to pass to ``ImageAugmenter.process``.

    ``None`` draws fresh entropy from the OS.
    """

    if seed is None:
        return np.random.default_rng()
    return np.random.default_rng(int(seed))
