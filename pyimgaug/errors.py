"""Exception types raised by the augmentation core."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid augmenter configuration (bad ``data_shape``, ``inter_method``, ...).

    Raised while building an augmenter; the pipeline should not proceed.
    """


class PreconditionError(ValueError):
    """A per-call requirement does not hold (e.g. the crop exceeds the image)."""
