"""pyimgaug - randomized image augmentation for training pipelines.

Keep top-level imports lightweight: the augmenters pull in OpenCV, so they
are lazy-loaded on first attribute access.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__version__ = "0.1.0"

__all__ = [
    # Modules
    "augmenters",
    "config",
    "inputs",
    "io",
    "utils",
    # Errors
    "ConfigurationError",
    "PreconditionError",
    # Augmenters
    "DefaultImageAugmenter",
    "DefaultAugmentParams",
    "create_augmenter",
    "list_augmenters",
]


_LAZY_SUBMODULES = {
    "augmenters",
    "config",
    "inputs",
    "io",
    "utils",
}

_LAZY_EXPORTS = {
    "ConfigurationError": ("errors", "ConfigurationError"),
    "PreconditionError": ("errors", "PreconditionError"),
    "DefaultImageAugmenter": ("augmenters", "DefaultImageAugmenter"),
    "DefaultAugmentParams": ("augmenters", "DefaultAugmentParams"),
    "create_augmenter": ("augmenters", "create_augmenter"),
    "list_augmenters": ("augmenters", "list_augmenters"),
}


def __getattr__(name: str) -> Any:  # pragma: no cover - thin delegation
    if name in _LAZY_SUBMODULES:
        module = import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module

    target = _LAZY_EXPORTS.get(name)
    if target is not None:
        module_name, attr = target
        module = import_module(f"{__name__}.{module_name}")
        value = getattr(module, attr)
        globals()[name] = value
        return value

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - tooling convenience
    return sorted(set(globals()) | set(__all__))
