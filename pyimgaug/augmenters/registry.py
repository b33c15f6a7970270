"""
Augmenter registry.

Augmenter implementations register a zero-argument constructor under a
string name at import time; pipelines look them up by that name.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from pyimgaug.augmenters.base import ImageAugmenter


@dataclass
class AugmenterEntry:
    name: str
    constructor: Callable[[], ImageAugmenter]
    description: str
    tags: tuple[str, ...]


class AugmenterRegistry:
    """Registry for storing augmenter constructors with a description."""

    def __init__(self) -> None:
        self._registry: Dict[str, AugmenterEntry] = {}

    # ------------------------------------------------------------------
    def register(
        self,
        name: str,
        constructor: Callable[[], ImageAugmenter],
        *,
        description: str = "",
        tags: Optional[Iterable[str]] = None,
        overwrite: bool = False,
    ) -> None:
        if not overwrite and name in self._registry:
            raise KeyError(
                f"Augmenter {name!r} already exists. Set overwrite=True to replace it."
            )
        self._registry[str(name)] = AugmenterEntry(
            name=str(name),
            constructor=constructor,
            description=str(description),
            tags=tuple(str(t) for t in (tags or ())),
        )

    def get(self, name: str) -> Callable[[], ImageAugmenter]:
        return self.info(name).constructor

    def available(self, *, tags: Optional[Iterable[str]] = None) -> List[str]:
        if tags is None:
            return sorted(self._registry)
        tag_set = {str(t) for t in tags}
        return sorted(
            entry.name for entry in self._registry.values() if tag_set.issubset(entry.tags)
        )

    def info(self, name: str) -> AugmenterEntry:
        try:
            return self._registry[str(name)]
        except KeyError as exc:
            available = ", ".join(sorted(self._registry)) or "<empty>"
            raise KeyError(
                f"Augmenter {name!r} not found. Available augmenters: {available}"
            ) from exc


AUGMENTER_REGISTRY = AugmenterRegistry()


def register_augmenter(
    name: str,
    *,
    description: str = "",
    tags: Optional[Iterable[str]] = None,
    overwrite: bool = False,
) -> Callable[[Callable[[], ImageAugmenter]], Callable[[], ImageAugmenter]]:
    """
    Decorator registering an augmenter class at import time.

    Examples
    --------
    >>> @register_augmenter("aug_identity", description="returns the input")
    ... class IdentityAugmenter(ImageAugmenter):
    ...     ...
    """

    def decorator(constructor: Callable[[], ImageAugmenter]) -> Callable[[], ImageAugmenter]:
        AUGMENTER_REGISTRY.register(
            name,
            constructor,
            description=description,
            tags=tags,
            overwrite=overwrite,
        )
        return constructor

    return decorator


def create_augmenter(name: str) -> ImageAugmenter:
    """Instantiate the augmenter registered as ``name`` (not yet configured)."""
    return AUGMENTER_REGISTRY.get(name)()


def list_augmenters(*, tags: Optional[Iterable[str]] = None) -> List[str]:
    return AUGMENTER_REGISTRY.available(tags=tags)


def augmenter_info(name: str) -> Dict[str, Any]:
    entry = AUGMENTER_REGISTRY.info(name)
    constructor = entry.constructor
    return {
        "name": entry.name,
        "description": entry.description,
        "tags": list(entry.tags),
        "constructor": {
            "module": getattr(constructor, "__module__", "<unknown>"),
            "qualname": getattr(constructor, "__qualname__", "<unknown>"),
        },
    }
