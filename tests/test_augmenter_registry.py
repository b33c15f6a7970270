from __future__ import annotations

import numpy as np
import pytest

from pyimgaug.augmenters import (
    AUGMENTER_REGISTRY,
    AugmenterRegistry,
    DefaultImageAugmenter,
    ImageAugmenter,
    augmenter_info,
    create_augmenter,
    list_augmenters,
)


def test_default_augmenter_is_registered() -> None:
    assert "aug_default" in list_augmenters()
    assert "aug_default" in list_augmenters(tags=["default"])

    info = augmenter_info("aug_default")
    assert info["name"] == "aug_default"
    assert info["description"] == "default augmenter"
    assert info["constructor"]["qualname"] == "DefaultImageAugmenter"


def test_create_augmenter_returns_fresh_unconfigured_instance() -> None:
    a = create_augmenter("aug_default")
    b = create_augmenter("aug_default")
    assert isinstance(a, DefaultImageAugmenter)
    assert a is not b
    assert a.params is None

    a.init({"data_shape": "(3,4,4)"})
    out = a(np.zeros((6, 6, 3), dtype=np.uint8), np.random.default_rng(0))
    assert out.shape == (4, 4, 3)


def test_unknown_augmenter_lists_available_names() -> None:
    with pytest.raises(KeyError) as exc:
        create_augmenter("aug_missing")
    assert "aug_default" in str(exc.value)


def test_registry_duplicate_requires_overwrite() -> None:
    registry = AugmenterRegistry()
    registry.register("toy", ImageAugmenter, description="toy")

    with pytest.raises(KeyError):
        registry.register("toy", ImageAugmenter)

    registry.register("toy", DefaultImageAugmenter, description="replaced", overwrite=True)
    assert registry.info("toy").description == "replaced"
    assert registry.available() == ["toy"]
    assert registry.available(tags=["missing"]) == []


def test_register_custom_augmenter_in_global_registry() -> None:
    class _Identity(ImageAugmenter):
        def init(self, kwargs):  # noqa: ANN001
            return list(dict(kwargs).items())

        def process(self, image, rng):  # noqa: ANN001
            return image.copy()

    AUGMENTER_REGISTRY.register(
        "test_aug_identity", _Identity, description="identity", tags=["unit"], overwrite=True
    )
    assert "test_aug_identity" in list_augmenters(tags=["unit"])

    aug = create_augmenter("test_aug_identity")
    assert aug.init({"k": "v"}) == [("k", "v")]
    img = np.ones((3, 3, 3), dtype=np.uint8)
    np.testing.assert_array_equal(aug.process(img, np.random.default_rng(0)), img)


def test_base_augmenter_is_abstract() -> None:
    base = ImageAugmenter()
    with pytest.raises(NotImplementedError):
        base.init({})
    with pytest.raises(NotImplementedError):
        base.process(np.zeros((1, 1, 3), dtype=np.uint8), np.random.default_rng(0))
