"""
Default image augmenter.

Applies, in order:
- an affine warp composing rotation, shear, scale and aspect ratio distortion
- a constant-color border (padding)
- a crop to the target shape, either exact or from a random size range
- a color jitter in HLS space

Every random draw comes from the ``np.random.Generator`` passed to
``process``; stages draw in a fixed order so a seeded generator reproduces
the output byte for byte.
"""

from __future__ import annotations

import logging
import math
from enum import IntEnum
from typing import Any, Optional, Tuple

import cv2
import numpy as np
from numpy.typing import NDArray

from pyimgaug.augmenters.base import ImageAugmenter
from pyimgaug.augmenters.params import DefaultAugmentParams, KwargsLike
from pyimgaug.augmenters.registry import register_augmenter
from pyimgaug.errors import ConfigurationError, PreconditionError
from pyimgaug.inputs.image_format import require_bgr_u8_hwc

logger = logging.getLogger(__name__)

HLS_LIMITS = (180, 255, 255)


class InterMethod(IntEnum):
    """Interpolation codes, matching OpenCV's ``cv2.INTER_*`` values."""

    NEAREST = cv2.INTER_NEAREST
    LINEAR = cv2.INTER_LINEAR
    CUBIC = cv2.INTER_CUBIC
    AREA = cv2.INTER_AREA
    LANCZOS4 = cv2.INTER_LANCZOS4
    AUTO = 9
    RANDOM = 10


def get_inter_method(
    inter_method: int,
    old_width: int,
    old_height: int,
    new_width: int,
    new_height: int,
    rng: np.random.Generator,
) -> int:
    """
    Resolve the interpolation method for one resize.

    Args:
        inter_method: Requested code. ``AUTO`` picks cubic when enlarging,
            area when shrinking and bilinear otherwise; ``RANDOM`` picks one
            of the five concrete methods.
        old_width, old_height: Source size
        new_width, new_height: Destination size
        rng: Random source, only consumed for ``RANDOM``

    Returns:
        A concrete ``cv2.INTER_*`` code
    """
    if inter_method == InterMethod.AUTO:
        if new_width > old_width and new_height > old_height:
            return int(InterMethod.CUBIC)
        if new_width < old_width and new_height < old_height:
            return int(InterMethod.AREA)
        return int(InterMethod.LINEAR)
    if inter_method == InterMethod.RANDOM:
        return int(rng.integers(0, 4, endpoint=True))
    return int(inter_method)


# Affine stage

def build_affine_matrix(
    src_width: int,
    src_height: int,
    new_width: float,
    new_height: float,
    *,
    angle: float,
    shear: float,
    scale: float,
    ratio: float,
) -> NDArray[np.float32]:
    """
    Compose rotation, shear, scale and aspect ratio into one 2x3 matrix.

    The height and width scale factors keep ``hs * ws`` tied to ``scale``
    while their quotient equals ``ratio``. The translation centers the
    transformed source in a ``new_width`` x ``new_height`` canvas.
    """
    a = math.cos(angle / 180.0 * math.pi)
    b = math.sin(angle / 180.0 * math.pi)
    hs = 2.0 * scale / (1.0 + ratio)
    ws = ratio * hs

    M = np.zeros((2, 3), dtype=np.float32)
    M[0, 0] = hs * a - shear * b * ws
    M[1, 0] = -b * ws
    M[0, 1] = hs * b + shear * a * ws
    M[1, 1] = a * ws

    ori_center_width = M[0, 0] * src_width + M[0, 1] * src_height
    ori_center_height = M[1, 0] * src_width + M[1, 1] * src_height
    M[0, 2] = (new_width - ori_center_width) / 2
    M[1, 2] = (new_height - ori_center_height) / 2
    return M


def _draw_angle(params: DefaultAugmentParams, rng: np.random.Generator) -> int:
    max_angle = max(params.max_rotate_angle, 0)
    angle = int(rng.integers(-max_angle, max_angle, endpoint=True))
    if params.rotate_list:
        angle = params.rotate_list[int(rng.integers(0, len(params.rotate_list)))]
    if params.rotate > 0:
        angle = params.rotate
    return angle


def apply_affine(
    image: NDArray[np.uint8],
    params: DefaultAugmentParams,
    rng: np.random.Generator,
) -> NDArray[np.uint8]:
    """Warp ``image`` through a randomly drawn affine transform.

    Exposed pixels are filled with the constant fill color.
    """
    src_h, src_w = image.shape[:2]

    shear = rng.random() * params.max_shear_ratio * 2 - params.max_shear_ratio
    angle = _draw_angle(params, rng)
    scale = (
        rng.random() * (params.max_random_scale - params.min_random_scale)
        + params.min_random_scale
    )
    ratio = rng.random() * params.max_aspect_ratio * 2 - params.max_aspect_ratio + 1

    new_width = max(params.min_img_size, min(params.max_img_size, scale * src_w))
    new_height = max(params.min_img_size, min(params.max_img_size, scale * src_h))
    dsize = (max(1, int(new_width)), max(1, int(new_height)))

    M = build_affine_matrix(
        src_w,
        src_h,
        new_width,
        new_height,
        angle=angle,
        shear=shear,
        scale=scale,
        ratio=ratio,
    )
    interpolation = get_inter_method(params.inter_method, src_w, src_h, dsize[0], dsize[1], rng)
    logger.debug(
        "affine: angle=%s shear=%.4f scale=%.4f ratio=%.4f size=%s inter=%s",
        angle,
        shear,
        scale,
        ratio,
        dsize,
        interpolation,
    )

    return cv2.warpAffine(
        image,
        M,
        dsize,
        flags=interpolation,
        borderMode=cv2.BORDER_CONSTANT,
        borderValue=params.fill_bgr,
    )


# Padding stage

def apply_padding(image: NDArray[np.uint8], pad: int, fill_bgr: Tuple[int, int, int]) -> NDArray[np.uint8]:
    """Add a constant border of ``pad`` pixels on every side."""
    if pad <= 0:
        return image
    return cv2.copyMakeBorder(
        image, pad, pad, pad, pad, cv2.BORDER_CONSTANT, value=fill_bgr
    )


# Crop stage

def _crop_offset(span: int, rand_crop: bool, rng: np.random.Generator) -> int:
    if rand_crop:
        return int(rng.integers(0, span, endpoint=True))
    return span // 2


def resolve_crop_range(params: DefaultAugmentParams) -> Tuple[int, int]:
    """Return ``(min_crop_size, max_crop_size)``; an unset minimum takes the maximum.

    An unset maximum stays -1 and fails the range check in :func:`apply_crop`.
    """
    min_size, max_size = params.min_crop_size, params.max_crop_size
    if min_size == -1:
        min_size = max_size
    return min_size, max_size


def apply_crop(
    image: NDArray[np.uint8],
    params: DefaultAugmentParams,
    rng: np.random.Generator,
) -> NDArray[np.uint8]:
    """
    Crop ``image`` to the target ``(height, width)`` of ``params.data_shape``.

    With a crop-size range configured a square of random side is cut and
    resized to the target; otherwise a region of exactly the target size is
    cut. The position is random with ``rand_crop`` and centered without.

    Raises:
        PreconditionError: If the crop does not fit in ``image``
    """
    height, width = image.shape[:2]
    target_h, target_w = params.target_hw

    if params.crop_range_enabled:
        min_size, max_size = resolve_crop_range(params)
        if not (height >= max_size and width >= max_size and max_size >= min_size > 0):
            raise PreconditionError(
                f"input image size {width}x{height} smaller than max_crop_size, "
                f"or invalid crop range [{params.min_crop_size}, {params.max_crop_size}]"
            )
        crop_size = int(rng.integers(min_size, max_size, endpoint=True))
        y = _crop_offset(height - crop_size, params.rand_crop, rng)
        x = _crop_offset(width - crop_size, params.rand_crop, rng)
        interpolation = get_inter_method(
            params.inter_method, crop_size, crop_size, target_w, target_h, rng
        )
        logger.debug("crop: size=%s at (x=%s, y=%s) inter=%s", crop_size, x, y, interpolation)
        roi = image[y:y + crop_size, x:x + crop_size]
        return cv2.resize(roi, (target_w, target_h), interpolation=interpolation)

    if height < target_h or width < target_w:
        raise PreconditionError(
            f"input image size {width}x{height} smaller than input shape {target_w}x{target_h}"
        )
    y = _crop_offset(height - target_h, params.rand_crop, rng)
    x = _crop_offset(width - target_w, params.rand_crop, rng)
    return image[y:y + target_h, x:x + target_w].copy()


# Color-jitter stage

def apply_color_jitter(
    image: NDArray[np.uint8],
    params: DefaultAugmentParams,
    rng: np.random.Generator,
) -> NDArray[np.uint8]:
    """Shift H, L and S by random offsets, clamping each channel to its range.

    Hue is clamped to [0, 180], not wrapped.
    """
    h = int(rng.random() * params.random_h * 2 - params.random_h)
    s = int(rng.random() * params.random_s * 2 - params.random_s)
    l = int(rng.random() * params.random_l * 2 - params.random_l)  # noqa: E741

    hls = cv2.cvtColor(image, cv2.COLOR_BGR2HLS).astype(np.int16)
    hls += np.array([h, l, s], dtype=np.int16)
    np.clip(hls, 0, np.array(HLS_LIMITS, dtype=np.int16), out=hls)
    return cv2.cvtColor(hls.astype(np.uint8), cv2.COLOR_HLS2BGR)


@register_augmenter("aug_default", description="default augmenter", tags=["default"])
class DefaultImageAugmenter(ImageAugmenter):
    """
    Affine, padding, crop and color augmentation driven by
    :class:`DefaultAugmentParams`.

    Examples
    --------
    >>> aug = DefaultImageAugmenter.from_kwargs({"data_shape": "(3,224,224)", "rand_crop": "1"})
    >>> out = aug.process(image, np.random.default_rng(0))
    """

    def __init__(self) -> None:
        self.params: Optional[DefaultAugmentParams] = None

    @classmethod
    def from_kwargs(cls, kwargs: KwargsLike) -> "DefaultImageAugmenter":
        aug = cls()
        aug.init(kwargs)
        return aug

    def init(self, kwargs: KwargsLike) -> list[tuple[str, Any]]:
        params, leftovers = DefaultAugmentParams.from_kwargs(kwargs)
        if leftovers:
            logger.debug("aug_default: passing through unknown keys %s", [k for k, _ in leftovers])
        self.params = params
        logger.debug("aug_default configured: %s", params)
        return leftovers

    def process(self, image: NDArray[np.uint8], rng: np.random.Generator) -> NDArray[np.uint8]:
        if self.params is None:
            raise ConfigurationError("DefaultImageAugmenter.init() must be called before process()")
        params = self.params
        res = require_bgr_u8_hwc(image)

        if params.affine_enabled:
            res = apply_affine(res, params, rng)
        res = apply_padding(res, params.pad, params.fill_bgr)
        res = apply_crop(res, params, rng)
        if params.color_jitter_enabled:
            res = apply_color_jitter(res, params, rng)
        return res
