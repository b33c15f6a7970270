"""
Image augmenters.

Importing this package registers the built-in augmenters, so
``create_augmenter("aug_default")`` works right after
``import pyimgaug.augmenters``.
"""

from .base import ImageAugmenter
from .default import (
    DefaultImageAugmenter,
    InterMethod,
    apply_affine,
    apply_color_jitter,
    apply_crop,
    apply_padding,
    build_affine_matrix,
    get_inter_method,
)
from .params import (
    PARAM_FIELDS,
    DefaultAugmentParams,
    ParamField,
    list_default_aug_params,
    param_fields_info,
    parse_data_shape,
    parse_rotate_list,
    resolve_fill_value,
)
from .registry import (
    AUGMENTER_REGISTRY,
    AugmenterRegistry,
    augmenter_info,
    create_augmenter,
    list_augmenters,
    register_augmenter,
)

__all__ = [
    # Interface
    "ImageAugmenter",
    # Default augmenter
    "DefaultImageAugmenter",
    "InterMethod",
    "get_inter_method",
    "build_affine_matrix",
    "apply_affine",
    "apply_padding",
    "apply_crop",
    "apply_color_jitter",
    # Parameters
    "PARAM_FIELDS",
    "ParamField",
    "DefaultAugmentParams",
    "list_default_aug_params",
    "param_fields_info",
    "parse_data_shape",
    "parse_rotate_list",
    "resolve_fill_value",
    # Registry
    "AUGMENTER_REGISTRY",
    "AugmenterRegistry",
    "register_augmenter",
    "create_augmenter",
    "list_augmenters",
    "augmenter_info",
]
