"""
Parameters of the default image augmenter.

Options arrive as textual key/value pairs (e.g. from a record-iterator
configuration) and are parsed into a typed, immutable record. Keys that are
not augmentation parameters are handed back to the caller so a secondary
consumer can pick them up.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Tuple, Union

from pyimgaug.errors import ConfigurationError

MAX_IMG_SIZE_UNSET = 1e10
VALID_INTER_METHODS = (1, 2, 3, 4, 9, 10)

KwargsLike = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ParamField:
    name: str
    type_name: str
    default: Any
    description: str


PARAM_FIELDS: Tuple[ParamField, ...] = (
    ParamField("rand_crop", "bool", False, "Augmentation Param: Whether to random crop on the image."),
    ParamField("crop_y_start", "int", -1, "Augmentation Param: Where to nonrandom crop on y."),
    ParamField("crop_x_start", "int", -1, "Augmentation Param: Where to nonrandom crop on x."),
    ParamField(
        "max_rotate_angle",
        "int",
        0,
        "Augmentation Param: rotated randomly in [-max_rotate_angle, max_rotate_angle].",
    ),
    ParamField(
        "max_aspect_ratio",
        "float",
        0.0,
        "Augmentation Param: denotes the max ratio of random aspect ratio augmentation.",
    ),
    ParamField("max_shear_ratio", "float", 0.0, "Augmentation Param: denotes the max random shearing ratio."),
    ParamField("max_crop_size", "int", -1, "Augmentation Param: Maximum crop size."),
    ParamField("min_crop_size", "int", -1, "Augmentation Param: Minimum crop size."),
    ParamField("max_random_scale", "float", 1.0, "Augmentation Param: Maximum scale ratio."),
    ParamField("min_random_scale", "float", 1.0, "Augmentation Param: Minimum scale ratio."),
    ParamField("max_img_size", "float", MAX_IMG_SIZE_UNSET, "Augmentation Param: Maximum image size after resizing."),
    ParamField("min_img_size", "float", 0.0, "Augmentation Param: Minimum image size after resizing."),
    ParamField("random_h", "int", 0, "Augmentation Param: Maximum value of H channel in HSL color space."),
    ParamField("random_s", "int", 0, "Augmentation Param: Maximum value of S channel in HSL color space."),
    ParamField("random_l", "int", 0, "Augmentation Param: Maximum value of L channel in HSL color space."),
    ParamField("rotate", "int", -1, "Augmentation Param: Rotate angle."),
    ParamField("fill_value", "int", 255, "Augmentation Param: Filled color value while padding."),
    ParamField("fill_value_r", "int", -1, "Augmentation Param: Red channel fill value, falls back to fill_value."),
    ParamField("fill_value_g", "int", -1, "Augmentation Param: Green channel fill value, falls back to fill_value."),
    ParamField("fill_value_b", "int", -1, "Augmentation Param: Blue channel fill value, falls back to fill_value."),
    ParamField(
        "inter_method",
        "int",
        1,
        "Augmentation Param: 0-NN 1-bilinear 2-cubic 3-area 4-lanczos4 9-auto 10-rand.",
    ),
    ParamField("pad", "int", 0, "Augmentation Param: Padding size."),
    ParamField(
        "data_shape",
        "Shape(tuple)",
        None,
        "Dataset Param: Shape of each instance generated by the DataIter. Required.",
    ),
    ParamField(
        "rotate_list",
        "str",
        "",
        "Augmentation Param: Comma separated list of angles to pick the rotation from.",
    ),
)

_FIELD_BY_NAME = {f.name: f for f in PARAM_FIELDS}


def list_default_aug_params() -> List[ParamField]:
    """Return the recognized parameter fields (name, type, default, description)."""
    return list(PARAM_FIELDS)


def param_fields_info() -> List[dict[str, Any]]:
    return [
        {
            "name": f.name,
            "type": f.type_name,
            "default": f.default,
            "description": f.description,
        }
        for f in PARAM_FIELDS
    ]


def _parse_bool(value: Any, *, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def _parse_int(value: Any, *, name: str) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, float) and not value.is_integer():
        raise ConfigurationError(f"{name} must be an int, got {value!r}")
    try:
        return int(str(value).strip()) if isinstance(value, str) else int(value)
    except Exception as exc:  # noqa: BLE001 - validation boundary
        raise ConfigurationError(f"{name} must be an int, got {value!r}") from exc


def _parse_float(value: Any, *, name: str) -> float:
    try:
        return float(value)
    except Exception as exc:  # noqa: BLE001 - validation boundary
        raise ConfigurationError(f"{name} must be a float, got {value!r}") from exc


def parse_data_shape(value: Any) -> tuple[int, int, int]:
    """Parse ``(channels, height, width)`` from text like ``"(3,224,224)"`` or a sequence."""

    if value is None:
        raise ConfigurationError("data_shape is required")

    if isinstance(value, str):
        tokens = [t for t in re.split(r"[\s,()\[\]]+", value) if t]
    elif isinstance(value, (list, tuple)):
        tokens = list(value)
    else:
        raise ConfigurationError(f"data_shape must be a shape like (3,224,224), got {value!r}")

    dims = tuple(_parse_int(t, name="data_shape") for t in tokens)
    if len(dims) != 3:
        raise ConfigurationError(f"data_shape must be 3-dimensional, got {dims}")
    if any(d <= 0 for d in dims):
        raise ConfigurationError(f"data_shape components must be positive, got {dims}")
    return (dims[0], dims[1], dims[2])


def parse_rotate_list(value: Any) -> tuple[int, ...]:
    """Parse a comma separated angle list, e.g. ``"0,90,180,270"``."""

    if isinstance(value, (list, tuple)):
        return tuple(_parse_int(v, name="rotate_list") for v in value)
    text = str(value)
    if not text:
        return ()
    return tuple(_parse_int(tok, name="rotate_list") for tok in text.split(",") if tok)


def _iter_items(kwargs: KwargsLike) -> List[Tuple[str, Any]]:
    if isinstance(kwargs, Mapping):
        return [(str(k), v) for k, v in kwargs.items()]
    return [(str(k), v) for k, v in kwargs]


@dataclass(frozen=True)
class DefaultAugmentParams:
    """Resolved configuration of :class:`~pyimgaug.augmenters.default.DefaultImageAugmenter`."""

    data_shape: tuple[int, int, int]
    rand_crop: bool = False
    crop_y_start: int = -1
    crop_x_start: int = -1
    max_rotate_angle: int = 0
    max_aspect_ratio: float = 0.0
    max_shear_ratio: float = 0.0
    max_crop_size: int = -1
    min_crop_size: int = -1
    max_random_scale: float = 1.0
    min_random_scale: float = 1.0
    max_img_size: float = MAX_IMG_SIZE_UNSET
    min_img_size: float = 0.0
    random_h: int = 0
    random_s: int = 0
    random_l: int = 0
    rotate: int = -1
    fill_value: int = 255
    fill_value_r: int = -1
    fill_value_g: int = -1
    fill_value_b: int = -1
    inter_method: int = 1
    pad: int = 0
    rotate_list: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "data_shape", parse_data_shape(self.data_shape))
        if int(self.inter_method) not in VALID_INTER_METHODS:
            raise ConfigurationError(
                f"invalid inter_method: {self.inter_method!r}, valid values are 1,2,3,4,9,10"
            )
        r, g, b = resolve_fill_value(
            self.fill_value, self.fill_value_r, self.fill_value_g, self.fill_value_b
        )
        object.__setattr__(self, "fill_value_r", r)
        object.__setattr__(self, "fill_value_g", g)
        object.__setattr__(self, "fill_value_b", b)

    # ------------------------------------------------------------------
    @classmethod
    def from_kwargs(cls, kwargs: KwargsLike) -> tuple["DefaultAugmentParams", list[tuple[str, Any]]]:
        """Parse known keys and return ``(params, leftovers)``.

        ``leftovers`` keeps every unrecognized ``(key, value)`` pair in input
        order. The fill triple is normalized on construction, see
        :func:`resolve_fill_value`.
        """

        values: dict[str, Any] = {}
        leftovers: list[tuple[str, Any]] = []
        for key, raw in _iter_items(kwargs):
            field_def = _FIELD_BY_NAME.get(key)
            if field_def is None:
                leftovers.append((key, raw))
                continue
            if key == "data_shape":
                values[key] = parse_data_shape(raw)
            elif key == "rotate_list":
                values[key] = parse_rotate_list(raw)
            elif field_def.type_name == "bool":
                values[key] = _parse_bool(raw, name=key)
            elif field_def.type_name == "int":
                values[key] = _parse_int(raw, name=key)
            else:
                values[key] = _parse_float(raw, name=key)

        if "data_shape" not in values:
            raise ConfigurationError("data_shape is required")

        return cls(**values), leftovers

    # ------------------------------------------------------------------
    @property
    def target_hw(self) -> tuple[int, int]:
        return (self.data_shape[1], self.data_shape[2])

    @property
    def fill_bgr(self) -> tuple[int, int, int]:
        return (self.fill_value_b, self.fill_value_g, self.fill_value_r)

    @property
    def affine_enabled(self) -> bool:
        return (
            self.max_rotate_angle > 0
            or self.max_shear_ratio > 0.0
            or self.rotate > 0
            or len(self.rotate_list) > 0
            or self.max_random_scale != 1.0
            or self.min_random_scale != 1.0
            or self.max_aspect_ratio != 0.0
            or self.max_img_size != MAX_IMG_SIZE_UNSET
            or self.min_img_size != 0.0
        )

    @property
    def crop_range_enabled(self) -> bool:
        return self.max_crop_size != -1 or self.min_crop_size != -1

    @property
    def color_jitter_enabled(self) -> bool:
        return self.random_h != 0 or self.random_s != 0 or self.random_l != 0


def resolve_fill_value(fill_value: int, fill_r: int, fill_g: int, fill_b: int) -> tuple[int, int, int]:
    """Return the ``(r, g, b)`` fill; any negative channel collapses all three onto ``fill_value``."""

    if fill_r < 0 or fill_g < 0 or fill_b < 0:
        return (fill_value, fill_value, fill_value)
    return (fill_r, fill_g, fill_b)
