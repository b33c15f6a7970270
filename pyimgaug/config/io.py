from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Mapping


def load_config(path: str | Path) -> dict[str, Any]:
    """Load augmenter options from a config file into a Python dict.

    Supported formats:
    - JSON (.json) always
    - YAML (.yml/.yaml) only when PyYAML is installed

    The top level must be an object mapping option names to values, e.g.
    ``{"data_shape": "(3,224,224)", "rand_crop": true}``.
    """

    config_path = Path(path)
    suffix = str(config_path.suffix).lower()

    if suffix == ".json":
        with config_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    elif suffix in (".yml", ".yaml"):
        try:
            import yaml  # type: ignore[import-not-found]
        except Exception as exc:  # noqa: BLE001 - dependency boundary
            raise ImportError(
                "YAML config files require PyYAML.\n"
                "Install it via:\n"
                "  pip install 'pyimgaug[yaml]'"
            ) from exc

        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    else:
        raise ValueError(
            f"Unsupported config extension: {suffix!r} for {str(config_path)!r}. "
            "Supported: .json, .yml, .yaml."
        )

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(
            "Config must be an object/dict at the top level, "
            f"got {type(data).__name__} from {str(config_path)!r}."
        )

    return dict(data)


def parse_key_value_pairs(items: Iterable[str] | None) -> list[tuple[str, str]]:
    """Split ``["key=value", ...]`` into pairs, keeping order and duplicates."""

    pairs: list[tuple[str, str]] = []
    for item in items or ():
        key, sep, value = str(item).partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {item!r}")
        pairs.append((key, value.strip()))
    return pairs


def to_option_pairs(raw: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten a config mapping into the textual ``(key, value)`` pairs augmenters parse.

    Booleans become ``"1"``/``"0"`` and lists/tuples are joined with commas,
    so ``{"data_shape": [3, 32, 32], "rotate_list": [0, 90]}`` yields
    ``[("data_shape", "3,32,32"), ("rotate_list", "0,90")]``.
    """

    pairs: list[tuple[str, str]] = []
    for key, value in raw.items():
        if isinstance(value, bool):
            pairs.append((str(key), "1" if value else "0"))
        elif isinstance(value, (list, tuple)):
            pairs.append((str(key), ",".join(str(v) for v in value)))
        elif isinstance(value, Mapping):
            raise ValueError(f"Option {key!r} must be a scalar or a list, got a nested object")
        else:
            pairs.append((str(key), str(value)))
    return pairs


def load_augmenter_options(path: str | Path) -> list[tuple[str, str]]:
    """Load an option file (see :func:`load_config`) as augmenter ``(key, value)`` pairs."""

    return to_option_pairs(load_config(path))
