from __future__ import annotations

from .io import load_augmenter_options, load_config, parse_key_value_pairs, to_option_pairs

__all__ = ["load_augmenter_options", "load_config", "parse_key_value_pairs", "to_option_pairs"]
