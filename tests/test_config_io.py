import json

import pytest

from pyimgaug.config.io import (
    load_augmenter_options,
    load_config,
    parse_key_value_pairs,
    to_option_pairs,
)


def test_load_config_json(tmp_path):
    config_path = tmp_path / "cfg.json"
    payload = {"data_shape": [3, 224, 224], "rand_crop": True, "pad": 4, "rotate_list": "0,90"}
    config_path.write_text(json.dumps(payload), encoding="utf-8")

    assert load_config(config_path) == payload


def test_load_config_empty_json_object(tmp_path):
    config_path = tmp_path / "cfg.json"
    config_path.write_text("{}", encoding="utf-8")

    assert load_config(config_path) == {}


def test_load_config_rejects_non_mapping(tmp_path):
    config_path = tmp_path / "cfg.json"
    config_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError, match="object/dict"):
        load_config(config_path)


def test_load_config_unknown_extension_raises(tmp_path):
    config_path = tmp_path / "cfg.txt"
    config_path.write_text("x", encoding="utf-8")

    with pytest.raises(ValueError) as exc:
        load_config(config_path)

    assert ".txt" in str(exc.value)


def test_load_config_yaml_optional(tmp_path):
    config_path = tmp_path / "cfg.yaml"
    config_path.write_text("data_shape: '(3,32,32)'\nrand_crop: true\n", encoding="utf-8")

    try:
        import yaml  # noqa: F401
    except Exception:
        with pytest.raises(ImportError) as exc:
            load_config(config_path)
        msg = str(exc.value)
        assert "PyYAML" in msg
        assert "pip install" in msg
    else:
        assert load_config(config_path) == {"data_shape": "(3,32,32)", "rand_crop": True}


def test_parse_key_value_pairs_keeps_order_and_value_text():
    pairs = parse_key_value_pairs(["data_shape=(3,8,8)", "rotate_list=0,90", " pad = 2 "])
    assert pairs == [("data_shape", "(3,8,8)"), ("rotate_list", "0,90"), ("pad", "2")]
    assert parse_key_value_pairs(None) == []


@pytest.mark.parametrize("item", ["pad", "=3"])
def test_parse_key_value_pairs_rejects_malformed(item):
    with pytest.raises(ValueError, match="KEY=VALUE"):
        parse_key_value_pairs([item])


def test_to_option_pairs_flattens_values():
    pairs = to_option_pairs(
        {"data_shape": [3, 32, 32], "rand_crop": True, "rotate_list": (0, 90), "pad": 4, "mirror": False}
    )
    assert pairs == [
        ("data_shape", "3,32,32"),
        ("rand_crop", "1"),
        ("rotate_list", "0,90"),
        ("pad", "4"),
        ("mirror", "0"),
    ]


def test_to_option_pairs_rejects_nested_objects():
    with pytest.raises(ValueError, match="nested"):
        to_option_pairs({"data_shape": {"h": 1}})


def test_load_augmenter_options_json(tmp_path):
    config_path = tmp_path / "aug.json"
    config_path.write_text(json.dumps({"data_shape": [3, 8, 8], "rand_crop": False}), encoding="utf-8")

    assert load_augmenter_options(config_path) == [("data_shape", "3,8,8"), ("rand_crop", "0")]
