from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyimgaug-augment",
        description="Apply a registered image augmenter to an image file.",
    )
    parser.add_argument("input", nargs="?", default=None, help="Input image path")
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output image path (with --num > 1, files are named <stem>_<i><suffix>)",
    )

    discovery = parser.add_mutually_exclusive_group()
    discovery.add_argument(
        "--list-augmenters",
        action="store_true",
        help="List registered augmenters and exit",
    )
    discovery.add_argument(
        "--list-params",
        action="store_true",
        help="List the parameters accepted by aug_default and exit",
    )
    discovery.add_argument(
        "--augmenter-info",
        default=None,
        metavar="NAME",
        help="Show details of a registered augmenter and exit",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print discovery output as JSON",
    )

    parser.add_argument(
        "--augmenter",
        default="aug_default",
        help="Registered augmenter name (default: aug_default)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON/YAML file with augmenter options",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Augmenter option, repeatable; applied after --config",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--num", type=int, default=1, help="Number of augmented samples")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _output_paths(output: Path, num: int) -> list[Path]:
    if num == 1:
        return [output]
    return [output.with_name(f"{output.stem}_{i}{output.suffix}") for i in range(num)]


def _print_discovery(args: argparse.Namespace) -> None:
    from pyimgaug.augmenters import augmenter_info, list_augmenters, param_fields_info

    if bool(args.list_augmenters):
        names = list_augmenters()
        if bool(args.json):
            print(json.dumps(names, indent=2))
            return
        for name in names:
            print(f"{name}\t{augmenter_info(name)['description']}")
        return

    if bool(args.list_params):
        fields = param_fields_info()
        if bool(args.json):
            print(json.dumps(fields, indent=2))
            return
        for field in fields:
            print(f"{field['name']} : {field['type']}, default={field['default']!r}")
            print(f"    {field['description']}")
        return

    info = augmenter_info(str(args.augmenter_info))
    if bool(args.json):
        print(json.dumps(info, indent=2, sort_keys=True))
        return
    print(f"Name: {info['name']}")
    print(f"Description: {info['description']}")
    print(f"Tags: {', '.join(info['tags']) or '-'}")
    print(f"Constructor: {info['constructor']['module']}.{info['constructor']['qualname']}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if bool(args.verbose) else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.list_augmenters or args.list_params or args.augmenter_info is not None:
            _print_discovery(args)
            return 0

        if args.input is None or args.output is None:
            raise ValueError("input and output paths are required")
        if int(args.num) < 1:
            raise ValueError(f"--num must be >= 1, got {args.num}")

        from pyimgaug.augmenters import create_augmenter
        from pyimgaug.config.io import load_augmenter_options, parse_key_value_pairs
        from pyimgaug.io.image import read_image, write_image
        from pyimgaug.utils.seeding import make_rng

        options: list[tuple[str, str]] = []
        if args.config is not None:
            options.extend(load_augmenter_options(args.config))
        options.extend(parse_key_value_pairs(args.overrides))

        augmenter = create_augmenter(str(args.augmenter))
        unused = augmenter.init(options)
        for key, _ in unused:
            logger.warning("Unknown augmenter option ignored: %s", key)

        image = read_image(args.input)
        rng = make_rng(args.seed)
        for out_path in _output_paths(Path(str(args.output)), int(args.num)):
            written = write_image(out_path, augmenter.process(image, rng))
            logger.info("Wrote %s", written)
        return 0
    except Exception as exc:  # noqa: BLE001 - CLI surface error
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
