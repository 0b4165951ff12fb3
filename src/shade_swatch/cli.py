"""Print or render the palette generated from a color."""

import argparse
import json
import logging
import math
import sys

from .charts import swatch
from .material import SwatchMode, material_color_from


def _finite_float(raw: str) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"must be a finite number, got {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shade-swatch",
        description="Generate a Material-style shade palette from one color.",
    )
    parser.add_argument(
        "color",
        help='Primary color, e.g. "#6496c8", "tab:blue" or "0xff6496c8"',
    )
    parser.add_argument(
        "--mode", "-m",
        choices=[m.value for m in SwatchMode],
        default=SwatchMode.desaturate.value,
        help="Swatch generation mode (default: desaturate)",
    )
    parser.add_argument(
        "--factor", "-f",
        type=_finite_float,
        default=None,
        help="Mode tuning: range width (shade), strength (desaturate), white offset (fade)",
    )
    parser.add_argument(
        "--accent",
        action="store_true",
        help="Build the five-shade accent palette instead of the ten-shade primary",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the palette as JSON",
    )
    parser.add_argument(
        "--render",
        metavar="FILE",
        help="Also save a swatch chart to FILE (e.g. swatch.svg)",
    )
    parser.add_argument(
        "--output-dir", "-o",
        help="Directory for --render output",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _parse_color_arg(raw: str) -> int | str:
    """Accept 0x-prefixed ARGB integers as well as matplotlib color specs."""
    if raw.lower().startswith("0x"):
        return int(raw, 16)
    return raw


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        color = _parse_color_arg(args.color)
        palette = material_color_from(color, args.mode, args.factor, not args.accent)
    except ValueError as e:
        print(f"shade-swatch: error: {e}", file=sys.stderr)
        return 2

    if args.json:
        body = {
            "value": f"0x{palette.value:08X}",
            "mode": args.mode,
            "shades": {str(k): str(c) for k, c in palette.items()},
        }
        print(json.dumps(body, indent=2))
    else:
        for key, shade in palette.items():
            print(f"{key:>3} {shade}")

    if args.render:
        swatch(
            palette,
            title=f"{palette.primary.to_hex()} ({args.mode})",
            filename=args.render,
            output_dir=args.output_dir,
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
