"""Convert an image file into a ZPL ^GFA label.

Usage:
    uv run python examples/convert_image.py logo.png > logo.zpl
    uv run python examples/convert_image.py logo.png --invert --no-compress
    uv run python examples/convert_image.py logo.png --origin 20 40 -v
"""

from __future__ import annotations

import argparse
import logging
import sys

from PIL import Image

from zplgfa import EncodeOptions, ZplGfaError, generate_printer_code


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("image", help="Path to the source image")
    parser.add_argument("--invert", action="store_true", help="Print light pixels instead of dark")
    parser.add_argument(
        "--no-compress",
        dest="compress",
        action="store_false",
        help="Emit plain hex instead of run-length data",
    )
    parser.add_argument(
        "--origin",
        nargs=2,
        type=int,
        default=(0, 0),
        metavar=("X", "Y"),
        help="Field origin in dots (default: 0 0)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log encoding details to stderr")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = EncodeOptions(
            invert=args.invert,
            compress=args.compress,
            origin_x=args.origin[0],
            origin_y=args.origin[1],
        )
        with Image.open(args.image) as image:
            label = generate_printer_code(image, options)
    except (OSError, ValueError) as err:
        kind = "encoding" if isinstance(err, ZplGfaError) else "input"
        print(f"{kind} error: {err}", file=sys.stderr)
        return 1

    print(label)
    return 0


if __name__ == "__main__":
    sys.exit(main())
