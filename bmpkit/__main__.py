"""
Command line front end: python -m bmpkit <command> ...
"""

import argparse
import logging
import sys

from . import filters, preview
from .bitmap import create_bitmap, read_bitmap
from .constants import BRIGHTNESS_METHODS, CHANNELS
from .errors import BitmapError
from .geom_ops import crop

logger = logging.getLogger("bmpkit")


def _cmd_info(args):
    preview.print_metadata(read_bitmap(args.input))


def _cmd_show(args):
    preview.print_bitmap(read_bitmap(args.input))


def _cmd_invert(args):
    image = read_bitmap(args.input)
    filters.invert(image)
    image.save(args.output)


def _cmd_grayscale(args):
    image = read_bitmap(args.input)
    if args.luma:
        filters.grayscale_luma(image)
    else:
        filters.grayscale(image)
    image.save(args.output)


def _cmd_brightness(args):
    image = read_bitmap(args.input)
    filters.brightness(image, args.factor, args.method)
    image.save(args.output)


def _cmd_contrast(args):
    image = read_bitmap(args.input)
    filters.contrast(image, args.factor)
    image.save(args.output)


def _cmd_channel(args):
    read_bitmap(args.input).get_channel(args.channel).save(args.output)


def _cmd_crop(args):
    image = read_bitmap(args.input)
    crop(image, args.x, args.y, args.width, args.height).save(args.output)


def _cmd_create(args):
    create_bitmap(args.width, args.height).save(args.output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bmpkit", description="Read, transform and write 24-bit BMP files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("info", help="Print header information")
    p.add_argument("input")
    p.set_defaults(func=_cmd_info)

    p = sub.add_parser("show", help="Print the image as colored blocks")
    p.add_argument("input")
    p.set_defaults(func=_cmd_show)

    p = sub.add_parser("invert", help="Negate all colors")
    p.add_argument("input")
    p.add_argument("output")
    p.set_defaults(func=_cmd_invert)

    p = sub.add_parser("grayscale", help="Convert to black-and-white")
    p.add_argument("input")
    p.add_argument("output")
    p.add_argument("--luma", action="store_true", help="Use ITU-R 601-2 luma weights")
    p.set_defaults(func=_cmd_grayscale)

    p = sub.add_parser("brightness", help="Adjust brightness")
    p.add_argument("input")
    p.add_argument("output")
    p.add_argument("factor", type=float)
    p.add_argument("--method", choices=BRIGHTNESS_METHODS, default="multiply")
    p.set_defaults(func=_cmd_brightness)

    p = sub.add_parser("contrast", help="Adjust contrast")
    p.add_argument("input")
    p.add_argument("output")
    p.add_argument("factor", type=float)
    p.set_defaults(func=_cmd_contrast)

    p = sub.add_parser("channel", help="Keep a single color channel")
    p.add_argument("input")
    p.add_argument("output")
    p.add_argument("channel", choices=CHANNELS)
    p.set_defaults(func=_cmd_channel)

    p = sub.add_parser("crop", help="Crop a region (0,0 is top-left)")
    p.add_argument("input")
    p.add_argument("output")
    for name in ("x", "y", "width", "height"):
        p.add_argument(name, type=int)
    p.set_defaults(func=_cmd_crop)

    p = sub.add_parser("create", help="Create a black image")
    p.add_argument("output")
    p.add_argument("width", type=int)
    p.add_argument("height", type=int)
    p.set_defaults(func=_cmd_create)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except (BitmapError, ValueError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
