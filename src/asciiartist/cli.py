import argparse
import logging
import sys
import time
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from asciiartist import charsets
from asciiartist.config import DEFAULT_ASPECT_RATIO, DEFAULT_WIDTH, RenderConfig
from asciiartist.converter import format_grid, load_image
from asciiartist.errors import AsciiArtistError
from asciiartist.renderer import AsciiRenderer
from asciiartist.terminal import supports_colour, write_output

log = logging.getLogger("asciiartist")

EPILOG = """\
examples:
  %(prog)s -i my_image.jpg
  %(prog)s -i colorful_pic.png -w 80 --no-color
  %(prog)s -i portrait.jpeg -w 100 -c " .-+=%%#" -A 0.5
  %(prog)s -i night_sky.png -c "{inverted}"
  %(prog)s -i logo.png -c "{blocks}"

Decrease -A (e.g. 0.45) if the image looks vertically squashed, increase it
(e.g. 0.65) if it looks stretched. The best value depends on terminal font.
""".format(inverted=charsets.INVERTED.replace("%", "%%"), blocks=charsets.BLOCKS)


def _version() -> str:
    try:
        return version("asciiartist")
    except PackageNotFoundError:
        return "unknown"


def setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    log.setLevel(level)
    log.handlers[:] = [handler]
    log.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="asciiartist",
        description="Convert an image into (optionally coloured) ASCII art",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-i", "--input", required=True, type=Path, help="Path to input image")
    parser.add_argument(
        "-w", "--width", type=int, default=DEFAULT_WIDTH, help=f"Output width in characters (default: {DEFAULT_WIDTH})"
    )
    parser.add_argument(
        "-c",
        "--charset",
        default=charsets.DEFAULT,
        help='Characters ordered from brightest to darkest (default: "%(default)s")',
    )
    parser.add_argument(
        "-C",
        "--color",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Colour each character with its source pixel using ANSI truecolor (default: on)",
    )
    parser.add_argument(
        "-A",
        "--aspect-ratio-compensation",
        type=float,
        default=DEFAULT_ASPECT_RATIO,
        help=f"Vertical scale correction for non-square character cells (default: {DEFAULT_ASPECT_RATIO:.2f})",
    )
    parser.add_argument("--debug", action="store_true", default=False, help="Log debug information to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_version()}")
    return parser


def run(args: argparse.Namespace) -> None:
    start = time.perf_counter()
    config = RenderConfig(
        width=args.width,
        charset=args.charset,
        aspect_ratio=args.aspect_ratio_compensation,
        colour=args.color and supports_colour(),
    )
    if args.color and not config.colour:
        log.debug("Colour disabled by environment (NO_COLOR or TERM=dumb)")

    write_output(f"Loading image from: {args.input}...")
    image = load_image(args.input)
    write_output(f"Image dimensions: {image.width}x{image.height}")

    grid = AsciiRenderer(config).render(image)
    if grid.rows:
        write_output(format_grid(grid))

    elapsed = time.perf_counter() - start
    write_output(f"\nConversion complete! Time taken: {elapsed:.2f}s")


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)
    try:
        run(args)
    except AsciiArtistError as e:
        log.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
