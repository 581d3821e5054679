import logging
from pathlib import Path

from PIL import Image

from asciiartist.config import RenderConfig
from asciiartist.engine import CellGrid
from asciiartist.errors import InputNotFound, UnsupportedImage
from asciiartist.renderer import AsciiRenderer

log = logging.getLogger(__name__)

RESET = "\033[0m"


def load_image(path: str | Path) -> Image.Image:
    """Open and fully decode an image file."""
    path = Path(path)
    try:
        fp = path.open("rb")
    except FileNotFoundError as e:
        raise InputNotFound(f"File not found: {path}") from e
    except OSError as e:
        raise InputNotFound(f"Cannot read {path}: {e.strerror or e}") from e

    with fp:
        try:
            image = Image.open(fp)
            image.load()
        except Image.DecompressionBombError as e:
            raise UnsupportedImage(f"Image too large to decode: {path}") from e
        except (OSError, SyntaxError, ValueError, EOFError) as e:
            # UnidentifiedImageError, truncated data, broken chunks and bad header fields
            raise UnsupportedImage(f"Cannot decode image {path}: {e}") from e
    log.debug("Decoded %s: format=%s mode=%s size=%dx%d", path, image.format, image.mode, image.width, image.height)
    return image


def _format_colour(lines: list[str], colours) -> str:
    """Wrap each character in an ANSI truecolor foreground escape sequence."""
    out = []
    for r, line in enumerate(lines):
        parts = []
        for c, char in enumerate(line):
            red, green, blue = int(colours[r, c, 0]), int(colours[r, c, 1]), int(colours[r, c, 2])
            parts.append(f"\033[38;2;{red};{green};{blue}m{char}")
        parts.append(RESET)
        out.append("".join(parts))
    return "\n".join(out)


def format_grid(grid: CellGrid) -> str:
    if grid.colours is None:
        return "\n".join(grid.chars)
    return _format_colour(grid.chars, grid.colours)


def image_to_ascii(image: Image.Image | str | Path, config: RenderConfig) -> str:
    if not isinstance(image, Image.Image):
        image = load_image(image)
    return format_grid(AsciiRenderer(config).render(image))
