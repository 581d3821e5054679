import math

import numpy as np
from PIL import Image

from asciiartist.errors import InvalidConfiguration

# ITU-R BT.709 luma coefficients for (R, G, B)
LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722])

# Substituted for any ramp index that falls outside the charset
FALLBACK_GLYPH = " "


def _round_half_up(values):
    """Round non-negative values to the nearest integer, halves away from zero."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5)


def output_height(image_width: int, image_height: int, width: int, aspect_ratio: float) -> int:
    """Number of text rows for an image scaled to `width` columns.

    Terminal cells are taller than wide, so the proportional height is
    multiplied by `aspect_ratio` (about 0.5 for most monospace fonts).
    """
    height = width * (image_height / image_width) * aspect_ratio
    if not math.isfinite(height):
        raise InvalidConfiguration(f"Output height overflows for aspect ratio compensation {aspect_ratio!r}")
    return math.floor(height + 0.5)


def nearest_indices(count: int, source_size: int) -> np.ndarray:
    """Source pixel index for each of `count` output positions (floor(i / count * source_size))."""
    if count <= 0:
        return np.zeros(0, dtype=np.intp)
    return np.arange(count, dtype=np.intp) * source_size // count


def luminance(rgb: np.ndarray) -> np.ndarray:
    """Per-pixel BT.709 luma of an (..., 3) RGB array, as uint8."""
    luma = np.asarray(rgb, dtype=np.float64) @ LUMA_WEIGHTS
    return np.clip(_round_half_up(luma), 0, 255).astype(np.uint8)


def glyph_table(charset: str) -> np.ndarray:
    """Lookup table of 256 glyphs, one per luminance value.

    Index 0 of the charset is used for luminance 0 and the last one for 255.
    """
    glyphs = np.array(list(charset) + [FALLBACK_GLYPH])
    levels = np.arange(256) / 255.0 * (len(charset) - 1)
    idx = _round_half_up(levels).astype(np.intp)
    idx = np.where((idx >= 0) & (idx < len(charset)), idx, len(charset))
    return glyphs[idx]


def sample_pixels(image: Image.Image, width: int, height: int) -> np.ndarray:
    """Nearest-neighbour downscale of an image. Returns array of shape (height, width, 3) as uint8."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    arr = np.asarray(image, dtype=np.uint8)
    ys = nearest_indices(height, image.height)
    xs = nearest_indices(width, image.width)
    return arr[np.ix_(ys, xs)]
