import logging

import numpy as np
from PIL import Image

from asciiartist.config import RenderConfig
from asciiartist.engine import CellGrid
from asciiartist.errors import InvalidConfiguration
from asciiartist.sampling import glyph_table, luminance, output_height, sample_pixels

log = logging.getLogger(__name__)

# Upper bound on width x height of the output grid
MAX_CELLS = 16_000_000


class AsciiRenderer:
    """Maps each output cell to one source pixel and picks a glyph by its luminance."""

    def __init__(self, config: RenderConfig):
        self.config = config
        self.glyphs = glyph_table(config.charset)

    def render(self, image: Image.Image) -> CellGrid:
        width = self.config.width
        if image.width == 0 or image.height == 0:
            raise InvalidConfiguration(f"Image has no pixels ({image.width}x{image.height})")

        height = output_height(image.width, image.height, width, self.config.aspect_ratio)
        log.debug("Rendering %dx%d image to %d columns x %d rows", image.width, image.height, width, height)
        if width * height > MAX_CELLS:
            raise InvalidConfiguration(
                f"Output of {width}x{height} characters is too large (limit {MAX_CELLS} cells); "
                "reduce the width or the aspect ratio compensation"
            )
        if height == 0:
            colours = np.zeros((0, width, 3), dtype=np.uint8) if self.config.colour else None
            return CellGrid(chars=[], colours=colours)

        rgb = sample_pixels(image, width, height)
        chars = ["".join(row) for row in self.glyphs[luminance(rgb)]]
        return CellGrid(chars=chars, colours=rgb if self.config.colour else None)
