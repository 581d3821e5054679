import pytest
from PIL import Image

from asciiartist.config import RenderConfig


@pytest.fixture
def gradient_image():
    """Build a horizontal grey ramp from black at the left edge to white at the right."""

    def make(width: int, height: int = 1) -> Image.Image:
        img = Image.new("RGB", (width, height))
        pixels = img.load()
        for x in range(width):
            value = round(x * 255 / max(width - 1, 1))
            for y in range(height):
                pixels[x, y] = (value, value, value)
        return img

    return make


@pytest.fixture
def plain_config():
    return RenderConfig(width=10, colour=False)


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "photo.png"
    Image.new("RGB", (40, 20), (200, 30, 60)).save(path)
    return path
