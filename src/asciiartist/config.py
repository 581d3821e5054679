import math
from dataclasses import dataclass

from asciiartist.charsets import DEFAULT
from asciiartist.errors import InvalidConfiguration

DEFAULT_WIDTH = 120
DEFAULT_ASPECT_RATIO = 0.5


@dataclass(frozen=True)
class RenderConfig:
    width: int = DEFAULT_WIDTH
    charset: str = DEFAULT
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    colour: bool = True

    def __post_init__(self):
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width <= 0:
            raise InvalidConfiguration(f"Width must be a positive integer, got {self.width!r}")
        if not self.charset:
            raise InvalidConfiguration("Charset must contain at least one character")
        if not math.isfinite(self.aspect_ratio) or self.aspect_ratio <= 0:
            raise InvalidConfiguration(
                f"Aspect ratio compensation must be a positive number, got {self.aspect_ratio!r}"
            )
