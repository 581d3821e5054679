class AsciiArtistError(Exception):
    """Base class for every failure the converter reports to the user."""


class InputNotFound(AsciiArtistError):
    """The input file does not exist or cannot be read."""


class UnsupportedImage(AsciiArtistError):
    """The input file is not an image Pillow can decode."""


class InvalidConfiguration(AsciiArtistError, ValueError):
    """Render settings (or the image size) make rendering impossible."""


class OutputWriteFailure(AsciiArtistError):
    """Writing the rendered art to the output stream failed."""
