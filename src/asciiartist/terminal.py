import os
import sys
from typing import Mapping, TextIO

from asciiartist.errors import OutputWriteFailure


def supports_colour(environ: Mapping[str, str] | None = None) -> bool:
    """False when the environment asks for plain output (NO_COLOR set, or TERM=dumb)."""
    env = os.environ if environ is None else environ
    if env.get("NO_COLOR"):
        return False
    return env.get("TERM") != "dumb"


def write_output(text: str, stream: TextIO | None = None) -> None:
    """Write a line of text, turning stream errors into OutputWriteFailure."""
    stream = sys.stdout if stream is None else stream
    try:
        stream.write(text + "\n")
        stream.flush()
    except (OSError, UnicodeEncodeError) as e:
        raise OutputWriteFailure(f"Failed to write output: {e}") from e
