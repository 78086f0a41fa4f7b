"""Terminal output for the setup CLI.

User-facing status lines go through the standard logging module; StatusFormatter renders
each record with a coloured status glyph instead of a level name.
"""

import logging
import os
import sys
from collections.abc import Mapping
from typing import Optional, TextIO

# Custom level for completed steps (between INFO and WARNING)
SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

DEBUG_ENV = "PRETTIER_SETUP_DEBUG"

RESET = "\x1b[0m"
BRIGHT = "\x1b[1m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
RED = "\x1b[31m"

GLYPHS = {
    logging.DEBUG: ("·", ""),
    logging.INFO: ("ℹ", BLUE),
    SUCCESS: ("✓", GREEN),
    logging.WARNING: ("⚠", YELLOW),
    logging.ERROR: ("✗", RED),
    logging.CRITICAL: ("✗", RED),
}


class StatusFormatter(logging.Formatter):
    """Prefix each message with a status glyph, coloured when use_color is set."""

    def __init__(self, use_color: bool = False):
        super().__init__("%(message)s")
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        glyph, color = GLYPHS.get(record.levelno, ("•", ""))
        if self.use_color and color:
            glyph = f"{color}{glyph}{RESET}"
        return f"{glyph} {message}"


def debug_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    if environ is None:
        environ = os.environ
    return environ.get(DEBUG_ENV, "").strip().lower() in {"1", "true", "yes"}


def configure_logging(stream: Optional[TextIO] = None, debug: bool = False) -> logging.Handler:
    """Install a StatusFormatter handler on the package logger.

    Returns:
        The installed handler (so callers can remove it)
    """
    if stream is None:
        stream = sys.stdout

    handler = logging.StreamHandler(stream)
    handler.setFormatter(StatusFormatter(use_color=_is_tty(stream)))

    package_logger = logging.getLogger("prettier_setup")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return handler


def header(message: str, stream: Optional[TextIO] = None) -> None:
    """Print a bold header surrounded by blank lines."""
    if stream is None:
        stream = sys.stdout
    text = f"{BRIGHT}{message}{RESET}" if _is_tty(stream) else message
    print(f"\n{text}\n", file=stream)


def highlight(message: str, stream: Optional[TextIO] = None) -> str:
    if stream is None:
        stream = sys.stdout
    return f"{BRIGHT}{message}{RESET}" if _is_tty(stream) else message


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())
