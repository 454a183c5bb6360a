"""Logging with short level markers and optional terminal colours."""

from __future__ import annotations

import logging
import sys

_ROOT_NAME = "kvik"
_DEFAULT_LEVEL = logging.INFO

_MARKERS = {
    logging.DEBUG: ("D", "\033[0;2m"),
    logging.INFO: ("I", "\033[0;36m"),
    logging.WARNING: ("W", "\033[0;33m"),
    logging.ERROR: ("E", "\033[0;31m"),
}
_UNKNOWN_MARKER = ("?", "\033[0m")
_RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    """Formats records as ``[L] tag: message``, coloured if requested."""

    def __init__(self, colors: bool = True) -> None:
        super().__init__()
        self.colors = colors

    def format(self, record: logging.LogRecord) -> str:
        letter, color = _MARKERS.get(record.levelno, _UNKNOWN_MARKER)
        tag = record.name
        prefix = _ROOT_NAME + "."
        if tag.startswith(prefix):
            tag = tag[len(prefix):]
        text = f"[{letter}] {tag}: {record.getMessage()}"
        if record.exc_info:
            text += "\n" + self.formatException(record.exc_info)
        if self.colors:
            return f"{color}{text}{_RESET}"
        return text


def _root_logger() -> logging.Logger:
    root = logging.getLogger(_ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        isatty = getattr(sys.stderr, "isatty", None)
        handler.setFormatter(ColorFormatter(colors=bool(isatty and isatty())))
        root.addHandler(handler)
        root.setLevel(_DEFAULT_LEVEL)
        root.propagate = False
    return root


def get_logger(tag: str) -> logging.Logger:
    """Return the logger for ``tag``, writing to standard error."""
    root = _root_logger()
    return root.getChild(tag)