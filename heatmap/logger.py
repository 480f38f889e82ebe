"""
Logging setup for the heatmap command line and library.
"""

import logging
import os
import sys
from typing import Optional, TextIO

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


class ColoredFormatter(logging.Formatter):
    """
    Formatter that paints warnings and errors when writing to a terminal.

    Args:
        fmt (str): Format string passed to logging.Formatter.
        use_color (bool): Disable to produce plain text, e.g. for files.
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[0;96m",  # Cyan
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[1;31m",  # Bold Red
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str = LOG_FORMAT, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record):
        message = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno) if self.use_color else None
        if not color:
            return message
        return f"{color}{message}{self.RESET}"


def _wants_color(stream: TextIO) -> bool:
    if os.getenv("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def config_logger(debug: bool = False, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Route all logging of the process to a single handler on ``stream``.

    Any handler already on the root logger is replaced, so configuring twice
    does not duplicate lines.

    Args:
        debug (bool, optional): Log at DEBUG level instead of INFO.
        stream (TextIO, optional): Destination, stderr by default. Colors are
            only used when it is a terminal and NO_COLOR is not set.

    Returns:
        logging.Handler: The installed handler.
    """
    stream = stream if stream is not None else sys.stderr
    root = logging.getLogger()

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColoredFormatter(use_color=_wants_color(stream)))

    root.setLevel(logging.DEBUG if debug else logging.INFO)
    root.addHandler(handler)
    return handler
