import logging
import os
import sys

_root_configured = False

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Colors:
    """ANSI color codes for terminal output."""

    RESET = "\033[0m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    GREY = "\x1b[38;5;245m"
    BOLD_RED = "\x1b[31;1m"

    @staticmethod
    def disable():
        """Disable colors (for non-terminal output)."""
        for attr in dir(Colors):
            if not attr.startswith("_") and attr not in ("disable", "enabled"):
                setattr(Colors, attr, "")

    @staticmethod
    def enabled():
        """Check if colors are enabled."""
        return hasattr(sys.stderr, "isatty") and sys.stderr.isatty() and os.getenv("TERM") != "dumb"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the whole line by level."""

    def format(self, record):
        formatted = super().format(record)
        level_colors = {
            logging.DEBUG: Colors.GREY,
            logging.INFO: Colors.GREY,
            logging.WARNING: Colors.YELLOW,
            logging.ERROR: Colors.RED,
            logging.CRITICAL: Colors.BOLD_RED,
        }
        log_color = level_colors.get(record.levelno, Colors.RESET)
        return f"{log_color}{formatted}{Colors.RESET}"


class StderrHandler(logging.StreamHandler):
    """Stream handler that writes to the current sys.stderr at emit time."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def setup_logger(name: str, level: str | None = None) -> logging.Logger:
    """Return a named logger, configuring the console root handler once.

    Meant for entry points only; library modules use logging.getLogger.
    Output goes to stderr so generated codes can be piped from stdout.
    """
    global _root_configured

    if not _root_configured:
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(logging.INFO)

        handler = StderrHandler()
        handler.setFormatter(ColoredFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(handler)
        _root_configured = True

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(getattr(logging, level.upper()))

    return logger


# Auto-disable colors if not in terminal
if not Colors.enabled():
    Colors.disable()
