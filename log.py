"""Gradeshape logging.

Loggers live under the ``gradeshape`` hierarchy. The suite runner draws tqdm
progress bars on stderr, so console records are written through
:func:`tqdm.tqdm.write` and land above an active bar instead of through it.

Environment variables:
    GRADESHAPE_LOG_LEVEL: DEBUG / INFO (default) / WARNING / ERROR
    GRADESHAPE_LOG_FILE: optional path; appends plain-text log lines
"""

import logging
import os
import sys

from tqdm import tqdm

ROOT = "gradeshape"
CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False

_LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}
_RESET = "\033[0m"


class TqdmHandler(logging.Handler):
    """Console handler that cooperates with live tqdm bars."""

    def __init__(self, stream=None, use_color: bool = False):
        super().__init__()
        self.stream = stream
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if self.use_color:
            color = _LEVEL_COLORS.get(record.levelno, "")
            text = text.replace(record.levelname, f"{color}{record.levelname}{_RESET}", 1)
        return text

    def emit(self, record: logging.LogRecord) -> None:
        try:
            tqdm.write(self.format(record), file=self.stream or sys.stderr)
        except Exception:
            self.handleError(record)


def _configure() -> None:
    global _configured
    if _configured:
        return
    _configured = True

    root = logging.getLogger(ROOT)
    level_name = os.environ.get("GRADESHAPE_LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    console = TqdmHandler(use_color=sys.stderr.isatty())
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console)

    log_file = os.environ.get("GRADESHAPE_LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file, mode="a")
        fh.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(fh)


def get_logger(name: str) -> logging.Logger:
    """Logger ``gradeshape.<name>``; the hierarchy is configured on first use."""
    _configure()
    return logging.getLogger(f"{ROOT}.{name}")
