# logger_utils.py - logging setup and block timing for the suggester

import logging
import os
import time
from typing import Optional, Union

# Directory where log files are stored when file logging is enabled
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "affinity_suggester.log")

LOG_FORMAT = "[%(asctime)s] %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


class ColorFormatter(logging.Formatter):
    """Console formatter that colours each line by level."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = self.COLORS.get(record.levelname)
        if color is None:
            return line
        return f"{color}{line}{self.COLORS['RESET']}"


def setup_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[str] = None,
    use_color: bool = True,
) -> logging.Logger:
    """
    Configure the `affinity_suggester` logger hierarchy.
    Console output goes to stderr; `log_file` adds a plain-text file handler
    (its directory is created if missing). Calling again replaces the handlers.
    """
    root = logging.getLogger("affinity_suggester")
    root.setLevel(level.upper() if isinstance(level, str) else level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    fmt_cls = ColorFormatter if use_color else logging.Formatter
    console.setFormatter(fmt_cls(LOG_FORMAT, DATE_FORMAT))
    root.addHandler(console)

    if log_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(fh)

    root.propagate = False
    return root


def time_block(label: str, log: Optional[logging.Logger] = None) -> "_Timer":
    """
    Helper for measuring execution time of a code block.
    To use:
        with time_block("train"):
            engine.train()
    The elapsed seconds are logged at INFO when the block exits.
    """
    return _Timer(label, log or logger)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label: str, log: logging.Logger):
        self.label = label
        self.log = log
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self) -> "_Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self.start
        if exc_type is None:
            self.log.info("%s done in %.3fs", self.label, self.elapsed)
        else:
            self.log.warning("%s failed after %.3fs: %s", self.label, self.elapsed, exc_type.__name__)
